"""Read the page inputs: the Markdown news source and the HTML template."""

import logging
import os

logger = logging.getLogger(__name__)


def read_text(path: str | os.PathLike[str]) -> str:
    # newline='' keeps the file's own line endings.
    with open(path, encoding='utf-8', newline='') as f:
        text = f.read()
    logger.info("Read %d characters from %s", len(text), path)
    return text


def load_markdown(path: str | os.PathLike[str]) -> str:
    return read_text(path)


def load_template(path: str | os.PathLike[str]) -> str:
    return read_text(path)
