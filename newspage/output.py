"""Write the rendered page and copy the stylesheet next to it."""

import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_parent(path: str | os.PathLike[str]) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def write_page(path: str | os.PathLike[str], html: str) -> None:
    ensure_parent(path)
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(html)
    logger.info("Wrote %s", path)


def copy_stylesheet(source: str | os.PathLike[str], target: str | os.PathLike[str]) -> None:
    """ Byte copy, the stylesheet is not looked at. """
    ensure_parent(target)
    shutil.copyfile(source, target)
    logger.info("Copied %s to %s", source, target)
