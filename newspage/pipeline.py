"""Build the news page: read the Markdown, render it into the template, write dist/.

Each step runs once, in order: load, transform, write, copy.
The first failure ends the build; whatever was already written stays.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import attrs

from newspage.content import load_markdown, load_template
from newspage.output import copy_stylesheet, write_page
from newspage.paths import SitePaths
from newspage.render import markdown_to_context, render_template

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error building news page:"


@attrs.define(frozen=True)
class BuildResult:
    error: Exception | None = None
    written: tuple[Path, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None


def build(paths: SitePaths | None = None) -> BuildResult:
    """ Run the whole pipeline.  Errors are returned, not raised. """
    if paths is None:
        paths = SitePaths()
    written: list[Path] = []
    try:
        context = markdown_to_context(load_markdown(paths.news_source))
        html = render_template(load_template(paths.template), context)
        write_page(paths.output_page, html)
        written.append(paths.output_page)
        copy_stylesheet(paths.stylesheet, paths.output_stylesheet)
        written.append(paths.output_stylesheet)
    except Exception as e:  # any step, any failure
        return BuildResult(error=e, written=tuple(written))
    return BuildResult(written=tuple(written))


def main() -> int:
    logging.basicConfig(level=logging.INFO, stream=sys.stderr, format="%(message)s")
    result = build()
    if not result.ok:
        logger.error("%s %s", ERROR_PREFIX, result.error)
        return 1
    return 0
