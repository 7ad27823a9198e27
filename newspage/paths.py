"""Where the news page is read from and written to."""

from __future__ import annotations

import os
from pathlib import Path

import attrs
from typing_extensions import Self


@attrs.define(frozen=True)
class SitePaths:
    """ The fixed inputs and outputs of one build.
    Paths are relative to the working directory unless anchored with under().
    """
    news_source: Path = Path('page/md/news.md')
    template: Path = Path('page/template.html')
    stylesheet: Path = Path('page/style.css')
    output_page: Path = Path('dist/index.html')
    output_stylesheet: Path = Path('dist/style.css')

    def under(self, root: str | os.PathLike[str]) -> Self:
        """ Same layout, anchored at root. """
        root = Path(root)
        return attrs.evolve(self, **{
            field.name: root / getattr(self, field.name)
            for field in attrs.fields(type(self))
            })
