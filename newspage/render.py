"""Markdown to HTML, and HTML into the page template.

The template uses double-brace placeholders, e.g. ``<body>{{news}}</body>``.
The rendered fragment is inserted as-is: it is already HTML, so no escaping.
"""

from __future__ import annotations

import logging
import re

import attrs
import jinja2
from markdown import markdown

logger = logging.getLogger(__name__)

# keep_trailing_newline: text outside the placeholders comes out unchanged.
environment = jinja2.Environment(autoescape=False, keep_trailing_newline=True)

NEWLINE_RE = re.compile(r'\r\n|\r|\n')


@attrs.define(frozen=True)
class NewsContext:
    """ Values available to the template.  Only one: the news fragment. """
    news: str


def markdown_to_html(text: str) -> str:
    return markdown(text)


def markdown_to_context(text: str) -> NewsContext:
    return NewsContext(news=markdown_to_html(text))


def line_ending(text: str) -> str:
    """ The first line ending found in text, '\\n' if there is none. """
    m = NEWLINE_RE.search(text)
    return m.group() if m else '\n'


def render_template(template_text: str, context: NewsContext) -> str:
    """ Substitute the context into the template text.
    Raises jinja2.TemplateSyntaxError if a placeholder is malformed.
    Placeholders naming anything other than the context's fields render empty.
    Jinja2 rewrites every line ending to newline_sequence, so that is set to the
    template's own.
    """
    env = environment.overlay(newline_sequence=line_ending(template_text))
    template = env.from_string(template_text)
    html = template.render(attrs.asdict(context))
    logger.info("Rendered template (%d characters)", len(html))
    return html
