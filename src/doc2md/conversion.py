"""Entry points: documentation comments and raw comment text to Markdown."""

from __future__ import annotations

import logging

from doc2md.block_tags import render_block_tags
from doc2md.directives import replace_directives
from doc2md.exceptions import ConversionError
from doc2md.html_utils import is_html_like
from doc2md.markdown import convert_html_to_markdown
from doc2md.renderer import render_trees
from doc2md.schemas import DocComment, MarkupContent, MarkupKind

logger = logging.getLogger(__name__)


def render_comment(comment: DocComment) -> str:
    """Render summary, body and block tags, separated by blank lines.

    Blank sections are left out entirely, so an empty comment renders as an
    empty string.
    """
    parts = [
        render_trees(comment.first_sentence),
        render_trees(comment.body),
        render_block_tags(comment.block_tags),
    ]
    return "\n\n".join(part for part in parts if part.strip())


def render_comment_text(text: str) -> str:
    """Render raw comment text that may hold HTML-like markup or directives.

    Markup conversion is attempted only when the text looks like HTML; if it
    fails the original text is kept.
    """
    if is_html_like(text):
        try:
            text = convert_html_to_markdown(text)
        except ConversionError as exc:
            logger.info("Failed to parse comment HTML, falling back to plain text: %s", exc)
    return replace_directives(text)


def render_comment_json(payload: str | bytes) -> str:
    """Validate a JSON-encoded ``DocComment`` and render it.

    Raises:
        pydantic.ValidationError: If ``payload`` is not a valid comment.
    """
    return render_comment(DocComment.model_validate_json(payload))


def as_markup_content(comment: DocComment) -> MarkupContent:
    """Render ``comment`` as Markdown markup content."""
    return MarkupContent(kind=MarkupKind.MARKDOWN, value=render_comment(comment))


def text_as_markup_content(text: str) -> MarkupContent:
    """Render raw comment text as Markdown markup content."""
    return MarkupContent(kind=MarkupKind.MARKDOWN, value=render_comment_text(text))
