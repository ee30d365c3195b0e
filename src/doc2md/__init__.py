"""doc2md: render documentation comments into Markdown."""

from doc2md.conversion import (
    as_markup_content,
    render_comment,
    render_comment_json,
    render_comment_text,
    text_as_markup_content,
)
from doc2md.directives import parse_directives, replace_directives
from doc2md.exceptions import (
    ConversionError,
    DirectiveParseError,
    Doc2mdError,
    ParseError,
)
from doc2md.html_utils import is_html_like
from doc2md.hover import compose_hover, compose_type_hover
from doc2md.markdown import convert_html_to_markdown
from doc2md.schemas import DocComment, MarkupContent, MarkupKind

__all__ = [
    "ConversionError",
    "DirectiveParseError",
    "Doc2mdError",
    "DocComment",
    "MarkupContent",
    "MarkupKind",
    "ParseError",
    "as_markup_content",
    "compose_hover",
    "compose_type_hover",
    "convert_html_to_markdown",
    "is_html_like",
    "parse_directives",
    "render_comment",
    "render_comment_json",
    "render_comment_text",
    "replace_directives",
    "text_as_markup_content",
]
