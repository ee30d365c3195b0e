"""Convert HTML-like comment text to Markdown."""

from __future__ import annotations

from typing import Callable

from doc2md.config import DOC2MD_HTML_PARSER, DOC2MD_MAX_MARKUP_DEPTH
from doc2md.directives import replace_directives
from doc2md.entities import decode_entities
from doc2md.exceptions import ConversionError
from doc2md.html_utils import WRAPPER_TAG, find_wrapper_root, wrap_fragment

try:
    from bs4 import BeautifulSoup, FeatureNotFound
    from bs4.builder import ParserRejectedMarkup
    from bs4.element import NavigableString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_ELEMENT_TEMPLATES: dict[str, Callable[[str], str]] = {
    "i": lambda content: f"*{content}*",
    "b": lambda content: f"**{content}**",
    "pre": lambda content: f"`{content}`",
    "code": lambda content: f"`{content}`",
    "a": lambda content: content,
}


def convert_html_to_markdown(
    text: str,
    *,
    parser: str | None = None,
    max_depth: int | None = None,
) -> str:
    """Convert HTML-like comment text into Markdown.

    Inline directives are resolved first, then the text is parsed under a
    synthetic root and ``i``, ``b``, ``pre``, ``code`` and ``a`` elements are
    replaced by Markdown text, innermost element first. Other elements are
    serialized back unchanged.

    Parameters
    ----------
    text : str
        Comment text, usually one that ``is_html_like`` accepted.
    parser : str | None
        BeautifulSoup tree builder name. Defaults to ``DOC2MD_HTML_PARSER``.
    max_depth : int | None
        Element nesting limit. Defaults to ``DOC2MD_MAX_MARKUP_DEPTH``.

    Raises
    ------
    ConversionError
        If the markup cannot be parsed or is nested too deeply.
    """
    text = replace_directives(text)
    try:
        # The root keeps whitespace-only strings, e.g. blank lines between tags.
        soup = BeautifulSoup(
            wrap_fragment(text),
            parser or DOC2MD_HTML_PARSER,
            preserve_whitespace_tags={WRAPPER_TAG, "pre", "textarea"},
        )
    except (FeatureNotFound, ParserRejectedMarkup) as exc:
        raise ConversionError(f"Failed to parse comment markup: {exc}") from exc

    root = find_wrapper_root(soup)
    if root is None:
        raise ConversionError("Comment markup lost its synthetic root element")

    _rewrite_elements(
        root, depth=0, max_depth=DOC2MD_MAX_MARKUP_DEPTH if max_depth is None else max_depth
    )
    return decode_entities(root.decode_contents())


def _rewrite_elements(tag: Tag, *, depth: int, max_depth: int) -> None:
    if depth > max_depth:
        raise ConversionError(f"Comment markup is nested deeper than {max_depth} elements")
    for child in list(tag.children):
        if not isinstance(child, Tag):
            continue
        _rewrite_elements(child, depth=depth + 1, max_depth=max_depth)
        template = _ELEMENT_TEMPLATES.get(child.name)
        if template is not None:
            child.replace_with(NavigableString(template(child.get_text().strip())))
