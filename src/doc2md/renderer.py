"""Render documentation tree nodes to Markdown."""

from __future__ import annotations

import logging
import re
from typing import Sequence, assert_never

from doc2md.config import DOC2MD_MAX_TREE_DEPTH
from doc2md.directives import replace_directives
from doc2md.entities import decode_entity
from doc2md.schemas.doctree import (
    DocNode,
    EndElementNode,
    EntityNode,
    ErroneousNode,
    LinkNode,
    LiteralNode,
    SeeReferenceNode,
    StartElementNode,
    TextNode,
    UnknownTagNode,
)

logger = logging.getLogger(__name__)

_LINE_BREAK_RUN_RE = re.compile(r"[ \t\r\f\v]*\n[ \t\r\f\v\n]*")
_SPACE_RUN_RE = re.compile(r" {2,}")
_TRAILING_SPACE_RE = re.compile(r"[ \t]+\n")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")

_START_TOKENS = {
    "p": "\n\n",
    "br": "\n",
    "pre": "\n\n```\n",
    "code": "`",
    "b": "**",
    "strong": "**",
    "i": "*",
    "em": "*",
}
_END_TOKENS = {
    "p": "\n\n",
    "pre": "\n```\n",
    "code": "`",
    "b": "**",
    "strong": "**",
    "i": "*",
    "em": "*",
}
_VERBATIM_ELEMENTS = frozenset({"code", "pre"})


def render_trees(nodes: Sequence[DocNode], *, max_depth: int | None = None) -> str:
    """Render a node sequence to normalized Markdown.

    Link labels and see references nested deeper than ``max_depth``
    (default ``DOC2MD_MAX_TREE_DEPTH``) are not descended into: a link
    falls back to its reference, a see reference renders empty.
    """
    return _render_trees(
        nodes, depth=0, max_depth=DOC2MD_MAX_TREE_DEPTH if max_depth is None else max_depth
    )


def _render_trees(nodes: Sequence[DocNode], *, depth: int, max_depth: int) -> str:
    out: list[str] = []
    open_elements: list[str] = []
    for node in nodes:
        _render_node(node, out, open_elements, depth=depth, max_depth=max_depth)
    return normalize_markdown("".join(out))


def normalize_markdown(text: str) -> str:
    """Trim, drop trailing spaces on lines, cap blank runs, resolve directives."""
    text = text.strip()
    text = _TRAILING_SPACE_RE.sub("\n", text)
    text = _EXCESS_NEWLINES_RE.sub("\n\n", text)
    return replace_directives(text)


def collapse_whitespace(text: str) -> str:
    """Join wrapped lines with a single space and squeeze repeated spaces."""
    text = _LINE_BREAK_RUN_RE.sub(" ", text)
    return _SPACE_RUN_RE.sub(" ", text)


def _render_node(
    node: DocNode,
    out: list[str],
    open_elements: list[str],
    *,
    depth: int,
    max_depth: int,
) -> None:
    if isinstance(node, TextNode):
        if _in_verbatim_element(open_elements):
            out.append(node.body)
        else:
            out.append(collapse_whitespace(node.body))
    elif isinstance(node, LiteralNode):
        out.append(f"`{node.body}`")
    elif isinstance(node, LinkNode):
        out.append(_render_link(node, depth=depth, max_depth=max_depth))
    elif isinstance(node, SeeReferenceNode):
        if depth >= max_depth:
            logger.debug("Skipping see reference nested deeper than %d levels", max_depth)
        else:
            out.append(_render_trees(node.reference, depth=depth + 1, max_depth=max_depth))
    elif isinstance(node, StartElementNode):
        name = node.name.lower()
        out.append(_START_TOKENS.get(name, ""))
        open_elements.append(name)
    elif isinstance(node, EndElementNode):
        name = node.name.lower()
        out.append(_END_TOKENS.get(name, ""))
        _close_element(open_elements, name)
    elif isinstance(node, EntityNode):
        out.append(decode_entity(node.name))
    elif isinstance(node, ErroneousNode):
        out.append(node.body)
    elif isinstance(node, UnknownTagNode):
        out.append(node.raw_text)
    else:
        assert_never(node)


def _render_link(node: LinkNode, *, depth: int, max_depth: int) -> str:
    label = ""
    if depth >= max_depth:
        logger.debug("Skipping link label nested deeper than %d levels", max_depth)
    else:
        label = _render_trees(node.label, depth=depth + 1, max_depth=max_depth)
    if label.strip():
        return label
    reference = node.reference or ""
    if reference.strip():
        return f"`{reference}`"
    return ""


def _close_element(open_elements: list[str], name: str) -> None:
    # Unbalanced input is tolerated: the latest matching element closes.
    for index in range(len(open_elements) - 1, -1, -1):
        if open_elements[index] == name:
            del open_elements[index]
            return


def _in_verbatim_element(open_elements: list[str]) -> bool:
    return any(name in _VERBATIM_ELEMENTS for name in open_elements)
