"""Format block tags (``@param``, ``@return``, ...) as Markdown lines."""

from __future__ import annotations

from typing import Sequence, assert_never

from doc2md.renderer import normalize_markdown, render_trees
from doc2md.schemas.block_tags import (
    AuthorTag,
    BlockTag,
    DeprecatedTag,
    ParamTag,
    ReturnTag,
    SeeTag,
    SinceTag,
    ThrowsTag,
    UnknownBlockTag,
)


def render_block_tags(tags: Sequence[BlockTag]) -> str:
    """Render block tags one per line, then normalize the whole block."""
    lines = [_render_block_tag(tag) for tag in tags]
    return normalize_markdown("\n".join(lines))


def format_block(label: str, body: str) -> str:
    """Return ``label body``, or just ``label`` when ``body`` is blank."""
    if not body.strip():
        return label
    return f"{label} {body}"


def format_param(name: str, description: str, type_parameter: bool) -> str:
    """Return the ``@param``/``@typeparam`` line, adding the description when non-blank."""
    prefix = "@typeparam" if type_parameter else "@param"
    if not description.strip():
        return f"{prefix} {name}"
    return f"{prefix} {name} - {description}"


def _render_block_tag(tag: BlockTag) -> str:
    if isinstance(tag, AuthorTag):
        return format_block("@author", render_trees(tag.name))
    if isinstance(tag, SinceTag):
        return format_block("@since", render_trees(tag.body))
    if isinstance(tag, SeeTag):
        return format_block("@see", render_trees(tag.reference))
    if isinstance(tag, ParamTag):
        return format_param(
            tag.name, render_trees(tag.description), tag.is_type_parameter
        )
    if isinstance(tag, ReturnTag):
        return format_block("@return", render_trees(tag.description))
    if isinstance(tag, ThrowsTag):
        description = render_trees(tag.description)
        if description.strip():
            return format_block("@throws", f"{tag.exception_name} - {description}")
        return format_block("@throws", tag.exception_name)
    if isinstance(tag, DeprecatedTag):
        return format_block("@deprecated", render_trees(tag.body))
    if isinstance(tag, UnknownBlockTag):
        return tag.raw_text
    assert_never(tag)
