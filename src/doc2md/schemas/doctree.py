"""Documentation tree node models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _DocTreeNode(BaseModel):
    model_config = ConfigDict(frozen=True)


class TextNode(_DocTreeNode):
    """A run of prose."""

    kind: Literal["text"] = "text"
    body: str


class LiteralNode(_DocTreeNode):
    """Verbatim code span, e.g. the body of ``{@code ...}``."""

    kind: Literal["literal"] = "literal"
    body: str


class LinkNode(_DocTreeNode):
    """Cross-reference with an optional human-readable label."""

    kind: Literal["link"] = "link"
    reference: str | None = None
    label: list[DocNode] = Field(default_factory=list)


class SeeReferenceNode(_DocTreeNode):
    """Inline ``see`` reference, rendered as its own nodes."""

    kind: Literal["see_reference"] = "see_reference"
    reference: list[DocNode] = Field(default_factory=list)


class StartElementNode(_DocTreeNode):
    """Opening markup element such as ``<p>`` or ``<code>``."""

    kind: Literal["start_element"] = "start_element"
    name: str


class EndElementNode(_DocTreeNode):
    """Closing markup element."""

    kind: Literal["end_element"] = "end_element"
    name: str


class EntityNode(_DocTreeNode):
    """Named character reference, without the ``&`` and ``;``."""

    kind: Literal["entity"] = "entity"
    name: str


class ErroneousNode(_DocTreeNode):
    """Malformed construct captured by the tree supplier."""

    kind: Literal["erroneous"] = "erroneous"
    body: str


class UnknownTagNode(_DocTreeNode):
    """Inline tag the tree supplier did not recognize."""

    kind: Literal["unknown_tag"] = "unknown_tag"
    raw_text: str


DocNode = Annotated[
    Union[
        TextNode,
        LiteralNode,
        LinkNode,
        SeeReferenceNode,
        StartElementNode,
        EndElementNode,
        EntityNode,
        ErroneousNode,
        UnknownTagNode,
    ],
    Field(discriminator="kind"),
]

LinkNode.model_rebuild()
SeeReferenceNode.model_rebuild()
