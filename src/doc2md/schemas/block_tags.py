"""Block tag models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from doc2md.schemas.doctree import DocNode


class _BlockTag(BaseModel):
    model_config = ConfigDict(frozen=True)


class AuthorTag(_BlockTag):
    kind: Literal["author"] = "author"
    name: list[DocNode] = Field(default_factory=list)


class SinceTag(_BlockTag):
    kind: Literal["since"] = "since"
    body: list[DocNode] = Field(default_factory=list)


class SeeTag(_BlockTag):
    kind: Literal["see"] = "see"
    reference: list[DocNode] = Field(default_factory=list)


class ParamTag(_BlockTag):
    """``@param`` tag; ``is_type_parameter`` marks the ``<T>`` form."""

    kind: Literal["param"] = "param"
    name: str
    is_type_parameter: bool = False
    description: list[DocNode] = Field(default_factory=list)


class ReturnTag(_BlockTag):
    kind: Literal["return"] = "return"
    description: list[DocNode] = Field(default_factory=list)


class ThrowsTag(_BlockTag):
    """``@throws`` tag; the legacy ``@exception`` spelling shares this model."""

    kind: Literal["throws", "exception"] = "throws"
    exception_name: str
    description: list[DocNode] = Field(default_factory=list)


class DeprecatedTag(_BlockTag):
    kind: Literal["deprecated"] = "deprecated"
    body: list[DocNode] = Field(default_factory=list)


class UnknownBlockTag(_BlockTag):
    """Block tag outside the supported set, kept as raw text."""

    kind: Literal["unknown"] = "unknown"
    raw_text: str


BlockTag = Annotated[
    Union[
        AuthorTag,
        SinceTag,
        SeeTag,
        ParamTag,
        ReturnTag,
        ThrowsTag,
        DeprecatedTag,
        UnknownBlockTag,
    ],
    Field(discriminator="kind"),
]
