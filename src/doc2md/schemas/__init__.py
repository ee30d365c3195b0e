"""Shared schemas for doc2md."""

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
from doc2md.schemas.comment import DocComment
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
from doc2md.schemas.markup import MarkupContent, MarkupKind

__all__ = [
    "AuthorTag",
    "BlockTag",
    "DeprecatedTag",
    "DocComment",
    "DocNode",
    "EndElementNode",
    "EntityNode",
    "ErroneousNode",
    "LinkNode",
    "LiteralNode",
    "MarkupContent",
    "MarkupKind",
    "ParamTag",
    "ReturnTag",
    "SeeReferenceNode",
    "SeeTag",
    "SinceTag",
    "StartElementNode",
    "TextNode",
    "ThrowsTag",
    "UnknownBlockTag",
    "UnknownTagNode",
]
