"""Documentation comment model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from doc2md.schemas.block_tags import BlockTag
from doc2md.schemas.doctree import DocNode


class DocComment(BaseModel):
    """A parsed documentation comment as supplied by an external parser.

    Attributes:
        first_sentence: Summary sentence nodes.
        body: Remaining description nodes.
        block_tags: Trailing block tags in source order.
    """

    model_config = ConfigDict(frozen=True)

    first_sentence: list[DocNode] = Field(default_factory=list)
    body: list[DocNode] = Field(default_factory=list)
    block_tags: list[BlockTag] = Field(default_factory=list)
