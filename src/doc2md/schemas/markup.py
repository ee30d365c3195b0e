"""Markup content handed to the presentation layer."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class MarkupKind(str, Enum):
    """Enumeration for rendered content formats."""

    PLAINTEXT = "plaintext"
    MARKDOWN = "markdown"


class MarkupContent(BaseModel):
    """Rendered documentation with its format."""

    kind: MarkupKind = MarkupKind.MARKDOWN
    value: str
