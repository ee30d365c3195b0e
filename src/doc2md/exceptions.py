"""Custom exceptions for doc2md."""

from __future__ import annotations


class Doc2mdError(Exception):
    """Base exception for doc2md operations."""


class ParseError(Doc2mdError):
    """Error during comment text parsing."""


class DirectiveParseError(ParseError):
    """Unbalanced or too deeply nested inline directive braces."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at offset {position}")
        self.position = position


class ConversionError(Doc2mdError):
    """Error during HTML-like markup conversion."""
