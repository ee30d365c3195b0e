"""Assemble hover tooltips from a declaration signature and its rendered docs."""

from __future__ import annotations

from doc2md.schemas import MarkupContent, MarkupKind

_DOCS_SEPARATOR = "\n\n---\n\n"
_DEFAULT_PACKAGE = "(default package)"


def compose_hover(
    signature: str, docs: str, *, language: str = "java"
) -> MarkupContent:
    """Build hover content: a fenced signature, then the docs if there are any."""
    markdown = f"```{language}\n{signature}\n```"
    if docs:
        markdown += _DOCS_SEPARATOR + docs
    return MarkupContent(kind=MarkupKind.MARKDOWN, value=markdown)


def compose_type_hover(qualified_name: str, signature: str, docs: str) -> MarkupContent:
    """Build hover content for a type, headed by its package name."""
    markdown = type_header(qualified_name, signature)
    if docs:
        markdown += _DOCS_SEPARATOR + docs
    return MarkupContent(kind=MarkupKind.MARKDOWN, value=markdown)


def type_header(qualified_name: str, signature: str) -> str:
    """Bold package name on the first line, the type signature below."""
    package = package_name(qualified_name) or _DEFAULT_PACKAGE
    return f"**{package}**\n{signature}"


def package_name(qualified_name: str) -> str:
    """Return everything before the last dot of ``qualified_name``."""
    package, dot, _ = qualified_name.rpartition(".")
    return package if dot else ""
