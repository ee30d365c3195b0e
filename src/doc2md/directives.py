"""Resolve brace-delimited inline directives such as ``{@code ...}``."""

from __future__ import annotations

import logging

from doc2md.config import DOC2MD_MAX_DIRECTIVE_DEPTH
from doc2md.exceptions import DirectiveParseError

logger = logging.getLogger(__name__)

_CODE_DIRECTIVES = frozenset({"code", "link", "linkplain"})
_PLAIN_DIRECTIVES = frozenset({"literal"})


def parse_directives(text: str, *, max_depth: int | None = None) -> str:
    """Rewrite inline directives in ``text``.

    ``{@code x}``, ``{@link x}`` and ``{@linkplain x}`` become `` `x` ``,
    ``{@literal x}`` becomes ``x``. Unknown directives keep their content
    unwrapped. Braces that do not open a directive are copied through.

    Args:
        text: Comment text that may contain directives.
        max_depth: Nesting limit for braces; defaults to
            ``DOC2MD_MAX_DIRECTIVE_DEPTH``.

    Returns:
        The rewritten text.

    Raises:
        DirectiveParseError: If a ``{`` is never closed or nesting is too deep.
    """
    if "{" not in text:
        return text
    parser = _DirectiveParser(
        text, DOC2MD_MAX_DIRECTIVE_DEPTH if max_depth is None else max_depth
    )
    return parser.parse()


def replace_directives(text: str) -> str:
    """Best-effort ``parse_directives``; returns ``text`` unchanged on failure."""
    try:
        return parse_directives(text)
    except DirectiveParseError as exc:
        logger.debug("Leaving inline directives unresolved: %s", exc)
        return text


class _DirectiveParser:
    """Recursive-descent scanner over a single cursor."""

    def __init__(self, text: str, max_depth: int) -> None:
        self._text = text
        self._pos = 0
        self._depth = 0
        self._max_depth = max_depth
        self._out: list[str] = []

    def parse(self) -> str:
        while not self._at_end():
            self._parse_inner()
            if not self._at_end():
                # Stray closing brace at the top level.
                self._out.append(self._advance())
        return "".join(self._out)

    def _at_end(self) -> bool:
        return self._pos >= len(self._text)

    def _peek(self) -> str:
        if self._at_end():
            raise DirectiveParseError("unexpected end of input", self._pos)
        return self._text[self._pos]

    def _advance(self) -> str:
        char = self._peek()
        self._pos += 1
        return char

    def _expect(self, expected: str) -> None:
        found = self._advance()
        if found != expected:
            raise DirectiveParseError(
                f"want `{expected}` got `{found}`", self._pos - 1
            )

    def _parse_name(self) -> str:
        self._expect("@")
        start = self._pos
        while not self._at_end() and self._text[self._pos].isalpha():
            self._pos += 1
        return self._text[start : self._pos]

    def _parse_block(self) -> None:
        opened_at = self._pos
        self._expect("{")
        self._depth += 1
        if self._depth > self._max_depth:
            raise DirectiveParseError("directive nesting too deep", opened_at)

        if self._peek() == "@":
            name = self._parse_name()
            if not self._at_end() and self._text[self._pos] == " ":
                self._pos += 1
            if name in _CODE_DIRECTIVES:
                self._out.append("`")
                self._parse_inner()
                self._out.append("`")
            elif name in _PLAIN_DIRECTIVES:
                self._parse_inner()
            else:
                logger.debug("Unknown inline directive `@%s` at offset %d", name, opened_at)
                self._parse_inner()
        else:
            self._out.append("{")
            self._parse_inner()
            self._out.append("}")

        if self._at_end():
            raise DirectiveParseError("unclosed `{`", opened_at)
        self._expect("}")
        self._depth -= 1

    def _parse_inner(self) -> None:
        text = self._text
        while not self._at_end():
            char = text[self._pos]
            if char == "{":
                self._parse_block()
            elif char == "}":
                return
            else:
                end = self._pos + 1
                while end < len(text) and text[end] not in "{}":
                    end += 1
                self._out.append(text[self._pos : end])
                self._pos = end
