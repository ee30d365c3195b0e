"""Tests for inline directive parsing."""

from __future__ import annotations

import logging

import pytest

from doc2md.directives import parse_directives, replace_directives
from doc2md.exceptions import DirectiveParseError


class TestParseDirectives:
    """Tests for parse_directives function."""

    def test_text_without_braces_is_unchanged(self) -> None:
        """Plain text, including angle brackets, passes through untouched."""
        text = "Returns a <b>value</b> when x < y."

        assert parse_directives(text) == text

    @pytest.mark.parametrize("name", ["code", "link", "linkplain"])
    def test_code_like_directives_wrap_in_backticks(self, name: str) -> None:
        """code, link and linkplain render as inline code."""
        assert parse_directives(f"Use {{@{name} Foo#bar}} here") == "Use `Foo#bar` here"

    def test_literal_directive_is_unwrapped(self) -> None:
        """literal keeps its content without backticks."""
        assert parse_directives("{@literal a<b}") == "a<b"

    def test_comparison_inside_code_is_kept(self) -> None:
        """Operators inside a directive are plain text."""
        assert parse_directives("{@code x < y}") == "`x < y`"

    def test_nested_plain_braces_are_kept(self) -> None:
        """Braces that do not open a directive survive verbatim."""
        assert parse_directives("{@code Map{K, V}}") == "`Map{K, V}`"
        assert parse_directives("int[] a = {1, 2};") == "int[] a = {1, 2};"

    def test_directive_inside_directive(self) -> None:
        """Inner directives are resolved recursively."""
        assert parse_directives("{@literal see {@code x}}") == "see `x`"

    def test_only_one_space_after_name_is_consumed(self) -> None:
        """A single separator space is dropped, further spaces are content."""
        assert parse_directives("{@code  x}") == "` x`"

    def test_directive_without_content(self) -> None:
        """A bare directive renders as empty inline code."""
        assert parse_directives("{@code}") == "``"

    def test_unknown_directive_keeps_content(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Unknown directives fall back to their content and log a diagnostic."""
        with caplog.at_level(logging.DEBUG, logger="doc2md.directives"):
            result = parse_directives("Limit is {@value #MAX}.")

        assert result == "Limit is #MAX."
        assert "Unknown inline directive `@value`" in caplog.text

    def test_stray_closing_brace_is_copied(self) -> None:
        """A closing brace without an opener is ordinary text."""
        assert parse_directives("a } b {@code c}") == "a } b `c`"

    def test_unclosed_brace_raises(self) -> None:
        """An unmatched opening brace is reported with its offset."""
        with pytest.raises(DirectiveParseError) as exc_info:
            parse_directives("ab {@code x")

        assert exc_info.value.position == 3

    def test_trailing_open_brace_raises(self) -> None:
        """A brace at the very end of input cannot be closed."""
        with pytest.raises(DirectiveParseError):
            parse_directives("oops {")

    def test_nesting_limit(self) -> None:
        """Nesting beyond max_depth is rejected."""
        text = "{" * 5 + "x" + "}" * 5

        assert parse_directives(text, max_depth=5) == text
        with pytest.raises(DirectiveParseError, match="too deep"):
            parse_directives(text, max_depth=3)


class TestReplaceDirectives:
    """Tests for the best-effort replace_directives wrapper."""

    def test_resolves_balanced_input(self) -> None:
        """Balanced input is rewritten like parse_directives."""
        assert replace_directives("{@link List}") == "`List`"

    def test_falls_back_to_original_text(self) -> None:
        """Unbalanced input is returned exactly as given."""
        text = "Use {@code foo( to start"

        assert replace_directives(text) == text
