"""Tests for the public rendering entry points."""

from __future__ import annotations

import json
import logging
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from doc2md.conversion import (
    as_markup_content,
    render_comment,
    render_comment_json,
    render_comment_text,
    text_as_markup_content,
)
from doc2md.exceptions import ConversionError
from doc2md.schemas import DocComment, LinkNode, MarkupKind, ReturnTag, TextNode


class TestRenderComment:
    """Tests for render_comment function."""

    def test_all_sections(self, sum_comment: DocComment) -> None:
        """Summary, body and block tags are separated by blank lines."""
        assert render_comment(sum_comment) == (
            "Computes `sum` of `a`\n\n"
            "Overflow wraps around silently.\n\n"
            "@param a - the input\n"
            "@return the total"
        )

    def test_empty_comment(self) -> None:
        """A comment with nothing in it renders as an empty string."""
        assert render_comment(DocComment()) == ""

    def test_blank_sections_leave_no_separator(self) -> None:
        """Missing summary and body do not produce leading blank lines."""
        comment = DocComment(
            first_sentence=[TextNode(body="   ")],
            block_tags=[ReturnTag(description=[TextNode(body="nothing")])],
        )

        assert render_comment(comment) == "@return nothing"

    def test_markup_content(self, sum_comment: DocComment) -> None:
        """The wrapper carries Markdown kind and the rendered value."""
        content = as_markup_content(sum_comment)

        assert content.kind == MarkupKind.MARKDOWN
        assert content.value == render_comment(sum_comment)


class TestRenderCommentJson:
    """Tests for JSON input."""

    def test_json_comment(self) -> None:
        """A JSON document renders like the equivalent models."""
        payload = json.dumps(
            {
                "first_sentence": [
                    {"kind": "text", "body": "Returns "},
                    {"kind": "link", "reference": "List"},
                ],
                "block_tags": [
                    {"kind": "exception", "exception_name": "IOException"},
                ],
            }
        )

        assert render_comment_json(payload) == "Returns `List`\n\n@throws IOException"

    def test_invalid_json_comment(self) -> None:
        """Unknown node kinds are rejected by validation."""
        payload = json.dumps({"body": [{"kind": "footnote", "body": "x"}]})

        with pytest.raises(ValidationError):
            render_comment_json(payload)


class TestRenderCommentText:
    """Tests for raw comment text."""

    def test_code_directive(self) -> None:
        """Comparison operators inside a directive are not markup."""
        assert render_comment_text("{@code x < y}") == "`x < y`"

    def test_html_like_text(self) -> None:
        """Paired tags are converted to Markdown."""
        assert render_comment_text("<b>Warning</b>: deprecated") == "**Warning**: deprecated"

    def test_empty_text(self) -> None:
        """Empty input yields empty output."""
        assert render_comment_text("") == ""

    def test_unbalanced_directive_is_left_alone(self) -> None:
        """Broken directive braces fall back to the original text."""
        assert render_comment_text("Call {@code run( first") == "Call {@code run( first"

    def test_conversion_failure_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        """A markup failure keeps the original text and still resolves directives."""
        with patch(
            "doc2md.conversion.convert_html_to_markdown",
            side_effect=ConversionError("boom"),
        ):
            with caplog.at_level(logging.INFO, logger="doc2md.conversion"):
                result = render_comment_text("<b>x</b> {@code y}")

        assert result == "<b>x</b> `y`"
        assert "falling back to plain text" in caplog.text

    def test_text_markup_content(self) -> None:
        """Raw text can be wrapped as markup content too."""
        content = text_as_markup_content("<i>fast</i>")

        assert content.kind == MarkupKind.MARKDOWN
        assert content.value == "*fast*"

    def test_paragraph_break_in_html_like_text(self) -> None:
        """A blank line between tags keeps the paragraphs apart."""
        result = render_comment_text("<b>Note</b>\n\n<i>Second paragraph</i>")

        assert result == "**Note**\n\n*Second paragraph*"


class TestDeeplyNestedComment:
    """Tests for adversarially nested trees."""

    def test_nested_links_do_not_raise(self) -> None:
        """Thousands of nested link labels degrade instead of overflowing."""
        node = LinkNode(reference="inner", label=[TextNode(body="deepest")])
        for _ in range(2000):
            node = LinkNode(reference="outer", label=[node])

        assert render_comment(DocComment(body=[node])) == "`outer`"
