"""Test setup for doc2md."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from doc2md.schemas import (  # noqa: E402
    DocComment,
    EndElementNode,
    LiteralNode,
    ParamTag,
    ReturnTag,
    StartElementNode,
    TextNode,
)


@pytest.fixture
def sum_comment() -> DocComment:
    """Comment with a summary, a body paragraph and two block tags."""
    return DocComment(
        first_sentence=[
            TextNode(body="Computes "),
            LiteralNode(body="sum"),
            TextNode(body=" of "),
            StartElementNode(name="code"),
            TextNode(body="a"),
            EndElementNode(name="code"),
        ],
        body=[
            TextNode(body="Overflow wraps\n   around silently."),
        ],
        block_tags=[
            ParamTag(name="a", description=[TextNode(body="the input")]),
            ReturnTag(description=[TextNode(body="the total")]),
        ],
    )
