"""Shared HTML utilities for documentation comment text."""

from __future__ import annotations

import re

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


WRAPPER_TAG = "doc2md-wrapper"

_OPEN_TAG_RE = re.compile(r"<(\w+)[^>]*>", re.ASCII)


def is_html_like(text: str) -> bool:
    """Check whether ``text`` contains an opening tag closed somewhere later.

    Only the literal ``</name>`` after an opening ``<name ...>`` is looked
    for; nesting and balance are not checked.
    """
    for match in _OPEN_TAG_RE.finditer(text):
        if text.find(f"</{match.group(1)}>", match.end()) != -1:
            return True
    return False


def wrap_fragment(text: str) -> str:
    """Wrap a fragment in the single synthetic root element."""
    return f"<{WRAPPER_TAG}>{text}</{WRAPPER_TAG}>"


def find_wrapper_root(soup: BeautifulSoup) -> Tag | None:
    """Find the synthetic root added by ``wrap_fragment``.

    HTML tree builders may move the wrapper under ``<html><body>``, so it is
    searched for rather than assumed to be the top element.
    """
    root = soup.find(WRAPPER_TAG)
    if isinstance(root, Tag):
        return root
    return None
