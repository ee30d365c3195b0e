"""Decode the named character references used in documentation comments."""

from __future__ import annotations

import re

_ENTITIES = {
    "lt": "<",
    "gt": ">",
    "amp": "&",
    "nbsp": " ",
    "quot": '"',
}

_ENTITY_RE = re.compile(r"&([A-Za-z][A-Za-z0-9]*);")


def decode_entity(name: str) -> str:
    """Return the character for ``name``, or ``&name;`` if it is not supported."""
    return _ENTITIES.get(name, f"&{name};")


def decode_entities(text: str) -> str:
    """Decode every supported ``&name;`` reference in ``text`` in a single pass."""
    text = _ENTITY_RE.sub(lambda match: decode_entity(match.group(1)), text)
    return text.replace("\u00a0", " ")
