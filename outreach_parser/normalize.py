"""Splitting pasted blobs into candidate lines and canonicalising their separators."""
from __future__ import annotations

import re
from typing import List

# Leading list markers: "1. ", "- ", "* ", "(1) ", "[1] ". Numbering is capped at
# three digits so a phone number followed by a full stop is kept.
_LIST_MARKERS = (
    re.compile(r"^\s*\d{1,3}\.\s*", re.ASCII),
    re.compile(r"^\s*[-•*]\s*"),
    re.compile(r"^\s*\(\d+\)\s*", re.ASCII),
    re.compile(r"^\s*\[\d+\]\s*", re.ASCII),
)

_LONG_DASHES = re.compile(r"[–—]")
_QUOTES = re.compile(r"[“”‘’\"'`]+")
_BULLET_GLYPHS = re.compile(r"[•·]")
_ALTERNATE_SEPARATORS = re.compile(r"[|_~*,;:]+")
_DASH_RUN = re.compile(r"\s*-[\s-]*")
_WHITESPACE = re.compile(r"\s+")

SEPARATOR = " - "


def split_lines(blob: str) -> List[str]:
    """Return the trimmed, non-blank lines of ``blob`` in their original order."""

    if not blob:
        return []
    return [line.strip() for line in blob.split("\n") if line.strip()]


def strip_list_marker(line: str) -> str:
    """Remove any stacked numbering or bullet prefixes from the start of ``line``."""

    text = line
    changed = True
    while changed:
        changed = False
        for pattern in _LIST_MARKERS:
            stripped = pattern.sub("", text, count=1)
            if stripped != text:
                text = stripped
                changed = True
    return text.strip()


def normalize_line(line: str) -> str:
    """Canonicalise a raw line so every field separator becomes ``" - "``.

    Normalising an already normalised line returns it unchanged.
    """

    text = strip_list_marker(line)
    text = _LONG_DASHES.sub("-", text)
    text = _QUOTES.sub("", text)
    text = _BULLET_GLYPHS.sub(" ", text)
    text = _ALTERNATE_SEPARATORS.sub(SEPARATOR, text)
    text = _DASH_RUN.sub(SEPARATOR, text)
    text = _WHITESPACE.sub(" ", text).strip()
    # Separator rewriting can leave a bare "-" at the front.
    return strip_list_marker(text)
