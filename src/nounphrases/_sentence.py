"""Lightweight regex-based sentence splitter."""

from __future__ import annotations

import re
from typing import Iterator

# A boundary is the whitespace run after sentence-ending punctuation.
_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")


def iter_sentences(text: str) -> Iterator[str]:
    """Lazily yield sentences, skipping empty and whitespace-only fragments."""
    start = 0
    for m in _BOUNDARY_RE.finditer(text):
        s = text[start:m.start()].strip()
        if s:
            yield s
        start = m.end()
    s = text[start:].strip()
    if s:
        yield s


def split_sentences(text: str) -> list[str]:
    """Split text into sentences using regex heuristics."""
    return list(iter_sentences(text))
