"""Text normalization: markup stripping, case folding, punctuation removal."""

from __future__ import annotations

import html
import re

_SCRIPT_STYLE_RE = re.compile(
    r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL
)
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")
_PUNCT_RE = re.compile(r"[/.!?#$%^&*;:{}=\-_`~()]")


def clean_html(text: str) -> str:
    """Drop script/style blocks, comments and tags, then unescape entities."""
    text = _SCRIPT_STYLE_RE.sub(" ", text)
    text = _COMMENT_RE.sub(" ", text)
    text = _TAG_RE.sub(" ", text)
    return html.unescape(text)


def normalize(text: str) -> str:
    """Strip markup, lowercase, and remove the fixed punctuation set."""
    return _PUNCT_RE.sub("", clean_html(text).lower())
