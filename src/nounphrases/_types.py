"""Data structures for nounphrases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class LabeledToken(NamedTuple):
    token: str
    pos_tag: str
    chunk_label: str  # BIO chunk tag, e.g. "B-NP", "I-NP", "O"


@dataclass(slots=True, frozen=True)
class Entity:
    text: str
    label: str  # backend-specific entity type, e.g. "PERSON", "GPE"


@dataclass(slots=True, frozen=True)
class SentencePhrases:
    sentence: str
    normalized: str
    tokens: list[LabeledToken]
    candidates: list[str]  # after stop word filtering, in emission order


@dataclass(slots=True, frozen=True)
class DocumentPhrases:
    sentences: list[SentencePhrases]
    candidates: list[str]   # all sentences, concatenated
    phrases: list[str]      # reduced, longest first
    n_sentences: int
    n_candidates: int
