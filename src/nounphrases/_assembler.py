"""Noun-phrase assembly over one sentence's BIO chunk labels."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ._stop_words import StopWords
    from ._types import LabeledToken

NOUN_PHRASE_LABELS: frozenset[str] = frozenset({"B-NP", "I-NP"})


def is_noun_bearing(label: str) -> bool:
    """True for B-NP / I-NP. Any other label, known or not, is outside an NP."""
    return label in NOUN_PHRASE_LABELS


def _repair_backward(
    history: Sequence[LabeledToken], phrase: str
) -> str | None:
    """Rebuild an interrupted phrase leftward through the visited tokens.

    Every noun-bearing token before the interruption is prepended, nearest
    first. Hitting a non-noun-bearing token invalidates the whole phrase
    (returns None); reaching the sentence start makes it valid.
    """
    for token, _, label in reversed(history):
        if not is_noun_bearing(label):
            return None
        phrase = f"{token} {phrase}"
    return phrase


def assemble_phrases(
    tokens: Sequence[LabeledToken],
    stop_words: StopWords | None = None,
) -> list[str]:
    """Join contiguous noun-bearing tokens into candidate phrases.

    A phrase closes when the next token is not noun-bearing or the sentence
    ends, so each maximal run yields exactly one candidate. A phrase still
    open when a non-noun token arrives goes through ``_repair_backward``.

    Args:
        tokens: (token, pos_tag, chunk_label) triples for one sentence.
        stop_words: If given, candidates whose exact text is a stop word
            entry are dropped.

    Returns:
        Candidate phrases in the order they were closed.
    """
    phrases: list[str] = []
    current = ""
    last = len(tokens) - 1

    for index, (token, _, label) in enumerate(tokens):
        if is_noun_bearing(label):
            current = f"{current} {token}" if current else token
            if index == last or not is_noun_bearing(tokens[index + 1][2]):
                phrases.append(current)
                current = ""
        elif current:
            repaired = _repair_backward(tokens[:index], current)
            if repaired is not None:
                phrases.append(repaired)
            current = ""

    if stop_words is not None:
        return stop_words.remove_stopwords(phrases)
    return phrases
