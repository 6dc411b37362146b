"""Document-wide reduction to the longest non-redundant phrases (Aho-Corasick)."""

from __future__ import annotations

from typing import Iterable

import ahocorasick


def longest_phrases(candidates: Iterable[str]) -> list[str]:
    """Drop every candidate that is a substring of a longer candidate.

    Equivalent to walking the candidates longest first and keeping each one
    that is not a substring of an already-kept phrase: containment is
    transitive, so a phrase inside a dropped phrase is also inside the kept
    phrase that dropped it. The test is on raw characters, not token
    boundaries ("car" is removed by "scar tissue").

    Returns:
        Distinct phrases ordered by descending length, ties in first-seen order.
    """
    ordered = sorted(dict.fromkeys(candidates), key=len, reverse=True)

    # The empty string is inside everything; it survives only on its own.
    phrases = [p for p in ordered if p]
    if not phrases:
        return ordered

    ac = ahocorasick.Automaton()
    for idx, phrase in enumerate(phrases):
        ac.add_word(phrase, idx)
    ac.make_automaton()

    # Distinct phrases of equal length cannot contain each other, so any
    # match other than the phrase itself is strictly shorter.
    redundant: set[int] = set()
    for idx, phrase in enumerate(phrases):
        for _, found in ac.iter(phrase):
            if found != idx:
                redundant.add(found)

    return [p for idx, p in enumerate(phrases) if idx not in redundant]
