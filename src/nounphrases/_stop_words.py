"""Stop word vocabulary: case-insensitive word lookup and whole-phrase filtering."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator


def read_word_list(path: Path | str) -> frozenset[str]:
    """Read a newline-delimited word list.

    Each line is trimmed and lowercased; blank lines are discarded.
    """
    with open(path, encoding="utf-8") as f:
        return frozenset(
            line.strip().lower() for line in f if line.strip()
        )


class StopWords:
    """Immutable stop word vocabulary.

    Entries are stored lowercase. ``is_stopword`` folds case on the query,
    while ``remove_stopwords`` compares each phrase's exact text, so a
    multi-word phrase is only dropped when the whole phrase is an entry.
    """

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str]) -> None:
        self._words: frozenset[str] = frozenset(
            w.strip().lower() for w in words if w.strip()
        )

    @classmethod
    def from_file(cls, path: Path | str) -> StopWords:
        return cls(read_word_list(path))

    @property
    def words(self) -> frozenset[str]:
        return self._words

    def is_stopword(self, word: str) -> bool:
        return word.lower() in self._words

    def remove_stopwords(self, phrases: Iterable[str]) -> list[str]:
        return [p for p in phrases if p not in self._words]

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"StopWords({len(self._words)} words)"
