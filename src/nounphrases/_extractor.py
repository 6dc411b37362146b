"""NounPhraseExtractor: sentence split, normalize, chunk, assemble, reduce."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Sequence

from ._assembler import assemble_phrases
from ._normalize import normalize
from ._reducer import longest_phrases
from ._sentence import iter_sentences, split_sentences
from ._types import DocumentPhrases, SentencePhrases

if TYPE_CHECKING:
    from ._chunker import Chunker
    from ._stop_words import StopWords
    from ._types import Entity, LabeledToken

logger = logging.getLogger(__name__)


class NounPhraseExtractor:
    """Main extraction engine. Holds the stop words and chunker for one language."""

    __slots__ = ("_stop_words", "_chunker", "_language")

    def __init__(
        self,
        stop_words: StopWords,
        chunker: Chunker,
        language: str = "en",
    ) -> None:
        self._stop_words = stop_words
        self._chunker = chunker
        self._language = language

    def __repr__(self) -> str:
        return (
            f"NounPhraseExtractor(language={self._language!r}, "
            f"stop_words={len(self._stop_words)}, "
            f"chunker={type(self._chunker).__name__})"
        )

    @property
    def language(self) -> str:
        return self._language

    @property
    def stop_words(self) -> StopWords:
        return self._stop_words

    @property
    def chunker(self) -> Chunker:
        return self._chunker

    # -- Public extraction API --

    def noun_phrases(self, text: str) -> list[str]:
        """Longest non-redundant noun phrases of a whole document."""
        candidates: list[str] = []
        n_sentences = 0
        for sentence in iter_sentences(text):
            n_sentences += 1
            candidates.extend(self._sentence_candidates(sentence)[2])
        phrases = longest_phrases(candidates)
        logger.debug(
            "%d sentences, %d candidates, %d phrases",
            n_sentences, len(candidates), len(phrases),
        )
        return phrases

    def noun_phrases_batch(self, texts: Iterable[str]) -> list[list[str]]:
        """Extract noun phrases from multiple documents."""
        return [self.noun_phrases(t) for t in texts]

    def analyze(self, text: str | Sequence[str]) -> DocumentPhrases:
        """Run the pipeline and keep every intermediate result.

        Args:
            text: Raw text, or a pre-split sequence of sentences (list, tuple, ...).
        """
        if isinstance(text, str):
            sentences = split_sentences(text)
        else:
            sentences = [s for s in text if s.strip()]

        results: list[SentencePhrases] = []
        candidates: list[str] = []
        for sentence in sentences:
            normalized, tokens, sentence_candidates = self._sentence_candidates(
                sentence
            )
            results.append(SentencePhrases(
                sentence=sentence,
                normalized=normalized,
                tokens=tokens,
                candidates=sentence_candidates,
            ))
            candidates.extend(sentence_candidates)

        return DocumentPhrases(
            sentences=results,
            candidates=candidates,
            phrases=longest_phrases(candidates),
            n_sentences=len(results),
            n_candidates=len(candidates),
        )

    # -- Pipeline capabilities --

    def normalize(self, text: str) -> str:
        return normalize(text)

    def split_sentences(self, text: str) -> list[str]:
        return split_sentences(text)

    def tokenize(self, text: str) -> list[str]:
        return self._chunker.tokenize(text)

    def pos_tag(self, text: str) -> list[tuple[str, str]]:
        return self._chunker.pos_tag(text)

    def ner(self, text: str) -> list[Entity]:
        return self._chunker.ner(text)

    def chunk(self, text: str) -> list[LabeledToken]:
        return self._chunker.chunk(text)

    def is_stopword(self, word: str) -> bool:
        return self._stop_words.is_stopword(word)

    def remove_stopwords(self, phrases: Iterable[str]) -> list[str]:
        return self._stop_words.remove_stopwords(phrases)

    # -- Internal methods --

    def _sentence_candidates(
        self, sentence: str
    ) -> tuple[str, list[LabeledToken], list[str]]:
        """Normalize, chunk and assemble one sentence."""
        normalized = normalize(sentence)
        tokens = list(self._chunker.chunk(normalized))
        return normalized, tokens, assemble_phrases(tokens, self._stop_words)
