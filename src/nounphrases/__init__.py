"""nounphrases: maximal noun-phrase extraction from BIO-chunked text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._assembler import NOUN_PHRASE_LABELS, assemble_phrases, is_noun_bearing
from ._errors import NounPhraseError, VocabularyChecksumError, VocabularyVersionError
from ._extractor import NounPhraseExtractor
from ._loader import available_languages, load_stop_words
from ._normalize import clean_html, normalize
from ._reducer import longest_phrases
from ._sentence import iter_sentences, split_sentences
from ._stop_words import StopWords, read_word_list
from ._types import DocumentPhrases, Entity, LabeledToken, SentencePhrases

if TYPE_CHECKING:
    from pathlib import Path

    from ._chunker import Chunker

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "available_languages",
    "assemble_phrases",
    "clean_html",
    "Chunker",
    "DocumentPhrases",
    "Entity",
    "is_noun_bearing",
    "iter_sentences",
    "LabeledToken",
    "load_stop_words",
    "longest_phrases",
    "NltkChunker",
    "UndertheseaChunker",
    "normalize",
    "NOUN_PHRASE_LABELS",
    "NounPhraseError",
    "NounPhraseExtractor",
    "read_word_list",
    "SentencePhrases",
    "split_sentences",
    "StopWords",
    "VocabularyChecksumError",
    "VocabularyVersionError",
]

logger = logging.getLogger(__name__)

_DEFAULT_CHUNKERS = {"en": "NltkChunker", "vi": "UndertheseaChunker"}


def _default_chunker(language: str) -> Chunker:
    name = _DEFAULT_CHUNKERS.get(language)
    if name is None:
        raise NounPhraseError(
            f"No default chunker for language {language!r}; pass chunker="
        )
    from . import _chunker
    return getattr(_chunker, name)()


def load(
    data_dir: Path | str | None = None,
    *,
    language: str = "en",
    chunker: Chunker | None = None,
    stop_words_file: Path | str | None = None,
) -> NounPhraseExtractor:
    """Load the stop word vocabulary and return a ready-to-use extractor.

    Args:
        data_dir: Path to data directory. If None, uses bundled package data.
        language: Language code selecting the bundled stop word list.
        chunker: Chunker for ``language``. Defaults to NltkChunker for "en"
            and UndertheseaChunker for "vi"; other languages must pass one.
        stop_words_file: Newline-delimited stop word list used instead of
            the bundled one (no manifest or checksum involved).
    """
    if stop_words_file is not None:
        stop_words = StopWords.from_file(stop_words_file)
    else:
        stop_words = load_stop_words(language, data_dir)

    if chunker is None:
        chunker = _default_chunker(language)

    extractor = NounPhraseExtractor(stop_words, chunker, language=language)
    logger.info("Loaded %r", extractor)
    return extractor


# Deferred import so nltk is only imported when a chunker is requested.
def __getattr__(name: str):
    if name in ("Chunker", "NltkChunker", "UndertheseaChunker"):
        from . import _chunker
        return getattr(_chunker, name)
    raise AttributeError(f"module 'nounphrases' has no attribute {name!r}")
