"""Shared fixtures for nounphrases tests."""

import pytest

import nounphrases
from nounphrases import LabeledToken

# word -> (POS tag, chunk label); unknown words are ("X", "O").
VI_LEXICON = {
    "con": ("Nc", "B-NP"),
    "mèo": ("N", "I-NP"),
    "chó": ("N", "I-NP"),
    "đang": ("R", "B-VP"),
    "ngủ": ("V", "I-VP"),
    "chạy": ("V", "B-VP"),
    "đi": ("V", "B-VP"),
    "nhanh": ("A", "B-AP"),
    "tôi": ("P", "B-NP"),
    "xe": ("N", "B-NP"),
    "máy": ("N", "I-NP"),
    "nhà": ("N", "B-NP"),
    "sân": ("N", "B-NP"),
    "vườn": ("N", "I-NP"),
    "ở": ("E", "B-PP"),
    "trong": ("E", "B-PP"),
    "và": ("CC", "O"),
}


class LexiconChunker:
    """Whitespace tokenizer with fixed per-word POS and chunk labels."""

    def __init__(self, lexicon):
        self.lexicon = lexicon
        self.calls = []

    def tokenize(self, text):
        return text.split()

    def pos_tag(self, text):
        return [(t, self.lexicon.get(t, ("X", "O"))[0]) for t in self.tokenize(text)]

    def ner(self, text):
        return []

    def chunk(self, text):
        self.calls.append(text)
        return [
            LabeledToken(t, *self.lexicon.get(t, ("X", "O")))
            for t in self.tokenize(text)
        ]


@pytest.fixture
def lexicon_chunker():
    return LexiconChunker(VI_LEXICON)


@pytest.fixture(scope="session")
def vi_extractor():
    """Vietnamese extractor over the bundled stop words and the test lexicon."""
    return nounphrases.load(language="vi", chunker=LexiconChunker(VI_LEXICON))


@pytest.fixture(scope="session")
def en_extractor():
    """English extractor on the NLTK backend; skipped without NLTK data."""
    nltk = pytest.importorskip("nltk")
    try:
        nltk.pos_tag(nltk.word_tokenize("data check"))
    except LookupError:
        pytest.skip("NLTK punkt/tagger data not installed")
    return nounphrases.load()


@pytest.fixture(scope="session")
def vi_default_extractor():
    """Vietnamese extractor on the underthesea backend; skipped without it."""
    pytest.importorskip("underthesea")
    return nounphrases.load(language="vi")
