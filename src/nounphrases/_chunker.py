"""Chunker protocol with NLTK (English) and underthesea (Vietnamese) backends."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

import nltk
from nltk.chunk import tree2conlltags

from ._errors import NounPhraseError
from ._types import Entity, LabeledToken

# Adjective/noun runs ending in a noun; determiners stay outside the chunk.
DEFAULT_GRAMMAR = r"NP: {<JJ.*>*<NN.*>+}"


@runtime_checkable
class Chunker(Protocol):
    """Word tokenization, POS tagging, NER and BIO chunk labeling."""

    def tokenize(self, text: str) -> list[str]: ...

    def pos_tag(self, text: str) -> list[tuple[str, str]]: ...

    def ner(self, text: str) -> list[Entity]: ...

    def chunk(self, text: str) -> list[LabeledToken]: ...


class NltkChunker:
    """English chunker: punkt tokenizer, perceptron tagger, regexp NP grammar.

    Needs the NLTK ``punkt_tab`` and ``averaged_perceptron_tagger_eng`` data
    packages; ``ner`` also needs ``maxent_ne_chunker_tab`` and ``words``.
    Missing data surfaces as NLTK's own ``LookupError``.
    """

    __slots__ = ("_language", "_grammar", "_parser")

    def __init__(
        self, grammar: str = DEFAULT_GRAMMAR, language: str = "english"
    ) -> None:
        self._language = language
        self._grammar = grammar
        self._parser = nltk.RegexpParser(grammar)

    @property
    def grammar(self) -> str:
        return self._grammar

    def tokenize(self, text: str) -> list[str]:
        return nltk.word_tokenize(text, language=self._language)

    def pos_tag(self, text: str) -> list[tuple[str, str]]:
        return nltk.pos_tag(self.tokenize(text))

    def ner(self, text: str) -> list[Entity]:
        tree = nltk.ne_chunk(self.pos_tag(text))
        return [
            Entity(
                text=" ".join(word for word, _ in node.leaves()),
                label=node.label(),
            )
            for node in tree
            if isinstance(node, nltk.Tree)
        ]

    def chunk(self, text: str) -> list[LabeledToken]:
        return self.chunk_tagged(self.pos_tag(text))

    def chunk_tagged(
        self, tagged: Sequence[tuple[str, str]]
    ) -> list[LabeledToken]:
        """Chunk an already POS-tagged sentence into (token, tag, BIO label)."""
        if not tagged:
            return []
        tree = self._parser.parse(list(tagged))
        return [LabeledToken(*triple) for triple in tree2conlltags(tree)]


class UndertheseaChunker:
    """Vietnamese chunker backed by underthesea's CRF models.

    underthesea already emits (word, POS, BIO chunk) triples and segments
    multi-syllable words ("xe máy") into single tokens. Install it with the
    ``vi`` extra.
    """

    __slots__ = ("_ut",)

    def __init__(self) -> None:
        try:
            import underthesea
        except ImportError as exc:
            raise NounPhraseError(
                "UndertheseaChunker needs the 'underthesea' package "
                "(pip install 'nounphrases[vi]')"
            ) from exc
        self._ut = underthesea

    def tokenize(self, text: str) -> list[str]:
        if not text.strip():
            return []
        return self._ut.word_tokenize(text)

    def pos_tag(self, text: str) -> list[tuple[str, str]]:
        if not text.strip():
            return []
        return [(word, tag) for word, tag in self._ut.pos_tag(text)]

    def ner(self, text: str) -> list[Entity]:
        """Group underthesea's (word, pos, chunk, BIO entity) rows into entities."""
        if not text.strip():
            return []
        entities: list[Entity] = []
        words: list[str] = []
        label = ""
        for word, _, _, tag in self._ut.ner(text):
            if tag.startswith("I-") and words and tag[2:] == label:
                words.append(word)
                continue
            if words:
                entities.append(Entity(text=" ".join(words), label=label))
                words = []
            if tag.startswith(("B-", "I-")):
                words = [word]
                label = tag[2:]
        if words:
            entities.append(Entity(text=" ".join(words), label=label))
        return entities

    def chunk(self, text: str) -> list[LabeledToken]:
        if not text.strip():
            return []
        return [LabeledToken(*triple) for triple in self._ut.chunk(text)]
