"""Tests for sentence splitter."""

import types

from nounphrases._sentence import iter_sentences, split_sentences


def test_empty():
    assert split_sentences("") == []
    assert split_sentences("   ") == []


def test_single_sentence():
    assert split_sentences("Hello world.") == ["Hello world."]


def test_two_sentences():
    result = split_sentences("Hello world. This is a test.")
    assert result == ["Hello world.", "This is a test."]


def test_question_mark():
    result = split_sentences("What is this? It is a test.")
    assert len(result) == 2


def test_exclamation():
    result = split_sentences("Stop! That is enough.")
    assert len(result) == 2


def test_lowercase_after_period_splits():
    result = split_sentences("con mèo đang ngủ. xe chạy nhanh.")
    assert result == ["con mèo đang ngủ.", "xe chạy nhanh."]


def test_no_whitespace_after_period():
    """A period inside a token is not a boundary."""
    result = split_sentences("The value is 3.14 approximately.")
    assert len(result) == 1


def test_punctuation_runs():
    result = split_sentences("Really?! Yes.   Fine")
    assert result == ["Really?!", "Yes.", "Fine"]


def test_multiline():
    text = """The neural pathways connect through axons.
    Synaptic transmission occurs at junctions. The market surged today."""
    result = split_sentences(text)
    assert len(result) == 3


def test_lazy():
    it = iter_sentences("One. Two. Three.")
    assert isinstance(it, types.GeneratorType)
    assert next(it) == "One."
    assert list(it) == ["Two.", "Three."]
