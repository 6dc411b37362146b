"""Tests for the stop word vocabulary."""

from nounphrases import StopWords, read_word_list


def test_is_stopword_case_insensitive():
    sw = StopWords(["the", "và"])
    assert sw.is_stopword("the")
    assert sw.is_stopword("THE")
    assert sw.is_stopword("Và")
    assert not sw.is_stopword("cat")


def test_entries_lowercased_and_trimmed():
    sw = StopWords(["  The ", "", "   ", "Bởi Vì"])
    assert sw.words == frozenset({"the", "bởi vì"})
    assert len(sw) == 2


def test_remove_stopwords_whole_phrase_only():
    """Multi-word phrases survive even when one of their words is a stop word."""
    sw = StopWords(["tôi", "bởi vì"])
    phrases = ["tôi", "nhà tôi", "bởi vì", "con mèo"]
    assert sw.remove_stopwords(phrases) == ["nhà tôi", "con mèo"]


def test_remove_stopwords_exact_text():
    """Phrase filtering compares exact text; it does not fold case."""
    sw = StopWords(["tôi"])
    assert sw.remove_stopwords(["Tôi", "tôi"]) == ["Tôi"]


def test_remove_stopwords_keeps_order_and_duplicates():
    sw = StopWords(["a"])
    assert sw.remove_stopwords(["b", "a", "c", "b"]) == ["b", "c", "b"]


def test_read_word_list(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("the\n\n  Of  \r\nvà\n   \n", encoding="utf-8")
    assert read_word_list(path) == frozenset({"the", "of", "và"})


def test_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("foo\nbar\n", encoding="utf-8")
    sw = StopWords.from_file(path)
    assert "foo" in sw
    assert sorted(sw) == ["bar", "foo"]
