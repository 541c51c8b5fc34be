"""
Tests for quote normalization, word tokenization and sentence segmentation.
"""

from __future__ import annotations

from src.text import (
    count_words,
    get_sentences,
    get_words,
    normalize_quotes,
    remove_punctuation,
    strip_spaces,
    strip_tags,
)


def test_normalize_quotes():
    assert normalize_quotes("“Hello” ‘world’") == "\"Hello\" 'world'"
    assert normalize_quotes("«bonjour» „hallo‟") == '"bonjour" "hallo"'


def test_strip_tags_and_spaces():
    assert strip_spaces(strip_tags("<p>Hello <b>big</b>\n world</p>")) == "Hello big world"


def test_remove_punctuation():
    assert remove_punctuation("(hello)!") == "hello"
    assert remove_punctuation("“quoted”") == "quoted"
    assert remove_punctuation("-") == ""
    assert remove_punctuation("e-mail") == "e-mail"


def test_get_words_strips_punctuation_and_tags():
    words = get_words("The cat, sat on <b>the</b> mat.")
    assert words == ["The", "cat", "sat", "on", "the", "mat"]


def test_get_words_keeps_symbols():
    """Symbols are words of their own; the special character filter removes them later."""
    assert get_words("Price: $ 5 # tag") == ["Price", "$", "5", "#", "tag"]


def test_get_words_empty():
    assert get_words("") == []
    assert get_words("   ") == []
    assert count_words("one two three") == 3


def test_get_sentences_basic():
    sentences = get_sentences("The cat sat. The dog ran! Did it?")
    assert sentences == ["The cat sat.", "The dog ran!", "Did it?"]


def test_get_sentences_keeps_decimals_and_initials():
    assert get_sentences("It costs 3.5 dollars. Next sentence") == [
        "It costs 3.5 dollars.",
        "Next sentence",
    ]
    assert get_sentences("Written by J. Smith today. Fine.") == [
        "Written by J. Smith today.",
        "Fine.",
    ]


def test_get_sentences_letter_after_ordinary_word_ends_sentence():
    assert get_sentences("I take vitamin C. Vitamin C helps.") == [
        "I take vitamin C.",
        "Vitamin C helps.",
    ]
    assert get_sentences("We need a plan B. Plans fail.") == [
        "We need a plan B.",
        "Plans fail.",
    ]
    assert get_sentences("Ask John F. Kennedy. He knows.") == [
        "Ask John F. Kennedy.",
        "He knows.",
    ]


def test_get_sentences_needs_sentence_start():
    assert get_sentences("the cat sat. the dog ran.") == ["the cat sat. the dog ran."]


def test_get_sentences_splits_blocks():
    assert get_sentences("<p>First paragraph</p><p>Second one</p>") == [
        "First paragraph",
        "Second one",
    ]
    assert get_sentences("Line one\nLine two") == ["Line one", "Line two"]


def test_get_sentences_spanish_inverted_marks():
    text = "Hola amigo. ¿Qué tal?"
    assert get_sentences(text, "es_ES") == ["Hola amigo.", "¿Qué tal?"]
    assert get_sentences(text, "en_US") == ["Hola amigo. ¿Qué tal?"]


def test_get_sentences_empty():
    assert get_sentences("") == []
    assert get_sentences("\n\n") == []
