"""
Tests for WordCombination relevance and density.
"""

from __future__ import annotations

import pytest

from src.relevance import WordCombination


def test_combination_identity():
    wc = WordCombination(["search", "engine"])
    assert wc.combination == "search engine"
    assert wc.length == 2
    assert wc.occurrences == 0
    assert WordCombination(["engine", "search"]).combination != wc.combination


def test_increment_occurrences():
    wc = WordCombination(["cat"])
    wc.increment_occurrences()
    wc.increment_occurrences()
    assert wc.occurrences == 2


def test_single_word_relevance_is_occurrences():
    assert WordCombination(["cat"], occurrences=3).relevance == 3


def test_single_function_word_is_not_relevant():
    wc = WordCombination(["the"], occurrences=5, function_words=frozenset({"the"}))
    assert wc.relevance == 0


def test_multi_word_without_relevant_words_is_not_relevant():
    assert WordCombination(["search", "engine"], occurrences=4).relevance == 0


@pytest.mark.parametrize(
    "words,occurrences,relevant,expected",
    [
        (["search", "engine"], 4, {"search": 4, "engine": 4}, 16.0),
        (["search", "results"], 2, {"search": 2}, 5.0),
        (["a", "b", "c"], 2, {"a": 2, "b": 2, "c": 2}, 16.0),
        (["one", "two", "three", "four", "five"], 2, {w: 2 for w in ["one", "two", "three", "four", "five"]}, 38.0),
        (["search", "engine"], 3, {"other": 3}, 0.0),
    ],
)
def test_multi_word_relevance(words, occurrences, relevant, expected):
    wc = WordCombination(words, occurrences=occurrences)
    wc.set_relevant_words(relevant)
    assert wc.relevance == pytest.approx(expected)


def test_relevant_word_percentage():
    wc = WordCombination(["seo", "tips", "today"], occurrences=2)
    wc.set_relevant_words({"seo": 2, "tips": 2})
    assert wc.relevant_word_percentage == pytest.approx(2 / 3)
    assert WordCombination(["seo"]).relevant_word_percentage == 1.0


def test_density():
    wc = WordCombination(["keyword"], occurrences=4)
    assert wc.density(200) == pytest.approx(0.02)


def test_to_dict():
    wc = WordCombination(["keyword", "research"], occurrences=2)
    wc.set_relevant_words({"keyword": 2, "research": 2})
    data = wc.to_dict(100)
    assert data == {
        "words": ["keyword", "research"],
        "combination": "keyword research",
        "length": 2,
        "occurrences": 2,
        "relevance": 8.0,
        "density": 0.02,
    }
    assert "density" not in wc.to_dict()
