"""
Tests for the word combination filters and ranking.
"""

from __future__ import annotations

import pytest

from src.language import get_function_words
from src.relevance import (
    WordCombination,
    filter_combinations,
    filter_function_words,
    filter_function_words_anywhere,
    filter_function_words_at_beginning,
    filter_function_words_at_beginning_and_ending,
    filter_function_words_at_ending,
    filter_on_density,
    filter_one_character_word_combinations,
    filter_special_characters,
    get_relevant_combinations,
    sort_combinations,
    take_top,
)


def _wc(text: str, occurrences: int = 2) -> WordCombination:
    return WordCombination(text.split(" "), occurrences=occurrences)


def _names(combinations: list[WordCombination]) -> list[str]:
    return [c.combination for c in combinations]


def test_one_character_filter():
    combinations = [_wc("a"), _wc("ab"), _wc("a b"), _wc("")]
    assert _names(filter_one_character_word_combinations(combinations)) == ["ab", "a b"]


def test_special_character_filter():
    combinations = [
        _wc("seo # tips"),
        _wc("seo tips"),
        _wc("\u200b"),
        _wc("read //"),
        _wc("10 %"),
        _wc("c++ code"),
        _wc("©"),
    ]
    assert _names(filter_special_characters(combinations)) == ["seo tips", "c++ code"]


def test_function_words_anywhere():
    combinations = [_wc("very good"), _wc("good food"), _wc("food very good")]
    assert _names(filter_function_words_anywhere(combinations, {"very"})) == ["good food"]


def test_function_words_at_beginning_and_ending():
    combinations = [_wc("the cat"), _wc("cat the"), _wc("cat sat"), _wc("cat the mat")]
    assert _names(filter_function_words_at_beginning(combinations, {"the"})) == [
        "cat the",
        "cat sat",
        "cat the mat",
    ]
    assert _names(filter_function_words_at_ending(combinations, {"the"})) == [
        "the cat",
        "cat sat",
        "cat the mat",
    ]
    assert _names(filter_function_words_at_beginning_and_ending(combinations, {"the"})) == [
        "cat sat",
        "cat the mat",
    ]


def test_language_function_word_filters():
    en = get_function_words("en")
    combinations = [
        _wc("the cat"),
        _wc("cat sat"),
        _wc("new cat"),
        _wc("cat new"),
        _wc("cat first"),
        _wc("first cat"),
        _wc("we like cats"),
    ]
    assert _names(filter_function_words(combinations, en)) == ["cat sat", "cat new", "first cat"]


def test_filter_combinations_runs_every_stage():
    en = get_function_words("en")
    combinations = [_wc("x"), _wc("seo # tips"), _wc("of course"), _wc("seo tips")]
    assert _names(filter_combinations(combinations, en)) == ["seo tips"]


def test_relevant_combinations():
    function_word = WordCombination(["the"], occurrences=4, function_words=frozenset({"the"}))
    combinations = [_wc("cat", 1), _wc("cat", 2), function_word, _wc("dog", 3)]
    assert _names(get_relevant_combinations(combinations)) == ["cat", "dog"]


def test_filter_on_density():
    combinations = [_wc("keyword", 6), _wc("topic", 5), _wc("rare", 0)]
    assert _names(filter_on_density(combinations, 200, 0, 0.03)) == ["topic", "rare"]


def test_filters_accept_empty_input():
    en = get_function_words("en")
    assert filter_one_character_word_combinations([]) == []
    assert filter_special_characters([]) == []
    assert filter_function_words([], en) == []
    assert filter_combinations([], en) == []
    assert get_relevant_combinations([]) == []
    assert filter_on_density([], 300, 0, 0.03) == []
    assert sort_combinations([]) == []


def test_sort_by_relevance_then_length():
    low = _wc("low", 2)
    high = _wc("high", 5)
    pair = _wc("tie pair", 1)
    pair.set_relevant_words({"tie": 1, "pair": 1})  # relevance 4
    single = _wc("tie", 4)
    other_single = _wc("also", 4)

    ranked = sort_combinations([low, single, high, other_single, pair])
    assert _names(ranked) == ["high", "tie pair", "tie", "also", "low"]
    assert [c.relevance for c in ranked] == pytest.approx([5, 4, 4, 4, 2])


def test_take_top():
    combinations = [_wc(str(i)) for i in range(150)]
    assert len(take_top(combinations, 100)) == 100
    assert take_top(combinations[:3], 100) == combinations[:3]
