"""
Filters over word combinations.

Every filter takes a list of combinations and returns a new list with the
same order, leaving out the combinations it rejects.
"""

from __future__ import annotations

from typing import Collection, List

from src.language import FunctionWords

from .combination import WordCombination

# First four: en dash, em dash, hyphen-minus and copyright sign.
SPECIAL_CHARACTERS = frozenset(
    [
        "–", "—", "-", "\u00a9", "#", "%", "/", "\\", "$", "€", "£", "*", "•", "|", "→", "←",
        "}", "{", "//", "||", "\u200b",
    ]
)


def filter_one_character_word_combinations(
    combinations: List[WordCombination],
) -> List[WordCombination]:
    """Drop single-word combinations whose word is at most one character long."""
    return [c for c in combinations if not (c.length == 1 and len(c.words[0]) <= 1)]


def filter_function_words_anywhere(
    combinations: List[WordCombination],
    function_words: Collection[str],
) -> List[WordCombination]:
    """Drop combinations containing any of the given words."""
    return [c for c in combinations if not any(w in function_words for w in c.words)]


def filter_special_characters(combinations: List[WordCombination]) -> List[WordCombination]:
    return filter_function_words_anywhere(combinations, SPECIAL_CHARACTERS)


def filter_function_words_at_beginning(
    combinations: List[WordCombination],
    function_words: Collection[str],
) -> List[WordCombination]:
    return [c for c in combinations if c.words[0] not in function_words]


def filter_function_words_at_ending(
    combinations: List[WordCombination],
    function_words: Collection[str],
) -> List[WordCombination]:
    return [c for c in combinations if c.words[-1] not in function_words]


def filter_function_words_at_beginning_and_ending(
    combinations: List[WordCombination],
    function_words: Collection[str],
) -> List[WordCombination]:
    """Drop combinations that start or end with one of the given words."""
    combinations = filter_function_words_at_beginning(combinations, function_words)
    return filter_function_words_at_ending(combinations, function_words)


def filter_function_words(
    combinations: List[WordCombination],
    function_words: FunctionWords,
) -> List[WordCombination]:
    """Apply the language's positional function word filters in order."""
    combinations = filter_function_words_anywhere(combinations, function_words.filtered_anywhere)
    combinations = filter_function_words_at_beginning_and_ending(
        combinations, function_words.filtered_at_beginning_and_ending
    )
    combinations = filter_function_words_at_ending(combinations, function_words.filtered_at_ending)
    combinations = filter_function_words_at_beginning(
        combinations, function_words.filtered_at_beginning
    )
    return combinations


def filter_combinations(
    combinations: List[WordCombination],
    function_words: FunctionWords,
) -> List[WordCombination]:
    """Special character, one-character and function word filters, in that order."""
    combinations = filter_special_characters(combinations)
    combinations = filter_one_character_word_combinations(combinations)
    return filter_function_words(combinations, function_words)


def get_relevant_combinations(combinations: List[WordCombination]) -> List[WordCombination]:
    """Keep combinations seen more than once and with a non-zero relevance."""
    return [c for c in combinations if c.occurrences != 1 and c.relevance != 0]


def filter_on_density(
    combinations: List[WordCombination],
    word_count: int,
    density_lower_limit: float,
    density_upper_limit: float,
) -> List[WordCombination]:
    """Keep combinations whose density lies in [lower, upper)."""
    return [
        c
        for c in combinations
        if density_lower_limit <= c.density(word_count) < density_upper_limit
    ]
