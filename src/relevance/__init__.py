"""
Relevant words: ranked keyphrase candidates of a text.

Pipeline stages:
- n-gram generation per sentence (1 to 5 words)
- occurrence counting
- special character, one-character and function word filters
- two-pass relevance (single words feed multi-word combinations)
- density filter and ranking
"""

from .combination import LENGTH_BONUS, WordCombination
from .config import RelevanceConfig, load_config
from .filters import (
    SPECIAL_CHARACTERS,
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
)
from .ranking import sort_combinations, take_top
from .relevant_words import (
    RelevantWordsResult,
    analyze,
    calculate_occurrences,
    get_relevant_words,
    get_word_combinations,
)

__all__ = [
    "LENGTH_BONUS",
    "WordCombination",
    "RelevanceConfig",
    "load_config",
    "SPECIAL_CHARACTERS",
    "filter_combinations",
    "filter_function_words",
    "filter_function_words_anywhere",
    "filter_function_words_at_beginning",
    "filter_function_words_at_beginning_and_ending",
    "filter_function_words_at_ending",
    "filter_on_density",
    "filter_one_character_word_combinations",
    "filter_special_characters",
    "get_relevant_combinations",
    "sort_combinations",
    "take_top",
    "RelevantWordsResult",
    "analyze",
    "calculate_occurrences",
    "get_relevant_words",
    "get_word_combinations",
]
