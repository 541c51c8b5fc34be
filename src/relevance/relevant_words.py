"""
Relevant words of a text: the most significant one- to five-word
combinations, ranked by relevance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Collection, Dict, Iterable, List, Optional

from src.language import get_function_words, resolve_language
from src.text import get_sentences, get_words, normalize_quotes

from .combination import WordCombination
from .config import MAX_COMBINATION_SIZE, MIN_COMBINATION_SIZE, RelevanceConfig
from .filters import filter_combinations, filter_on_density, get_relevant_combinations
from .ranking import sort_combinations, take_top

logger = logging.getLogger(__name__)


@dataclass
class RelevantWordsResult:
    """Ranked combinations of one text plus the numbers they were computed from."""

    language: str
    word_count: int
    combinations: List[WordCombination] = field(default_factory=list)


def get_word_combinations(
    text: str,
    combination_size: int,
    function_words: Collection[str] = frozenset(),
    locale: Optional[str] = None,
) -> List[WordCombination]:
    """
    All combinations of `combination_size` consecutive words, sentence by
    sentence, in document order. Duplicates are kept.
    """
    if not MIN_COMBINATION_SIZE <= combination_size <= MAX_COMBINATION_SIZE:
        raise ValueError(
            f"combination_size must be between {MIN_COMBINATION_SIZE} and {MAX_COMBINATION_SIZE}"
        )

    function_words = frozenset(function_words)
    combinations: List[WordCombination] = []
    for sentence in get_sentences(text, locale):
        words = get_words(normalize_quotes(sentence.lower()))
        for i in range(len(words) - combination_size + 1):
            combinations.append(
                WordCombination(words[i : i + combination_size], function_words=function_words)
            )
    return combinations


def calculate_occurrences(combinations: Iterable[WordCombination]) -> List[WordCombination]:
    """Merge identical combinations into one, counting how often each was seen."""
    occurrences: Dict[str, WordCombination] = {}
    for combination in combinations:
        key = combination.combination
        if key not in occurrences:
            occurrences[key] = combination
        occurrences[key].increment_occurrences()
    return list(occurrences.values())


def analyze(
    text: str,
    locale: Optional[str] = None,
    config: Optional[RelevanceConfig] = None,
) -> RelevantWordsResult:
    """Run the relevant words pipeline and keep the word count alongside the result."""
    if config is None:
        config = RelevanceConfig()

    language = resolve_language(locale)
    function_words = get_function_words(language)

    words = get_word_combinations(text, 1, function_words.all, locale)
    word_count = len(words)

    one_word_combinations = get_relevant_combinations(calculate_occurrences(words))
    one_word_combinations = take_top(
        sort_combinations(one_word_combinations), config.one_word_limit
    )
    one_word_relevance_map = {c.combination: c.relevance for c in one_word_combinations}

    combinations = list(one_word_combinations)
    for size in range(2, config.max_combination_size + 1):
        combinations.extend(
            calculate_occurrences(get_word_combinations(text, size, function_words.all, locale))
        )
    logger.debug(
        "%d words, %d relevant single words, %d combinations before filtering",
        word_count,
        len(one_word_combinations),
        len(combinations),
    )

    combinations = filter_combinations(combinations, function_words)

    for combination in combinations:
        combination.set_relevant_words(one_word_relevance_map)

    combinations = sort_combinations(get_relevant_combinations(combinations))

    if word_count >= config.word_count_lower_limit:
        combinations = filter_on_density(
            combinations,
            word_count,
            config.density_lower_limit,
            config.density_upper_limit,
        )

    combinations = take_top(combinations, config.relevant_word_limit)
    logger.debug("%d relevant combinations for language %r", len(combinations), language)
    return RelevantWordsResult(language=language, word_count=word_count, combinations=combinations)


def get_relevant_words(
    text: str,
    locale: Optional[str] = None,
    config: Optional[RelevanceConfig] = None,
) -> List[WordCombination]:
    """The relevant words of a text, most relevant first."""
    return analyze(text, locale, config).combinations
