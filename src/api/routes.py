"""
API routes: relevant words, word combinations, languages, health.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from src.language import DEFAULT_LANGUAGE, get_function_words, supported_languages
from src.relevance import (
    RelevanceConfig,
    WordCombination,
    analyze,
    calculate_occurrences,
    get_word_combinations,
)

from .deps import get_config
from .models import (
    HealthResponse,
    LanguagesResponse,
    RelevantWordsRequest,
    RelevantWordsResponse,
    WordCombinationOut,
    WordCombinationsRequest,
    WordCombinationsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


def _combination_out(combination: WordCombination, word_count: int) -> WordCombinationOut:
    return WordCombinationOut(**combination.to_dict(word_count))


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Health check."""
    return HealthResponse(status="ok", languages=supported_languages())


@router.get("/languages", response_model=LanguagesResponse)
def languages() -> LanguagesResponse:
    """Languages with function word lists."""
    return LanguagesResponse(default=DEFAULT_LANGUAGE, languages=supported_languages())


@router.post("/relevant-words", response_model=RelevantWordsResponse)
def relevant_words(
    body: RelevantWordsRequest,
    config: RelevanceConfig = Depends(get_config),
) -> RelevantWordsResponse:
    """Ranked relevant words of the submitted text."""
    result = analyze(body.text, body.locale, config)
    combinations = result.combinations
    if body.limit is not None:
        combinations = combinations[: body.limit]
    logger.info(
        "relevant-words: locale=%s words=%d results=%d",
        body.locale,
        result.word_count,
        len(combinations),
    )
    return RelevantWordsResponse(
        locale=body.locale,
        language=result.language,
        word_count=result.word_count,
        results=[_combination_out(c, result.word_count) for c in combinations],
    )


@router.post("/word-combinations", response_model=WordCombinationsResponse)
def word_combinations(body: WordCombinationsRequest) -> WordCombinationsResponse:
    """All combinations of one size with their occurrence counts, unfiltered."""
    function_words = get_function_words(body.locale)
    combinations = calculate_occurrences(
        get_word_combinations(body.text, body.size, function_words.all, body.locale)
    )
    word_count = len(get_word_combinations(body.text, 1, locale=body.locale))
    return WordCombinationsResponse(
        locale=body.locale,
        size=body.size,
        results=[_combination_out(c, word_count) for c in combinations],
    )
