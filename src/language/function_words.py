"""
Function word table keyed by language code.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import List, Mapping, Optional

from . import dutch, english, french, german, italian, spanish
from .locale import DEFAULT_LANGUAGE, get_language
from .models import FunctionWords

logger = logging.getLogger(__name__)

FUNCTION_WORDS: Mapping[str, FunctionWords] = MappingProxyType(
    {
        "en": english.FUNCTION_WORDS,
        "de": german.FUNCTION_WORDS,
        "nl": dutch.FUNCTION_WORDS,
        "fr": french.FUNCTION_WORDS,
        "es": spanish.FUNCTION_WORDS,
        "it": italian.FUNCTION_WORDS,
    }
)


def supported_languages() -> List[str]:
    return sorted(FUNCTION_WORDS)


def resolve_language(locale: Optional[str]) -> str:
    """Language code for the locale, or the default language when it has no table."""
    language = get_language(locale)
    if language not in FUNCTION_WORDS:
        logger.debug("No function words for %r, falling back to %r", locale, DEFAULT_LANGUAGE)
        return DEFAULT_LANGUAGE
    return language


def get_function_words(locale: Optional[str]) -> FunctionWords:
    """Function word lists for the locale's language (default language if unsupported)."""
    return FUNCTION_WORDS[resolve_language(locale)]
