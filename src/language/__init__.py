"""
Language support: locale resolution and per-language function word lists.
"""

from .function_words import FUNCTION_WORDS, get_function_words, resolve_language, supported_languages
from .locale import DEFAULT_LANGUAGE, get_language
from .models import FunctionWords

__all__ = [
    "DEFAULT_LANGUAGE",
    "FUNCTION_WORDS",
    "FunctionWords",
    "get_function_words",
    "get_language",
    "resolve_language",
    "supported_languages",
]
