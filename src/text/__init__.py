"""
Text processing helpers: quote normalization, word tokenization and
sentence segmentation.
"""

from .quotes import normalize_double_quotes, normalize_quotes, normalize_single_quotes
from .sentences import get_sentences
from .words import count_words, get_words, remove_punctuation, strip_spaces, strip_tags

__all__ = [
    "normalize_quotes",
    "normalize_single_quotes",
    "normalize_double_quotes",
    "get_sentences",
    "get_words",
    "count_words",
    "remove_punctuation",
    "strip_spaces",
    "strip_tags",
]
