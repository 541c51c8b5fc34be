"""
Word tokenization.

Words are whatever sits between spaces once HTML tags are removed, with
surrounding punctuation stripped. Symbols such as "#" or "/" are kept as
words on purpose; they are dealt with by the special-character filter.
"""

from __future__ import annotations

import re
from typing import List

TAG_RE = re.compile(r"<[^>]*>")
SPACES_RE = re.compile(r"[\s ]+")

# Dashes, brackets, quotes, sentence punctuation and a few joining symbols.
PUNCTUATION = "–\\-()_\\[\\]’“”\"'.?!:;,¿¡«»‹›—×+&"
PUNCTUATION_RE = re.compile(rf"^[{PUNCTUATION}]+|[{PUNCTUATION}]+$")


def strip_tags(text: str) -> str:
    return TAG_RE.sub(" ", text)


def strip_spaces(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return SPACES_RE.sub(" ", text).strip()


def remove_punctuation(word: str) -> str:
    """Strip leading and trailing punctuation from a single word."""
    return PUNCTUATION_RE.sub("", word)


def get_words(text: str) -> List[str]:
    """Split text into words, in order."""
    text = strip_spaces(strip_tags(text))
    if not text:
        return []

    words: List[str] = []
    for piece in text.split(" "):
        word = remove_punctuation(piece)
        if word:
            words.append(word)
    return words


def count_words(text: str) -> int:
    return len(get_words(text))
