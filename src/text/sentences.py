"""
Sentence segmentation.

Text is first cut into blocks at line breaks and block-level HTML elements;
each block is then cut at sentence delimiters that are followed by something
that can start a sentence.
"""

from __future__ import annotations

import re
from typing import Dict, FrozenSet, List, Optional

from src.language.function_words import get_function_words
from src.language.locale import get_language

BLOCK_RE = re.compile(
    r"\n+|<br\s*/?>|</?(?:p|div|h[1-6]|li|ul|ol|table|tr|td|th|blockquote|pre)\b[^>]*>",
    re.IGNORECASE,
)

# Delimiter run, optional closing quotes/brackets, then whitespace.
SENTENCE_END_RE = re.compile(r"([.?!…]+[\"')\]»”’]*)\s+")

SENTENCE_STARTS: FrozenSet[str] = frozenset("\"'([«“‘")

LANGUAGE_SENTENCE_STARTS: Dict[str, FrozenSet[str]] = {
    "es": SENTENCE_STARTS | frozenset("¿¡"),
}


def _is_sentence_start(char: str, starts: FrozenSet[str]) -> bool:
    return char.isupper() or char.isdigit() or char in starts


def _ends_with_initial(text: str, function_words: FrozenSet[str]) -> bool:
    """
    True for text like "by J" or "John F" where the following period marks an
    initial. An uppercase letter after an ordinary lowercase word ("vitamin C",
    "plan B") is a word of its own and the period ends the sentence.
    """
    words = text.split()
    if not words:
        return False
    last = words[-1]
    if len(last) != 1 or not last.isalpha() or not last.isupper():
        return False
    if len(words) == 1:
        return True
    previous = words[-2]
    return previous[:1].isupper() or previous.lower() in function_words


def _split_block(block: str, starts: FrozenSet[str], function_words: FrozenSet[str]) -> List[str]:
    sentences: List[str] = []
    start = 0
    for match in SENTENCE_END_RE.finditer(block):
        next_index = match.end()
        if next_index >= len(block):
            continue
        if not _is_sentence_start(block[next_index], starts):
            continue
        if match.group(1) == "." and _ends_with_initial(
            block[start : match.start(1)], function_words
        ):
            continue
        sentences.append(block[start : match.end(1)].strip())
        start = next_index
    sentences.append(block[start:].strip())
    return [s for s in sentences if s]


def get_sentences(text: str, locale: Optional[str] = None) -> List[str]:
    """Split text into ordered, whitespace-trimmed sentences."""
    if not text:
        return []

    starts = LANGUAGE_SENTENCE_STARTS.get(get_language(locale), SENTENCE_STARTS)
    function_words = get_function_words(locale).all
    sentences: List[str] = []
    for block in BLOCK_RE.split(text):
        if not block.strip():
            continue
        sentences.extend(_split_block(block, starts, function_words))
    return sentences
