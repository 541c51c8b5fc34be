"""
Ranking of word combinations.
"""

from __future__ import annotations

from typing import List

from .combination import WordCombination


def sort_combinations(combinations: List[WordCombination]) -> List[WordCombination]:
    """
    Sort by relevance, highest first; on equal relevance the longer
    combination comes first. Remaining ties keep their input order.
    """
    return sorted(combinations, key=lambda c: (c.relevance, c.length), reverse=True)


def take_top(combinations: List[WordCombination], limit: int) -> List[WordCombination]:
    return combinations[:limit]
