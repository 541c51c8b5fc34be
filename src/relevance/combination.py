"""
Word combination: one n-gram of a text with its occurrence count and relevance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

# Extra weight for multi-word combinations made of relevant words, by length.
LENGTH_BONUS: Mapping[int, int] = {2: 3, 3: 7, 4: 12, 5: 18}


@dataclass
class WordCombination:
    """
    An ordered sequence of words taken from a single sentence.

    Occurrences start at 0 and are counted by `calculate_occurrences`; the
    first sighting already counts as one. Multi-word combinations only get a
    non-zero relevance once a single-word relevance map has been set.
    """

    words: List[str]
    occurrences: int = 0
    function_words: FrozenSet[str] = field(default_factory=frozenset, repr=False)
    relevant_words: Optional[Mapping[str, float]] = field(default=None, repr=False)

    @property
    def combination(self) -> str:
        """Identity of the combination: its words joined by a space."""
        return " ".join(self.words)

    @property
    def length(self) -> int:
        return len(self.words)

    def increment_occurrences(self) -> None:
        self.occurrences += 1

    def set_relevant_words(self, relevant_words: Mapping[str, float]) -> None:
        self.relevant_words = relevant_words

    def is_relevant_word(self, word: str) -> bool:
        return self.relevant_words is not None and word in self.relevant_words

    @property
    def length_bonus(self) -> int:
        return LENGTH_BONUS.get(self.length, 0)

    def multiplier(self, relevant_word_percentage: float) -> float:
        bonus = self.length_bonus
        if bonus == 0:
            return 1.0
        return 1 + bonus * relevant_word_percentage

    @property
    def relevant_word_percentage(self) -> float:
        """Share of words found in the relevance map; single words always count fully."""
        if self.length <= 1:
            return 1.0
        relevant = sum(1 for word in self.words if self.is_relevant_word(word))
        return relevant / self.length

    @property
    def relevance(self) -> float:
        """Relevance score; 0 means the combination is not relevant."""
        if self.length == 1 and self.words[0] in self.function_words:
            return 0.0

        percentage = self.relevant_word_percentage
        if percentage == 0:
            return 0.0
        return self.multiplier(percentage) * self.occurrences

    def density(self, word_count: int) -> float:
        """Share of the text's words taken up by this combination's occurrences."""
        return self.occurrences / word_count

    def to_dict(self, word_count: Optional[int] = None) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "words": list(self.words),
            "combination": self.combination,
            "length": self.length,
            "occurrences": self.occurrences,
            "relevance": self.relevance,
        }
        if word_count:
            data["density"] = self.density(word_count)
        return data
