"""
Function word set shared by every language table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable


def _words(words: Iterable[str]) -> FrozenSet[str]:
    return frozenset(w.lower() for w in words)


@dataclass(frozen=True)
class FunctionWords:
    """
    Per-language function word lists used to filter word combinations.

    - filtered_anywhere: a combination containing one of these is dropped
    - filtered_at_beginning: dropped when the first word is one of these
    - filtered_at_ending: dropped when the last word is one of these
    - filtered_at_beginning_and_ending: dropped when the first or last word is one of these
    - all: every function word of the language; single words in here are never relevant
    """

    language: str
    filtered_anywhere: FrozenSet[str]
    filtered_at_beginning: FrozenSet[str]
    filtered_at_ending: FrozenSet[str]
    filtered_at_beginning_and_ending: FrozenSet[str]
    all: FrozenSet[str]

    @classmethod
    def from_lists(
        cls,
        language: str,
        *,
        filtered_anywhere: Iterable[str] = (),
        filtered_at_beginning: Iterable[str] = (),
        filtered_at_ending: Iterable[str] = (),
        filtered_at_beginning_and_ending: Iterable[str] = (),
        unfiltered: Iterable[str] = (),
    ) -> "FunctionWords":
        """Build a set; `all` is the union of every list plus `unfiltered`."""
        anywhere = _words(filtered_anywhere)
        beginning = _words(filtered_at_beginning)
        ending = _words(filtered_at_ending)
        both = _words(filtered_at_beginning_and_ending)
        return cls(
            language=language,
            filtered_anywhere=anywhere,
            filtered_at_beginning=beginning,
            filtered_at_ending=ending,
            filtered_at_beginning_and_ending=both,
            all=anywhere | beginning | ending | both | _words(unfiltered),
        )
