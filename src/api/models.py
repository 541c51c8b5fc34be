"""
Request and response models for the relevant words API.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class RelevantWordsRequest(BaseModel):
    """Request body for POST /api/relevant-words."""

    text: str = Field(..., description="Text to analyze; may contain HTML")
    locale: str = Field("en_US", description="Locale of the text, e.g. en_US or de_DE")
    limit: Optional[int] = Field(None, ge=1, le=100, description="Return at most this many results")


class WordCombinationsRequest(BaseModel):
    """Request body for POST /api/word-combinations."""

    text: str
    locale: str = "en_US"
    size: int = Field(..., ge=1, le=5)


class WordCombinationOut(BaseModel):
    """A single word combination in API responses."""

    words: List[str]
    combination: str
    length: int
    occurrences: int
    relevance: float
    density: Optional[float] = None


class RelevantWordsResponse(BaseModel):
    """Response for POST /api/relevant-words."""

    locale: str
    language: str
    word_count: int
    results: List[WordCombinationOut] = Field(default_factory=list)


class WordCombinationsResponse(BaseModel):
    """Response for POST /api/word-combinations."""

    locale: str
    size: int
    results: List[WordCombinationOut] = Field(default_factory=list)


class LanguagesResponse(BaseModel):
    """Response for GET /api/languages."""

    default: str
    languages: List[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Response for GET /api/health."""

    status: str = "ok"
    languages: List[str] = Field(default_factory=list)
