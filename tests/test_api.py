"""
Tests for the relevant words FastAPI routes.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from src.api.main import app

client = TestClient(app)

ARTICLE = (
    "Keyword research helps content marketing. "
    "Content marketing needs keyword research. "
    "Good keyword research improves content marketing results."
)


def test_health():
    """GET /api/health returns ok and the supported languages."""
    r = client.get("/api/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert "en" in data["languages"]


def test_languages():
    r = client.get("/api/languages")
    assert r.status_code == 200
    assert r.json() == {"default": "en", "languages": ["de", "en", "es", "fr", "it", "nl"]}


def test_relevant_words_requires_body():
    """POST /api/relevant-words without text returns 422."""
    r = client.post("/api/relevant-words", json={})
    assert r.status_code == 422


def test_relevant_words():
    r = client.post("/api/relevant-words", json={"text": ARTICLE, "locale": "en_US"})
    assert r.status_code == 200
    data = r.json()
    assert data["language"] == "en"
    assert data["word_count"] == 17

    top = data["results"][0]
    assert top["combination"] == "keyword research"
    assert top["words"] == ["keyword", "research"]
    assert top["occurrences"] == 3
    assert top["relevance"] == pytest.approx(12)
    assert top["density"] == pytest.approx(3 / 17)


def test_relevant_words_limit():
    r = client.post("/api/relevant-words", json={"text": ARTICLE, "limit": 1})
    assert r.status_code == 200
    assert len(r.json()["results"]) == 1


@pytest.mark.parametrize("limit", [0, 101])
def test_relevant_words_rejects_bad_limit(limit):
    r = client.post("/api/relevant-words", json={"text": ARTICLE, "limit": limit})
    assert r.status_code == 422


def test_relevant_words_unknown_locale_uses_default():
    r = client.post("/api/relevant-words", json={"text": ARTICLE, "locale": "xx_XX"})
    assert r.status_code == 200
    data = r.json()
    assert data["locale"] == "xx_XX"
    assert data["language"] == "en"


def test_relevant_words_empty_text():
    r = client.post("/api/relevant-words", json={"text": ""})
    assert r.status_code == 200
    assert r.json()["results"] == []


def test_word_combinations():
    r = client.post(
        "/api/word-combinations",
        json={"text": "The cat sat. The cat sat.", "size": 2},
    )
    assert r.status_code == 200
    results = r.json()["results"]
    assert [(c["combination"], c["occurrences"]) for c in results] == [
        ("the cat", 2),
        ("cat sat", 2),
    ]
    assert results[0]["density"] == pytest.approx(2 / 6)


def test_word_combinations_rejects_bad_size():
    r = client.post("/api/word-combinations", json={"text": "Some text.", "size": 6})
    assert r.status_code == 422
