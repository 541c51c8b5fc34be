"""
Tests for the relevant words command line tool.
"""

from __future__ import annotations

import json
import sys

import pytest

from scripts.relevant_words import main

ARTICLE = (
    "Keyword research helps content marketing. "
    "Content marketing needs keyword research. "
    "Good keyword research improves content marketing results."
)


def test_cli_json_output(tmp_path, monkeypatch, capsys):
    path = tmp_path / "article.txt"
    path.write_text(ARTICLE, encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["relevant_words", str(path), "--json", "--limit", "2"])

    main()

    data = json.loads(capsys.readouterr().out)
    assert data["language"] == "en"
    assert data["word_count"] == 17
    assert [r["combination"] for r in data["results"]] == ["keyword research", "content marketing"]


def test_cli_table_output(tmp_path, monkeypatch, capsys):
    path = tmp_path / "article.txt"
    path.write_text(ARTICLE, encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["relevant_words", str(path), "--locale", "en_GB"])

    main()

    out = capsys.readouterr().out
    assert out.startswith("language=en words=17")
    assert "keyword research" in out


def test_cli_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["relevant_words", str(tmp_path / "missing.txt")])
    with pytest.raises(SystemExit):
        main()
