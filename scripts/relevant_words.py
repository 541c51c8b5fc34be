"""
Print the relevant words of a text.

Usage:

    python -m scripts.relevant_words article.html --locale en_US --limit 20
    cat article.txt | python -m scripts.relevant_words --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from src.relevance import analyze, load_config


def _read_text(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    file_path = Path(path)
    if not file_path.exists():
        raise SystemExit(f"Input file not found: {file_path}")
    return file_path.read_text(encoding="utf-8")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Rank the most relevant one- to five-word combinations of a text.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Text or HTML file to analyze (default: read stdin)",
    )
    parser.add_argument(
        "--locale",
        type=str,
        default="en_US",
        help="Locale of the text, e.g. en_US, de_DE, nl_NL",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Only print the top N combinations",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of a table",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    result = analyze(_read_text(args.input), args.locale, load_config())
    combinations = result.combinations
    if args.limit is not None:
        combinations = combinations[: max(0, args.limit)]

    if args.json:
        payload = {
            "language": result.language,
            "word_count": result.word_count,
            "results": [c.to_dict(result.word_count) for c in combinations],
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    print(f"language={result.language} words={result.word_count} results={len(combinations)}")
    for c in combinations:
        print(
            f"{c.combination:<50} occurrences={c.occurrences:<4} "
            f"relevance={c.relevance:<8.2f} density={c.density(result.word_count):.4f}"
        )


if __name__ == "__main__":
    main()
