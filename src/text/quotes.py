"""
Quote character normalization.
"""

from __future__ import annotations

import re

SINGLE_QUOTES_RE = re.compile("[‘’‛`‹›]")
DOUBLE_QUOTES_RE = re.compile("[“”〝〞〟‟„«»]")


def normalize_single_quotes(text: str) -> str:
    """Replace typographic single quotes with a plain apostrophe."""
    return SINGLE_QUOTES_RE.sub("'", text)


def normalize_double_quotes(text: str) -> str:
    """Replace typographic double quotes with a plain double quote."""
    return DOUBLE_QUOTES_RE.sub('"', text)


def normalize_quotes(text: str) -> str:
    return normalize_double_quotes(normalize_single_quotes(text))
