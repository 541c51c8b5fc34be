"""
Locale to language code resolution.
"""

from __future__ import annotations

import re
from typing import Optional

DEFAULT_LANGUAGE = "en"

_LOCALE_SEPARATOR_RE = re.compile(r"[_-]")


def get_language(locale: Optional[str]) -> str:
    """Return the language part of a locale ("en_US" -> "en", "pt-BR" -> "pt")."""
    if not locale or not locale.strip():
        return DEFAULT_LANGUAGE
    return _LOCALE_SEPARATOR_RE.split(locale.strip(), maxsplit=1)[0].lower()
