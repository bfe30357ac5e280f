"""Helpers to normalize phrases and queries before comparison."""

from __future__ import annotations

import unicodedata
from typing import List


def normalize_text(text: str) -> str:
    """Return ``text`` lowercased, stripped of diacritics and trimmed.

    Accented characters are decomposed (NFD) and every combining mark is
    dropped, so ``"Baño"`` and ``"bano"`` compare equal.
    """

    if not isinstance(text, str):
        return ""

    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.category(ch).startswith("M"))
    return stripped.strip()


def split_words(text: str) -> List[str]:
    """Split already normalized ``text`` on whitespace, dropping empty tokens."""

    return text.split()
