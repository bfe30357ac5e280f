"""Loading helpers for suggestion catalogs stored as JSON.

Two layouts are accepted.  The current one lists entries explicitly::

    {"entries": [{"phrase": "Destapar WC", "category": "fontaneria"}],
     "generic_fallbacks": ["Arreglo urgente"]}

The older grouped layout maps each category to its phrases and keeps the
fallbacks under the reserved ``"general"`` key::

    {"fontaneria": ["Destapar WC"], "general": ["Arreglo urgente"]}

Catalogs are read-only at runtime.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

from .catalog import default_catalog
from .models import GENERIC_CATEGORY, CatalogError, SuggestionCatalog

logger = logging.getLogger(__name__)


def _decode(raw: bytes) -> str:
    for enc in ("utf-8-sig", "utf-16"):
        try:
            return raw.decode(enc)
        except UnicodeDecodeError:
            continue
    return raw.decode("utf-8", errors="replace")


def _pairs_from_entries(items: Any) -> List[Tuple[str, str]]:
    if not isinstance(items, list):
        raise CatalogError("'entries' must be a list")
    pairs: List[Tuple[str, str]] = []
    for item in items:
        if not isinstance(item, dict):
            raise CatalogError(f"Invalid entry: {item!r}")
        pairs.append((item.get("phrase"), item.get("category")))
    return pairs


def catalog_from_data(data: Any) -> SuggestionCatalog:
    """Build a :class:`SuggestionCatalog` from decoded JSON ``data``."""

    if not isinstance(data, dict):
        raise CatalogError("Catalog root must be a JSON object")

    if "entries" in data:
        pairs = _pairs_from_entries(data["entries"])
        fallbacks = data.get("generic_fallbacks", [])
    else:
        pairs = []
        fallbacks = []
        for category, phrases in data.items():
            if not isinstance(phrases, list):
                raise CatalogError(f"Invalid phrase list for {category!r}")
            if category == GENERIC_CATEGORY:
                fallbacks = phrases
                continue
            pairs.extend((phrase, category) for phrase in phrases)

    if not isinstance(fallbacks, list):
        raise CatalogError("'generic_fallbacks' must be a list")

    return SuggestionCatalog.from_pairs(pairs, fallbacks)


def load_catalog(path: str | Path) -> SuggestionCatalog:
    """Return the catalog stored at ``path``.

    A missing file falls back to the built-in catalog.  Malformed content
    raises :class:`CatalogError`.
    """

    p = Path(path)
    if not p.exists():
        logger.warning("Suggestion catalog %s not found, using built-in catalog", p)
        return default_catalog()

    text = _decode(p.read_bytes())
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"{p}: invalid JSON ({exc})") from exc

    catalog = catalog_from_data(data)
    logger.info("Loaded suggestion catalog %s (%s entries)", p, len(catalog))
    return catalog


def catalog_to_data(catalog: SuggestionCatalog) -> Dict[str, Any]:
    """Return ``catalog`` in the explicit ``entries`` layout."""

    return {
        "entries": [
            {"phrase": entry.phrase, "category": entry.category}
            for entry in catalog.entries
        ],
        "generic_fallbacks": list(catalog.generic_fallbacks),
    }


def validate_catalog(catalog: SuggestionCatalog) -> None:
    """Raise :class:`CatalogError` for problems construction does not catch."""

    for entry in catalog.entries:
        if entry.category == GENERIC_CATEGORY:
            raise CatalogError(
                f"Category {GENERIC_CATEGORY!r} is reserved for fallbacks: {entry.phrase!r}"
            )
        if not entry.words:
            raise CatalogError(f"Phrase has no comparable words: {entry.phrase!r}")

    seen: set[str] = set()
    for phrase in catalog.generic_fallbacks:
        if phrase in seen:
            raise CatalogError(f"Duplicate fallback phrase: {phrase!r}")
        seen.add(phrase)
