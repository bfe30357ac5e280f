"""Ranking of catalog phrases against a free-text query.

Every catalog entry is scored in three tiers: a full prefix match, a full
substring match and per-word signals (word prefix, word containment and
edit-distance similarity).  The tiers are additive and weighted so that
clean matches always outrank fuzzy ones while typos still surface useful
phrases.  Sparse results are padded with entries from the category of the
best match and finally with generic fallback phrases.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Sequence

from .catalog import default_catalog
from .models import (
    GENERIC_CATEGORY,
    CatalogEntry,
    ScoredEntry,
    Suggestion,
    SuggestionCatalog,
)
from .normalizer import normalize_text, split_words
from .scorer import similarity

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 8
MIN_QUERY_LENGTH = 2
MIN_GENERIC_RESULTS = 2

PREFIX_SCORE = 1000
SUBSTRING_SCORE = 500
WORD_PREFIX_SCORE = 200
WORD_CONTAINS_SCORE = 100
FUZZY_WEIGHT = 80
FUZZY_THRESHOLD = 0.6
MIN_QUERY_WORD_LENGTH = 2
MIN_FUZZY_WORD_LENGTH = 3


def _score_normalized(query: str, words: Sequence[str], entry: CatalogEntry) -> int:
    text = entry.normalized
    score = 0

    if text.startswith(query):
        score += PREFIX_SCORE

    if query in text:
        score += SUBSTRING_SCORE

    for word in words:
        if len(word) < MIN_QUERY_WORD_LENGTH:
            continue

        for phrase_word in entry.words:
            if phrase_word.startswith(word):
                score += WORD_PREFIX_SCORE
                break

        if word in text:
            score += WORD_CONTAINS_SCORE

        for phrase_word in entry.words:
            if len(phrase_word) < MIN_FUZZY_WORD_LENGTH:
                continue
            sim = similarity(word, phrase_word)
            if sim >= FUZZY_THRESHOLD:
                score += _round_half_up(sim * FUZZY_WEIGHT)

    return score


def _round_half_up(value: float) -> int:
    # ``round`` uses banker's rounding; x.5 must round up here.
    return int(value + 0.5)


class SuggestionEngine:
    """Rank the phrases of a :class:`SuggestionCatalog` for search queries.

    The engine keeps no state besides the catalog it was built with, so a
    single instance can serve concurrent callers.
    """

    def __init__(self, catalog: SuggestionCatalog | None = None) -> None:
        self.catalog = catalog if catalog is not None else default_catalog()

    def score(self, query: str, entry: CatalogEntry) -> int:
        """Return the relevance of ``entry`` for ``query``; ``0`` means no match."""

        q = normalize_text(query)
        return _score_normalized(q, split_words(q), entry)

    def rank(self, query: str) -> List[ScoredEntry]:
        """Return all matching entries ordered by descending score.

        Entries with equal scores keep their catalog order.
        """

        q = normalize_text(query)
        words = split_words(q)
        scored: List[ScoredEntry] = []
        for entry in self.catalog.entries:
            value = _score_normalized(q, words, entry)
            if value > 0:
                scored.append(ScoredEntry(entry.phrase, entry.category, value))
        # list.sort is stable, ties stay in catalog order
        scored.sort(key=lambda item: item.score, reverse=True)
        return scored

    def suggest(self, query: str, limit: int = DEFAULT_LIMIT) -> List[Suggestion]:
        """Return up to ``limit`` suggestions for ``query``.

        Queries shorter than two characters (after trimming) yield an empty
        list without scoring anything.  Negative limits behave like ``0``.
        """

        if not isinstance(query, str) or len(query.strip()) < MIN_QUERY_LENGTH:
            return []
        limit = max(0, int(limit))

        scored = self.rank(query)
        results = [item.as_suggestion() for item in scored[:limit]]
        logger.debug("Query %r: %s candidates", query, len(scored))

        if len(results) < limit and scored:
            top_category = scored[0].category
            existing = {item.phrase for item in results}
            for entry in self.catalog.by_category(top_category):
                if len(results) >= limit:
                    break
                if entry.phrase not in existing:
                    results.append(Suggestion(entry.phrase, entry.category))
                    existing.add(entry.phrase)
            logger.debug("Category backfill from %r -> %s results", top_category, len(results))

        if len(results) < MIN_GENERIC_RESULTS:
            existing = {item.phrase for item in results}
            for phrase in self.catalog.generic_fallbacks:
                if len(results) >= MIN_GENERIC_RESULTS:
                    break
                if phrase not in existing:
                    results.append(Suggestion(phrase, GENERIC_CATEGORY))
                    existing.add(phrase)
            logger.debug("Generic backfill -> %s results", len(results))

        return results[:limit]


@lru_cache(maxsize=1)
def default_engine() -> SuggestionEngine:
    """Return a shared engine over the built-in catalog."""

    return SuggestionEngine(default_catalog())


def suggest(query: str, limit: int = DEFAULT_LIMIT) -> List[Suggestion]:
    """Shortcut for ``default_engine().suggest(query, limit)``."""

    return default_engine().suggest(query, limit)
