"""Dataclasses representing the suggestion catalog and ranking results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Tuple

from .normalizer import normalize_text, split_words

GENERIC_CATEGORY = "general"


class CatalogError(ValueError):
    """Raised when catalog data is malformed."""


class DuplicatePhraseError(CatalogError):
    """Raised when the same phrase appears more than once in a catalog."""

    def __init__(self, phrase: str) -> None:
        super().__init__(f"Duplicate phrase in catalog: {phrase!r}")
        self.phrase = phrase


@dataclass(frozen=True)
class CatalogEntry:
    """Single service intent offered as a search suggestion.

    Attributes:
        phrase: Display text shown to the user, e.g. ``"Destapar mi baño"``.
        category: Category key the phrase belongs to, e.g. ``"fontaneria"``.
        normalized: ``phrase`` after :func:`normalize_text`.
        words: Whitespace separated words of ``normalized``.
    """

    phrase: str
    category: str
    normalized: str = field(init=False, repr=False, compare=False)
    words: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.phrase, str) or not self.phrase.strip():
            raise CatalogError(f"Invalid phrase: {self.phrase!r}")
        if not isinstance(self.category, str) or not self.category.strip():
            raise CatalogError(f"Invalid category for {self.phrase!r}: {self.category!r}")
        normalized = normalize_text(self.phrase)
        object.__setattr__(self, "normalized", normalized)
        object.__setattr__(self, "words", tuple(split_words(normalized)))


@dataclass(frozen=True)
class Suggestion:
    """Public ranking result."""

    phrase: str
    category: str

    def to_dict(self) -> Dict[str, str]:
        return {"phrase": self.phrase, "category": self.category}


@dataclass(frozen=True)
class ScoredEntry:
    """Catalog entry together with its score for one query."""

    phrase: str
    category: str
    score: int

    def as_suggestion(self) -> Suggestion:
        return Suggestion(self.phrase, self.category)


@dataclass(frozen=True)
class SuggestionCatalog:
    """Immutable collection of catalog entries and generic fallback phrases.

    Phrases must be unique; a duplicate raises :class:`DuplicatePhraseError`
    when the catalog is built.
    """

    entries: Tuple[CatalogEntry, ...] = ()
    generic_fallbacks: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        object.__setattr__(self, "generic_fallbacks", tuple(self.generic_fallbacks))

        seen: set[str] = set()
        for entry in self.entries:
            if not isinstance(entry, CatalogEntry):
                raise CatalogError(f"Invalid catalog entry: {entry!r}")
            if entry.phrase in seen:
                raise DuplicatePhraseError(entry.phrase)
            seen.add(entry.phrase)

        for phrase in self.generic_fallbacks:
            if not isinstance(phrase, str) or not phrase.strip():
                raise CatalogError(f"Invalid fallback phrase: {phrase!r}")

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Tuple[str, str]],
        generic_fallbacks: Iterable[str] = (),
    ) -> "SuggestionCatalog":
        """Build a catalog from ``(phrase, category)`` pairs."""

        entries = tuple(CatalogEntry(phrase, category) for phrase, category in pairs)
        return cls(entries, tuple(generic_fallbacks))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries)

    def categories(self) -> List[str]:
        """Return the categories in the order they first appear."""

        result: List[str] = []
        for entry in self.entries:
            if entry.category not in result:
                result.append(entry.category)
        return result

    def by_category(self, category: str) -> List[CatalogEntry]:
        return [entry for entry in self.entries if entry.category == category]
