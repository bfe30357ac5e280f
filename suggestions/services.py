"""Keyword search over the directory of bookable services."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from .scorer import similarity

NAME_SCORE = 100
CATEGORY_SCORE = 80
KEYWORD_QUERY_SCORE = 60
KEYWORD_WORD_SCORE = 30
FUZZY_WEIGHT = 20
FUZZY_THRESHOLD = 0.6


@dataclass(frozen=True)
class SearchableService:
    """Service listed in the directory.

    Attributes:
        id: Stable identifier used in booking links.
        name: Display name.
        category: Directory section the service is listed under.
        keywords: Lowercase search terms describing the service.
    """

    id: str
    name: str
    category: str
    keywords: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "keywords": list(self.keywords),
        }


DEFAULT_SERVICES: Tuple[SearchableService, ...] = (
    SearchableService(
        "limpieza",
        "Limpieza del hogar",
        "Limpieza",
        ("limpieza", "limpiar", "hogar", "casa", "domestica", "cleaning"),
    ),
    SearchableService(
        "plomeria",
        "Plomería",
        "Reparaciones",
        ("plomeria", "plomero", "tuberia", "agua", "baño", "cocina", "fuga"),
    ),
    SearchableService(
        "electricidad",
        "Electricidad",
        "Reparaciones",
        ("electricidad", "electricista", "luz", "cables", "instalacion"),
    ),
    SearchableService(
        "jardineria",
        "Jardinería",
        "Jardinería",
        ("jardin", "jardineria", "plantas", "poda", "jardinero", "verde"),
    ),
    SearchableService(
        "pintura",
        "Pintura",
        "Reparaciones",
        ("pintura", "pintar", "pared", "color", "brocha"),
    ),
    SearchableService(
        "carpinteria",
        "Carpintería",
        "Reparaciones",
        ("carpinteria", "carpintero", "madera", "muebles", "reparar"),
    ),
)


def score_service(query: str, service: SearchableService) -> int:
    """Return the relevance of ``service`` for an already lowercased ``query``."""

    score = 0
    words = query.split()

    if query in service.name.lower():
        score += NAME_SCORE

    if query in service.category.lower():
        score += CATEGORY_SCORE

    for keyword in service.keywords:
        if query in keyword:
            score += KEYWORD_QUERY_SCORE
        for word in words:
            if len(word) > 2 and word in keyword:
                score += KEYWORD_WORD_SCORE

    for word in words:
        for keyword in service.keywords:
            sim = similarity(word, keyword)
            if sim > FUZZY_THRESHOLD:
                score += math.floor(sim * FUZZY_WEIGHT)

    return score


def fuzzy_search(
    query: str,
    services: Sequence[SearchableService] = DEFAULT_SERVICES,
) -> List[SearchableService]:
    """Return ``services`` matching ``query``, best match first.

    A blank query returns every service in its original order.
    """

    if not isinstance(query, str) or not query.strip():
        return list(services)

    normalized = query.lower().strip()
    scored = [(score_service(normalized, service), service) for service in services]
    ranked = [item for item in scored if item[0] > 0]
    ranked.sort(key=lambda item: item[0], reverse=True)
    return [service for _, service in ranked]
