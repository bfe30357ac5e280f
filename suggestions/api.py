"""Flask-Blueprint mit den Endpunkten der Vorschlagssuche.

Die Suchleiste im Browser ruft ``/api/suggestions/`` bei jedem Tastendruck
auf (Debouncing übernimmt das Frontend). Engine und Einstellungen legt
``server.create_app`` unter ``app.extensions["suggestions"]`` ab, damit Tests
eigene Kataloge einhängen können.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from .engine import SuggestionEngine
from .services import fuzzy_search

logger = logging.getLogger(__name__)
detail_logger = logging.getLogger("detail")

EXTENSION_KEY = "suggestions"

bp = Blueprint("suggestions", __name__, url_prefix="/api/suggestions")


def _state() -> Dict[str, Any]:
    return current_app.extensions[EXTENSION_KEY]


def _resolve_limit(raw: str | None) -> int:
    """Wandelt ``?limit=`` in einen Integer innerhalb ``[0, max_limit]`` um."""
    settings = _state()["settings"]
    if raw is None or raw.strip() == "":
        return settings.default_limit
    value = int(raw)
    return min(max(0, value), settings.max_limit)


@bp.route("/", methods=["GET"])
def suggest() -> Any:
    """Liefert die bestplatzierten Katalogphrasen für ``?q=``."""
    query = request.args.get("q", "")
    try:
        limit = _resolve_limit(request.args.get("limit"))
    except ValueError:
        return jsonify({"error": "limit must be an integer"}), 400

    engine: SuggestionEngine = _state()["engine"]
    results = engine.suggest(query, limit)
    if current_app.config.get("SUGGESTIONS_LOG_QUERIES"):
        detail_logger.info("Vorschlagssuche %r (limit=%s): %s Treffer", query, limit, len(results))
    return jsonify([item.to_dict() for item in results])


@bp.route("/services", methods=["GET"])
def services() -> Any:
    """Durchsucht das Dienstverzeichnis nach ``?q=``."""
    query = request.args.get("q", "")
    matches = fuzzy_search(query, _state()["services"])
    return jsonify([service.to_dict() for service in matches])


@bp.route("/categories", methods=["GET"])
def categories() -> Any:
    """Listet alle Kategorien des Katalogs mit Anzahl Einträgen."""
    catalog = _state()["engine"].catalog
    return jsonify([
        {"category": name, "count": len(catalog.by_category(name))}
        for name in catalog.categories()
    ])
