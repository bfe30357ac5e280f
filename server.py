"""Flask-Anwendung für die Vorschlagssuche der Servicebuchung.

Der Server lädt die Konfiguration, baut einmalig die Ranking-Engine über dem
eingebauten oder einem per ``config.ini`` angegebenen JSON-Katalog und
registriert das Blueprint ``suggestions.api``. Zusätzlich richtet das Modul
das Logging (Konsole, optionale Rotationsdatei, separater ``detail``-Logger
für Anfrageprotokolle) ein.
"""

import configparser
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

from flask import Flask, jsonify
from flask_compress import Compress

from runtime_config import get_suggestion_settings, load_merged_config
from suggestions.api import EXTENSION_KEY, bp as suggestions_bp
from suggestions.catalog import default_catalog
from suggestions.engine import SuggestionEngine
from suggestions.services import DEFAULT_SERVICES
from suggestions.storage import load_catalog


class SafeEncodingStreamHandler(logging.StreamHandler):
    """Stream handler that never fails on characters the console cannot encode."""

    def emit(self, record):
        try:
            msg = self.format(record)
            encoding = getattr(self.stream, "encoding", None) or "utf-8"
            # Unencodable characters become "?" instead of raising
            self.stream.write(msg.encode(encoding, errors="replace").decode(encoding) + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)
detail_logger = logging.getLogger("detail")


def _reset_handlers(target: logging.Logger) -> None:
    for handler in target.handlers[:]:
        target.removeHandler(handler)
        handler.close()


def configure_logging(config: configparser.ConfigParser) -> Optional[RotatingFileHandler]:
    """Richtet Konsolen-, Datei- und Detail-Logging gemäß ``[LOGGING]`` ein."""
    root_logger = logging.getLogger()
    _reset_handlers(root_logger)
    _reset_handlers(detail_logger)

    console_level_name = config.get('LOGGING', 'console_level', fallback='INFO').upper()
    console_level = logging._nameToLevel.get(console_level_name, logging.INFO)

    safe_handler = SafeEncodingStreamHandler(sys.stdout)
    safe_handler.setFormatter(formatter)
    safe_handler.setLevel(console_level)
    root_logger.addHandler(safe_handler)
    root_logger.setLevel(console_level)

    # Der Detail-Logger protokolliert einzelne Anfragen und bleibt sonst stumm.
    log_queries = config.getint('LOGGING', 'log_queries', fallback=0) == 1
    detail_handler = SafeEncodingStreamHandler(sys.stdout)
    detail_handler.setFormatter(formatter)
    detail_logger.addHandler(detail_handler)
    detail_logger.propagate = False
    detail_level = logging.INFO if log_queries else logging.WARNING
    detail_logger.setLevel(detail_level)
    detail_handler.setLevel(detail_level)

    # Optional: Dateibasiertes Logging (RotatingFileHandler) per config.ini
    file_enabled = config.getint('LOGGING', 'file_enabled', fallback=0) == 1
    file_path = config.get('LOGGING', 'file_path', fallback='').strip()
    if not (file_enabled and file_path):
        return None

    max_bytes = max(0, config.getint('LOGGING', 'file_max_bytes', fallback=1048576))
    backup_count = max(0, config.getint('LOGGING', 'file_backup_count', fallback=5))
    file_level_name = config.get('LOGGING', 'file_level', fallback=console_level_name).upper()

    log_path = Path(file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8',
        delay=True,
    )
    file_handler.setLevel(logging._nameToLevel.get(file_level_name, console_level))
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
    # Auch Detail-Logger schreibt in Datei
    detail_logger.addHandler(file_handler)
    return file_handler


def create_app(config: Optional[configparser.ConfigParser] = None) -> Flask:
    """
    Erstellt die Flask-Instanz.
    Gunicorn ruft diese Factory einmal pro Worker auf und bekommt das
    WSGI-Objekt zurück; Tests übergeben eine eigene Konfiguration.
    """
    if config is None:
        config = load_merged_config()
    settings = get_suggestion_settings(config)

    if settings.catalog_path is not None:
        catalog = load_catalog(settings.catalog_path)
    else:
        catalog = default_catalog()
    logger.info(" ✓ Vorschlagskatalog geladen (%s Einträge).", len(catalog))

    app = Flask(__name__)
    # Umlaute und Akzente sollen als UTF-8 und nicht als \u-Escapes ankommen.
    app.json.ensure_ascii = False
    app.config.update(
        APP_VERSION=config.get('APP', 'version', fallback='unknown'),
        SUGGESTIONS_LOG_QUERIES=config.getint('LOGGING', 'log_queries', fallback=0) == 1,
    )
    app.extensions[EXTENSION_KEY] = {
        "engine": SuggestionEngine(catalog),
        "settings": settings,
        "services": DEFAULT_SERVICES,
    }
    app.register_blueprint(suggestions_bp)

    @app.after_request
    def _ensure_utf8_charset(response):
        """Stelle sicher, dass textbasierte Antworten explizit UTF-8 senden."""
        content_type = response.headers.get("Content-Type")
        if content_type:
            lowered = content_type.lower()
            needs_charset = "charset=" not in lowered and (
                lowered.startswith("text/")
                or lowered.startswith("application/json")
            )
            if needs_charset:
                response.headers["Content-Type"] = f"{content_type}; charset=utf-8"
        return response

    @app.route('/api/version')
    def api_version() -> Any:
        """Return the configured application version."""
        return jsonify({
            "version": app.config["APP_VERSION"],
            "catalog_entries": len(catalog),
        })

    Compress(app)
    return app


config = load_merged_config()
configure_logging(config)
app: Flask = create_app(config)


def _run_local() -> None:
    """Lokaler Debug-Server (wird von Gunicorn **nicht** aufgerufen)."""
    port = int(os.environ.get("PORT", 8000))
    # WARNING, damit die Adresse auch bei console_level=WARNING sichtbar ist.
    logger.warning("🚀 Lokal verfügbar auf http://127.0.0.1:%s", port)
    app.run(host="0.0.0.0", port=port, debug=True)


if __name__ == "__main__":
    _run_local()
