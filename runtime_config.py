"""Helper-Funktionen, um statische und dynamische Konfiguration zu trennen.

Die Anwendung liest ``config.ini`` als Basis. Deployment-spezifische Werte
(etwa ein eigener Katalogpfad oder ein anderes Limit) werden in
``config.runtime.ini`` abgelegt und überschreiben die Basiswerte. Über die
Umgebungsvariable ``SUGGESTIONS_CONFIG`` (auch aus ``.env``) lässt sich eine
alternative Basisdatei angeben.
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

CONFIG_MAIN_PATH = Path(__file__).resolve().parent / "config.ini"
CONFIG_RUNTIME_PATH = Path(__file__).resolve().parent / "config.runtime.ini"
CONFIG_ENV_VAR = "SUGGESTIONS_CONFIG"

SECTION = "SUGGESTIONS"
DEFAULT_LIMIT = 8
DEFAULT_MAX_LIMIT = 50


@dataclass(frozen=True)
class SuggestionSettings:
    """Werte aus dem Abschnitt ``[SUGGESTIONS]``."""

    default_limit: int = DEFAULT_LIMIT
    max_limit: int = DEFAULT_MAX_LIMIT
    catalog_path: Optional[Path] = None


def _main_config_path() -> Path:
    load_dotenv()
    override = os.getenv(CONFIG_ENV_VAR, "").strip()
    return Path(override) if override else CONFIG_MAIN_PATH


def load_base_config() -> configparser.ConfigParser:
    """Lädt ausschließlich die statische Grundkonfiguration."""
    cfg = configparser.ConfigParser()
    cfg.read(_main_config_path(), encoding="utf-8-sig")
    return cfg


def load_runtime_config() -> configparser.ConfigParser:
    """Lädt nur die dynamische Laufzeitkonfiguration."""
    cfg = configparser.ConfigParser()
    if CONFIG_RUNTIME_PATH.exists():
        cfg.read(CONFIG_RUNTIME_PATH, encoding="utf-8-sig")
    return cfg


def load_merged_config() -> configparser.ConfigParser:
    """Kombiniert statische und dynamische Konfiguration."""
    base = load_base_config()
    runtime = load_runtime_config()
    for section in runtime.sections():
        if not base.has_section(section):
            base.add_section(section)
        for key, value in runtime.items(section):
            base.set(section, key, value)
    return base


def _get_int_option(cfg: configparser.ConfigParser, option: str, default: int) -> int:
    """Liest einen Integer und fällt bei ungültigem Wert auf ``default`` zurück."""
    if not cfg.has_option(SECTION, option):
        return default
    try:
        return max(0, cfg.getint(SECTION, option))
    except ValueError:
        logger.warning(
            "Ignoriere ungueltigen Wert fuer %s.%s: %s",
            SECTION,
            option,
            cfg.get(SECTION, option, fallback="").strip(),
        )
        return default


def get_suggestion_settings(cfg: configparser.ConfigParser) -> SuggestionSettings:
    """Ermittelt Limits und Katalogpfad für die Vorschlagssuche."""
    default_limit = _get_int_option(cfg, "default_limit", DEFAULT_LIMIT)
    max_limit = max(default_limit, _get_int_option(cfg, "max_limit", DEFAULT_MAX_LIMIT))
    raw_path = cfg.get(SECTION, "catalog_path", fallback="").strip()
    catalog_path = Path(raw_path) if raw_path else None
    return SuggestionSettings(default_limit, max_limit, catalog_path)
