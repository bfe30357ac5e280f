"""Search suggestion ranking for the service booking frontend."""

# Package exports should be side-effect free.

from . import (
    models,
    normalizer,
    scorer,
    catalog,
    engine,
    services,
    storage,
)
from .engine import SuggestionEngine, suggest

__all__ = [
    "models",
    "normalizer",
    "scorer",
    "catalog",
    "engine",
    "services",
    "storage",
    "SuggestionEngine",
    "suggest",
]
