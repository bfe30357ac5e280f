"""
Pytest configuration: ensure project root is on sys.path for imports.

The tests import the local `suggestions` package as well as the root-level
`server` and `runtime_config` modules. When running tests from certain IDEs
or subdirectories, the repository root might not be on the Python module
search path. This hook prepends the repo root so imports work consistently.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _add_repo_root_to_sys_path() -> None:
    # tests/ -> repo root
    root = Path(__file__).resolve().parents[1]
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_add_repo_root_to_sys_path()

from suggestions.models import SuggestionCatalog  # noqa: E402


@pytest.fixture
def small_catalog() -> SuggestionCatalog:
    return SuggestionCatalog.from_pairs(
        [
            ("Pintar pared", "pintura"),
            ("Lavar carro", "auto"),
            ("Barnizar madera", "pintura"),
            ("Retoques", "pintura"),
        ],
        ["Arreglo urgente", "Servicio general", "Otro"],
    )
