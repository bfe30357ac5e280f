import json

import pytest

from suggestions.catalog import default_catalog
from suggestions.models import CatalogError, DuplicatePhraseError, SuggestionCatalog
from suggestions.storage import catalog_to_data, load_catalog, validate_catalog


def test_load_missing_returns_builtin(tmp_path):
    catalog = load_catalog(tmp_path / "missing.json")
    assert catalog is default_catalog()


def test_load_entries_format(tmp_path):
    data = {
        "entries": [
            {"phrase": "Destapar WC", "category": "fontaneria"},
            {"phrase": "Pintar sala", "category": "pintura"},
        ],
        "generic_fallbacks": ["Arreglo urgente"],
    }
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    catalog = load_catalog(path)
    assert [e.phrase for e in catalog] == ["Destapar WC", "Pintar sala"]
    assert catalog.generic_fallbacks == ("Arreglo urgente",)


def test_load_grouped_format(tmp_path):
    data = {
        "fontaneria": ["Destapar WC", "Fuga en lavabo"],
        "general": ["Arreglo urgente"],
        "pintura": ["Pintar sala"],
    }
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    catalog = load_catalog(path)
    assert catalog.categories() == ["fontaneria", "pintura"]
    assert catalog.generic_fallbacks == ("Arreglo urgente",)


def test_load_utf16_file(tmp_path):
    data = {"entries": [{"phrase": "Destapar mi baño", "category": "fontaneria"}]}
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-16")
    catalog = load_catalog(path)
    assert catalog.entries[0].words == ("destapar", "mi", "bano")


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        "[]",
        json.dumps({"entries": {"phrase": "x"}}),
        json.dumps({"entries": ["x"]}),
        json.dumps({"entries": [{"phrase": "x"}]}),
        json.dumps({"entries": [], "generic_fallbacks": "x"}),
        json.dumps({"fontaneria": "Destapar WC"}),
    ],
)
def test_load_malformed_raises(tmp_path, payload):
    path = tmp_path / "catalog.json"
    path.write_text(payload, encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_load_duplicate_phrase_raises(tmp_path):
    data = {"fontaneria": ["Destapar WC"], "handyman": ["Destapar WC"]}
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    with pytest.raises(DuplicatePhraseError):
        load_catalog(path)


def test_catalog_to_data_matches_loader(tmp_path):
    data = catalog_to_data(default_catalog())
    assert len(data["entries"]) == 139
    assert data["entries"][0] == {"phrase": "Destapar mi baño", "category": "fontaneria"}
    path = tmp_path / "export.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    assert load_catalog(path) == default_catalog()


def test_validate_catalog():
    validate_catalog(default_catalog())
    with pytest.raises(CatalogError):
        validate_catalog(SuggestionCatalog.from_pairs([("Algo", "general")]))
    with pytest.raises(CatalogError):
        validate_catalog(SuggestionCatalog.from_pairs([], ["Otro", "Otro"]))
