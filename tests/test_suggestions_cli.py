import json

import pytest

from suggestions import cli


def test_query_prints_ranked_phrases(capsys):
    cli.main(["query", "destapar", "--limit", "3"])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 3
    assert out[0].endswith("Destapar mi baño  [fontaneria]")
    assert out[0].split()[0] == "1880"


def test_query_json(capsys):
    cli.main(["query", "xyzzyx", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data == [
        {"phrase": "Reparación del hogar", "category": "general"},
        {"phrase": "Limpieza de casa", "category": "general"},
    ]


def test_query_marks_backfilled_rows(capsys):
    cli.main(["query", "xyzzyx"])
    out = capsys.readouterr().out.splitlines()
    assert out[0].strip().startswith("-")


def test_validate_ok(tmp_path, capsys):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"pintura": ["Pintar sala"]}), encoding="utf-8")
    cli.main(["validate", str(path)])
    assert "OK" in capsys.readouterr().out


def test_validate_failures(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"pintura": ["Pintar sala"], "auto": ["Pintar sala"]}), encoding="utf-8")
    with pytest.raises(SystemExit, match="invalid catalog"):
        cli.main(["validate", str(path)])
    with pytest.raises(SystemExit, match="not found"):
        cli.main(["validate", str(tmp_path / "missing.json")])


def test_stats_builtin(capsys):
    cli.main(["stats"])
    out = capsys.readouterr().out
    assert "Entries: 139" in out
    assert "Categories: 11" in out
    assert "  fontaneria: 20" in out


def test_export_to_file(tmp_path):
    target = tmp_path / "out.json"
    cli.main(["export", "--output", str(target)])
    data = json.loads(target.read_text(encoding="utf-8"))
    assert len(data["entries"]) == 139
    assert len(data["generic_fallbacks"]) == 5


@pytest.mark.parametrize("command", [["stats"], ["export"], ["query", "pintar", "--catalog"]])
def test_explicit_missing_catalog_is_rejected(tmp_path, command):
    missing = str(tmp_path / "missing.json")
    with pytest.raises(SystemExit, match="not found"):
        cli.main(command + [missing])
