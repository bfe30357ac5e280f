import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from . import storage
from .catalog import default_catalog
from .engine import DEFAULT_LIMIT, SuggestionEngine
from .models import CatalogError, SuggestionCatalog


def _load(path: Path | None) -> SuggestionCatalog:
    if path is None:
        return default_catalog()
    if not path.exists():
        raise SystemExit(f"catalog not found: {path}")
    try:
        return storage.load_catalog(path)
    except CatalogError as e:
        raise SystemExit(f"invalid catalog: {e}")


def _reconfigure_stdout() -> None:
    if hasattr(sys.stdout, "reconfigure"):
        getattr(sys.stdout, "reconfigure")(encoding="utf-8")


def query(args: argparse.Namespace) -> None:
    """Print ranked suggestions for a query."""

    _reconfigure_stdout()
    engine = SuggestionEngine(_load(args.catalog))
    text = " ".join(args.text)

    if args.json:
        results = engine.suggest(text, args.limit)
        print(json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2))
        return

    scores = {item.phrase: item.score for item in engine.rank(text)}
    for item in engine.suggest(text, args.limit):
        score = scores.get(item.phrase)
        label = f"{score:>5}" if score is not None else "    -"
        print(f"{label}  {item.phrase}  [{item.category}]")


def validate(args: argparse.Namespace) -> None:
    """Validate a catalog JSON file."""

    catalog = _load(args.input)
    try:
        storage.validate_catalog(catalog)
    except CatalogError as e:
        raise SystemExit(f"invalid catalog: {e}")

    print(f"Catalog '{args.input}' OK")


def stats(args: argparse.Namespace) -> None:
    """Show entry counts per category."""

    catalog = _load(args.input)
    print(f"Entries: {len(catalog)}")
    print(f"Categories: {len(catalog.categories())}")
    print(f"Generic fallbacks: {len(catalog.generic_fallbacks)}")
    for category in catalog.categories():
        print(f"  {category}: {len(catalog.by_category(category))}")


def export(args: argparse.Namespace) -> None:
    """Export a catalog as JSON."""

    catalog = _load(args.input)
    text = json.dumps(storage.catalog_to_data(catalog), ensure_ascii=False, indent=2)
    if args.output is None or args.output == Path("-"):
        _reconfigure_stdout()
        print(text)
    else:
        args.output.write_text(text, encoding="utf-8")


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Search suggestion utility")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("query", help="rank suggestions for a query")
    p.add_argument("text", nargs="+")
    p.add_argument("--limit", type=int, default=DEFAULT_LIMIT, help="maximum number of results")
    p.add_argument("--catalog", type=Path, default=None, help="JSON catalog instead of the built-in one")
    p.add_argument("--json", action="store_true", help="print results as JSON")
    p.set_defaults(func=query)

    p = sub.add_parser("validate", help="validate a catalog file")
    p.add_argument("input", type=Path)
    p.set_defaults(func=validate)

    p = sub.add_parser("stats", help="show statistics")
    p.add_argument("input", type=Path, nargs="?", default=None)
    p.set_defaults(func=stats)

    p = sub.add_parser("export", help="export catalog as JSON")
    p.add_argument("input", type=Path, nargs="?", default=None)
    p.add_argument(
        "--output",
        type=Path,
        default=None,
        help="output file (defaults to stdout)",
    )
    p.set_defaults(func=export)

    parser.add_argument("-v", "--verbose", action="count", default=0, help="increase verbosity")
    parser.add_argument("--log-file", type=Path, default=None, help="write logs to this file")

    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if args.log_file:
        handlers.append(logging.FileHandler(args.log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", handlers=handlers)

    args.func(args)


if __name__ == "__main__":
    main()
