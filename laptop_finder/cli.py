# laptop_finder/cli.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger

from .catalog_build import load_catalog
from .config import CATALOG_SEED_PATH, DEFAULT_PAGE_SIZE
from .mapping import format_inr, page_to_response
from .normalize import parse_strategy
from .pipeline import search
from .pipeline_types import ResultPage
from .presets import apply_preset, preset_names
from .ranking import InvalidStrategy

# CLI flag -> raw query key understood by the normaliser
_FILTER_FLAGS = {
    "purpose": "purpose",
    "ram": "ram",
    "storage_type": "storageType",
    "storage_size": "storageSize",
    "screen_size": "screenSize",
    "brand": "brand",
    "min_price": "minPrice",
    "max_price": "maxPrice",
    "q": "q",
}


def _raw_query_from_args(args: argparse.Namespace) -> Dict[str, object]:
    raw: Dict[str, object] = {}
    if args.preset:
        preset_query, strategy = apply_preset(args.preset)
        raw.update(preset_query)
        if args.sort is None:
            args.sort = strategy.value
    for attr, key in _FILTER_FLAGS.items():
        value = getattr(args, attr)
        if value:
            raw[key] = value
    return raw


def _print_page(result: ResultPage) -> None:
    print(f"{result.total_count} matches, page {result.page} of {result.total_pages}")
    for rank, scored in enumerate(result.items, start=1 + (result.page - 1) * result.page_size):
        item = scored.item
        badge = " [Best Match]" if scored.is_best_match else ""
        print(
            f"{rank:>3}. {item.brand} {item.model} - {format_inr(item.price)}"
            f"  score={scored.match_score}{badge}"
        )
        if scored.reasons:
            print(f"       {'; '.join(scored.reasons)}")


def cmd_search(args: argparse.Namespace) -> int:
    items = load_catalog(args.catalog)
    raw = _raw_query_from_args(args)
    try:
        strategy = parse_strategy(args.sort)
    except InvalidStrategy as e:
        logger.error("{}", e)
        return 2
    result = search(items, raw, strategy=strategy, page=args.page, page_size=args.limit)
    if args.json:
        print(page_to_response(result).model_dump_json(indent=2))
    else:
        _print_page(result)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("laptop_finder.api:app", host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="laptop-finder")
    ap.add_argument("--log-level", default="WARNING",
                    help="stderr log level (DEBUG, INFO, WARNING, ...)")
    sub = ap.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("search", help="Search a catalog file locally")
    sp.add_argument("--catalog", type=Path, default=CATALOG_SEED_PATH,
                    help="Catalog file (.json or .csv)")
    sp.add_argument("--preset", choices=preset_names())
    sp.add_argument("--purpose", action="append")
    sp.add_argument("--ram", action="append")
    sp.add_argument("--storage-type", dest="storage_type", action="append")
    sp.add_argument("--storage-size", dest="storage_size", action="append")
    sp.add_argument("--screen-size", dest="screen_size", action="append")
    sp.add_argument("--brand", action="append")
    sp.add_argument("--min-price", dest="min_price")
    sp.add_argument("--max-price", dest="max_price")
    sp.add_argument("-q", "--query", dest="q", help="free-text search")
    sp.add_argument("--sort", default=None,
                    help="relevance | price-ascending | price-descending")
    sp.add_argument("--page", type=int, default=1)
    sp.add_argument("--limit", type=int, default=DEFAULT_PAGE_SIZE)
    sp.add_argument("--json", action="store_true", help="print the API response shape")
    sp.set_defaults(func=cmd_search)

    sv = sub.add_parser("serve", help="Run the HTTP API")
    sv.add_argument("--host", default="127.0.0.1")
    sv.add_argument("--port", type=int, default=8000)
    sv.set_defaults(func=cmd_serve)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
