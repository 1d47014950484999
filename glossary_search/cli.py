"""CLI: Query a JSON glossary corpus and print the ranked results."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from .corpus import load_corpus
from .engine import SearchEngine
from .exceptions import CorpusError
from .settings import load_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search a glossary corpus")
    parser.add_argument("--corpus", required=True, help="Path to the JSON corpus file")
    parser.add_argument("--query", required=True, help="Search query")
    parser.add_argument("--page", type=int, default=1, help="Result page (1-based)")
    parser.add_argument("--per-page", type=int, default=None,
                        help="Results per page (overrides config)")
    parser.add_argument("--output", choices=["json", "titles"], default="json",
                        help="Output format: json (id/title/score) or titles (one per line)")
    parser.add_argument("--env-file", default=None, help="Optional .env file with GLOSSARY_SEARCH_* settings")
    parser.add_argument("--log-level", default=None, help="Logging level (overrides config)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.per_page is not None:
        overrides["per_page"] = args.per_page
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    try:
        config = load_config(env_path=args.env_file, **overrides)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        corpus = load_corpus(args.corpus)
    except CorpusError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    engine = SearchEngine(corpus, config)
    page = engine.search_page(args.query, page=args.page)

    if args.output == "titles":
        for result in page.items:
            record = result.record
            print(record.title.ko or record.title.en or f"#{record.id}")
        if not page.items:
            print("(no matches)")
        return 0

    payload = {
        "query": args.query,
        "total": page.total,
        "page": page.page,
        "total_pages": page.total_pages,
        "results": [
            {
                "id": r.record.id,
                "title": {"ko": r.record.title.ko, "en": r.record.title.en},
                "score": r.score,
            }
            for r in page.items
        ],
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
