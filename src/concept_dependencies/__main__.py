"""CLI entry point for concept dependency resolution.

Usage:
    python -m src.concept_dependencies SOURCE CODE [CODE ...] [--max-depth N]
        [--api-url URL] [--mappings-file PATH] [--json]
"""

import argparse
import json
import logging
from pathlib import Path

from config.settings import Settings
from src.concept_dependencies.fetchers import build_fetcher
from src.concept_dependencies.progress import logging_progress
from src.concept_dependencies.resolver import resolve_dependencies


logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if depth < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {depth}")
    return depth


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.concept_dependencies",
        description="List the concepts a set of concepts depends on through mappings",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "source",
        help="Source URL the concepts belong to, e.g. /orgs/CIEL/sources/CIEL/",
    )
    parser.add_argument(
        "codes",
        nargs="+",
        help="Concept codes to start from",
    )
    parser.add_argument(
        "--max-depth",
        type=_non_negative_int,
        default=None,
        help="Mapping levels to follow beyond the seeds (default: from settings)",
    )
    parser.add_argument(
        "--api-url",
        type=str,
        default=None,
        help="Terminology service API root (default: from settings)",
    )
    parser.add_argument(
        "--mappings-file",
        type=Path,
        default=None,
        help="Resolve offline against a JSON mapping file",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the concept URLs as a JSON array",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Resolve dependent concepts and print their URLs."""
    args = build_parser().parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Load settings with CLI overrides
    updates = {}
    if args.max_depth is not None:
        updates["levels_to_check"] = args.max_depth
    if args.api_url:
        updates["ocl_api_url"] = args.api_url.rstrip("/")
    if args.mappings_file:
        updates["mappings_file"] = args.mappings_file

    settings = Settings()
    if updates:
        settings = settings.model_copy(update=updates)

    fetcher = build_fetcher(settings)
    logger.info(f"Resolving {len(args.codes)} concept(s) in {args.source} via {fetcher.name}")

    urls = resolve_dependencies(
        args.source,
        args.codes,
        logging_progress(logger),
        max_depth=settings.levels_to_check,
        fetcher=fetcher,
    )

    if args.json:
        print(json.dumps(urls, indent=2))
    else:
        for url in urls:
            print(url)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
