#!/usr/bin/env python3
"""Quick Start Example: Resolve the concepts a set of concepts depends on.

Walks mappings out of a few CIEL concepts and prints every internal
concept they pull in, with progress messages along the way.

Usage:
    python docs/examples/01_resolve_dependencies.py
"""

from config.settings import Settings
from src.concept_dependencies import build_fetcher, resolve_dependencies


def main():
    """Resolve dependencies for a handful of concepts."""
    # Load default settings from .env
    settings = Settings()

    # Keep the walk shallow for a quick look
    settings = settings.model_copy(update={"levels_to_check": 3})

    source = "/orgs/CIEL/sources/CIEL/"
    codes = ["1065", "1066", "5089"]

    print("=" * 60)
    print("Quick Start: Concept Dependency Resolution")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  - API: {settings.ocl_api_url}")
    print(f"  - Source: {source}")
    print(f"  - Concepts: {codes}")
    print(f"  - Levels to check: {settings.levels_to_check}")
    print()

    urls = resolve_dependencies(
        source,
        codes,
        print,
        max_depth=settings.levels_to_check,
        fetcher=build_fetcher(settings),
    )

    print(f"\n{len(urls)} dependent concepts:")
    for url in urls:
        print(f"  - {url}")


if __name__ == "__main__":
    main()
