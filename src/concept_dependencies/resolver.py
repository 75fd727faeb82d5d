"""Transitive concept-dependency resolution over mapping edges.

Starting from a set of concept codes in one source, ``resolve_dependencies``
walks mappings breadth-first, one level per fetch:

    level 0       mappings out of the seed codes
    level i + 1   mappings out of the target codes of level i

External mappings are dropped at every level. Traversal stops when a level
has no target codes or after ``max_depth`` levels beyond level 0. A failed
fetch shows up as an empty level, which ends the walk without raising.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from config.settings import Settings
from src.concept_dependencies.fetchers import MappingFetcher, build_fetcher
from src.concept_dependencies.mappings import (
    InternalMapping,
    frontier_codes,
    internal_mappings,
    unique_concept_urls,
)
from src.concept_dependencies.progress import ProgressCallback

logger = logging.getLogger(__name__)

DEFAULT_LEVELS_TO_CHECK = 20

STARTING_MESSAGE = "Finding dependent concepts..."


def found_message(count: int) -> str:
    return f"Found {count} dependent concepts to add..."


def _default_fetcher() -> MappingFetcher:
    return build_fetcher(Settings())


def resolve_dependencies(
    source_id: str,
    seed_concept_codes: Sequence[str],
    progress: ProgressCallback,
    max_depth: int = DEFAULT_LEVELS_TO_CHECK,
    fetcher: MappingFetcher | None = None,
) -> list[str]:
    """Return URLs of every internal concept reachable from the seeds.

    Args:
        source_id: Source the seed codes (and all discovered codes) belong to.
        seed_concept_codes: Codes to start from. May be empty.
        progress: Called with a status message before the first fetch and
            after every fetch, each time with the cumulative URL count.
        max_depth: Levels to expand beyond the seeds' direct mappings.
        fetcher: Mapping source; built from ``Settings()`` when omitted.

    Returns:
        Target concept URLs in first-discovery order, without duplicates.
        Seed codes are not filtered out of the result.

    Raises:
        ValueError: If ``source_id`` is empty or ``max_depth`` is not a
            non-negative integer.
    """
    if not source_id:
        raise ValueError("source_id is required")
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
        raise ValueError(f"max_depth must be a non-negative integer, got {max_depth!r}")
    if fetcher is None:
        fetcher = _default_fetcher()

    progress(STARTING_MESSAGE)
    seeds = list(seed_concept_codes)
    logger.debug("Resolving dependencies of %d concept(s) in %s", len(seeds), source_id)

    levels: list[list[InternalMapping]] = [
        internal_mappings(fetcher.fetch(source_id, seeds))
    ]
    progress(found_message(len(unique_concept_urls(levels))))

    for depth in range(max_depth):
        codes = frontier_codes(levels[depth])
        if not codes:
            break
        level = internal_mappings(fetcher.fetch(source_id, codes))
        levels.append(level)
        found = len(unique_concept_urls(levels))
        logger.debug(
            "Level %d: %d mapping(s) from %d code(s), %d unique concept(s) so far",
            depth + 1, len(level), len(codes), found,
        )
        progress(found_message(found))

    result = unique_concept_urls(levels)
    logger.info(
        "Resolved %d dependent concept(s) in %s after %d level(s)",
        len(result), source_id, len(levels),
    )
    return result
