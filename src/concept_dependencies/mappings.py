"""Mapping edges between concepts and the helpers that filter them.

A mapping either points at a concept inside the terminology service
(``InternalMapping``, which carries a ``to_concept_url``) or at something
outside it (``ExternalMapping``). Only internal mappings take part in
dependency resolution; external ones are dropped by ``internal_mappings``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class InternalMapping:
    """A mapping whose target concept lives in the terminology service."""

    from_concept_code: str | None
    to_concept_code: str | None
    to_concept_url: str
    map_type: str
    from_concept_url: str | None = None


@dataclass(frozen=True)
class ExternalMapping:
    """A mapping whose target lies outside the service (or is missing)."""

    from_concept_code: str | None
    map_type: str
    to_concept_code: str | None = None
    from_concept_url: str | None = None


Mapping = InternalMapping | ExternalMapping


def parse_mapping(raw: dict) -> Mapping:
    """Build a ``Mapping`` from an API record.

    Records with a non-empty ``to_concept_url`` are internal; anything else,
    including records with neither a target code nor a target URL, is
    external.
    """
    to_concept_url = raw.get("to_concept_url") or None
    to_concept_code = raw.get("to_concept_code") or None
    from_concept_code = raw.get("from_concept_code") or None
    from_concept_url = raw.get("from_concept_url") or None
    map_type = str(raw.get("map_type") or "")

    if to_concept_url:
        return InternalMapping(
            from_concept_code=from_concept_code,
            to_concept_code=to_concept_code,
            to_concept_url=str(to_concept_url),
            map_type=map_type,
            from_concept_url=from_concept_url,
        )
    return ExternalMapping(
        from_concept_code=from_concept_code,
        map_type=map_type,
        to_concept_code=to_concept_code,
        from_concept_url=from_concept_url,
    )


def internal_mappings(mappings: Iterable[Mapping]) -> list[InternalMapping]:
    """Keep only mappings that point at concepts inside the service."""
    kept: list[InternalMapping] = []
    for mapping in mappings:
        match mapping:
            case InternalMapping():
                kept.append(mapping)
            case ExternalMapping():
                continue
            case _:
                raise TypeError(f"Not a mapping: {mapping!r}")
    return kept


def frontier_codes(level: Sequence[InternalMapping]) -> list[str]:
    """Target codes of one level, in discovery order (duplicates kept)."""
    return [m.to_concept_code for m in level if m.to_concept_code]


def unique_concept_urls(levels: Iterable[Sequence[InternalMapping]]) -> list[str]:
    """Target URLs across all levels, first discovery wins."""
    seen: dict[str, None] = {}
    for level in levels:
        for mapping in level:
            seen.setdefault(mapping.to_concept_url, None)
    return list(seen)
