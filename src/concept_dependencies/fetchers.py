"""Pluggable mapping fetchers consumed by the dependency resolver.

Provides a ``MappingFetcher`` protocol with two concrete implementations:

* ``ApiMappingFetcher``: wraps ``ConceptApiClient`` and turns every
  ``FetchError`` into an empty list, so the resolver never sees a failure.
* ``StaticMappingFetcher``: reads mappings from a JSON file keyed by source,
  for offline runs and fixtures.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from src.concept_dependencies.api_client import ConceptApiClient, FetchError, FetchOk
from src.concept_dependencies.mappings import Mapping, parse_mapping

if TYPE_CHECKING:
    from config.settings import Settings

logger = logging.getLogger(__name__)


# ── Protocol ─────────────────────────────────────────────────────────────────


@runtime_checkable
class MappingFetcher(Protocol):
    """Interface for a source of mapping edges."""

    @property
    def name(self) -> str: ...

    def fetch(self, source_id: str, concept_codes: Sequence[str]) -> list[Mapping]:
        """Return mappings whose origin is one of ``concept_codes``.

        Must return ``[]`` instead of raising on transport or server errors.
        """
        ...


# ── ApiMappingFetcher ────────────────────────────────────────────────────────


class ApiMappingFetcher:
    """Fail-soft adapter over ``ConceptApiClient``."""

    def __init__(self, client: ConceptApiClient) -> None:
        self._client = client

    @property
    def name(self) -> str:
        return "api"

    def fetch(self, source_id: str, concept_codes: Sequence[str]) -> list[Mapping]:
        if not concept_codes:
            return []
        result = self._client.retrieve_mappings(source_id, list(concept_codes))
        match result:
            case FetchOk(mappings=mappings):
                return list(mappings)
            case FetchError(reason=reason, status_code=status_code):
                logger.warning(
                    "Could not fetch mappings for %d concept(s) in %s (status %s): %s",
                    len(concept_codes), source_id, status_code, reason,
                )
                return []
        raise TypeError(f"Unexpected fetch result: {result!r}")


# ── StaticMappingFetcher ─────────────────────────────────────────────────────


class StaticMappingFetcher:
    """Load mappings from a JSON file of ``{source_id: [mapping, ...]}``.

    Lazy-loads the file on first access. A missing file, or one whose top
    level is not a JSON object, is treated as an empty mapping set.
    """

    def __init__(self, json_path: Path) -> None:
        self._path = json_path
        self._data: dict[str, list[Mapping]] | None = None

    @property
    def name(self) -> str:
        return "static"

    @staticmethod
    def _source_key(source_id: str) -> str:
        return "/" + source_id.strip("/") + "/"

    def _ensure_loaded(self) -> dict[str, list[Mapping]]:
        if self._data is None:
            if not self._path.exists():
                logger.warning("Static mapping file not found: %s", self._path)
                self._data = {}
            else:
                with open(self._path) as f:
                    raw = json.load(f)
                if not isinstance(raw, dict):
                    logger.warning(
                        "Static mapping file %s is not a JSON object; ignoring it", self._path
                    )
                    raw = {}
                raw.pop("_metadata", None)
                self._data = {
                    self._source_key(source): [
                        parse_mapping(entry) for entry in entries if isinstance(entry, dict)
                    ]
                    for source, entries in raw.items()
                    if isinstance(entries, list)
                }
                logger.info(
                    "Loaded mappings for %d source(s) from %s",
                    len(self._data),
                    self._path.name,
                )
        return self._data

    def fetch(self, source_id: str, concept_codes: Sequence[str]) -> list[Mapping]:
        wanted = set(concept_codes)
        if not wanted:
            return []
        mappings = self._ensure_loaded().get(self._source_key(source_id), [])
        return [m for m in mappings if m.from_concept_code in wanted]


def build_fetcher(settings: Settings) -> MappingFetcher:
    """Pick the static fetcher when a mapping file is configured, else the API."""
    if settings.mappings_file is not None:
        return StaticMappingFetcher(settings.mappings_file)
    return ApiMappingFetcher(ConceptApiClient.from_settings(settings))
