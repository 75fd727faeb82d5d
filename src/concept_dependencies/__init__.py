"""Transitive dependency resolution for terminology concepts."""

from src.concept_dependencies.api_client import (
    ConceptApiClient,
    FetchError,
    FetchOk,
    FetchResult,
)
from src.concept_dependencies.fetchers import (
    ApiMappingFetcher,
    MappingFetcher,
    StaticMappingFetcher,
    build_fetcher,
)
from src.concept_dependencies.mappings import (
    ExternalMapping,
    InternalMapping,
    Mapping,
    parse_mapping,
)
from src.concept_dependencies.progress import ProgressLog, logging_progress
from src.concept_dependencies.resolver import resolve_dependencies

__all__ = [
    "ApiMappingFetcher",
    "ConceptApiClient",
    "ExternalMapping",
    "FetchError",
    "FetchOk",
    "FetchResult",
    "InternalMapping",
    "Mapping",
    "MappingFetcher",
    "ProgressLog",
    "StaticMappingFetcher",
    "build_fetcher",
    "logging_progress",
    "parse_mapping",
    "resolve_dependencies",
]
