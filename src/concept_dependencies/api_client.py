"""HTTP client for the terminology service's mapping endpoint.

``ConceptApiClient.retrieve_mappings`` never raises for transport or server
failures. It returns a ``FetchResult``: either ``FetchOk`` with the parsed
mappings, or ``FetchError`` describing why the request gave up. Rate-limit
responses (429) and server errors are retried with exponential backoff.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import requests

from src.concept_dependencies.mappings import Mapping, parse_mapping

if TYPE_CHECKING:
    from config.settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchOk:
    mappings: list[Mapping] = field(default_factory=list)


@dataclass(frozen=True)
class FetchError:
    reason: str
    status_code: int | None = None


FetchResult = FetchOk | FetchError


class ConceptApiClient:
    """Query ``{source_url}mappings/`` for mappings out of a set of concepts.

    Args:
        base_url: Root of the terminology service API.
        timeout: Per-request timeout in seconds.
        retries: Attempts per request before giving up.
        limit: ``limit`` query parameter sent with every request (0 = all).
        session: Optional pre-configured ``requests.Session``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retries: int = 3,
        limit: int = 0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._retries = max(1, retries)
        self._limit = limit
        self._session = session

    @classmethod
    def from_settings(cls, settings: Settings) -> ConceptApiClient:
        return cls(
            base_url=settings.ocl_api_url,
            timeout=settings.request_timeout,
            retries=settings.request_retries,
            limit=settings.mappings_limit,
        )

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def mappings_url(self, source_url: str) -> str:
        path = "/" + source_url.strip("/") + "/"
        return f"{self._base_url}{path}mappings/"

    def retrieve_mappings(
        self, source_url: str, from_concept_codes: Sequence[str]
    ) -> FetchResult:
        """Fetch mappings whose origin is one of ``from_concept_codes``."""
        url = self.mappings_url(source_url)
        params = {"fromConcept": ",".join(from_concept_codes), "limit": self._limit}
        last_error = FetchError(reason="no attempt made")

        for attempt in range(self._retries):
            try:
                resp = self.session.get(url, params=params, timeout=self._timeout)
                if resp.status_code == 429:
                    last_error = FetchError("rate limited", status_code=429)
                    if attempt < self._retries - 1:
                        time.sleep(2 ** (attempt + 1))
                    continue
                if 400 <= resp.status_code < 500:
                    return FetchError(
                        f"client error from {url}", status_code=resp.status_code
                    )
                resp.raise_for_status()
                payload = resp.json()
            except ValueError as e:
                # Also covers requests' JSONDecodeError and malformed URLs
                return FetchError(f"invalid response from {url}: {e}")
            except requests.RequestException as e:
                status = e.response.status_code if e.response is not None else None
                last_error = FetchError(str(e), status_code=status)
                logger.debug(
                    "Mapping request to %s failed (attempt %d/%d): %s",
                    url, attempt + 1, self._retries, e,
                )
                if attempt < self._retries - 1:
                    time.sleep(2 ** attempt)
                continue

            if not isinstance(payload, list):
                return FetchError(f"expected a list of mappings from {url}")
            return FetchOk([parse_mapping(raw) for raw in payload if isinstance(raw, dict)])

        return last_error
