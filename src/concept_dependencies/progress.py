"""Progress sinks for dependency resolution."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

ProgressCallback = Callable[[str], None]

_FOUND_RE = re.compile(r"^Found (\d+) ")


def logging_progress(log: logging.Logger, level: int = logging.INFO) -> ProgressCallback:
    """Return a callback that forwards each progress message to ``log``."""

    def _report(message: str) -> None:
        log.log(level, message)

    return _report


class ProgressLog:
    """Record progress messages in the order they were reported."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def found_counts(self) -> list[int]:
        """Cumulative counts from the ``Found N ...`` messages."""
        counts = []
        for message in self.messages:
            hit = _FOUND_RE.match(message)
            if hit:
                counts.append(int(hit.group(1)))
        return counts

    @property
    def latest(self) -> str | None:
        return self.messages[-1] if self.messages else None
