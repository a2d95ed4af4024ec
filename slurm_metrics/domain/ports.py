"""Ports (interfaces) for infrastructure adapters."""

from abc import ABC, abstractmethod

from slurm_metrics.domain.entities import SeriesResult
from slurm_metrics.domain.types import Timestamp


class MetricsFetcherPort(ABC):
    """Port for executing one request against the metrics service."""

    @abstractmethod
    async def fetch(self, url: str) -> list[SeriesResult]:
        """Fetch a query URL and return the decoded series."""


class ClockPort(ABC):
    """Port for time operations."""

    @abstractmethod
    def now(self) -> Timestamp:
        """Get current timestamp (timezone-aware, UTC)."""

    @abstractmethod
    def format_iso(self, ts: Timestamp) -> str:
        """Format timestamp as an ISO-8601 UTC string."""
