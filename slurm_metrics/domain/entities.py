"""Domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from slurm_metrics.domain.enums import EntryStatus, QueryMode
from slurm_metrics.domain.errors import MetricsQueryError
from slurm_metrics.domain.types import Labels


@dataclass(frozen=True)
class QueryDefinition:
    """Catalogue entry describing one metrics query.

    ``range_unit`` is a plain string: units other than ``"day"`` are accepted
    here and rejected when a range URL is built.
    """

    label: str
    name: str
    query: str
    range_offset: int | None = None
    range_unit: str | None = None
    range_step: str | None = None

    def __post_init__(self) -> None:
        if self.range_offset is not None and self.range_offset <= 0:
            raise ValueError(
                f"range_offset must be positive for query {self.name!r}, got {self.range_offset}"
            )

    @property
    def has_range(self) -> bool:
        """Whether any range parameter is set."""
        return any(
            value is not None
            for value in (self.range_offset, self.range_unit, self.range_step)
        )


@dataclass(frozen=True)
class Sample:
    """One (timestamp, value) point as sent by the service."""

    timestamp: float
    value: str

    def as_float(self) -> float:
        """Convert value to float (handles "NaN", "+Inf", "-Inf")."""
        return float(self.value)


@dataclass(frozen=True)
class SeriesResult:
    """Decoded series: label set plus one or more samples."""

    metric: Labels
    samples: tuple[Sample, ...] = ()

    @property
    def latest(self) -> Sample | None:
        """Most recent sample, if any."""
        return self.samples[-1] if self.samples else None


@dataclass(frozen=True)
class AggregatedEntry:
    """Outcome of one catalogue query in a fetch cycle."""

    query: QueryDefinition
    mode: QueryMode
    status: EntryStatus
    series: tuple[SeriesResult, ...] = field(default=())
    error: MetricsQueryError | None = None

    @classmethod
    def succeeded(
        cls,
        query: QueryDefinition,
        mode: QueryMode,
        series: list[SeriesResult] | tuple[SeriesResult, ...],
    ) -> AggregatedEntry:
        """Build a successful entry."""
        return cls(query=query, mode=mode, status=EntryStatus.SUCCESS, series=tuple(series))

    @classmethod
    def failed(
        cls,
        query: QueryDefinition,
        mode: QueryMode,
        error: MetricsQueryError,
    ) -> AggregatedEntry:
        """Build a failed entry."""
        return cls(query=query, mode=mode, status=EntryStatus.FAILURE, error=error)

    @property
    def ok(self) -> bool:
        return self.status == EntryStatus.SUCCESS

    @property
    def name(self) -> str:
        return self.query.name

    @property
    def error_code(self) -> str | None:
        return self.error.code if self.error is not None else None
