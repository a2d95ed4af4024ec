"""Build Prometheus HTTP API request URLs from query definitions."""

from datetime import timedelta

import httpx

from slurm_metrics.domain.entities import QueryDefinition
from slurm_metrics.domain.enums import QueryMode, RangeUnit
from slurm_metrics.domain.errors import InvalidQueryDefinition, UnsupportedRangeUnit
from slurm_metrics.domain.ports import ClockPort

INSTANT_QUERY_PATH = "/api/v1/query"
RANGE_QUERY_PATH = "/api/v1/query_range"

_ENDPOINT_PATHS = {
    QueryMode.INSTANT: INSTANT_QUERY_PATH,
    QueryMode.RANGE: RANGE_QUERY_PATH,
}


def build_query_url(
    definition: QueryDefinition,
    mode: QueryMode,
    *,
    base_url: str,
    clock: ClockPort,
) -> str:
    """Build the request URL for one query.

    Range mode evaluates the window ending at ``clock.now()``.

    Raises:
        UnsupportedRangeUnit: range unit is missing or not ``"day"``.
        InvalidQueryDefinition: range offset or step is missing.
    """
    mode = QueryMode(mode)
    params: dict[str, str] = {"query": definition.query}

    if mode == QueryMode.RANGE:
        params.update(_range_params(definition, clock))

    endpoint = base_url.rstrip("/") + _ENDPOINT_PATHS[mode]
    return str(httpx.URL(endpoint, params=params))


def _range_params(definition: QueryDefinition, clock: ClockPort) -> dict[str, str]:
    """Compute start/end/step for a range query."""
    window = _window_length(definition)

    if definition.range_step is None:
        raise InvalidQueryDefinition(
            f"Range query {definition.name!r} has no range_step"
        )

    end = clock.now()
    start = end - window
    return {
        "start": clock.format_iso(start),
        "end": clock.format_iso(end),
        "step": definition.range_step,
    }


def _window_length(definition: QueryDefinition) -> timedelta:
    """Translate range_offset/range_unit into a window length."""
    if definition.range_unit != RangeUnit.DAY.value:
        raise UnsupportedRangeUnit(definition.range_unit)

    if definition.range_offset is None:
        raise InvalidQueryDefinition(
            f"Range query {definition.name!r} has no range_offset"
        )

    return timedelta(days=definition.range_offset)
