"""Fetch every catalogue query concurrently - main orchestration."""

import asyncio

import structlog

from slurm_metrics.application.services.query_catalog import (
    INSTANT_QUERIES,
    RANGE_QUERIES,
    catalogue_pairs,
)
from slurm_metrics.application.services.url_builder import build_query_url
from slurm_metrics.domain.entities import AggregatedEntry, QueryDefinition
from slurm_metrics.domain.enums import QueryMode
from slurm_metrics.domain.errors import DeadlineExceeded, MetricsQueryError
from slurm_metrics.domain.ports import ClockPort, MetricsFetcherPort
from slurm_metrics.infrastructure.observability.metrics import (
    failed_entries_total,
    fetch_cycles_total,
)

logger = structlog.get_logger()


async def run(
    fetcher: MetricsFetcherPort,
    clock: ClockPort,
    *,
    base_url: str,
    instant_queries: tuple[QueryDefinition, ...] = INSTANT_QUERIES,
    range_queries: tuple[QueryDefinition, ...] = RANGE_QUERIES,
    deadline_seconds: float | None = None,
) -> list[AggregatedEntry]:
    """Fetch all queries and return one entry per query in catalogue order.

    Individual query failures become failed entries; this coroutine does not
    raise for them. Cancelling it cancels every in-flight request.
    """
    pairs = list(catalogue_pairs(instant_queries, range_queries))
    logger.info("fetch_cycle_started", query_count=len(pairs))

    if not pairs:
        return []

    tasks = [
        asyncio.create_task(
            _fetch_entry(definition, mode, fetcher, clock, base_url),
            name=f"fetch:{definition.name}",
        )
        for definition, mode in pairs
    ]

    try:
        await asyncio.wait(tasks, timeout=deadline_seconds)
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        # Cancelled children finish unwinding before run returns or re-raises
        await asyncio.gather(*tasks, return_exceptions=True)

    entries = [
        _collect(task, definition, mode, deadline_seconds)
        for task, (definition, mode) in zip(tasks, pairs)
    ]

    failed = [entry for entry in entries if not entry.ok]
    for entry in failed:
        failed_entries_total.labels(error_code=entry.error_code).inc()
    fetch_cycles_total.inc()

    logger.info(
        "fetch_cycle_completed",
        query_count=len(entries),
        failed_count=len(failed),
        failed_queries=[entry.name for entry in failed],
    )
    return entries


async def _fetch_entry(
    definition: QueryDefinition,
    mode: QueryMode,
    fetcher: MetricsFetcherPort,
    clock: ClockPort,
    base_url: str,
) -> AggregatedEntry:
    """Resolve one query into an entry, converting every failure."""
    try:
        url = build_query_url(definition, mode, base_url=base_url, clock=clock)
        series = await fetcher.fetch(url)
        return AggregatedEntry.succeeded(definition, mode, series)

    except MetricsQueryError as e:
        logger.warning(
            "query_failed",
            name=definition.name,
            mode=mode.value,
            error_code=e.code,
            error_message=str(e),
        )
        return AggregatedEntry.failed(definition, mode, e)

    except Exception as e:
        logger.error(
            "query_failed",
            name=definition.name,
            mode=mode.value,
            error_code=MetricsQueryError.code,
            error_message=str(e),
            exc_info=True,
        )
        error = MetricsQueryError(f"Unexpected error fetching {definition.name!r}: {e}")
        error.__cause__ = e
        return AggregatedEntry.failed(definition, mode, error)


def _collect(
    task: "asyncio.Task[AggregatedEntry]",
    definition: QueryDefinition,
    mode: QueryMode,
    deadline_seconds: float | None,
) -> AggregatedEntry:
    """Entry for a finished task; cancelled tasks missed the deadline."""
    if task.cancelled():
        logger.warning(
            "query_failed",
            name=definition.name,
            mode=mode.value,
            error_code=DeadlineExceeded.code,
            deadline_seconds=deadline_seconds,
        )
        return AggregatedEntry.failed(
            definition,
            mode,
            DeadlineExceeded(
                f"Query {definition.name!r} did not finish within {deadline_seconds}s"
            ),
        )
    return task.result()
