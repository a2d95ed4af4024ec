"""Main entrypoint."""

import asyncio
import sys

import httpx
import structlog

from slurm_metrics.application.use_cases.fetch_all import run as fetch_all
from slurm_metrics.domain.entities import AggregatedEntry
from slurm_metrics.infrastructure.config.settings import Settings
from slurm_metrics.infrastructure.http.client import build_async_client
from slurm_metrics.infrastructure.http.prometheus_fetcher import PrometheusHttpFetcher
from slurm_metrics.infrastructure.observability.logging import configure_logging
from slurm_metrics.infrastructure.observability.push import push_metrics
from slurm_metrics.infrastructure.runtime.clock import SystemClock
from slurm_metrics.interfaces.presenters.result_store import ResultStore

logger = structlog.get_logger()


async def fetch_all_prometheus_data(
    settings: Settings | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> list[AggregatedEntry]:
    """Run one fetch cycle over the whole catalogue.

    When ``client`` is given it is used as-is and left open.
    """
    settings = settings or Settings()

    if client is not None:
        return await _fetch_with(client, settings)

    async with build_async_client(settings) as owned_client:
        return await _fetch_with(owned_client, settings)


async def _fetch_with(client: httpx.AsyncClient, settings: Settings) -> list[AggregatedEntry]:
    return await fetch_all(
        PrometheusHttpFetcher(client),
        SystemClock(),
        base_url=settings.prometheus_base_url,
        deadline_seconds=settings.fetch_deadline_seconds,
    )


def _log_summary(entries: tuple[AggregatedEntry, ...]) -> None:
    """Log one line per entry."""
    for entry in entries:
        if entry.ok:
            logger.info(
                "query_result",
                name=entry.name,
                label=entry.query.label,
                mode=entry.mode.value,
                series_count=len(entry.series),
            )
        else:
            logger.info(
                "query_result",
                name=entry.name,
                label=entry.query.label,
                mode=entry.mode.value,
                error_code=entry.error_code,
                error=str(entry.error),
            )


async def main_async(settings: Settings) -> ResultStore:
    """Fetch once and deliver the result to a fresh store."""
    store = ResultStore()
    store.subscribe(_log_summary)

    logger.info("fetching_data", base_url=settings.prometheus_base_url)
    entries = await fetch_all_prometheus_data(settings)
    store.set(entries)

    logger.info("data_fetched", loaded=store.loaded, entry_count=len(store.value))
    return store


def main() -> None:
    """Entrypoint."""
    settings = Settings()
    configure_logging(settings.log_level, settings.log_format)
    logger.info("app_starting")

    try:
        store = asyncio.run(main_async(settings))
    except KeyboardInterrupt:
        logger.info("keyboard_interrupt")
        sys.exit(130)

    push_metrics(settings)

    if not any(entry.ok for entry in store.value):
        logger.error("no_query_succeeded", entry_count=len(store.value))
        sys.exit(1)


if __name__ == "__main__":
    main()
