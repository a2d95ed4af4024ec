"""Prometheus HTTP API fetcher."""

import time

import httpx
import structlog
from pydantic import ValidationError

from slurm_metrics.application.dto.prometheus import PrometheusResponse
from slurm_metrics.domain.entities import SeriesResult
from slurm_metrics.domain.errors import (
    DecodeError,
    MetricsQueryError,
    ServiceError,
    TransportError,
)
from slurm_metrics.domain.ports import MetricsFetcherPort
from slurm_metrics.infrastructure.observability.metrics import (
    queries_total,
    query_duration_seconds,
)

logger = structlog.get_logger()


class PrometheusHttpFetcher(MetricsFetcherPort):
    """Execute one GET against the Prometheus HTTP API and decode the envelope.

    No retries are attempted: every failure is reported to the caller as
    soon as it happens.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize fetcher with a shared client."""
        self.client = client

    async def fetch(self, url: str) -> list[SeriesResult]:
        """Fetch a query URL and return the decoded series."""
        endpoint = httpx.URL(url).path.rsplit("/", 1)[-1]
        logger.info("fetching_query", url=url, endpoint=endpoint)

        started = time.perf_counter()
        try:
            series = await self._fetch(url)
        except MetricsQueryError as e:
            queries_total.labels(endpoint=endpoint, outcome=e.code.lower()).inc()
            raise
        except Exception:
            queries_total.labels(endpoint=endpoint, outcome="internal_error").inc()
            raise
        finally:
            query_duration_seconds.labels(endpoint=endpoint).observe(
                time.perf_counter() - started
            )

        queries_total.labels(endpoint=endpoint, outcome="success").inc()
        logger.debug("query_fetched", url=url, series_count=len(series))
        return series

    async def _fetch(self, url: str) -> list[SeriesResult]:
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to reach Prometheus at {url}: {e!r}") from e

        envelope = self._decode(response)

        if envelope.status == "error":
            raise ServiceError(
                envelope.error or "unknown error",
                error_type=envelope.error_type,
                status_code=response.status_code,
            )

        for warning in envelope.warnings:
            logger.warning("prometheus_warning", url=url, warning=warning)

        return envelope.to_series()

    def _decode(self, response: httpx.Response) -> PrometheusResponse:
        """Parse the response body into an envelope."""
        try:
            return PrometheusResponse.model_validate_json(response.content)
        except ValidationError as e:
            if response.is_error:
                raise ServiceError(
                    f"HTTP {response.status_code} {response.reason_phrase}",
                    status_code=response.status_code,
                ) from e
            raise DecodeError(f"Malformed Prometheus response: {e}") from e
