"""httpx client builder."""

import httpx

from slurm_metrics.infrastructure.config.settings import Settings


def build_async_client(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` for the Prometheus HTTP API.

    ``transport`` lets tests substitute ``httpx.MockTransport``.
    """
    settings = settings or Settings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout_seconds),
        follow_redirects=True,
        headers={
            "User-Agent": settings.user_agent,
            "Accept": "application/json",
        },
        transport=transport,
    )
