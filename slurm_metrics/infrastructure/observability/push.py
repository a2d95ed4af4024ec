"""Push fetch metrics to a Prometheus Pushgateway."""

import structlog
from prometheus_client import REGISTRY, CollectorRegistry, push_to_gateway

from slurm_metrics.infrastructure.config.settings import Settings

logger = structlog.get_logger()


def push_metrics(settings: Settings, registry: CollectorRegistry = REGISTRY) -> bool:
    """Push the registry once; returns True when a push succeeded.

    Does nothing when no Pushgateway is configured. Push failures are logged
    and do not affect the fetch result.
    """
    if not settings.pushgateway_url:
        logger.debug("metrics_push_skipped")
        return False

    try:
        push_to_gateway(
            settings.pushgateway_url,
            job=settings.pushgateway_job,
            registry=registry,
            timeout=settings.request_timeout_seconds,
        )
    except Exception as e:
        logger.warning(
            "metrics_push_failed",
            pushgateway_url=settings.pushgateway_url,
            error=str(e),
        )
        return False

    logger.info("metrics_pushed", pushgateway_url=settings.pushgateway_url, job=settings.pushgateway_job)
    return True
