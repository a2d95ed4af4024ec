"""Static catalogue of Prometheus queries."""

from collections.abc import Iterator

from slurm_metrics.domain.entities import QueryDefinition
from slurm_metrics.domain.enums import QueryMode, RangeUnit

INSTANT_QUERIES: tuple[QueryDefinition, ...] = (
    QueryDefinition(
        label="Free CPUs (non-GPU) by location",
        name="cpus_free",
        query='sum(slurm_node_cpus{state="free",nodes!="gpu"}) by (cluster,nodes)',
    ),
    QueryDefinition(
        label="Allocated CPUs (non-GPU) by location",
        name="cpus_allocated",
        query='sum(slurm_node_cpus{state="alloc",nodes!="gpu"}) by (cluster,nodes)',
    ),
    QueryDefinition(
        label="Percent Free CPUs (non-GPU) by location",
        name="cpus_percent_free",
        query=(
            'sum(slurm_node_cpus{state="free",nodes!="gpu"}) by (cluster,nodes)'
            ' / sum(slurm_node_cpus{nodes!="gpu"}) by (cluster,nodes)'
        ),
    ),
    QueryDefinition(
        label="GPUs free by location",
        name="gpus_free",
        query='sum(slurm_node_gpus{state="free",nodes="gpu"}) by (cluster)',
    ),
    QueryDefinition(
        label="GPUs allocated by location",
        name="gpus_allocated",
        query='sum(slurm_node_gpus{state="alloc",nodes="gpu"}) by (cluster)',
    ),
    QueryDefinition(
        label="Slurm pending job requests",
        name="slurm_pending_jobs",
        query='sum(slurm_job_count{state="pending"}) by (account)',
    ),
)

RANGE_QUERIES: tuple[QueryDefinition, ...] = (
    QueryDefinition(
        label="Rusty queue wait time over 24 hours",
        name="rusty_wait_time",
        query='sum(slurm_job_seconds{cluster="iron",state="pending"}) by (account)',
        range_offset=1,
        range_unit=RangeUnit.DAY.value,
        range_step="15m",
    ),
    QueryDefinition(
        label="Rusty queue length over 24 hours",
        name="rusty_queue_length",
        query='sum(slurm_job_count{state="pending"}) by (account)',
        range_offset=1,
        range_unit=RangeUnit.DAY.value,
        range_step="15m",
    ),
    QueryDefinition(
        label="Node counts by center for the last 7 Days",
        name="node_count",
        query='sum(slurm_job_nodes{state="running"}) by (account)',
        range_offset=7,
        range_unit=RangeUnit.DAY.value,
        range_step="90m",
    ),
)


def catalogue_pairs(
    instant_queries: tuple[QueryDefinition, ...] = INSTANT_QUERIES,
    range_queries: tuple[QueryDefinition, ...] = RANGE_QUERIES,
) -> Iterator[tuple[QueryDefinition, QueryMode]]:
    """Yield (definition, mode) pairs in catalogue order, instant first."""
    for definition in instant_queries:
        yield definition, QueryMode.INSTANT
    for definition in range_queries:
        yield definition, QueryMode.RANGE
