"""Integration test for a full fetch cycle over a mocked Prometheus API."""

import httpx
import pytest

from slurm_metrics.application.services.query_catalog import INSTANT_QUERIES, RANGE_QUERIES
from slurm_metrics.infrastructure.config.settings import Settings
from slurm_metrics.infrastructure.http.client import build_async_client
from slurm_metrics.infrastructure.runtime.main import fetch_all_prometheus_data
from slurm_metrics.interfaces.presenters.result_store import ResultStore

FAILING_QUERY = INSTANT_QUERIES[2].query


def prometheus_handler(request: httpx.Request) -> httpx.Response:
    """Serve vector/matrix results; fail one query with an error envelope."""
    query = request.url.params["query"]

    if query == FAILING_QUERY:
        return httpx.Response(
            422,
            json={"status": "error", "errorType": "execution", "error": "bad query"},
        )

    if request.url.path == "/api/v1/query_range":
        assert {"start", "end", "step"} <= set(request.url.params.keys())
        return httpx.Response(
            200,
            json={
                "status": "success",
                "data": {
                    "resultType": "matrix",
                    "result": [
                        {
                            "metric": {"account": "cca"},
                            "values": [[1700000000, "3"], [1700000900, "5"]],
                        }
                    ],
                },
            },
        )

    assert request.url.path == "/api/v1/query"
    assert list(request.url.params.keys()) == ["query"]
    return httpx.Response(
        200,
        json={
            "status": "success",
            "data": {
                "resultType": "vector",
                "result": [{"metric": {"cluster": "rusty"}, "value": [1700000000, "42"]}],
            },
        },
    )


@pytest.fixture
def settings(monkeypatch, tmp_path):
    """Settings pointing at a fake Prometheus."""
    monkeypatch.chdir(tmp_path)
    return Settings(prometheus_base_url="http://prometheus.test")


@pytest.mark.asyncio
async def test_fetch_all_prometheus_data(settings):
    """Test full cycle: URL building, HTTP, decoding and aggregation."""
    async with build_async_client(settings, transport=httpx.MockTransport(prometheus_handler)) as client:
        entries = await fetch_all_prometheus_data(settings, client=client)

    catalogue = INSTANT_QUERIES + RANGE_QUERIES
    assert [entry.name for entry in entries] == [q.name for q in catalogue]

    failed = [entry for entry in entries if not entry.ok]
    assert [entry.name for entry in failed] == ["cpus_percent_free"]
    assert failed[0].error_code == "SERVICE_ERROR"
    assert failed[0].error.status_code == 422

    instant = entries[0]
    assert instant.series[0].metric == {"cluster": "rusty"}
    assert instant.series[0].latest.value == "42"

    ranged = entries[-1]
    assert ranged.name == "node_count"
    assert len(ranged.series[0].samples) == 2

    store = ResultStore()
    store.set(entries)
    assert store.loaded is True


@pytest.mark.asyncio
async def test_fetch_all_prometheus_data_unreachable(settings):
    """Test an unreachable service still yields a complete, failed result."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with build_async_client(settings, transport=httpx.MockTransport(refuse)) as client:
        entries = await fetch_all_prometheus_data(settings, client=client)

    assert len(entries) == len(INSTANT_QUERIES) + len(RANGE_QUERIES)
    assert {entry.error_code for entry in entries} == {"TRANSPORT_ERROR"}
