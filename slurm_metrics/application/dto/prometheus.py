"""Prometheus HTTP API response DTOs."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from slurm_metrics.domain.entities import Sample, SeriesResult
from slurm_metrics.domain.errors import DecodeError

# [unix_timestamp, "value"]
SamplePair = tuple[float, str]


class PrometheusSeries(BaseModel):
    """One element of ``data.result`` for vector or matrix results."""

    model_config = ConfigDict(extra="ignore")

    metric: dict[str, str] = Field(default_factory=dict)
    value: SamplePair | None = None  # instant (vector)
    values: list[SamplePair] | None = None  # range (matrix)

    @model_validator(mode="after")
    def _check_single_shape(self) -> "PrometheusSeries":
        if (self.value is None) == (self.values is None):
            raise ValueError("series must carry exactly one of 'value' or 'values'")
        return self

    def to_domain(self) -> SeriesResult:
        """Normalize to a series with one or many samples."""
        pairs = [self.value] if self.value is not None else self.values
        return SeriesResult(
            metric=dict(self.metric),
            samples=tuple(Sample(timestamp=ts, value=value) for ts, value in pairs),
        )


class PrometheusData(BaseModel):
    """``data`` member of a success envelope."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    result_type: str | None = Field(None, alias="resultType")
    result: list[PrometheusSeries] | SamplePair


class PrometheusResponse(BaseModel):
    """Top-level response envelope."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status: Literal["success", "error"]
    data: PrometheusData | None = None
    error_type: str | None = Field(None, alias="errorType")
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_success_has_data(self) -> "PrometheusResponse":
        if self.status == "success" and self.data is None:
            raise ValueError("success envelope without 'data'")
        return self

    def to_series(self) -> list[SeriesResult]:
        """Decoded series of a success envelope.

        Scalar results become a single label-less series; string results are
        not supported.
        """
        if self.data is None:
            return []

        result_type = self.data.result_type
        if result_type not in (None, "vector", "matrix", "scalar"):
            raise DecodeError(f"Unsupported result type: {result_type}")

        if isinstance(self.data.result, tuple):
            if result_type not in (None, "scalar"):
                raise DecodeError(f"Unexpected scalar payload for result type {result_type}")
            ts, value = self.data.result
            return [SeriesResult(metric={}, samples=(Sample(timestamp=ts, value=value),))]

        return [series.to_domain() for series in self.data.result]
