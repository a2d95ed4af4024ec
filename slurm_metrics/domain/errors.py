"""Domain errors."""


class DomainError(Exception):
    """Base domain error."""


class MetricsQueryError(DomainError):
    """Error resolving a single catalogue query."""

    code = "INTERNAL_ERROR"


class TransportError(MetricsQueryError):
    """Metrics service could not be reached."""

    code = "TRANSPORT_ERROR"


class ServiceError(MetricsQueryError):
    """Metrics service answered with an application-level error."""

    code = "SERVICE_ERROR"

    def __init__(
        self,
        message: str,
        error_type: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.status_code = status_code


class DecodeError(MetricsQueryError):
    """Response body did not match the expected envelope."""

    code = "DECODE_ERROR"


class UnsupportedRangeUnit(MetricsQueryError):
    """Range query uses a unit no window can be computed for."""

    code = "UNSUPPORTED_RANGE_UNIT"

    def __init__(self, unit: str | None) -> None:
        super().__init__(f"Unsupported range unit: {unit!r}")
        self.unit = unit


class InvalidQueryDefinition(MetricsQueryError):
    """Query definition is missing parameters required by its mode."""

    code = "INVALID_QUERY_DEFINITION"


class DeadlineExceeded(MetricsQueryError):
    """Query was still in flight when the fetch cycle deadline passed."""

    code = "DEADLINE_EXCEEDED"
