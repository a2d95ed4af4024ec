"""Clock implementation."""

from datetime import datetime, timezone

from slurm_metrics.domain.ports import ClockPort
from slurm_metrics.domain.types import Timestamp


class SystemClock(ClockPort):
    """System clock implementation."""

    def now(self) -> Timestamp:
        """Get current timestamp."""
        return datetime.now(timezone.utc)

    def format_iso(self, ts: Timestamp) -> str:
        """Format timestamp as ISO-8601 UTC with millisecond precision."""
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        ts = ts.astimezone(timezone.utc)
        return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")
