"""Observable holder for the latest fetch-cycle result."""

from collections.abc import Callable, Iterable

import structlog

from slurm_metrics.domain.entities import AggregatedEntry

logger = structlog.get_logger()

Subscriber = Callable[[tuple[AggregatedEntry, ...]], None]


class ResultStore:
    """Mutable cell owned by the composition root.

    Each ``set`` replaces the whole sequence; subscribers are notified with the
    new value. ``loaded`` is derived, never stored.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._value: tuple[AggregatedEntry, ...] = ()
        self._subscribers: list[Subscriber] = []

    @property
    def value(self) -> tuple[AggregatedEntry, ...]:
        return self._value

    @property
    def loaded(self) -> bool:
        return len(self._value) > 0

    def set(self, entries: Iterable[AggregatedEntry]) -> None:
        """Replace the stored sequence and notify subscribers."""
        self._value = tuple(entries)
        logger.debug("result_store_updated", entry_count=len(self._value), loaded=self.loaded)
        for subscriber in list(self._subscribers):
            subscriber(self._value)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback; returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe
