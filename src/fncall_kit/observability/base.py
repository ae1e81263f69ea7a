# src/fncall_kit/observability/base.py

from collections import defaultdict
from typing import Protocol

Labels = dict[str, str]


class MetricsHook(Protocol):
    """Sink for chat and function-call metrics.

    Implementations forward to Prometheus, StatsD, etc. Names come from
    `fncall_kit.observability.names`.
    """

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None: ...

    def increment(
        self, name: str, value: int = 1, labels: Labels | None = None
    ) -> None: ...

    def record_gauge(
        self, name: str, value: float, labels: Labels | None = None
    ) -> None: ...


class NoOpMetricsHook:
    """Default hook. Discards everything."""

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        return None

    def increment(
        self, name: str, value: int = 1, labels: Labels | None = None
    ) -> None:
        return None

    def record_gauge(
        self, name: str, value: float, labels: Labels | None = None
    ) -> None:
        return None


class InMemoryMetricsHook:
    """Keeps metrics in process, keyed by name and sorted label pairs.

    Handy for scripts and tests that want to inspect what a client or
    engine reported without wiring a real backend.
    """

    def __init__(self) -> None:
        self.latencies: dict[tuple, list[float]] = defaultdict(list)
        self.counters: dict[tuple, int] = defaultdict(int)
        self.gauges: dict[tuple, float] = {}

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        self.latencies[_key(name, labels)].append(value_ms)

    def increment(
        self, name: str, value: int = 1, labels: Labels | None = None
    ) -> None:
        self.counters[_key(name, labels)] += value

    def record_gauge(
        self, name: str, value: float, labels: Labels | None = None
    ) -> None:
        self.gauges[_key(name, labels)] = value

    def count(self, name: str, labels: Labels | None = None) -> int:
        return self.counters.get(_key(name, labels), 0)


def _key(name: str, labels: Labels | None) -> tuple:
    return (name, *sorted((labels or {}).items()))
