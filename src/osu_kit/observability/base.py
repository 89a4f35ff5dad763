# src/osu_kit/observability/base.py

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Sink for parser and retention metrics.

    One parse reports its duration, the number of lines read, the number
    of diagnostics, and one document count labelled ``valid=true|false``.
    Retention reports its selection time and how many media files it
    kept. Names live in ``osu_kit.observability.names``; durations are
    milliseconds.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    """Default hook for parsers and retention calls built without one."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        return None

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        return None

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        return None
