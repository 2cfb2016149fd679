import logging
from typing import Protocol


class MetricsHook(Protocol):
    """Sink for preprocessor metrics.

    Durations are milliseconds. Labels are optional string pairs
    (e.g. ``{"chapter": "Intro"}``).
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


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass


class LoggingMetricsHook:
    """Writes every metric to the debug log. Used by ``mdbook-uwuify -v``."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("mdbook_uwuify.metrics")

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self._logger.debug("%s=%.2fms %s", name, value_ms, _format_labels(labels))

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self._logger.debug("%s+=%d %s", name, value, _format_labels(labels))


def _format_labels(labels: dict[str, str] | None) -> str:
    if not labels:
        return ""
    return " ".join(f"{k}={v}" for k, v in sorted(labels.items()))
