"""A thread-safe, name-keyed collection of metrics."""

from __future__ import annotations

import threading
from typing import TypeVar, Union

from .metrics import Counter, Gauge
from .visitors import SUPPORTED_TYPES, ValueVisitor

M = TypeVar("M", Counter, Gauge)
Metric = Union[Counter, Gauge]


class Registry:
    """Maps metric names to counters and gauges."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._metrics: dict[str, Metric] = {}

    def add_metric(self, name: str, metric: Metric) -> None:
        """Store ``metric`` under ``name``, replacing any earlier one."""
        if not isinstance(metric, SUPPORTED_TYPES):
            raise TypeError(f"unsupported metric: {metric!r}")
        with self._lock:
            self._metrics[name] = metric

    def get_metric(self, name: str, metric_type: type[M]) -> M:
        """Return a handle sharing the metric stored under ``name``.

        A missing metric is created as a default ``metric_type``. If the
        stored metric is of another kind, an unconnected default is returned.
        """
        visitor = ValueVisitor(metric_type)
        with self._lock:
            metric = self._metrics.get(name)
            if metric is None:
                metric = self._metrics[name] = metric_type()
            metric.accept(visitor)
        return visitor.result()

    def metric_group(self) -> dict[str, Metric]:
        """Return a snapshot of all stored metrics by name."""
        with self._lock:
            return dict(self._metrics)


_default_registry: Registry | None = None
_default_lock = threading.Lock()


def create_registry() -> Registry:
    """Return a new, empty registry."""
    return Registry()


def get_registry() -> Registry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = create_registry()
        return _default_registry