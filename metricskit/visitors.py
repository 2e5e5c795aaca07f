"""Visitors that read, reset and format metrics."""

from __future__ import annotations

from typing import Generic, TypeVar, Union

from .metrics import Counter, Gauge, MetricsVisitor

M = TypeVar("M", Counter, Gauge)
Metric = Union[Counter, Gauge]

SUPPORTED_TYPES = (Counter, Gauge)


class ValueVisitor(MetricsVisitor, Generic[M]):
    """Produces a handle of ``metric_type`` sharing the visited metric.

    If the visited metric is of another kind, the result is a fresh,
    unconnected metric of ``metric_type``.
    """

    def __init__(self, metric_type: type[M]) -> None:
        if metric_type not in SUPPORTED_TYPES:
            raise TypeError(f"unsupported metric type: {metric_type!r}")
        self._metric_type = metric_type
        self._result: M = metric_type()

    def visit_counter(self, counter: Counter) -> None:
        if self._metric_type is Counter:
            self._result = counter.share()

    def visit_gauge(self, gauge: Gauge) -> None:
        if self._metric_type is Gauge:
            self._result = gauge.share()

    def result(self) -> M:
        """Return the handle produced by the last visit."""
        return self._result


class ResetVisitor(MetricsVisitor):
    """Resets every metric it visits."""

    def visit_counter(self, counter: Counter) -> None:
        counter.reset()

    def visit_gauge(self, gauge: Gauge) -> None:
        gauge.reset()


class StringValueVisitor(MetricsVisitor):
    """Accumulates ``"name" value`` pairs for every metric it visits.

    The name used is whatever ``metric_name`` holds at the time of the visit.
    """

    def __init__(self) -> None:
        self.metric_name = ""
        self._parts: list[str] = []

    def visit_counter(self, counter: Counter) -> None:
        self._parts.append(f' "{self.metric_name}" {counter.value()}')

    def visit_gauge(self, gauge: Gauge) -> None:
        self._parts.append(f' "{self.metric_name}" {gauge.value():g}')

    def result(self) -> str:
        """Return everything accumulated so far."""
        return "".join(self._parts)