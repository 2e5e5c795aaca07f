"""Counter and gauge metrics whose handles can share one underlying value."""

from __future__ import annotations

import operator
import threading
from abc import ABC, abstractmethod
from typing import Any

_U64 = 1 << 64


def _as_u64(amount: Any) -> int:
    number = operator.index(amount)
    if number < 0:
        raise ValueError(f"counter amounts must be non-negative, got {number}")
    return number % _U64


class _Cell:
    """A value guarded by a lock, shared between metric handles."""

    __slots__ = ("lock", "value")

    def __init__(self, value: Any) -> None:
        self.lock = threading.Lock()
        self.value = value


class MetricsVisitor(ABC):
    """Receives a metric through double dispatch from ``accept``."""

    @abstractmethod
    def visit_counter(self, counter: Counter) -> None:
        """Handle a counter."""

    @abstractmethod
    def visit_gauge(self, gauge: Gauge) -> None:
        """Handle a gauge."""


class Counter:
    """A monotonically increasing unsigned 64-bit counter.

    Handles obtained through :meth:`share` refer to the same value.
    """

    __slots__ = ("_cell",)

    def __init__(self, value: int = 0) -> None:
        self._cell = _Cell(_as_u64(value))

    @classmethod
    def _from_cell(cls, cell: _Cell) -> Counter:
        handle = cls.__new__(cls)
        handle._cell = cell
        return handle

    def value(self) -> int:
        """Return the current count."""
        with self._cell.lock:
            return self._cell.value

    def reset(self) -> None:
        """Set the count back to zero."""
        with self._cell.lock:
            self._cell.value = 0

    def increment(self) -> Counter:
        """Add one to the count."""
        self += 1
        return self

    def __iadd__(self, amount: int) -> Counter:
        step = _as_u64(amount)
        with self._cell.lock:
            self._cell.value = (self._cell.value + step) % _U64
        return self

    def share(self) -> Counter:
        """Return a new handle to the same underlying count."""
        return Counter._from_cell(self._cell)

    def accept(self, visitor: MetricsVisitor) -> None:
        """Dispatch to ``visitor.visit_counter``."""
        visitor.visit_counter(self)

    def __repr__(self) -> str:
        return f"Counter({self.value()})"


class Gauge:
    """A floating-point value that can go up and down.

    Handles obtained through :meth:`share` refer to the same value.
    """

    __slots__ = ("_cell",)

    def __init__(self, value: float = 0.0) -> None:
        self._cell = _Cell(float(value))

    @classmethod
    def _from_cell(cls, cell: _Cell) -> Gauge:
        handle = cls.__new__(cls)
        handle._cell = cell
        return handle

    def value(self) -> float:
        """Return the current value."""
        with self._cell.lock:
            return self._cell.value

    def reset(self) -> None:
        """Set the value back to zero."""
        with self._cell.lock:
            self._cell.value = 0.0

    def __iadd__(self, amount: float) -> Gauge:
        step = float(amount)
        with self._cell.lock:
            self._cell.value += step
        return self

    def __isub__(self, amount: float) -> Gauge:
        step = float(amount)
        with self._cell.lock:
            self._cell.value -= step
        return self

    def share(self) -> Gauge:
        """Return a new handle to the same underlying value."""
        return Gauge._from_cell(self._cell)

    def accept(self, visitor: MetricsVisitor) -> None:
        """Dispatch to ``visitor.visit_gauge``."""
        visitor.visit_gauge(self)

    def __repr__(self) -> str:
        return f"Gauge({self.value()!r})"