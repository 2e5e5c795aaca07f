"""Writing registry snapshots to a file, on demand or periodically."""

from __future__ import annotations

import threading
import weakref
from datetime import datetime
from os import PathLike
from types import TracebackType
from typing import Union

from .registry import Registry
from .visitors import ResetVisitor, StringValueVisitor


def current_timestamp() -> str:
    """Return local time as ``YYYY-MM-DD HH:MM:SS.mmm``."""
    now = datetime.now()
    return f"{now:%Y-%m-%d %H:%M:%S}.{now.microsecond // 1000:03d}"


def _auto_write(
    dumper_ref: weakref.ReferenceType,
    registry: Registry,
    interval: float,
    stop: threading.Event,
) -> None:
    while not stop.is_set():
        dumper = dumper_ref()
        if dumper is None:
            break
        dumper.write(registry)
        del dumper
        if stop.wait(interval):
            break


class Dumper:
    """Appends one line per snapshot of a registry to a file.

    Each written line holds a timestamp followed by every metric's name and
    value; the metrics are reset once written.
    """

    def __init__(self, filename: Union[str, PathLike]) -> None:
        self.filename = filename
        self._file = open(filename, "w", encoding="utf-8")
        self._lock = threading.Lock()
        self._worker: threading.Thread | None = None
        self._stop = threading.Event()

    def write(self, registry: Registry) -> None:
        """Write one snapshot of ``registry`` and reset its metrics."""
        with self._lock:
            if self._file.closed:
                raise ValueError("dumper is closed")
            timestamp = current_timestamp()
            formatter = StringValueVisitor()
            resetter = ResetVisitor()
            for name, metric in registry.metric_group().items():
                formatter.metric_name = name
                metric.accept(formatter)
                metric.accept(resetter)
            self._file.write(f"{timestamp}{formatter.result()}\n")
            self._file.flush()

    def enable_auto_write(self, registry: Registry, interval: float) -> None:
        """Write ``registry`` every ``interval`` seconds in the background.

        Does nothing if background writing is already running.
        """
        if interval <= 0:
            raise ValueError("interval must be positive")
        if self._worker is not None and self._worker.is_alive():
            return
        self._stop = threading.Event()
        self._worker = threading.Thread(
            target=_auto_write,
            args=(weakref.ref(self), registry, float(interval), self._stop),
            daemon=True,
        )
        self._worker.start()

    def disable_auto_write(self) -> None:
        """Stop background writing and wait for it to finish."""
        self._stop.set()
        worker, self._worker = self._worker, None
        if worker is not None and worker is not threading.current_thread():
            worker.join()

    def reset(self) -> None:
        """Stop background writing and close the file."""
        self.disable_auto_write()
        with self._lock:
            if not self._file.closed:
                self._file.close()

    def __enter__(self) -> Dumper:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.reset()