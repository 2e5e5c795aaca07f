"""A short demonstration of shared metrics, the registry and the dumper."""

from __future__ import annotations

import argparse
import sys
import time
from os import PathLike
from typing import TextIO, Union

from .dumper import Dumper
from .metrics import Counter, Gauge
from .registry import Registry, get_registry


def run_demo(
    filename: Union[str, PathLike] = "example.txt",
    registry: Registry | None = None,
    duration: float = 4.0,
    interval: float = 1.0,
    out: TextIO | None = None,
) -> None:
    """Exercise the metrics and dump ``registry`` for ``duration`` seconds."""
    registry = registry if registry is not None else get_registry()
    out = out if out is not None else sys.stdout

    with Dumper(filename) as dumper:
        cnt1 = Counter(35)
        cnt2 = cnt1.share()

        cnt1.increment()
        print(cnt1.value(), cnt2.value(), file=out)

        cnt2.reset()
        print(cnt1.value(), cnt2.value(), file=out)

        cpu_utilization = Gauge(0.97)
        registry.add_metric("CPU", cpu_utilization)
        registry.add_metric("HTTP RPS", Counter(42))

        http_rps = registry.get_metric("HTTP RPS", Counter)
        http_rps += 20
        print(http_rps.value(), file=out)

        dumper.enable_auto_write(registry, interval)
        time.sleep(duration)


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration from the command line."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--output", default="example.txt", help="dump file")
    parser.add_argument(
        "--duration", type=float, default=4.0, help="seconds to keep dumping"
    )
    parser.add_argument(
        "--interval", type=float, default=1.0, help="seconds between dumps"
    )
    args = parser.parse_args(argv)
    if args.interval <= 0:
        parser.error("--interval must be positive")
    if args.duration < 0:
        parser.error("--duration must not be negative")
    run_demo(args.output, duration=args.duration, interval=args.interval)
    return 0


if __name__ == "__main__":
    sys.exit(main())