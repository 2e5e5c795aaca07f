# metricskit

Small, thread-safe metrics for Python programs. It provides counters and
gauges, a registry that holds them by name, and a dumper that writes
snapshots of a registry to a text file. The dumper can write once or
periodically from a background thread.

## Install

```
pip install .
```

To also install what the tests need:

```
pip install .[test]
```

## Metrics

```python
from metricskit.metrics import Counter, Gauge

requests = Counter(35)
alias = requests.share()      # both objects see the same value
requests.increment()
print(requests.value(), alias.value())   # 36 36

alias.reset()
print(requests.value())                  # 0

cpu = Gauge(0.97)
cpu += 0.01
cpu -= 0.5
```

A `Counter` holds an unsigned 64-bit integer:

- Adding wraps around at 2**64.
- Adding a negative amount raises `ValueError`.

A `Gauge` holds a float.

`share()` returns a second handle onto the same underlying value. Every
operation takes a lock, so handles can be used from several threads.

Both classes take a visitor through `accept(visitor)`. A visitor is any
subclass of `MetricsVisitor` that implements `visit_counter` and
`visit_gauge`. The `metricskit.visitors` module has three ready-made ones:

- `ValueVisitor` produces a shared handle of a given type.
- `ResetVisitor` resets whatever it visits.
- `StringValueVisitor` collects `"name" value` text.

## Registry

```python
from metricskit.metrics import Counter, Gauge
from metricskit.registry import get_registry, create_registry

registry = get_registry()            # process-wide registry
registry.add_metric("CPU", Gauge(0.97))
registry.add_metric("HTTP RPS", Counter(42))

rps = registry.get_metric("HTTP RPS", Counter)
rps += 20
print(rps.value())                   # 62

fresh = registry.get_metric("errors", Counter)   # created on first use, starts at 0
print(registry.metric_group().keys())
```

`add_metric` works as follows:

- It replaces any metric already stored under the same name.
- It raises `TypeError` for anything that is not a `Counter` or `Gauge`.

`get_metric` returns a handle that shares the stored value. If the stored
metric is of the other kind, it returns a fresh, unconnected metric of the
requested type.

`metric_group()` returns a snapshot dictionary. `create_registry()` gives
an independent registry, which is handy in tests.

## Dumping to a file

```python
from metricskit.dumper import Dumper

with Dumper("metrics.txt") as dumper:
    dumper.write(registry)                       # one line now
    dumper.enable_auto_write(registry, interval=1)
    ...                                          # a line every second
```

The file is opened for writing when the `Dumper` is created, which
truncates any existing content.

Each line starts with a local timestamp with milliseconds. Every metric
then follows as `"name" value`, for example:

```
2024-05-01 12:00:00.123 "CPU" 0.97 "HTTP RPS" 62
```

The timestamp format is available on its own as `current_timestamp()`.

Writing a snapshot resets every metric in the registry, so each line holds
what accumulated since the previous one.

Background writing:

- `enable_auto_write` requires a positive interval in seconds.
- It does nothing if background writing is already running.
- `disable_auto_write()` stops the background thread and waits for it.

Closing the file:

- `reset()` stops background writing and closes the file.
- Leaving the `with` block does the same.
- Writing after that raises `ValueError`.

## Demo

```
metricskit-demo
```

This runs a short demonstration. It prints a few counter values, then
dumps a registry to a file once per interval for a few seconds. The
options are:

- `--output` sets the file; the default is `example.txt`.
- `--duration` sets how long to keep dumping, in seconds; the default is 4.
- `--interval` sets the seconds between dumps; the default is 1.

The same demonstration can be run from Python with
`metricskit.demo.run_demo(...)`.

## What it does not do

metricskit only keeps values in memory and appends plain text lines to a
file. It does not serve metrics over the network. It does not export to
any monitoring system. It does not read dump files back in.