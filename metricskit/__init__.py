"""Thread-safe counters, gauges, a metric registry and a periodic file dumper."""

__version__ = "0.1.0"
__all__ = ["metrics", "visitors", "registry", "dumper", "demo"]