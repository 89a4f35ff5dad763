"""Metrics hooks for the parser and the retention selector.

The kit never talks to a metrics backend directly; callers inject a
MetricsHook and the no-op default keeps library use free of setup.
"""

from . import names
from .base import MetricsHook, NoOpMetricsHook

__all__ = [
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
