"""Metrics hooks for chat completions and function execution."""

from . import names
from .base import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

__all__ = [
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
