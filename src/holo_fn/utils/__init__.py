"""Composition and debugging helpers."""

from .debug import inspect, tap
from .pipe import pipe

__all__ = ["inspect", "pipe", "tap"]
