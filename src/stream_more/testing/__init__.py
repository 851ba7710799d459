"""Helpers for testing code that consumes or adapts streams."""

from .streams import END, PENDING, GatedStream, ScriptedStream

__all__ = [
    "END",
    "PENDING",
    "GatedStream",
    "ScriptedStream",
]
