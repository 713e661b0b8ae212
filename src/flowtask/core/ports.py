# src/flowtask/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the services and the view layer.

Services depend on these Protocols instead of concrete clocks/id generators/delays.
This keeps the simulated latency swappable (zero-delay in tests) and makes
timestamps and ids deterministic under test.
"""

from datetime import datetime
from typing import Protocol


class Latency(Protocol):
    """Simulated I/O delay awaited before every service operation."""
    async def wait(self) -> None: ...


class Clock(Protocol):
    def __call__(self) -> datetime: ...


class IdFactory(Protocol):
    def __call__(self) -> str: ...

