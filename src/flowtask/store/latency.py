# src/flowtask/store/latency.py

"""
Simulated network latency.

Services await `latency.wait()` before every operation. The delay only affects
timing: results are the same with NoLatency (used by tests and by
FLOWTASK_LATENCY_MS=0).
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from ..core.ports import Latency

DEFAULT_LATENCY_MS = 300


@dataclass(frozen=True, slots=True)
class FixedLatency:
    seconds: float = DEFAULT_LATENCY_MS / 1000.0

    def __post_init__(self) -> None:
        if self.seconds < 0:
            raise ValueError("latency must be >= 0")

    async def wait(self) -> None:
        await asyncio.sleep(self.seconds)


class NoLatency:
    async def wait(self) -> None:
        return


def latency_from_ms(ms: int) -> Latency:
    if ms <= 0:
        return NoLatency()
    return FixedLatency(seconds=ms / 1000.0)
