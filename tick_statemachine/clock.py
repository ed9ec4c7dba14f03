"""Time sources used to stamp state entry and evaluate elapsed-time guards."""
from __future__ import annotations

import time
from typing import Protocol


class TimeSource(Protocol):
    def now(self) -> float: ...


class ManualClock:
    """Simulated time, moved forward explicitly by the host or a test."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError("seconds must be non-negative")
        self._now += seconds
        return self._now

    def set(self, t: float) -> None:
        if t < self._now:
            raise ValueError(f"Clock cannot move backwards ({t} < {self._now})")
        self._now = t


class TickClock:
    """Fixed-timestep clock. Time is ``tick_number * dt``."""

    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def now(self) -> float:
        return self._tick_number * self._dt

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number


class MonotonicClock:
    """Wall-clock seconds since construction."""

    def __init__(self) -> None:
        self._origin = time.monotonic()

    def now(self) -> float:
        return time.monotonic() - self._origin
