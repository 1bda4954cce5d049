"""Run-time statistics collected in numbered slots for debugging."""

from __future__ import annotations

import math
import sys
import threading
from dataclasses import dataclass
from typing import TextIO

MAX_DEBUG_SLOTS = 32
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


@dataclass
class _Hit:
    total: int = 0
    hits: int = 0


@dataclass
class _Mean:
    total: int = 0
    sum: int = 0


@dataclass
class _Stdev:
    total: int = 0
    sum: int = 0
    sum_sq: int = 0


@dataclass
class _Extremes:
    total: int = 0
    max: int = _INT64_MIN
    min: int = _INT64_MAX


@dataclass
class _Correl:
    total: int = 0
    sum1: int = 0
    sum1_sq: int = 0
    sum2: int = 0
    sum2_sq: int = 0
    sum12: int = 0


def _fmt(x: float) -> str:
    return f"{x:g}"


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def _div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a)
    return a / b


class DebugStats:
    """Thread-safe counters for hit rates, means, deviations, extremes and correlations."""

    def __init__(self, slots: int = MAX_DEBUG_SLOTS) -> None:
        if slots <= 0:
            raise ValueError("slots must be positive")
        self.slots = slots
        self._lock = threading.Lock()
        self.clear()

    def _check(self, slot: int) -> int:
        if not 0 <= slot < self.slots:
            raise IndexError(f"debug slot {slot} out of range")
        return slot

    def hit_on(self, cond: bool, slot: int = 0) -> None:
        """Count one event, and one hit if cond is true."""
        entry = self._hit[self._check(slot)]
        with self._lock:
            entry.total += 1
            if cond:
                entry.hits += 1

    def mean_of(self, value: int, slot: int = 0) -> None:
        """Record a value towards a mean."""
        entry = self._mean[self._check(slot)]
        with self._lock:
            entry.total += 1
            entry.sum += value

    def stdev_of(self, value: int, slot: int = 0) -> None:
        """Record a value towards a standard deviation."""
        entry = self._stdev[self._check(slot)]
        with self._lock:
            entry.total += 1
            entry.sum += value
            entry.sum_sq += value * value

    def extremes_of(self, value: int, slot: int = 0) -> None:
        """Record a value towards a minimum and maximum."""
        entry = self._extremes[self._check(slot)]
        with self._lock:
            entry.total += 1
            entry.max = max(entry.max, value)
            entry.min = min(entry.min, value)

    def correl_of(self, value1: int, value2: int, slot: int = 0) -> None:
        """Record a pair of values towards a correlation coefficient."""
        entry = self._correl[self._check(slot)]
        with self._lock:
            entry.total += 1
            entry.sum1 += value1
            entry.sum1_sq += value1 * value1
            entry.sum2 += value2
            entry.sum2_sq += value2 * value2
            entry.sum12 += value1 * value2

    def report(self) -> list[str]:
        """Return one line for every slot that holds data, grouped by kind."""
        lines: list[str] = []
        with self._lock:
            for i, h in enumerate(self._hit):
                if h.total:
                    rate = 100.0 * h.hits / h.total
                    lines.append(
                        f"Hit #{i}: Total {h.total} Hits {h.hits} Hit Rate (%) {_fmt(rate)}"
                    )
            for i, m in enumerate(self._mean):
                if m.total:
                    lines.append(f"Mean #{i}: Total {m.total} Mean {_fmt(m.sum / m.total)}")
            for i, s in enumerate(self._stdev):
                if s.total:
                    n = s.total
                    r = _sqrt(s.sum_sq / n - (s.sum / n) ** 2)
                    lines.append(f"Stdev #{i}: Total {n} Stdev {_fmt(r)}")
            for i, e in enumerate(self._extremes):
                if e.total:
                    lines.append(f"Extremity #{i}: Total {e.total} Min {e.min} Max {e.max}")
            for i, c in enumerate(self._correl):
                if c.total:
                    n = c.total
                    mean1, mean2 = c.sum1 / n, c.sum2 / n
                    cov = c.sum12 / n - mean1 * mean2
                    spread = _sqrt(c.sum1_sq / n - mean1**2) * _sqrt(c.sum2_sq / n - mean2**2)
                    lines.append(f"Correl. #{i}: Total {n} Coefficient {_fmt(_div(cov, spread))}")
        return lines

    def print(self, stream: TextIO | None = None) -> None:
        """Write the report to stream, standard error by default."""
        out = sys.stderr if stream is None else stream
        for line in self.report():
            out.write(line + "\n")
        out.flush()

    def clear(self) -> None:
        """Reset every slot."""
        with self._lock:
            self._hit = [_Hit() for _ in range(self.slots)]
            self._mean = [_Mean() for _ in range(self.slots)]
            self._stdev = [_Stdev() for _ in range(self.slots)]
            self._extremes = [_Extremes() for _ in range(self.slots)]
            self._correl = [_Correl() for _ in range(self.slots)]