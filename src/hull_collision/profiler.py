# MIT License (see LICENSE)
"""
Lightweight timing of the GJK and EPA phases.

GjkAlgorithm accepts an optional Profiler and records one sample per phase
and query under the section names "gjk" and "epa".

Example:
    profiler = Profiler()
    algorithm = GjkAlgorithm(profiler=profiler)
    algorithm.intersect(hull_a, hull_b, Collision())
    print(profiler.stats.summary()["gjk"]["mean_ms"])
"""
from __future__ import annotations
import time
from dataclasses import dataclass, field


@dataclass
class ProfileStats:
    """Timing samples (seconds) per named section."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def reset(self) -> None:
        self.samples.clear()

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Summary statistics per section.

        Returns:
            Dict mapping section name to a dict with keys 'n', 'total_ms',
            'mean_ms', 'min_ms' and 'max_ms'.
        """
        out = {}
        for name, times in self.samples.items():
            total = sum(times)
            out[name] = {
                "n": len(times),
                "total_ms": 1e3 * total,
                "mean_ms": 1e3 * total / len(times),
                "min_ms": 1e3 * min(times),
                "max_ms": 1e3 * max(times),
            }
        return out


class _Section:
    """Context manager recording the wall time of its body into a ProfileStats."""

    def __init__(self, stats: ProfileStats, name: str) -> None:
        self._stats = stats
        self._name = name
        self._t0 = 0.0

    def __enter__(self) -> _Section:
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stats.add(self._name, time.perf_counter() - self._t0)


class Profiler:
    """
    Context-manager based profiler for timing code sections.

    Sections are recorded even when the timed block raises.
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    def section(self, name: str) -> _Section:
        """Return a context manager that times the enclosed code under `name`."""
        return _Section(self.stats, name)
