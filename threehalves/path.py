"""A simulated price path with the statistics exotic options need."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from itertools import pairwise

from .arguments import Arguments

_INITIAL_MIN = 2147483647.0


class Path:
    """Values sampled every ``dt`` from ``start`` over ``horizon``."""

    def __init__(
        self, start: float, dt: float, horizon: float, values: Iterable[float]
    ) -> None:
        self.start = start
        self.dt = dt
        self.horizon = horizon
        self.values = tuple(values)

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> Path:
        """Build a path from the ``T``, ``dt`` and ``path`` arguments."""
        return cls(0.0, arguments["dt"], arguments["T"], arguments["path"])

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    @property
    def _count(self) -> float:
        return self.horizon / self.dt

    def arithmetic_avg(self) -> float:
        """Sum of the values divided by horizon / dt."""
        return math.fsum(self.values) / self._count

    def geometric_avg(self) -> float:
        """Product of the values raised to the power dt / horizon."""
        product = math.prod(self.values)
        if product == 0.0:
            return 0.0
        if product < 0.0 or math.isnan(product):
            return math.nan
        return math.exp(math.log(product) / self._count)

    def breaks_up(self, level: float) -> bool:
        """True if some step goes from above ``level`` to below it."""
        return any(a > level and b < level for a, b in pairwise(self.values))

    def breaks_down(self, level: float) -> bool:
        """True if some step goes from below ``level`` to above it."""
        return any(a < level and b > level for a, b in pairwise(self.values))

    def max(self) -> float:
        """Largest value, never less than zero."""
        best = 0.0
        for value in self.values:
            if value > best:
                best = value
        return best

    def min(self) -> float:
        """Smallest value, capped at 2147483647."""
        best = _INITIAL_MIN
        for value in self.values:
            if value < best:
                best = value
        return best

    def __str__(self) -> str:
        return "[" + "".join(f"{value:g}," for value in self.values) + "]"

    def __repr__(self) -> str:
        return (
            f"Path(start={self.start!r}, dt={self.dt!r}, "
            f"horizon={self.horizon!r}, values={list(self.values)!r})"
        )