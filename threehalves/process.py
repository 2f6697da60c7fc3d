"""Base class for stochastic processes that simulate the underlying."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .arguments import Arguments
from .exceptions import BadAccessError

if TYPE_CHECKING:
    from .path import Path


class Process:
    """A process stepped in increments of ``dt``.

    ``loaded`` records whether the initial state has been taken from the
    arguments. Simulation is left to subclasses.
    """

    def __init__(self, dt: float) -> None:
        self.dt = float(dt)
        self.loaded = False

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> Process:
        """Build a process from the ``dt`` argument."""
        return cls(arguments["dt"])

    def validate(self) -> None:
        """Raise ValueError unless the step is positive."""
        if not self.dt > 0.0:
            raise ValueError(f"dt must be positive, got {self.dt}")

    def load(self, arguments: Arguments) -> None:
        """Take the initial state from ``arguments``."""
        raise BadAccessError("process cannot load an initial state")

    def simulate(self) -> float:
        """Simulate the value one step ahead."""
        raise BadAccessError("process cannot simulate")

    def simulate_with(self, arguments: Arguments) -> float:
        """Load from ``arguments``, simulate one step and store it as ``ST``."""
        raise BadAccessError("process cannot simulate")

    def simulate_path(self, arguments: Arguments) -> Path:
        """Simulate a whole path up to ``T`` and store it as ``path``."""
        raise BadAccessError("process cannot simulate a path")