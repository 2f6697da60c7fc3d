"""Geometric Brownian motion for the underlying price."""

from __future__ import annotations

import math

from .arguments import Arguments
from .exceptions import ProcessNotLoadedError, RequiredArgumentMissing
from .process import Process
from .util import normal_rnd


class GeometricBrownianMotion(Process):
    """dS_t / S_t = mu dt + sigma dW_t, stepped by ``dt``."""

    def __init__(self, dt: float, mu: float, sigma: float) -> None:
        super().__init__(dt)
        self.mu = float(mu)
        self.sigma = float(sigma)
        self.s0: float | None = None

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> GeometricBrownianMotion:
        """Build from ``dt``, ``mu`` and ``sigma``; load ``S0`` if it is present."""
        process = cls(arguments["dt"], arguments["mu"], arguments["sigma"])
        try:
            process.load(arguments)
        except RequiredArgumentMissing:
            process.loaded = False
        return process

    @staticmethod
    def parameters() -> list[tuple[str, type]]:
        """Arguments this process needs, in the order they are asked for."""
        return [("mu", float), ("sigma", float), ("S0", float), ("dt", float)]

    def load(self, arguments: Arguments) -> None:
        """Take the initial price from ``S0``."""
        self.s0 = float(arguments["S0"])
        self.loaded = True

    def simulate(self) -> float:
        """Simulate the price one step of ``dt`` ahead."""
        if not self.loaded or self.s0 is None:
            raise ProcessNotLoadedError()
        t = self.dt
        drift = (self.mu - self.sigma * self.sigma / 2.0) * t
        return self.s0 * math.exp(drift + self.sigma * normal_rnd(0.0, t))

    def simulate_with(self, arguments: Arguments) -> float:
        """Load from ``arguments``, simulate one step and store it as ``ST``."""
        self.load(arguments)
        result = self.simulate()
        arguments["ST"] = result
        return result