"""The 3/2 stochastic volatility model, simulated exactly step by step.

dS_t / S_t = r dt + sqrt(V_t) rho dW1_t + sqrt(V_t (1 - rho^2)) dW2_t
dV_t = kappa V_t (theta - V_t) dt + epsilon V_t^(3/2) dW1_t
"""

from __future__ import annotations

import cmath
import math

from .arguments import Arguments
from .exceptions import (
    NonCentralChi2Dead,
    NonCentralChi2Error,
    PathAbnormalError,
    ProcessNotLoadedError,
    RequiredArgumentMissing,
)
from .path import Path
from .process import Process
from .util import (
    modified_bessel_i,
    nc_chi2_rnd,
    normal_rnd,
    numerical_diff,
    numerical_diff2,
    rvs,
    uni_rnd,
)

_TWO_OVER_PI = 0.63661977236758134307553505349005744813783858296182579499066937623
_SERIES_TOL = 0.001570796326794896619231321691639751442098584699687552910487472296
_MAX_DRAW_ATTEMPTS = 100
_DEAD_AFTER = 98
_DIFF_STEP = 0.01


class ThreeHalvesProcess(Process):
    """Price and variance under the 3/2 model, stepped by ``dt``."""

    def __init__(
        self,
        r: float,
        rho: float,
        kappa: float,
        theta: float,
        epsilon: float,
        dt: float,
    ) -> None:
        super().__init__(dt)
        self.r = float(r)
        self.rho = float(rho)
        self.kappa = float(kappa)
        self.theta = float(theta)
        self.epsilon = float(epsilon)
        self.s0 = -1.0
        self.v0 = -1.0
        self.vt = -1.0
        self.validate()
        self.loaded = False
        self._post_update()

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> ThreeHalvesProcess:
        """Build from the model arguments; load ``S0`` and ``V0`` if present."""
        process = cls(
            arguments["r"],
            arguments["rho"],
            arguments["kappa"],
            arguments["theta"],
            arguments["epsilon"],
            arguments["dt"],
        )
        try:
            process.s0 = float(arguments["S0"])
            process.v0 = float(arguments["V0"])
            process.loaded = True
        except RequiredArgumentMissing:
            process.loaded = False
        process._post_update()
        return process

    @staticmethod
    def parameters() -> list[tuple[str, type]]:
        """Arguments this process needs, in the order they are asked for."""
        return [
            ("r", float),
            ("rho", float),
            ("kappa", float),
            ("theta", float),
            ("epsilon", float),
            ("dt", float),
            ("S0", float),
            ("V0", float),
        ]

    def validate(self) -> None:
        """Raise ValueError if a model parameter is out of range."""
        super().validate()
        if not self.r >= 0.0:
            raise ValueError(f"r must be non-negative, got {self.r}")
        if not -1.0 <= self.rho <= 1.0:
            raise ValueError(f"rho must lie in [-1, 1], got {self.rho}")
        if not self.kappa >= 0.0:
            raise ValueError(f"kappa must be non-negative, got {self.kappa}")
        if not self.theta >= 0.0:
            raise ValueError(f"theta must be non-negative, got {self.theta}")
        if not self.epsilon > 0.0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")

    def _post_update(self) -> None:
        t = self.dt
        kt = self.kappa * self.theta
        if kt == 0.0:
            raise ValueError("kappa * theta must be positive")
        eps2 = self.epsilon * self.epsilon
        self._eps2 = eps2
        self._p = -(2.0 * kt) / eps2
        self._nu = 2.0 * kt * (self.kappa + eps2) / (eps2 * kt) - 1.0
        self._big_delta = 0.25 * t * eps2
        self._delta = 4.0 * (eps2 + self.kappa) / eps2
        self._ektt = math.exp(kt * t)
        self._zp = eps2 * (self._ektt - 1.0) / (4.0 * kt)
        if self.loaded:
            self._x0 = 1.0 / self.v0 if self.v0 != 0.0 else math.inf
            self._lam = self._x0 / self._zp

    def load(self, arguments: Arguments) -> None:
        """Take the initial price ``S0`` and variance ``V0``."""
        self.s0 = float(arguments["S0"])
        self.v0 = float(arguments["V0"])
        self.loaded = True
        self._post_update()

    def _draw_chi2(self) -> float:
        for attempt in range(_MAX_DRAW_ATTEMPTS):
            try:
                return nc_chi2_rnd(self._delta, self._lam)
            except NonCentralChi2Error:
                if attempt >= _DEAD_AFTER:
                    raise NonCentralChi2Dead(self._delta, self._lam) from None
        raise NonCentralChi2Dead(self._delta, self._lam)

    def simulate(self) -> float:
        """Simulate the price one step ahead; the new variance is kept in ``vt``."""
        if self.s0 < 0.0 or self.v0 < 0.0 or not self.loaded:
            raise ProcessNotLoadedError()
        t = self.dt
        eps2 = self._eps2
        nu = self._nu
        x0 = self._x0

        z = self._draw_chi2()
        xt = z * self._zp / self._ektt
        self.vt = 1.0 / xt

        x = self._p * math.sqrt(xt * x0) / math.sinh(self._p * self._big_delta)
        scale = 1.0 / modified_bessel_i(abs(nu), x).real

        def phi(a: float) -> complex:
            order = cmath.sqrt(complex(nu * nu, -8.0 * a / eps2))
            return modified_bessel_i(order, x) * scale

        mu = (-1j * numerical_diff(phi, 0.0, _DIFF_STEP)).real
        sigma2 = (-numerical_diff2(phi, 0.0, _DIFF_STEP)).real - mu * mu
        sigma = math.sqrt(sigma2)
        upper = mu + 12.0 * sigma
        h = math.pi / upper

        def cdf(u: float) -> float:
            linear = h * u / math.pi
            total = 0.0
            i = 1.0
            while True:
                term = phi(h * i) / i
                total += math.sin(h * i * u) * term.real
                i += 1.0
                if not abs(term) / i > _SERIES_TOL:
                    break
            return linear + _TWO_OVER_PI * total

        integrated = rvs(cdf, uni_rnd(0.0, 1.0), 1.0, 0.0, upper, mu)
        k = (
            math.log(x0 / xt)
            + (self.kappa + 0.5 * eps2) * integrated
            - t * self.kappa * self.theta
        ) / self.epsilon

        m = math.log(self.s0) + self.r * t - 0.5 * integrated + self.rho * k
        s = (1.0 - self.rho * self.rho) * integrated
        return math.exp(normal_rnd(m, s))

    def simulate_with(self, arguments: Arguments) -> float:
        """Load from ``arguments``, simulate one step and store it as ``ST``."""
        self.load(arguments)
        result = self.simulate()
        arguments["ST"] = result
        return result

    def simulate_path(self, arguments: Arguments) -> Path:
        """Simulate step by step up to ``T``; store the path as ``path`` and its end as ``ST``."""
        s0_backup = self.s0
        v0_backup = self.v0
        st = self.s0
        vt = self.v0
        horizon = arguments["T"]
        values = [st]
        dt = self.dt
        tt = 0.0
        while tt <= horizon:
            arguments["S0"] = st
            arguments["V0"] = vt
            self.load(arguments)
            st = self.simulate()
            values.append(st)
            vt = self.vt
            if math.isnan(st) or math.isnan(vt):
                raise PathAbnormalError()
            tt += dt
        arguments["S0"] = s0_backup
        arguments["V0"] = v0_backup
        arguments["ST"] = st
        self.s0 = s0_backup
        self.v0 = v0_backup
        self._post_update()
        path = Path(0.0, dt, horizon, values)
        arguments["path"] = path
        return path