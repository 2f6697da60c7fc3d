"""Numerical helpers: differentiation, random variates and root finding by inversion."""

from __future__ import annotations

import math
import random
from collections.abc import Callable
from typing import Any

from .bessel import bessel_i
from .exceptions import BadAccessError, NonCentralChi2Error

INF = math.inf
MAXD = 1e8

_DIFF_STEP = 0.01
_SLOPE_FLOOR = 1e-3
_STEP_TOL = 0.001
_MAX_ITERATIONS = 1_000_000

_rng = random.Random()


def seed(value: Any = None) -> None:
    """Seed the generator behind every random draw in this module."""
    _rng.seed(value)


def modified_bessel_i(v: complex, x: float) -> complex:
    """Modified Bessel function of the first kind I_v(x) for a real argument x."""
    if isinstance(x, complex):
        raise BadAccessError("modified Bessel function needs a real argument")
    return bessel_i(v, x)


def diff(f: Callable[[float], float], x: float, dx: float) -> float:
    """Central difference estimate of f'(x)."""
    return (f(x + dx) - f(x - dx)) / (2.0 * dx)


def numerical_diff(f: Callable[[float], Any], x: float, dx: float) -> Any:
    """Central difference estimate of f'(x) for a real or complex valued f."""
    return (f(x + dx) - f(x - dx)) / (2.0 * dx)


def numerical_diff2(f: Callable[[float], Any], x: float, dx: float) -> Any:
    """Central difference estimate of f''(x) for a real or complex valued f."""
    return (f(x - dx) - 2.0 * f(x) + f(x + dx)) / (dx * dx)


def normal_rnd(mean: float, std: float) -> float:
    """Draw from a normal distribution with the given mean and standard deviation."""
    return _rng.gauss(mean, std)


def chi2_rnd(delta: float) -> float:
    """Draw from a chi-squared distribution with ``delta`` degrees of freedom."""
    return _rng.gammavariate(0.5 * delta, 2.0)


def nc_chi2_rnd(delta: float, lam: float) -> float:
    """Draw from a non-central chi-squared distribution.

    Raises NonCentralChi2Error unless ``delta > 1`` and ``lam >= 0``.
    """
    if delta <= 1.0:
        raise NonCentralChi2Error()
    if lam < 0.0:
        raise NonCentralChi2Error()
    y = chi2_rnd(delta - 1.0)
    z = normal_rnd(math.sqrt(lam), 1.0)
    return y + z * z


def uni_rnd(a: float, b: float) -> float:
    """Draw uniformly from [a, b)."""
    return _rng.random() * (b - a) + a


def sgn(x: float) -> float:
    """Sign of x as -1.0, 0.0 or 1.0."""
    if x > 0.0:
        return 1.0
    if x == 0.0:
        return 0.0
    return -1.0


def asmax(x: float, tol: float) -> float:
    """x itself if its magnitude exceeds tol, otherwise tol with the sign of x."""
    if abs(x) > tol:
        return x
    return sgn(x) * tol


def _ieee_div(num: float, den: float) -> float:
    if den != 0.0:
        return num / den
    if num == 0.0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def rvs(
    f: Callable[[float], float],
    x: float,
    eta: float = 1.0,
    b1: float = -MAXD,
    b2: float = MAXD,
    initial: float | None = None,
) -> float:
    """Find z in [b1, b2] with f(z) = x by damped Newton steps.

    ``eta`` is the step scale. Steps leaving the bounds are replaced by a
    uniform draw between the current point and the bound. Without an
    ``initial`` guess, one is drawn uniformly from [b1, b2].
    """
    if not b2 > b1:
        raise ValueError(f"upper bound {b2} must exceed lower bound {b1}")
    if not eta > 0:
        raise ValueError(f"eta must be positive, got {eta}")
    a0 = uni_rnd(b1, b2) if initial is None else initial
    num = 0
    while True:
        slope = asmax(diff(f, a0, _DIFF_STEP), _SLOPE_FLOOR)
        a1 = a0 - eta * _ieee_div(f(a0) - x, slope)
        if a1 < b1:
            a1 = uni_rnd(b1, a0)
        elif a1 > b2:
            a1 = uni_rnd(a0, b2)
        delta = a1 - a0
        a0 = a1
        num += 1
        if num > 19:
            eta *= 1.001
        if num % 17 == 0:
            eta *= 1.005
        if num % 13 == 0:
            eta *= 0.999
        if not (abs(delta) > _STEP_TOL and num < _MAX_ITERATIONS):
            return a0