"""Modified Bessel function of the first kind for complex order and real argument."""

from __future__ import annotations

import cmath
import math

from .exceptions import BesselInputError

_TOL = 1e-8
_SPOUGE_A = 11.0
_POWER_LIMIT = 200
_NO_MAGNITUDE = -400


def _gamma_spouge(x: complex) -> complex:
    """Gamma by Spouge's approximation: accurate but slow."""
    a = _SPOUGE_A
    es = (x - 1.0 + a) ** (x - 0.5) * cmath.exp(-x + 1.0 - a)
    pp = 0j
    for i in range(1, int(a) - 1):
        coeff = (-1.0) ** (i - 1) / math.gamma(i)
        pp += coeff * (a - i) ** (i - 0.5) * math.exp(a - i) / (x - 1.0 + i)
    return es * (math.sqrt(2.0 * math.pi) + pp)


def _gamma(x: complex) -> complex:
    """Gamma by Windschitl's formula, falling back to Spouge's where it fails."""
    try:
        inner = cmath.sqrt(x * cmath.sinh(1.0 / x) + 1.0 / (810.0 * x**6))
        res = cmath.sqrt(2.0 * math.pi / x) * (x / math.e * inner) ** x
    except (OverflowError, ZeroDivisionError, ValueError):
        return _gamma_spouge(x)
    if cmath.isnan(res):
        return _gamma_spouge(x)
    return res


def _gamma_ratio(z: complex, k: float) -> complex:
    """Approximate gamma(z) / gamma(z + k) without forming either factor."""
    rz = 1.0 / z
    p1 = cmath.sqrt((z + k) * rz)
    p2 = math.exp(k)
    p3 = ((z + k) * rz) ** (-z - k) * z ** (-k)
    p4 = 9.0**k * 10.0 ** (0.5 * k)
    p5 = (810.0 * z * cmath.sinh(rz) + 1.0) ** (0.5 * z)
    p6 = 1.0 / (k + z) ** 6.0
    p7 = (
        810.0 * k**7
        + 5670.0 * k**6 * z
        + 17010.0 * k**5 * z**2
        + 28350.0 * k**4 * z**3
        + 28350.0 * k**3 * z**4
        + 17010.0 * k**2 * z**5
        + 5670.0 * k * z**6
        + 810.0 * z**7
    )
    p8 = cmath.sinh(1.0 / (z + k))
    pdim = p6 * (p7 * p8 + 1.0)
    pdet = pdim ** (-0.5 * k)
    pdfe = pdim ** (-0.5 * z)
    return p1 * p2 * p3 * p4 * p5 * pdfe * pdet


def _magnitude(z: float) -> int:
    try:
        return int(math.log10(z))
    except (ValueError, OverflowError):
        return _NO_MAGNITUDE


def _power_times(z: float, k: float, m: complex, magz: int) -> complex:
    """m * z**k where z**k alone may overflow but the product does not."""
    if magz * k < _POWER_LIMIT:
        return (z**k) * m
    return _power_times(z, 0.5 * k, cmath.sqrt(m), int(magz * 0.5)) ** 2


def _series_term(a: complex, z: float, k: float, ga: complex, magz: int) -> complex:
    if magz * k >= _POWER_LIMIT:
        return _power_times(z, k, _gamma_ratio(a, k), magz) / math.gamma(k + 1.0)
    return (z**k / math.gamma(k + 1.0)) * (ga / _gamma(a + k))


def _hyper0f1(a: complex, z: float, ga: complex) -> complex:
    """Confluent hypergeometric limit function 0F1(; a; z), given ga = gamma(a)."""
    total = 0j
    term = complex(1.0 + _TOL)
    magz = _magnitude(z)
    k = 0.0
    while abs(term) > _TOL:
        try:
            term = _series_term(a, z, k, ga, magz)
        except OverflowError:
            # The remaining terms underflow to nothing.
            break
        total += term
        k += 1.0
    return total


def bessel_i(v: complex, x: float) -> complex:
    """Modified Bessel function of the first kind I_v(x)."""
    v = complex(v)
    x = float(x)
    try:
        ga = _gamma(v + 1.0)
    except (ZeroDivisionError, OverflowError) as exc:
        raise BesselInputError("v", v) from exc
    try:
        return (0.5 * x) ** v / ga * _hyper0f1(v + 1.0, 0.25 * x * x, ga)
    except ZeroDivisionError as exc:
        raise BesselInputError("v", v) from exc