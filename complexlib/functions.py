"""
Elementary functions of a complex argument.

Every function is composed from polar conversion and the arithmetic of
`Complex`; branch choices follow atan2, so results lie on the principal
branch. Scalar math runs on numpy float64 so that overflow and log(0)
give Inf/NaN rather than raising.
"""
import math

import numpy as np

from complexlib.complex import IMAGINARY_UNIT, Complex, _promote


def _real_exp(x: float) -> float:
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.exp(x))


def _real_log(x: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.log(x))


def sqrt(c) -> Complex:
    c = _promote(c)
    return Complex.from_polar(math.sqrt(c.magnitude), .5 * c.phase)


def exp(c) -> Complex:
    c = _promote(c)
    return Complex.from_polar(_real_exp(c.real), c.imaginary)


def log(c) -> Complex:
    """Natural logarithm; log(0) has a real part of -inf."""
    c = _promote(c)
    return _real_log(c.magnitude) + IMAGINARY_UNIT * c.phase


def pow(value, power) -> Complex:
    """
    Raise `value` to a complex `power`.

    A zero base short-circuits to exactly 0 so that log(0) is never taken.
    """
    value, power = _promote(value), _promote(power)
    if value.magnitude == 0:
        return Complex(0.0, 0.0)
    return exp((_real_log(value.magnitude) + value.phase * IMAGINARY_UNIT) * power)


def cos(c) -> Complex:
    e = exp(IMAGINARY_UNIT * _promote(c))
    return .5 * (e + 1 / e)


def acos(c) -> Complex:
    c = _promote(c)
    e = c + sqrt(c * c - 1)
    return log(e) / IMAGINARY_UNIT
