import math
import numbers

import numpy as np


class Complex:
    """
    An immutable complex number held as two double-precision components.

    Constructors
    ------------
    Complex(re, im)                  -> re + im i        (rectangular)
    Complex.from_real(d)             -> d + 0 i
    Complex.from_polar(r, theta)     -> r·e^{iθ}         (polar)

    Plain real numbers mix freely with Complex operands: they are promoted
    through `from_real` by every operator and named function.
    Non-finite components are never rejected; Inf and NaN propagate the
    way IEEE-754 arithmetic dictates.
    """

    __slots__ = ("_re", "_im")

    # ---------- construction ----------
    def __init__(self, real: float = 0.0, imaginary: float = 0.0):
        self._re = float(real)
        self._im = float(imaginary)

    @classmethod
    def from_real(cls, d: float) -> "Complex":
        return cls(d, 0.0)

    @classmethod
    def from_polar(cls, magnitude: float, phase: float) -> "Complex":
        """Explicit polar constructor."""
        with np.errstate(invalid="ignore"):
            cos, sin = float(np.cos(phase)), float(np.sin(phase))
        return cls(magnitude * cos, magnitude * sin)

    # ---------- basic properties ----------
    @property
    def real(self) -> float:
        return self._re

    @property
    def imaginary(self) -> float:
        return self._im

    @property
    def magnitude(self) -> float:
        return math.sqrt(self._re * self._re + self._im * self._im)

    @property
    def phase(self) -> float:
        """Angle in radians, in (-π, π]."""
        return math.atan2(self._im, self._re)

    def conjugate(self) -> "Complex":
        return Complex(self._re, -self._im)

    # ---------- arithmetic ----------
    def __neg__(self) -> "Complex":
        return Complex(-self._re, -self._im)

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Complex(self._re + other._re, self._im + other._im)

    __radd__ = __add__

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other + (-self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Complex(self._re * other._re - self._im * other._im,
                       self._re * other._im + self._im * other._re)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _divide(self, other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _divide(other, self)

    def __pow__(self, power):
        from complexlib import functions

        power = _coerce(power)
        if power is None:
            return NotImplemented
        return functions.pow(self, power)

    def __rpow__(self, value):
        from complexlib import functions

        value = _coerce(value)
        if value is None:
            return NotImplemented
        return functions.pow(value, self)

    __invert__ = conjugate

    def __abs__(self) -> float:
        return self.magnitude

    # ---------- comparison ----------
    def __eq__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._re == other._re and self._im == other._im

    def __hash__(self):
        # a promoted real must hash like the real it came from
        if self._im == 0:
            return hash(self._re)
        return hash((self._re, self._im))

    # ---------- conversion ----------
    def __complex__(self) -> complex:
        return complex(self._re, self._im)

    def __repr__(self):
        return f"Complex({self._re!r}, {self._im!r})"

    def __str__(self):
        from complexlib import text

        return text.format(self)

    def __format__(self, spec: str) -> str:
        from complexlib import text

        return text.format(self, spec or None)

    def write_to_file(self, path) -> None:
        from complexlib import binary

        binary.write_to_file(self, path)


IMAGINARY_UNIT = Complex(0.0, 1.0)


def _coerce(value):
    if isinstance(value, Complex):
        return value
    if isinstance(value, numbers.Real):
        return Complex.from_real(value)
    return None


def _promote(value) -> Complex:
    result = _coerce(value)
    if result is None:
        raise TypeError(f"cannot use {type(value).__name__!r} as a Complex operand")
    return result


def _divide(c1: Complex, c2: Complex) -> Complex:
    # zero divisors yield Inf/NaN components instead of raising
    with np.errstate(divide="ignore", invalid="ignore"):
        temp = float(np.float64(1.0) / np.float64(c2.magnitude))
    return temp * temp * c1 * c2.conjugate()


# ---------- named API ----------
def from_real(d: float) -> Complex:
    return Complex.from_real(d)


def from_polar(magnitude: float, phase: float) -> Complex:
    return Complex.from_polar(magnitude, phase)


def magnitude(c) -> float:
    return _promote(c).magnitude


def phase(c) -> float:
    return _promote(c).phase


def negate(c) -> Complex:
    return -_promote(c)


def add(a, b) -> Complex:
    return _promote(a) + _promote(b)


def subtract(a, b) -> Complex:
    return add(a, negate(b))


def multiply(a, b) -> Complex:
    return _promote(a) * _promote(b)


def conjugate(c) -> Complex:
    return _promote(c).conjugate()


def divide(a, b) -> Complex:
    return _divide(_promote(a), _promote(b))


def equals(a, b) -> bool:
    return _promote(a) == _promote(b)


if __name__ == "__main__":
    from complexlib.text import parse

    z = parse("<3;4>")
    print(z, z.magnitude)                 # <3.0;4.0> 5.0
    print(~z, z * ~z)                     # conjugate, |z|² on the real axis
    print(parse(str(z / 7)) == z / 7)     # text round-trip is exact
    print(z / 0)                          # non-finite parts, no exception
