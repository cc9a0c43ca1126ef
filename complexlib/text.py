"""
Canonical text form of a complex number: ``<R;I>``.

R and I are the real and imaginary parts written as plain decimal numbers.
Without a format spec the numbers are written with ``repr(float)``, the
shortest text that reads back to the same double, so ``parse(format(c))``
gives back ``c`` exactly for every finite ``c``.
"""
import builtins
import locale
import logging
import math
from typing import Callable, Optional, Tuple

from complexlib.complex import IMAGINARY_UNIT, Complex
from complexlib.errors import ArgumentError, FormatError

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
OPEN      = "<"
SEPARATOR = ";"
CLOSE     = ">"

logger = logging.getLogger(__name__)

NumberProvider = Callable[[float, Optional[str]], str]


def _default_provider(value: float, fmt: Optional[str]) -> str:
    if fmt is None:
        return repr(value)
    return builtins.format(value, fmt)


def locale_provider(value: float, fmt: Optional[str]) -> str:
    """
    Format through the process locale (decimal point, grouping).

    `fmt` is a printf-style conversion without the leading '%', e.g. ".3f".
    """
    if fmt is None:
        return locale.str(value)
    return locale.format_string(f"%{fmt}", value, grouping=True)


def format(c: Complex, fmt: Optional[str] = None,
           provider: Optional[NumberProvider] = None) -> str:
    provider = provider or _default_provider
    return (OPEN + provider(c.real, fmt) + SEPARATOR
            + provider(c.imaginary, fmt) + CLOSE)


def _parse_number(text: str) -> float:
    try:
        return float(text)
    except ValueError as exc:
        raise FormatError(f"not a number: {text!r}") from exc


def parse(s: Optional[str]) -> Complex:
    """
    Read a complex number written as ``<R;I>``.

    Raises ArgumentError for None or an empty string and FormatError when
    the delimiters are missing or either part is not a number.
    """
    if s is None:
        raise ArgumentError("value cannot be None or empty")
    if not isinstance(s, str):
        raise FormatError(f"expected a string, got {type(s).__name__}")
    if not s:
        raise ArgumentError("value cannot be None or empty")
    if not s.startswith(OPEN) or not s.endswith(CLOSE) or SEPARATOR not in s:
        raise FormatError(f"expected {OPEN}real{SEPARATOR}imaginary{CLOSE}, got {s!r}")

    idx = s.index(SEPARATOR)
    real = _parse_number(s[len(OPEN):idx])
    imaginary = _parse_number(s[idx + len(SEPARATOR):len(s) - len(CLOSE)])
    return real + IMAGINARY_UNIT * imaginary


def try_parse(s: Optional[str]) -> Tuple[Complex, bool]:
    """Like `parse`, but reports failure as ``(Complex(nan, nan), False)``."""
    try:
        return parse(s), True
    except Exception as exc:
        logger.debug("could not parse %r: %s", s, exc)
        return Complex(math.nan, math.nan), False
