from complexlib.binary import read_complex, read_from_file, write_complex, write_to_file
from complexlib.complex import (
    IMAGINARY_UNIT,
    Complex,
    add,
    conjugate,
    divide,
    equals,
    from_polar,
    from_real,
    magnitude,
    multiply,
    negate,
    phase,
    subtract,
)
from complexlib.errors import ArgumentError, ComplexError, FormatError
from complexlib.functions import acos, cos, exp, log, pow, sqrt
from complexlib.text import format, parse, try_parse

__version__ = "0.1.0"

__all__ = [
    "IMAGINARY_UNIT",
    "ArgumentError",
    "Complex",
    "ComplexError",
    "FormatError",
    "acos",
    "add",
    "conjugate",
    "cos",
    "divide",
    "equals",
    "exp",
    "format",
    "from_polar",
    "from_real",
    "log",
    "magnitude",
    "multiply",
    "negate",
    "parse",
    "phase",
    "pow",
    "read_complex",
    "read_from_file",
    "sqrt",
    "subtract",
    "try_parse",
    "write_complex",
    "write_to_file",
]
