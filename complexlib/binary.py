"""
Binary record of a complex number: two 8-byte IEEE-754 doubles, real
part first, then imaginary. No header, no length prefix.
"""
import logging
from pathlib import Path
from typing import BinaryIO, Union

import numpy as np

from complexlib.complex import Complex

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
BYTE_ORDER  = "<"                    # little-endian on every platform
RECORD      = np.dtype(BYTE_ORDER + "f8")
RECORD_SIZE = 2 * RECORD.itemsize    # 16 bytes

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def write_complex(writer: BinaryIO, c: Complex) -> None:
    writer.write(np.array([c.real, c.imaginary], dtype=RECORD).tobytes())


def read_complex(reader: BinaryIO) -> Complex:
    """Read one record; raises EOFError if fewer than 16 bytes remain."""
    raw = reader.read(RECORD_SIZE)
    if len(raw) < RECORD_SIZE:
        raise EOFError(f"expected {RECORD_SIZE} bytes, got {len(raw)}")
    re, im = np.frombuffer(raw, dtype=RECORD)
    return Complex(float(re), float(im))


def write_to_file(c: Complex, path: PathLike) -> None:
    """Create (or truncate) `path` and write `c` to it. OSError propagates."""
    path = Path(path)
    with path.open("wb") as fh:
        write_complex(fh, c)
    logger.debug("wrote %r to %s", c, path)


def read_from_file(path: PathLike) -> Complex:
    path = Path(path)
    with path.open("rb") as fh:
        c = read_complex(fh)
    logger.debug("read %r from %s", c, path)
    return c
