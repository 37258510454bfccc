from __future__ import annotations

import logging

from .errors import MemorySizeError, SizeOverflowError, UnsupportedRangeError
from .protocol import SupportsByteCount
from .size import MAX_BYTES, MemorySize
from .size_format import SizeParts, SizeStyle, format_size, to_size_parts
from .units import (
    BINARY_LADDER,
    BYTE,
    DECIMAL_LADDER,
    GIBIBYTE,
    GIGABYTE,
    KIBIBYTE,
    KILOBYTE,
    MEBIBYTE,
    MEGABYTE,
    PEBIBYTE,
    PETABYTE,
    TEBIBYTE,
    TERABYTE,
    SizeSystem,
    Unit,
    UnitLadder,
    resolve_ladder,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "MAX_BYTES",
    "MemorySize",
    "SupportsByteCount",
    "MemorySizeError",
    "SizeOverflowError",
    "UnsupportedRangeError",
    "SizeParts",
    "SizeStyle",
    "format_size",
    "to_size_parts",
    "SizeSystem",
    "Unit",
    "UnitLadder",
    "resolve_ladder",
    "BINARY_LADDER",
    "DECIMAL_LADDER",
    "BYTE",
    "KIBIBYTE",
    "MEBIBYTE",
    "GIBIBYTE",
    "TEBIBYTE",
    "PEBIBYTE",
    "KILOBYTE",
    "MEGABYTE",
    "GIGABYTE",
    "TERABYTE",
    "PETABYTE",
]
