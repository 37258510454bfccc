from __future__ import annotations

from memory_size import (
    BINARY_LADDER,
    MemorySizeError,
    SizeOverflowError,
    UnsupportedRangeError,
)


def test_overflow_error_hierarchy() -> None:
    error = SizeOverflowError(3, 1024)
    assert isinstance(error, MemorySizeError)
    assert isinstance(error, OverflowError)
    assert "3 x 1024 bytes" in str(error)


def test_overflow_error_for_raw_bytes() -> None:
    error = SizeOverflowError(2**64)
    assert error.factor == 1
    assert str(error) == f"Byte count {2**64} exceeds the 64-bit range"


def test_unsupported_range_error_names_ladder() -> None:
    error = UnsupportedRangeError(2**60, BINARY_LADDER)
    assert isinstance(error, MemorySizeError)
    assert isinstance(error, ValueError)
    assert "'binary'" in str(error)
    assert "PiB" in str(error)
