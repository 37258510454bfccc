from __future__ import annotations

import pytest

from memory_size import (
    BINARY_LADDER,
    BYTE,
    DECIMAL_LADDER,
    GIBIBYTE,
    KIBIBYTE,
    KILOBYTE,
    MEBIBYTE,
    PEBIBYTE,
    PETABYTE,
    Unit,
    UnitLadder,
    resolve_ladder,
)


def test_binary_ladder_factors_are_powers_of_1024() -> None:
    assert [u.factor for u in BINARY_LADDER.units] == [1024**i for i in range(6)]
    assert BINARY_LADDER.largest == PEBIBYTE


def test_decimal_ladder_factors_are_powers_of_1000() -> None:
    assert [u.factor for u in DECIMAL_LADDER.units] == [1000**i for i in range(6)]
    assert DECIMAL_LADDER.largest == PETABYTE


def test_ladder_limit_is_one_step_past_largest_unit() -> None:
    assert BINARY_LADDER.limit == 1024**6
    assert DECIMAL_LADDER.limit == 1000**6


def test_resolve_ladder_by_name() -> None:
    assert resolve_ladder("binary") is BINARY_LADDER
    assert resolve_ladder("decimal") is DECIMAL_LADDER
    assert resolve_ladder(BINARY_LADDER) is BINARY_LADDER


def test_resolve_ladder_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unknown size system"):
        resolve_ladder("octal")  # type: ignore[arg-type]


def test_ladder_rejects_inconsistent_factor() -> None:
    bogus = Unit("kilobyte", "KB", "kilobyte", "kilobytes", 1000)
    with pytest.raises(ValueError, match="expected 1024"):
        UnitLadder(name="mixed", base=1024, units=(BYTE, bogus))


def test_ladder_rejects_base_below_two() -> None:
    with pytest.raises(ValueError, match="at least 2"):
        UnitLadder(name="unary", base=1, units=(BYTE,))


def test_ladder_rejects_empty_units() -> None:
    with pytest.raises(ValueError):
        UnitLadder(name="empty", base=1024, units=())


class TestUpTo:
    def test_truncates_at_unit(self) -> None:
        ladder = BINARY_LADDER.up_to(GIBIBYTE)
        assert ladder.units == (BYTE, KIBIBYTE, MEBIBYTE, GIBIBYTE)
        assert ladder.base == 1024
        assert ladder.limit == 1024**4

    def test_rejects_foreign_unit(self) -> None:
        with pytest.raises(ValueError, match="not part of ladder"):
            BINARY_LADDER.up_to(KILOBYTE)


class TestSelect:
    def test_below_first_unit_is_byte(self) -> None:
        assert BINARY_LADDER.select(0) == BYTE
        assert BINARY_LADDER.select(1023) == BYTE

    def test_exact_boundary_promotes(self) -> None:
        assert BINARY_LADDER.select(1024) == KIBIBYTE
        assert BINARY_LADDER.select(1024**2 - 1) == KIBIBYTE
        assert BINARY_LADDER.select(1024**2) == MEBIBYTE

    def test_decimal_boundary(self) -> None:
        assert DECIMAL_LADDER.select(999) == BYTE
        assert DECIMAL_LADDER.select(1000) == KILOBYTE
