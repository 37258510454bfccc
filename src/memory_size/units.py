from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

SizeSystem = Literal["binary", "decimal"]


@dataclass(frozen=True, slots=True)
class Unit:
    """一个以字节为基准的命名单位。

    - `name`: 单位名（例如 "kibibyte"）
    - `symbol`: 缩写（例如 "KiB"）
    - `singular` / `plural`: 数值恰好为 1 时与其余情况使用的单词
    - `factor`: 每单位的字节数
    """

    name: str
    symbol: str
    singular: str
    plural: str
    factor: int


BYTE = Unit("byte", "B", "byte", "bytes", 1)

KIBIBYTE = Unit("kibibyte", "KiB", "kibibyte", "kibibytes", 1024)
MEBIBYTE = Unit("mebibyte", "MiB", "mebibyte", "mebibytes", 1024**2)
GIBIBYTE = Unit("gibibyte", "GiB", "gibibyte", "gibibytes", 1024**3)
TEBIBYTE = Unit("tebibyte", "TiB", "tebibyte", "tebibytes", 1024**4)
PEBIBYTE = Unit("pebibyte", "PiB", "pebibyte", "pebibytes", 1024**5)

KILOBYTE = Unit("kilobyte", "KB", "kilobyte", "kilobytes", 1000)
MEGABYTE = Unit("megabyte", "MB", "megabyte", "megabytes", 1000**2)
GIGABYTE = Unit("gigabyte", "GB", "gigabyte", "gigabytes", 1000**3)
TERABYTE = Unit("terabyte", "TB", "terabyte", "terabytes", 1000**4)
PETABYTE = Unit("petabyte", "PB", "petabyte", "petabytes", 1000**5)


@dataclass(frozen=True, slots=True)
class UnitLadder:
    """从小到大排列的单位序列，用于挑选展示单位。

    第 i 个单位必须恰好是 `base ** i` 字节，第 0 个单位是 `BYTE`。
    """

    name: str
    base: int
    units: tuple[Unit, ...]

    def __post_init__(self) -> None:
        if self.base < 2:
            raise ValueError(f"Ladder base must be at least 2, got {self.base}")
        if not self.units:
            raise ValueError("Ladder must contain at least one unit")

        for index, unit in enumerate(self.units):
            if unit.factor != self.base**index:
                raise ValueError(
                    f"Unit {unit.symbol} has factor {unit.factor}, "
                    f"expected {self.base}**{index} in ladder {self.name!r}"
                )

    @property
    def largest(self) -> Unit:
        return self.units[-1]

    @property
    def limit(self) -> int:
        """第一个无法用本阶梯展示的字节数。"""
        return self.largest.factor * self.base

    def up_to(self, unit: Unit) -> UnitLadder:
        """截断到 `unit`（含）为止，返回新的阶梯。"""
        if unit not in self.units:
            raise ValueError(f"Unit {unit.symbol} is not part of ladder {self.name!r}")

        end = self.units.index(unit) + 1
        return UnitLadder(
            name=f"{self.name}<={unit.symbol}",
            base=self.base,
            units=self.units[:end],
        )

    def select(self, num_bytes: int) -> Unit:
        """返回使 `num_bytes >= factor` 成立的最大单位。"""
        selected = self.units[0]
        for unit in self.units[1:]:
            if num_bytes < unit.factor:
                break
            selected = unit
        return selected


BINARY_LADDER = UnitLadder(
    name="binary",
    base=1024,
    units=(BYTE, KIBIBYTE, MEBIBYTE, GIBIBYTE, TEBIBYTE, PEBIBYTE),
)

DECIMAL_LADDER = UnitLadder(
    name="decimal",
    base=1000,
    units=(BYTE, KILOBYTE, MEGABYTE, GIGABYTE, TERABYTE, PETABYTE),
)

_LADDERS: dict[str, UnitLadder] = {
    "binary": BINARY_LADDER,
    "decimal": DECIMAL_LADDER,
}


def resolve_ladder(ladder: UnitLadder | SizeSystem) -> UnitLadder:
    if isinstance(ladder, UnitLadder):
        return ladder

    try:
        return _LADDERS[ladder]
    except KeyError:
        raise ValueError(
            f"Unknown size system {ladder!r}, expected one of {sorted(_LADDERS)}"
        ) from None
