from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .units import UnitLadder


class MemorySizeError(Exception):
    """本包所有异常的基类。"""


class SizeOverflowError(MemorySizeError, OverflowError):
    """字节数超出 64 位无符号整数范围。

    - `count`: 原始数量（按 `factor` 缩放之前）
    - `factor`: 每单位字节数；直接构造字节数时为 1
    """

    def __init__(self, count: int, factor: int = 1) -> None:
        self.count = count
        self.factor = factor
        if factor == 1:
            message = f"Byte count {count} exceeds the 64-bit range"
        else:
            message = f"{count} x {factor} bytes exceeds the 64-bit range"
        super().__init__(message)


class UnsupportedRangeError(MemorySizeError, ValueError):
    """字节数超出单位阶梯能表示的最大单位。"""

    def __init__(self, num_bytes: int, ladder: UnitLadder) -> None:
        self.num_bytes = num_bytes
        self.ladder = ladder
        super().__init__(
            f"{num_bytes} bytes is too large for the {ladder.name!r} ladder "
            f"(largest unit: {ladder.largest.symbol})"
        )
