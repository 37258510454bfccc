from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field, replace

from .errors import SizeOverflowError, UnsupportedRangeError
from .protocol import SupportsByteCount
from .units import (
    BINARY_LADDER,
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

logger = logging.getLogger(__name__)

MAX_BYTES = 2**64 - 1


def _check_count(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{what} must be non-negative, got {value}")
    return value


def _warn_legacy(old: str, new: str) -> None:
    warnings.warn(
        f"MemorySize.{old} treats a kilobyte as 1024 bytes; use MemorySize.{new} instead",
        DeprecationWarning,
        stacklevel=3,
    )


@dataclass(frozen=True, slots=True, order=True)
class MemorySize:
    """强类型的内存大小（字节数）。

    - `bytes`: 字节数，范围 `[0, MAX_BYTES]`
    - `ladder`: `str()` 使用的单位阶梯；不参与比较与哈希

    实例不可变，所有换算都返回新值或整数。

    `str()` 超出阶梯最大单位时退回原始字节数（例如 "4611686018427387904 B"），
    需要严格报错时直接调用 `format_size`。
    """

    bytes: int
    ladder: UnitLadder = field(default=BINARY_LADDER, compare=False, repr=False)

    def __post_init__(self) -> None:
        num_bytes = _check_count(self.bytes, "Byte count")
        if num_bytes > MAX_BYTES:
            logger.debug("Rejecting byte count %d above MAX_BYTES", num_bytes)
            raise SizeOverflowError(num_bytes)

        object.__setattr__(self, "ladder", resolve_ladder(self.ladder))

    # --- 构造 ---

    @classmethod
    def from_bytes(cls, num_bytes: int) -> MemorySize:
        return cls(num_bytes)

    @classmethod
    def from_unit(cls, count: int, unit: Unit) -> MemorySize:
        """按 `count * unit.factor` 构造；超出 64 位范围时抛出 `SizeOverflowError`。"""
        count = _check_count(count, "Unit count")

        num_bytes = count * unit.factor
        if num_bytes > MAX_BYTES:
            logger.debug("Overflow converting %d %s to bytes", count, unit.plural)
            raise SizeOverflowError(count, unit.factor)

        return cls(num_bytes)

    @classmethod
    def coerce(cls, value: int | SupportsByteCount) -> MemorySize:
        """把整数或任何实现了 `as_bytes()` 的对象转换为 `MemorySize`。"""
        if isinstance(value, MemorySize):
            return value
        if isinstance(value, SupportsByteCount):
            return cls(value.as_bytes())
        return cls(value)

    @classmethod
    def from_kibibytes(cls, count: int) -> MemorySize:
        return cls.from_unit(count, KIBIBYTE)

    @classmethod
    def from_mebibytes(cls, count: int) -> MemorySize:
        return cls.from_unit(count, MEBIBYTE)

    @classmethod
    def from_gibibytes(cls, count: int) -> MemorySize:
        return cls.from_unit(count, GIBIBYTE)

    @classmethod
    def from_tebibytes(cls, count: int) -> MemorySize:
        return cls.from_unit(count, TEBIBYTE)

    @classmethod
    def from_pebibytes(cls, count: int) -> MemorySize:
        return cls.from_unit(count, PEBIBYTE)

    @classmethod
    def from_kilobytes(cls, count: int) -> MemorySize:
        return cls.from_unit(count, KILOBYTE)

    @classmethod
    def from_megabytes(cls, count: int) -> MemorySize:
        return cls.from_unit(count, MEGABYTE)

    @classmethod
    def from_gigabytes(cls, count: int) -> MemorySize:
        return cls.from_unit(count, GIGABYTE)

    @classmethod
    def from_terabytes(cls, count: int) -> MemorySize:
        return cls.from_unit(count, TERABYTE)

    @classmethod
    def from_petabytes(cls, count: int) -> MemorySize:
        return cls.from_unit(count, PETABYTE)

    # 旧版本里 "kilobyte" 表示 1024 字节，保留这些别名以兼容旧调用方
    @classmethod
    def from_legacy_kilobytes(cls, count: int) -> MemorySize:
        _warn_legacy("from_legacy_kilobytes", "from_kibibytes")
        return cls.from_unit(count, KIBIBYTE)

    @classmethod
    def from_legacy_megabytes(cls, count: int) -> MemorySize:
        _warn_legacy("from_legacy_megabytes", "from_mebibytes")
        return cls.from_unit(count, MEBIBYTE)

    @classmethod
    def from_legacy_gigabytes(cls, count: int) -> MemorySize:
        _warn_legacy("from_legacy_gigabytes", "from_gibibytes")
        return cls.from_unit(count, GIBIBYTE)

    # --- 换算 ---

    def as_bytes(self) -> int:
        return self.bytes

    def as_unit(self, unit: Unit) -> int:
        """返回完整单位的个数（向下取整），不足一个单位时为 0。"""
        return self.bytes // unit.factor

    def as_kibibytes(self) -> int:
        return self.as_unit(KIBIBYTE)

    def as_mebibytes(self) -> int:
        return self.as_unit(MEBIBYTE)

    def as_gibibytes(self) -> int:
        return self.as_unit(GIBIBYTE)

    def as_tebibytes(self) -> int:
        return self.as_unit(TEBIBYTE)

    def as_pebibytes(self) -> int:
        return self.as_unit(PEBIBYTE)

    def as_kilobytes(self) -> int:
        return self.as_unit(KILOBYTE)

    def as_megabytes(self) -> int:
        return self.as_unit(MEGABYTE)

    def as_gigabytes(self) -> int:
        return self.as_unit(GIGABYTE)

    def as_terabytes(self) -> int:
        return self.as_unit(TERABYTE)

    def as_petabytes(self) -> int:
        return self.as_unit(PETABYTE)

    def as_legacy_kilobytes(self) -> int:
        _warn_legacy("as_legacy_kilobytes", "as_kibibytes")
        return self.as_unit(KIBIBYTE)

    def as_legacy_megabytes(self) -> int:
        _warn_legacy("as_legacy_megabytes", "as_mebibytes")
        return self.as_unit(MEBIBYTE)

    def as_legacy_gigabytes(self) -> int:
        _warn_legacy("as_legacy_gigabytes", "as_gibibytes")
        return self.as_unit(GIBIBYTE)

    def with_ladder(self, ladder: UnitLadder | SizeSystem) -> MemorySize:
        return replace(self, ladder=resolve_ladder(ladder))

    def __int__(self) -> int:
        return self.bytes

    def __index__(self) -> int:
        return self.bytes

    def __str__(self) -> str:
        from .size_format import format_size

        try:
            return format_size(self, ladder=self.ladder)
        except UnsupportedRangeError:
            return f"{self.bytes} B"
