from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from .errors import UnsupportedRangeError
from .protocol import SupportsByteCount
from .size import MemorySize
from .units import SizeSystem, Unit, UnitLadder, resolve_ladder

logger = logging.getLogger(__name__)

SizeStyle = Literal["symbol", "name"]


@dataclass(frozen=True, slots=True)
class SizeParts:
    """人类可读的大小表示。

    - `bytes`: 原始字节数
    - `value`: 换算后的数值（已按选择的单位缩放）
    - `unit`: 选中的单位
    """

    bytes: int
    value: float
    unit: Unit


def to_size_parts(
    size: MemorySize | SupportsByteCount | int,
    *,
    ladder: UnitLadder | SizeSystem = "binary",
    exact: bool = False,
) -> SizeParts:
    """将字节数转换为“合适”的数值与单位。

    选择规则：取阶梯中满足 `bytes >= factor` 的最大单位；不足 1 个非字节单位时使用 B。

    参数：
    - `size`: `MemorySize`、整数或任何实现了 `as_bytes()` 的对象
    - `ladder`:
        - "binary": 1024 进制（KiB/MiB/...）
        - "decimal": 1000 进制（KB/MB/...）
        - 或自定义的 `UnitLadder`
    - `exact`: True 时向下取整为整数个单位，False 时保留小数

    超出阶梯最大单位时抛出 `UnsupportedRangeError`，而不是截断。
    """

    num_bytes = MemorySize.coerce(size).as_bytes()
    resolved = resolve_ladder(ladder)

    if num_bytes >= resolved.limit:
        logger.debug("%d bytes is beyond the %r ladder", num_bytes, resolved.name)
        raise UnsupportedRangeError(num_bytes, resolved)

    unit = resolved.select(num_bytes)

    if exact or unit.factor == 1:
        value = float(num_bytes // unit.factor)
    else:
        value = num_bytes / unit.factor

    return SizeParts(bytes=num_bytes, value=value, unit=unit)


def _render_number(parts: SizeParts, exact: bool, decimals: int) -> str:
    if exact or parts.unit.factor == 1:
        return str(int(parts.value))

    # 整数运算向零截断，1023.9999 MiB 不会进位成 1024 MiB
    scale = 10**decimals
    whole, fraction = divmod(parts.bytes * scale // parts.unit.factor, scale)
    if decimals == 0:
        return str(whole)

    # 去掉多余的 0（例如 13.000 MiB -> 13 MiB）
    return f"{whole}.{fraction:0{decimals}d}".rstrip("0").rstrip(".")


def format_size(
    size: MemorySize | SupportsByteCount | int,
    *,
    ladder: UnitLadder | SizeSystem = "binary",
    style: SizeStyle = "symbol",
    exact: bool = False,
    decimals: int = 3,
    sep: str = " ",
) -> str:
    """将字节数格式化为字符串，例如 "3.251 KiB" 或 "13 bytes"。

    小数部分向零截断到 `decimals` 位，略小于单位边界的值不会显示成下一个单位的整数。

    `style="name"` 时，数值恰好为 "1" 使用单数单词，其余（包括 0）使用复数。
    """

    if style not in ("symbol", "name"):
        raise ValueError(f"Unknown size style {style!r}, expected 'symbol' or 'name'")
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    parts = to_size_parts(size, ladder=ladder, exact=exact)
    text = _render_number(parts, exact, decimals)

    if style == "symbol":
        label = parts.unit.symbol
    elif text == "1":
        label = parts.unit.singular
    else:
        label = parts.unit.plural

    return f"{text}{sep}{label}"
