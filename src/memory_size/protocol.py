from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SupportsByteCount(Protocol):
    """任何能报告自身字节数的对象。"""

    def as_bytes(self) -> int: ...
