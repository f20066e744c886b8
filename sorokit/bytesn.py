"""A fixed-size array of bytes whose length is part of its value."""

from __future__ import annotations

from functools import total_ordering
from typing import Optional, Union

from .bytes import Bytes, BytesIter, BytesLike
from .errors import ConversionError

_PLAIN = (bytes, bytearray, memoryview)


def _raw(value: Union["BytesN", BytesLike]) -> bytes:
    if isinstance(value, BytesN):
        return value.to_bytes()
    if isinstance(value, Bytes):
        return value.to_bytes()
    if isinstance(value, int):
        raise TypeError("expected a sequence of bytes, not an integer")
    return bytes(value)


@total_ordering
class BytesN:
    """Contiguous array of exactly ``size`` bytes."""

    __slots__ = ("_size", "_inner")

    def __init__(self, size: int, data: Union["BytesN", BytesLike]) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        raw = _raw(data)
        if len(raw) != size:
            raise ConversionError(f"expected {size} bytes, got {len(raw)}")
        self._size = size
        self._inner = Bytes(raw)

    @classmethod
    def from_array(cls, items: Union["BytesN", BytesLike]) -> "BytesN":
        """Build a BytesN whose size is the length of ``items``."""
        raw = _raw(items)
        return cls(len(raw), raw)

    @classmethod
    def from_bytes(cls, size: int, value: Union["BytesN", BytesLike]) -> "BytesN":
        """Convert ``value`` to a BytesN of ``size``; raises ConversionError on mismatch."""
        return cls(size, value)

    def set(self, i: int, v: int) -> None:
        """Set the byte at position i; raises HostError if out of bounds."""
        self._inner.set(i, v)

    def get(self, i: int) -> Optional[int]:
        return self._inner.get(i)

    def get_unchecked(self, i: int) -> int:
        return self._inner.get_unchecked(i)

    def is_empty(self) -> bool:
        return False

    def __len__(self) -> int:
        return self._size

    def first(self) -> Optional[int]:
        return self._inner.first()

    def first_unchecked(self) -> int:
        return self._inner.first_unchecked()

    def last(self) -> Optional[int]:
        return self._inner.last()

    def last_unchecked(self) -> int:
        return self._inner.last_unchecked()

    def to_array(self) -> bytes:
        return self._inner.to_bytes()

    def to_bytes(self) -> bytes:
        return self._inner.to_bytes()

    def as_bytes(self) -> Bytes:
        """Return the contents as a growable Bytes copy."""
        return Bytes(self._inner)

    def iter(self) -> BytesIter:
        return self._inner.iter()

    def __iter__(self) -> BytesIter:
        return self.iter()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BytesN):
            return self._size == other._size and self._inner == other._inner
        if isinstance(other, _PLAIN):
            return self.to_bytes() == bytes(other)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, BytesN):
            return self.to_bytes() < other.to_bytes()
        if isinstance(other, _PLAIN):
            return self.to_bytes() < bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        body = ", ".join(str(b) for b in self._inner.to_bytes())
        return f"BytesN<{self._size}>({body})"