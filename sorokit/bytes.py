"""A growable array of bytes with the host's bounds-checking rules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import total_ordering
from typing import Optional, Union

from .errors import HostError

BytesLike = Union["Bytes", bytes, bytearray, memoryview, Iterable[int]]


def _index_bounds() -> HostError:
    return HostError("Object", "IndexBounds")


def _byte(value: int) -> int:
    if not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value!r}")
    return value


def _raw(items: BytesLike) -> bytes:
    if isinstance(items, Bytes):
        return bytes(items._data)
    as_bytes = getattr(items, "as_bytes", None)
    if callable(as_bytes):
        return as_bytes().to_bytes()
    if isinstance(items, int):
        raise TypeError("expected a sequence of bytes, not an integer")
    return bytes(items)


class BytesIter:
    """Double-ended iterator over a snapshot of a byte sequence."""

    __slots__ = ("_data", "_front", "_back")

    def __init__(self, data: BytesLike) -> None:
        self._data = _raw(data)
        self._front = 0
        self._back = len(self._data)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self._front >= self._back:
            raise StopIteration
        value = self._data[self._front]
        self._front += 1
        return value

    def next_back(self) -> Optional[int]:
        """Return the last remaining byte, or None once exhausted."""
        if self._front >= self._back:
            return None
        self._back -= 1
        return self._data[self._back]

    def __len__(self) -> int:
        return self._back - self._front


@total_ordering
class Bytes:
    """Contiguous growable array of bytes."""

    __slots__ = ("_data",)

    def __init__(self, data: BytesLike = b"") -> None:
        self._data = bytearray(_raw(data))

    @classmethod
    def from_slice(cls, items: BytesLike) -> "Bytes":
        return cls(items)

    @classmethod
    def from_array(cls, items: BytesLike) -> "Bytes":
        return cls(items)

    def set(self, i: int, v: int) -> None:
        """Set the byte at position i; raises HostError if out of bounds."""
        if not 0 <= i < len(self._data):
            raise _index_bounds()
        self._data[i] = _byte(v)

    def get(self, i: int) -> Optional[int]:
        if 0 <= i < len(self._data):
            return self._data[i]
        return None

    def get_unchecked(self, i: int) -> int:
        if not 0 <= i < len(self._data):
            raise _index_bounds()
        return self._data[i]

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def first(self) -> Optional[int]:
        return self._data[0] if self._data else None

    def first_unchecked(self) -> int:
        if not self._data:
            raise _index_bounds()
        return self._data[0]

    def last(self) -> Optional[int]:
        return self._data[-1] if self._data else None

    def last_unchecked(self) -> int:
        if not self._data:
            raise _index_bounds()
        return self._data[-1]

    def remove(self, i: int) -> bool:
        """Remove the byte at position i; return False if out of bounds."""
        if 0 <= i < len(self._data):
            del self._data[i]
            return True
        return False

    def remove_unchecked(self, i: int) -> None:
        if not 0 <= i < len(self._data):
            raise _index_bounds()
        del self._data[i]

    def push_back(self, x: int) -> None:
        self._data.append(_byte(x))

    def pop_back(self) -> Optional[int]:
        return self._data.pop() if self._data else None

    def pop_back_unchecked(self) -> int:
        if not self._data:
            raise _index_bounds()
        return self._data.pop()

    def insert(self, i: int, b: int) -> None:
        if not 0 <= i <= len(self._data):
            raise _index_bounds()
        self._data.insert(i, _byte(b))

    def insert_from_bytes(self, i: int, other: BytesLike) -> None:
        if not 0 <= i <= len(self._data):
            raise _index_bounds()
        self._data[i:i] = _raw(other)

    def insert_from_slice(self, i: int, items: BytesLike) -> None:
        self.insert_from_bytes(i, items)

    def append(self, other: BytesLike) -> None:
        self._data.extend(_raw(other))

    def extend_from_slice(self, items: BytesLike) -> None:
        self._data.extend(_raw(items))

    def copy_from_slice(self, i: int, items: BytesLike) -> None:
        """Overwrite bytes starting at i, growing the array when needed."""
        if not 0 <= i <= len(self._data):
            raise _index_bounds()
        data = _raw(items)
        self._data[i : i + len(data)] = data

    def copy_into_slice(self, length: int) -> bytes:
        """Return the contents, which must be exactly ``length`` bytes long."""
        if length != len(self._data):
            raise ValueError("Bytes::copy_into_slice with mismatched slice length")
        return bytes(self._data)

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    def slice(self, start: int = 0, end: Optional[int] = None) -> "Bytes":
        """Return a copy of the range [start, end); raises HostError if out of bounds."""
        length = len(self._data)
        stop = length if end is None else end
        if start < 0 or stop > length or start > stop:
            raise _index_bounds()
        return Bytes(self._data[start:stop])

    def iter(self) -> BytesIter:
        return BytesIter(self._data)

    def __iter__(self) -> BytesIter:
        return self.iter()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Bytes):
            return self._data == other._data
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Bytes):
            return self._data < other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(bytes(self._data))

    def __repr__(self) -> str:
        return f"Bytes({', '.join(str(b) for b in self._data)})"