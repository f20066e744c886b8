"""Build byte containers from arrays or integer literals."""

from __future__ import annotations

from typing import Optional, Union

from .bytes import Bytes, BytesLike
from .bytesn import BytesN

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_BIN_DIGITS = frozenset("01")
_DEC_DIGITS = frozenset("0123456789")

Literal = Union[int, str]


def _from_int(value: int) -> bytes:
    if value < 0:
        raise ValueError(f"literal must not be negative: {value}")
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")


def bytes_literal(literal: Literal) -> bytes:
    """Turn an integer literal into big-endian bytes.

    Hex and binary literals given as text keep their leading zeros: each hex
    digit counts for four bits and each binary digit for one, rounded up to
    whole bytes. Decimal literals and ints use the fewest bytes, at least one.
    """
    if isinstance(literal, bool):
        raise TypeError("expected an integer literal, not a bool")
    if isinstance(literal, int):
        return _from_int(literal)
    if not isinstance(literal, str):
        raise TypeError(f"expected an int or str literal, not {type(literal).__name__}")

    text = literal.strip().replace("_", "")
    prefix = text[:2].lower()
    if prefix == "0x":
        digits, allowed, bits, base = text[2:], _HEX_DIGITS, 4, 16
    elif prefix == "0b":
        digits, allowed, bits, base = text[2:], _BIN_DIGITS, 1, 2
    else:
        if not text or not set(text) <= _DEC_DIGITS:
            raise ValueError(f"invalid integer literal: {literal!r}")
        return _from_int(int(text))

    if not digits or not set(digits) <= allowed:
        raise ValueError(f"invalid integer literal: {literal!r}")
    size = (len(digits) * bits + 7) // 8
    return int(digits, base).to_bytes(size, "big")


def _content(value: Union[Literal, BytesLike]) -> Union[bytes, BytesLike]:
    if isinstance(value, (int, str)):
        return bytes_literal(value)
    return value


def make_bytes(value: Optional[Union[Literal, BytesLike]] = None) -> Bytes:
    """Create Bytes from nothing, an array of bytes, or an integer literal."""
    if value is None:
        return Bytes()
    return Bytes.from_array(_content(value))


def make_bytesn(value: Union[Literal, BytesLike]) -> BytesN:
    """Create a BytesN sized to an array of bytes or an integer literal."""
    return BytesN.from_array(_content(value))