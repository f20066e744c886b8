import pytest

from sorokit.bytes import Bytes
from sorokit.bytesn import BytesN
from sorokit.literals import bytes_literal, make_bytes, make_bytesn


def _pushed(*values):
    b = Bytes()
    for v in values:
        b.push_back(v)
    return b


def test_macro_bytes():
    assert make_bytes() == Bytes()
    assert make_bytes(1) == _pushed(1)
    assert make_bytes([3, 2, 1]) == _pushed(3, 2, 1)


def test_macro_bytes_hex():
    assert make_bytes() == Bytes()
    assert make_bytes(1) == _pushed(1)
    assert make_bytes(0x30201) == _pushed(3, 2, 1)
    assert make_bytes("0x30201") == _pushed(3, 2, 1)
    assert make_bytes("0x0000030201") == Bytes.from_array([0, 0, 3, 2, 1])


def test_macro_bytesn():
    assert make_bytesn(1) == BytesN.from_array([1])
    assert make_bytesn([3, 2, 1]) == BytesN.from_array([3, 2, 1])


def test_macro_bytesn_hex():
    assert make_bytesn("0x030201") == BytesN.from_array([3, 2, 1])
    assert make_bytesn("0x0000030201") == BytesN.from_array([0, 0, 3, 2, 1])


def test_long_hex_literal_length():
    literal = "0xfded3f55dec47250a52a8c0bb7038e72fa6ffaae33562f77cd2b629ef7fd424d"
    assert len(make_bytes(literal)) == 32
    assert len(make_bytesn(literal)) == 32


def test_array_form_length():
    assert len(make_bytes([2, 0])) == 2
    assert len(make_bytesn([2, 0])) == 2


def test_bytes_literal_values():
    assert bytes_literal(0) == b"\x00"
    assert bytes_literal(256) == b"\x01\x00"
    assert bytes_literal("256") == b"\x01\x00"
    assert bytes_literal("0x01") == b"\x01"
    assert bytes_literal("0x1") == b"\x01"
    assert bytes_literal("0xff_ff") == b"\xff\xff"
    assert bytes_literal("0b000000001") == b"\x00\x01"


@pytest.mark.parametrize("bad", ["", "0x", "0xzz", "12a", "-1", "0b102"])
def test_bytes_literal_rejects_invalid_text(bad):
    with pytest.raises(ValueError):
        bytes_literal(bad)


def test_bytes_literal_rejects_negative_int():
    with pytest.raises(ValueError):
        bytes_literal(-5)


def test_bytes_literal_rejects_other_types():
    with pytest.raises(TypeError):
        bytes_literal(1.5)
    with pytest.raises(TypeError):
        bytes_literal(True)