import pytest

from tfrdump.tfr.errors import OffsetOutOfRange
from tfrdump.tfr.layout import Field
from tfrdump.tfr.reader import (
    read_byte,
    read_byte_array,
    read_dword,
    read_dword_array,
    read_field,
    read_word,
    read_word_array,
)


def test_read_byte():
    assert read_byte(b"\x00\xff\x10", 1) == 0xFF


def test_read_word_is_low_byte_first():
    assert read_word(b"\x34\x12", 0) == 0x1234
    assert read_word(b"\x00\x05\x00", 1) == 5


def test_read_dword_is_low_byte_first():
    assert read_dword(b"\x78\x56\x34\x12", 0) == 0x12345678
    assert read_dword(b"\xff\xff\xff\xff", 0) == 0xFFFFFFFF
    assert read_dword(bytearray(b"\x01\x00\x00\x00"), 0) == 1


def test_arrays_preserve_index_order():
    data = bytes(range(12))
    assert read_byte_array(data, 2, 3) == (2, 3, 4)
    assert read_word_array(data, 0, 3) == (0x0100, 0x0302, 0x0504)
    assert read_dword_array(data, 4, 2) == (0x07060504, 0x0B0A0908)


def test_empty_array():
    assert read_word_array(b"\x00\x00", 2, 0) == ()


@pytest.mark.parametrize("call", [
    lambda: read_byte(b"\x00\x00", 2),
    lambda: read_byte(b"\x00\x00", -1),
    lambda: read_word(b"\x00\x00", 1),
    lambda: read_dword(b"\x00\x00\x00", 0),
    lambda: read_word_array(b"\x00" * 6, 2, 3),
])
def test_reads_past_buffer_fail(call):
    with pytest.raises(OffsetOutOfRange):
        call()


def test_offset_error_details():
    with pytest.raises(OffsetOutOfRange) as exc:
        read_dword(bytes(10), 8)
    assert (exc.value.offset, exc.value.width, exc.value.length) == (8, 4, 10)
    assert isinstance(exc.value, IndexError)


def test_read_field_scalar_and_array():
    data = bytes([0, 1, 2, 3, 4, 5, 6, 7])
    assert read_field(data, Field("x", 2, 2)) == 0x0302
    assert read_field(data, Field("y", 4, 1, 3)) == (4, 5, 6)


def test_read_field_rejects_odd_width():
    with pytest.raises(ValueError):
        read_field(bytes(8), Field("z", 0, 3))
