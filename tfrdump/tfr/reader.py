"""Low-level field reader for TFR pilot buffers.

Multi-byte values are assembled low byte first with explicit shifts, so the
result does not depend on the host byte order.
"""
from __future__ import annotations

from typing import Callable, Union

from tfrdump.tfr.errors import OffsetOutOfRange
from tfrdump.tfr.layout import BYTE, DWORD, WORD, Field

Buffer = Union[bytes, bytearray, memoryview]


def _check(buffer: Buffer, offset: int, width: int) -> None:
    if offset < 0 or offset + width > len(buffer):
        raise OffsetOutOfRange(offset, width, len(buffer))


def read_byte(buffer: Buffer, offset: int) -> int:
    _check(buffer, offset, BYTE)
    return buffer[offset]


def read_word(buffer: Buffer, offset: int) -> int:
    """Read an unsigned 16-bit value (low byte first)."""
    _check(buffer, offset, WORD)
    return buffer[offset] | (buffer[offset + 1] << 8)


def read_dword(buffer: Buffer, offset: int) -> int:
    """Read an unsigned 32-bit value (low byte first)."""
    _check(buffer, offset, DWORD)
    return (
        buffer[offset]
        | (buffer[offset + 1] << 8)
        | (buffer[offset + 2] << 16)
        | (buffer[offset + 3] << 24)
    )


_SCALAR_READERS: dict[int, Callable[[Buffer, int], int]] = {
    BYTE: read_byte,
    WORD: read_word,
    DWORD: read_dword,
}


def read_array(buffer: Buffer, offset: int, count: int, width: int) -> tuple[int, ...]:
    """Read count elements of the given width; element i sits at offset + i * width."""
    reader = _SCALAR_READERS.get(width)
    if reader is None:
        raise ValueError(f"Unsupported element width: {width}")
    # Check the whole span first so a bad table entry fails before any element is read
    _check(buffer, offset, width * count)
    return tuple(reader(buffer, offset + i * width) for i in range(count))


def read_byte_array(buffer: Buffer, offset: int, count: int) -> tuple[int, ...]:
    return read_array(buffer, offset, count, BYTE)


def read_word_array(buffer: Buffer, offset: int, count: int) -> tuple[int, ...]:
    return read_array(buffer, offset, count, WORD)


def read_dword_array(buffer: Buffer, offset: int, count: int) -> tuple[int, ...]:
    return read_array(buffer, offset, count, DWORD)


def read_field(buffer: Buffer, field: Field) -> Union[int, tuple[int, ...]]:
    """Read a layout entry: an int for scalars, a tuple for arrays."""
    if field.is_array:
        return read_array(buffer, field.offset, field.count, field.width)
    reader = _SCALAR_READERS.get(field.width)
    if reader is None:
        raise ValueError(f"Unsupported width {field.width} for field {field.name}")
    return reader(buffer, field.offset)
