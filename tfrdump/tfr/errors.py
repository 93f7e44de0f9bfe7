"""Exceptions raised while decoding TFR pilot files."""
from __future__ import annotations

from typing import Optional


class TFRError(Exception):
    """Base class for all pilot decoding failures."""


class OffsetOutOfRange(TFRError, IndexError):
    """A field read would touch bytes outside the buffer."""

    def __init__(self, offset: int, width: int, length: int):
        self.offset = offset
        self.width = width
        self.length = length
        super().__init__(
            f"read of {width} byte(s) at offset {offset} exceeds buffer of {length} bytes"
        )


class EnumOutOfRange(TFRError, ValueError):
    """A byte selecting a named enumeration holds an unknown value."""

    def __init__(self, field: str, raw_value: int, index: Optional[int] = None):
        self.field = field
        self.raw_value = raw_value
        self.index = index
        where = field if index is None else f"{field}[{index}]"
        super().__init__(f"{where}: unknown value {raw_value}")


class UnexpectedValue(TFRError, ValueError):
    """A derived computation got input outside its documented domain."""

    def __init__(self, what: str, value: int):
        self.what = what
        self.value = value
        super().__init__(f"unexpected {what}: {value}")
