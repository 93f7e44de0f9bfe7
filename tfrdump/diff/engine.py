"""Compare two pilot records field by field."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from tfrdump.tfr.layout import fields_in_offset_order
from tfrdump.tfr.records import PilotRecord, field_values


@dataclass
class FieldChange:
    """A single changed value between two pilots. index is None for scalars."""
    field_name: str
    offset: int
    old_value: int
    new_value: int
    index: Optional[int] = None

    @property
    def label(self) -> str:
        if self.index is None:
            return self.field_name
        return f"{self.field_name}[{self.index}]"


@dataclass
class DiffResult:
    changes: list[FieldChange] = field(default_factory=list)
    reserved_changed: bool = False   # Bytes outside the layout differ

    @property
    def total_changes(self) -> int:
        return len(self.changes)


def _reserved_bytes(raw: bytes, covered: set[int]) -> bytes:
    return bytes(b for i, b in enumerate(raw) if i not in covered)


def compare_pilots(old: PilotRecord, new: PilotRecord) -> DiffResult:
    """Compare every layout entry; array entries are compared element-wise."""
    result = DiffResult()
    fields = fields_in_offset_order()
    old_values = field_values(old, fields)
    new_values = field_values(new, fields)

    covered: set[int] = set()
    for f in fields:
        covered.update(range(f.offset, f.end))
        old_val, new_val = old_values[f.name], new_values[f.name]
        if old_val == new_val:
            continue
        if not f.is_array:
            result.changes.append(FieldChange(f.name, f.offset, old_val, new_val))
            continue
        for i, (a, b) in enumerate(zip(old_val, new_val)):
            if a != b:
                result.changes.append(FieldChange(f.name, f.offset + i * f.width, a, b, index=i))

    result.reserved_changed = _reserved_bytes(old.raw, covered) != _reserved_bytes(new.raw, covered)
    return result


def format_diff(result: DiffResult) -> str:
    """Format a diff result as text."""
    if not result.changes and not result.reserved_changed:
        return "No differences."
    lines = [f"{result.total_changes} field change(s):"]
    for c in result.changes:
        lines.append(f"  @{c.offset:<5} {c.label:<32} {c.old_value} -> {c.new_value}")
    if result.reserved_changed:
        lines.append("  (bytes outside the known layout also differ)")
    return "\n".join(lines)
