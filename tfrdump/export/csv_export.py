"""Export a decoded pilot as CSV, one row per layout entry element."""
from __future__ import annotations

import csv
import io

from tfrdump.tfr.layout import fields_in_offset_order
from tfrdump.tfr.records import PilotRecord, field_values


def export_csv(record: PilotRecord) -> str:
    """Export every layout field as CSV string (field, index, offset, width, value)."""
    output = io.StringIO()
    writer = csv.writer(output)

    # Header
    writer.writerow(["field", "index", "offset", "width", "value"])

    fields = fields_in_offset_order()
    values = field_values(record, fields)
    for f in fields:
        value = values[f.name]
        if not f.is_array:
            writer.writerow([f.name, "", f.offset, f.width, value])
            continue
        for i, element in enumerate(value):
            writer.writerow([f.name, i, f.offset + i * f.width, f.width, element])

    return output.getvalue()
