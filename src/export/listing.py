"""Human-readable multi-line rendering of a parsed UVCI."""

from __future__ import annotations

from src.export.flat import format_value
from src.uvci.schema import ParsedRecord

_LABEL_WIDTH = max(len(name) for name in ParsedRecord.model_fields)


def to_listing(record: ParsedRecord) -> str:
    """Render one `name : value` line per field, names padded to a common width.

    Example:
        version                   : 1
        country                   : SE
        schema_option             : 3
    """

    lines = [
        f"{name.ljust(_LABEL_WIDTH)} : {format_value(getattr(record, name))}"
        for name in ParsedRecord.model_fields
    ]
    return "\n".join(lines) + "\n"
