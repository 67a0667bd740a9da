"""Flat comma-joined rendering of a parsed UVCI.

Values are joined as-is: embedded commas are not quoted or escaped.
"""

from __future__ import annotations

from src.uvci.parser import parse
from src.uvci.schema import ParsedRecord

FIELD_SEPARATOR = ","

_OPAQUE_DETAIL_FIELDS: frozenset[str] = frozenset(
    {"opaque_id", "opaque_issuance", "opaque_vaccination_month", "opaque_vaccination_year"}
)


def format_value(value: object) -> str:
    """Render a record value: booleans as `true`/`false`, enums by number."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    return str(value)


def to_flat_line(record: ParsedRecord, *, include_opaque_details: bool = True) -> str:
    """Render all 13 record fields in model order (9 without the national opaque details)."""

    values = [
        format_value(getattr(record, name))
        for name in ParsedRecord.model_fields
        if include_opaque_details or name not in _OPAQUE_DETAIL_FIELDS
    ]
    return FIELD_SEPARATOR.join(values)


def uvci_to_flat_line(cert_id: str, *, include_opaque_details: bool = True) -> str:
    """Parse a UVCI and render it as a flat line."""

    return to_flat_line(parse(cert_id), include_opaque_details=include_opaque_details)
