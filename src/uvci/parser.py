"""Tolerant UVCI grammar parser.

Grammar (eHealth Network guidelines, release 2):

    [URN:UVCI:]<version>:<country>:<block>[#<check character>]

where `<block>` has one of three `/`-separated layouts (see `SchemaOption`). The `URN:UVCI:`
prefix and the check character are optional, input is case-insensitive.

The parser never raises: each stage can stop early and return whatever has been extracted so
far. A structurally broken identifier yields a record with fewer populated fields.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

from src.uvci.checksum import CHECKSUM_DELIMITER, verify_checksum
from src.uvci.dates import get_vaccination_date
from src.uvci.schema import SCHEMA_OPTION_DESCRIPTIONS, ParsedRecord, SchemaOption

logger = logging.getLogger(__name__)

MAX_UVCI_LENGTH = 72
URN_PREFIX = "URN:UVCI:"
BLOCK_SEPARATOR = ":"
SEGMENT_SEPARATOR = "/"

OPAQUE_ID_LENGTH = 9

_VERSION_RE = re.compile(r"\+?[0-9]+")
_MAX_VERSION = 255

# Field names assigned, in order, to the `/` segments of each layout.
_SEGMENT_LAYOUTS: dict[int, tuple[SchemaOption, tuple[str, ...]]] = {
    3: (
        SchemaOption.identifier_with_semantics,
        ("issuing_entity", "vaccine_id", "opaque_unique_string"),
    ),
    1: (SchemaOption.opaque_identifier, ("opaque_unique_string",)),
    2: (SchemaOption.some_semantics, ("issuing_entity", "opaque_unique_string")),
}


def _parse_version(text: str) -> int:
    if not _VERSION_RE.fullmatch(text):
        return 0
    value = int(text)
    return value if value <= _MAX_VERSION else 0


def _canonicalize(cert_id: str) -> str:
    """Uppercase and make sure the `URN:UVCI:` prefix is present."""

    value = cert_id.upper()
    if not value.startswith(URN_PREFIX):
        value = URN_PREFIX + value
    return value


def _has_urn_header(blocks: list[str]) -> bool:
    # Only rejected when both header blocks are wrong; canonicalization makes this rare.
    return not (blocks[0] != "URN" and blocks[1] != "UVCI")


def _apply_layout(fields: dict[str, Any], segments: list[str]) -> None:
    layout = _SEGMENT_LAYOUTS.get(len(segments))
    if layout is None:
        return

    option, names = layout
    fields["schema_option"] = option
    fields["schema_option_description"] = SCHEMA_OPTION_DESCRIPTIONS[option]
    fields.update(zip(names, segments))


def _extract_national_details(record: ParsedRecord) -> ParsedRecord:
    """Split the Swedish opaque string into id, issuance suffix and estimated date."""

    if not record.matches_national_pattern:
        return record

    opaque_id = record.opaque_unique_string[:OPAQUE_ID_LENGTH]
    month, year = get_vaccination_date(opaque_id)
    return record.model_copy(
        update={
            "opaque_id": opaque_id,
            "opaque_issuance": record.opaque_unique_string[OPAQUE_ID_LENGTH:],
            "opaque_vaccination_month": month,
            "opaque_vaccination_year": year,
        }
    )


def parse(cert_id: str) -> ParsedRecord:
    """Parse and verify a UVCI, e.g. "URN:UVCI:01:SE:EHM/V12907267LAJW#E".

    The checksum is verified over the whole canonical identifier before any structural parsing,
    so `checksum_verified` is meaningful even for a partial record.
    """

    if not cert_id:
        logger.debug("degraded reason=empty")
        return ParsedRecord()

    if len(cert_id) > MAX_UVCI_LENGTH:
        logger.debug("degraded reason=too_long length=%d", len(cert_id))
        return ParsedRecord()

    canonical = _canonicalize(cert_id)
    fields: dict[str, Any] = {"checksum_verified": verify_checksum(canonical)}

    body, delimiter, checksum = canonical.partition(CHECKSUM_DELIMITER)
    if delimiter:
        fields["checksum"] = checksum

    blocks = body.split(BLOCK_SEPARATOR)
    if not _has_urn_header(blocks):
        logger.debug("degraded reason=missing_header")
        return ParsedRecord(**fields)

    if len(blocks) < 4:
        logger.debug("degraded reason=missing_country blocks=%d", len(blocks))
        return ParsedRecord(**fields)

    fields["version"] = _parse_version(blocks[2])
    fields["country"] = blocks[3]

    if len(blocks) < 5:
        logger.debug("degraded reason=missing_identifier_block blocks=%d", len(blocks))
        return ParsedRecord(**fields)

    _apply_layout(fields, blocks[4].split(SEGMENT_SEPARATOR))
    return _extract_national_details(ParsedRecord(**fields))


def parse_many(cert_ids: Iterable[str]) -> list[ParsedRecord]:
    """Parse a batch of identifiers independently, preserving input order."""

    return [parse(cert_id) for cert_id in cert_ids]
