"""Neo4j Cypher export of Swedish EHM-issued UVCIs.

Each national identifier becomes five `CREATE` statements linking the country, the issuer, the
opaque vaccination id, its estimated vaccination month and the reissued certificate id. Other
identifiers produce no statements.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.uvci.dates import month_abbreviation
from src.uvci.parser import parse
from src.uvci.schema import ParsedRecord

COUNTRY_NAMES: dict[str, str] = {"SE": "Sweden"}
ISSUER_NAMES: dict[str, str] = {"EHM": "E-Hälso Myndigheten"}

SCRIPT_TERMINATOR = "RETURN *"


def _date_node(record: ParsedRecord) -> str:
    # No separator: year 2021 month 8 -> d20218.
    return f"d{record.opaque_vaccination_year}{record.opaque_vaccination_month}"


def to_graph_statements(record: ParsedRecord) -> list[str]:
    """Build the Cypher statements for one parsed record (empty unless national)."""

    if not record.matches_national_pattern:
        return []

    country = record.country
    issuer = record.issuing_entity
    opaque_id = record.opaque_id
    date_node = _date_node(record)
    month_name = month_abbreviation(record.opaque_vaccination_month)
    date_label = f"{month_name} {record.opaque_vaccination_year}"

    return [
        f"CREATE ({country}:country {{name:'{COUNTRY_NAMES[country]}'}})"
        f"-[:COUNTRY_OF {{}}]->({issuer}:issuing_entity {{name:'{ISSUER_NAMES[issuer]}'}})",
        f"CREATE ({issuer})-[:ISSUER_OF {{}}]->({opaque_id}:opaque_id {{name:'{opaque_id}'}})",
        f"CREATE ({date_node}:vac_date {{name:'{date_label}'}})",
        f"CREATE ({date_node})-[:VAC_DATE_OF {{}}]->({opaque_id})",
        f"CREATE ({record.opaque_unique_string}:reissue_id {{name:'{record.opaque_issuance}'}})"
        f"-[:REISSUE_OF {{}}]->({opaque_id})",
    ]


def uvci_to_graph(cert_id: str) -> list[str]:
    """Parse a UVCI and build its Cypher statements."""

    return to_graph_statements(parse(cert_id))


def uvcis_to_graph(cert_ids: Iterable[str]) -> str:
    """Combine the statements of many UVCIs, one per line, without duplicate lines.

    Shared nodes (country, issuer, vaccination months) are created once; the first occurrence
    keeps its position.
    """

    statements: list[str] = []
    for cert_id in cert_ids:
        statements.extend(uvci_to_graph(cert_id))
    return "\n".join(dict.fromkeys(statements))


def render_graph_script(cert_ids: Iterable[str]) -> str:
    """Full Cypher script: de-duplicated statements followed by `RETURN *`."""

    body = uvcis_to_graph(cert_ids)
    lines = [body, SCRIPT_TERMINATOR] if body else [SCRIPT_TERMINATOR]
    return "\n".join(lines) + "\n"
