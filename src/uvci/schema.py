"""Parsed UVCI record (Pydantic model).

The record is the contract between the grammar parser and every serializer. It carries no
identity beyond its field values and is immutable once built.
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class SchemaOption(IntEnum):
    """Layout of the fifth colon-delimited block, keyed by its `/` segment count."""

    unknown = 0
    identifier_with_semantics = 1
    opaque_identifier = 2
    some_semantics = 3


SCHEMA_OPTION_DESCRIPTIONS: dict[SchemaOption, str] = {
    SchemaOption.unknown: "",
    SchemaOption.identifier_with_semantics: "identifier with semantics",
    SchemaOption.opaque_identifier: "opaque identifier - no structure",
    SchemaOption.some_semantics: "some semantics",
}

NATIONAL_VERSION = 1
NATIONAL_COUNTRY = "SE"
NATIONAL_ISSUER = "EHM"
NATIONAL_OPAQUE_LENGTH = 13


class ParsedRecord(BaseModel):
    """A parsed UVCI.

    Unset fields keep their zero value: callers tell a complete record from a partial one by
    inspecting fields, and an invalid certificate by `checksum_verified`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: int = Field(default=0, ge=0, le=255)
    country: str = ""
    schema_option: SchemaOption = SchemaOption.unknown
    schema_option_description: str = ""
    issuing_entity: str = ""
    vaccine_id: str = ""
    opaque_unique_string: str = ""
    opaque_id: str = ""
    opaque_issuance: str = ""
    opaque_vaccination_month: int = Field(default=0, ge=0, le=12)
    opaque_vaccination_year: int = Field(default=0, ge=0)
    checksum: str = ""
    checksum_verified: bool = False

    @property
    def matches_national_pattern(self) -> bool:
        """Whether this is a Swedish EHM-issued identifier with a decomposable opaque string."""

        return (
                self.version == NATIONAL_VERSION
                and self.country == NATIONAL_COUNTRY
                and self.issuing_entity == NATIONAL_ISSUER
                and self.schema_option == SchemaOption.some_semantics
                and len(self.opaque_unique_string) == NATIONAL_OPAQUE_LENGTH
        )
