"""Tests for the flat-line and listing serializers."""

from __future__ import annotations

from src.export.flat import to_flat_line, uvci_to_flat_line
from src.export.listing import to_listing
from src.uvci.parser import parse
from src.uvci.schema import ParsedRecord


def test_flat_line_end_to_end() -> None:
    assert (
            uvci_to_flat_line("URN:UVCI:01:SE:EHM/V00016227TFJJ#Q")
            == "1,SE,3,some semantics,EHM,,V00016227TFJJ,V00016227,TFJJ,12,2020,Q,false"
    )


def test_flat_line_without_opaque_details() -> None:
    line = uvci_to_flat_line("URN:UVCI:01:SE:EHM/V12907267LAJW#E", include_opaque_details=False)
    assert line == "1,SE,3,some semantics,EHM,,V12907267LAJW,E,true"
    assert len(line.split(",")) == 9


def test_flat_line_of_default_record() -> None:
    assert to_flat_line(ParsedRecord()) == "0,,0,,,,,,,0,0,,false"


def test_flat_line_does_not_escape_commas() -> None:
    record = ParsedRecord(country="S,E")
    assert to_flat_line(record).split(",")[1:3] == ["S", "E"]


def test_listing_layout() -> None:
    listing = to_listing(parse("URN:UVCI:01:SE:EHM/V12916227TFJJ#Q"))
    lines = listing.splitlines()

    assert listing.endswith("\n")
    assert len(lines) == len(ParsedRecord.model_fields)
    assert lines[0] == "version                   : 1"
    assert lines[3] == "schema_option_description : some semantics"
    assert lines[5] == "vaccine_id                : "
    assert lines[9] == "opaque_vaccination_month  : 8"
    assert lines[-1] == "checksum_verified         : true"
    assert len({line.index(" : ") for line in lines}) == 1
