"""Tests for the alphabet remapping and the Luhn mod 38 check character."""

from __future__ import annotations

import pytest

from src.uvci.alphabet import LUHN_ALPHABET, UVCI_ALPHABET, remap_to_luhn_alphabet
from src.uvci.checksum import verify_checksum

SWEDISH_VALID_UVCIS: tuple[str, ...] = (
    "URN:UVCI:01:SE:EHM/V12907267LAJW#E",
    "URN:UVCI:01:SE:EHM/V12916227TFJJ#Q",
    "URN:UVCI:01:SE:EHM/V12920064NYOH#4",
    "URN:UVCI:01:SE:EHM/V12923931NNBY#T",
    "URN:UVCI:01:SE:EHM/V12939008LSVR#F",
    "URN:UVCI:01:SE:EHM/V12939037PXFJ#V",
    "URN:UVCI:01:SE:EHM/V12940126MRXQ#N",
    "URN:UVCI:01:SE:EHM/V12956472WRGE#7",
    "URN:UVCI:01:SE:EHM/V12965046ALNM#I",
    "URN:UVCI:01:SE:EHM/V12982924YQMV#T",
    "URN:UVCI:01:SE:EHM/V12991074UCIC#4",
    "URN:UVCI:01:SE:EHM/V12993686OVCX#R",
    "URN:UVCI:01:SE:EHM/V12996544DVKM#M",
    "URN:UVCI:01:SE:EHM/V12997980ASMG#1",
    "URN:UVCI:01:SE:EHM/V12998404MNQF#6",
)

# One wrong check character per identifier above.
WRONG_CHECK_CHARACTERS = "ABCDEFGH0123459"


def test_remap_maps_positions_between_alphabets() -> None:
    assert remap_to_luhn_alphabet("ABKL") == "/09:"
    assert remap_to_luhn_alphabet("M0129/:") == "AOPQXYZ"


def test_remap_sends_y_and_z_to_the_same_symbol() -> None:
    assert remap_to_luhn_alphabet("Y") == "M"
    assert remap_to_luhn_alphabet("Z") == "M"
    assert "N" not in remap_to_luhn_alphabet(UVCI_ALPHABET)


def test_remap_output_stays_in_luhn_alphabet() -> None:
    assert set(remap_to_luhn_alphabet(UVCI_ALPHABET)) <= set(LUHN_ALPHABET)


def test_remap_passes_unknown_characters_through() -> None:
    assert remap_to_luhn_alphabet("A-B") == "/-0"


@pytest.mark.parametrize("cert_id", SWEDISH_VALID_UVCIS)
def test_valid_check_character(cert_id: str) -> None:
    assert verify_checksum(cert_id)


@pytest.mark.parametrize(
    ("cert_id", "wrong"),
    list(zip(SWEDISH_VALID_UVCIS, WRONG_CHECK_CHARACTERS)),
)
def test_wrong_check_character(cert_id: str, wrong: str) -> None:
    body, _, _ = cert_id.partition("#")
    assert not verify_checksum(f"{body}#{wrong}")


def test_checksum_without_delimiter_checks_last_symbol() -> None:
    assert verify_checksum("URN:UVCI:01:SE:EHM/V12907267LAJWE")
    assert not verify_checksum("URN:UVCI:01:SE:EHM/V12907267LAJW")


def test_characters_outside_alphabet_fail_without_raising() -> None:
    assert not verify_checksum("URN:UVCI:01:SE:EHM/V12907267-LAJW#E")
    assert not verify_checksum("")
    assert not verify_checksum("#")
