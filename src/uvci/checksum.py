"""UVCI check character verification (Luhn mod 38)."""

from __future__ import annotations

from stdnum import luhn

from src.uvci.alphabet import LUHN_ALPHABET, remap_to_luhn_alphabet

CHECKSUM_DELIMITER = "#"


def verify_checksum(text: str) -> bool:
    """Return whether a normalized UVCI passes the Luhn mod 38 self-check.

    The `#` delimiter is dropped but the check character stays part of the checked string. An
    identifier without a check character is validated against whatever its last symbol is.
    """

    remapped = remap_to_luhn_alphabet(text.replace(CHECKSUM_DELIMITER, ""))
    return luhn.is_valid(remapped, alphabet=LUHN_ALPHABET)
