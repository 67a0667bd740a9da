"""Symbol remapping between the UVCI alphabet and the Luhn primitive's alphabet."""

from __future__ import annotations

UVCI_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789/:"
LUHN_ALPHABET = "/0123456789:ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Y and Z share one Luhn value ("M"); nothing maps to "N".
_REMAP_TABLE: dict[int, int] = str.maketrans(UVCI_ALPHABET, LUHN_ALPHABET.replace("N", "M"))


def remap_to_luhn_alphabet(text: str) -> str:
    """Substitute each UVCI symbol with the Luhn symbol at the same alphabet position.

    Expects uppercase input without the `#` delimiter. Characters outside the UVCI alphabet are
    returned unchanged.
    """

    return text.translate(_REMAP_TABLE)
