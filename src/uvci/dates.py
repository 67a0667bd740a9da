"""Swedish vaccination date estimation from the UVCI opaque id.

The Swedish eHealth Agency (EHM) numbers vaccinations sequentially, so the opaque id works as a
cumulative national dose counter. The counter is mapped to a calendar month with an empirical
fit of the 2021 rollout:

    - up to 13 983 264 doses: a tangent curve over the observed S-shaped rollout,
    - beyond that: a constant rate of 1 552 008 doses per month.

Month 0 is December 2020. The constants are a fixed fit and must not be tuned.
"""

from __future__ import annotations

import math
import re
import struct

OPAQUE_ID_PREFIX = "V"

TANGENT_REGIME_LIMIT = 13_983_264.0
TANGENT_CENTER = 6_991_632.0
TANGENT_SCALE = 5_536_858.0
TANGENT_OFFSET = 5.03
TANGENT_GAIN = 1.6
DOSES_PER_MONTH = 1_552_008.0

# Elapsed months are an unsigned 16-bit count; out-of-range estimates saturate.
MAX_ELAPSED_MONTHS = 0xFFFF

FIRST_YEAR = 2021
MONTHS_PER_YEAR = 12

_MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

_NUMBER_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    flags=re.IGNORECASE,
)


def _single(value: float) -> float:
    """Round to the nearest IEEE 754 single-precision value (overflow becomes infinity)."""

    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _parse_dose_count(text: str) -> float | None:
    if not _NUMBER_RE.fullmatch(text):
        return None
    value = _single(float(text))
    if value < 0:
        return None
    return value


def _round_half_away_from_zero(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _saturate_months(value: float) -> int:
    """Truncate toward zero into 0..MAX_ELAPSED_MONTHS; NaN becomes 0."""

    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), MAX_ELAPSED_MONTHS))


def _elapsed_months(doses: float) -> int:
    """Months elapsed since December 2020 for a cumulative dose count.

    Every step is rounded to single precision: above 2**24 doses a count just below a month
    boundary rounds up into the next month, and the calibration depends on that.
    """

    if doses <= TANGENT_REGIME_LIMIT:
        x = _single(_single(TANGENT_CENTER - doses) / _single(TANGENT_SCALE))
        slope = _single(-_single(math.tan(x)) * _single(TANGENT_GAIN))
        estimate = _single(_single(TANGENT_OFFSET) + slope)
        return _saturate_months(_round_half_away_from_zero(estimate))
    return _saturate_months(_single(doses / DOSES_PER_MONTH))


def get_vaccination_date(opaque_id: str) -> tuple[int, int]:
    """Estimate `(month, year)` of a vaccination from its opaque id (e.g. "V12907267").

    Returns:
        Month in 1..12 and a four-digit year, or `(0, 0)` when the id is not a non-negative
        number once its "V" prefix is removed.
    """

    doses = _parse_dose_count(opaque_id.replace(OPAQUE_ID_PREFIX, ""))
    if doses is None:
        return 0, 0

    month = _elapsed_months(doses)
    if month == 0:
        return MONTHS_PER_YEAR, FIRST_YEAR - 1

    year = (month - 1) // MONTHS_PER_YEAR + FIRST_YEAR
    return (month - 1) % MONTHS_PER_YEAR + 1, year


def month_abbreviation(month: int) -> str:
    """Three-letter English month name, or "Unknown" outside 1..12."""

    if 1 <= month <= MONTHS_PER_YEAR:
        return _MONTH_ABBREVIATIONS[month - 1]
    return "Unknown"
