# src/gedcom_codec/dates/partial.py

from __future__ import annotations

import re
from typing import Optional


# ---------------------------------------------------------------------------
# Month helpers
# ---------------------------------------------------------------------------

GEDCOM_MONTHS = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
)

MONTHS = {abbr: idx for idx, abbr in enumerate(GEDCOM_MONTHS, start=1)}

_YEAR_RE = re.compile(r"^\d{4}$")
_DAY_RE = re.compile(r"^\d{1,2}$")
_EMBEDDED_YEAR_RE = re.compile(r"(?<!\d)(\d{4})(?!\d)")
_PARTIAL_ISO_RE = re.compile(r"^(\d{4})(?:-(\d{1,2})(?:-(\d{1,2}))?)?$")


def _month_number(token: str) -> Optional[int]:
    return MONTHS.get(token.strip().upper())


# ---------------------------------------------------------------------------
# GEDCOM text -> partial ISO
# ---------------------------------------------------------------------------

def parse_partial_date(raw: Optional[str]) -> Optional[str]:
    """
    Parse GEDCOM date text into a partial ISO string.

    Supported:
        "2 JAN 1900" / "02 jan 1900" -> "1900-01-02"
        "JAN 1900"                   -> "1900-01"
        "1900"                       -> "1900"

    Anything else falls back to a standalone 4-digit year found in the text
    ("ABT 1850" -> "1850"), or None.
    """
    if not raw:
        return None

    parts = raw.strip().split()

    if len(parts) == 3:
        day, mon, year = parts
        month = _month_number(mon)
        if month and _DAY_RE.match(day) and _YEAR_RE.match(year):
            return f"{year}-{month:02d}-{int(day):02d}"
    elif len(parts) == 2:
        mon, year = parts
        month = _month_number(mon)
        if month and _YEAR_RE.match(year):
            return f"{year}-{month:02d}"
    elif len(parts) == 1 and _YEAR_RE.match(parts[0]):
        return parts[0]

    match = _EMBEDDED_YEAR_RE.search(raw)
    if match:
        return match.group(1)
    return None


# ---------------------------------------------------------------------------
# Partial ISO -> GEDCOM text
# ---------------------------------------------------------------------------

def format_partial_date(iso: Optional[str]) -> Optional[str]:
    """
    Format a partial ISO date as GEDCOM date text.

        "1900-01-02" -> "02 JAN 1900"
        "1900-01"    -> "JAN 1900"
        "1900"       -> "1900"

    Text that is not a partial ISO date is returned stripped but otherwise
    unchanged; empty input gives None.
    """
    if iso is None:
        return None

    text = str(iso).strip()
    if not text:
        return None

    match = _PARTIAL_ISO_RE.match(text)
    if not match:
        return text

    year, month, day = match.groups()
    month_num = int(month) if month else 0
    if not 1 <= month_num <= 12:
        return year

    mon = GEDCOM_MONTHS[month_num - 1]
    if day and int(day) > 0:
        return f"{int(day):02d} {mon} {year}"
    return f"{mon} {year}"
