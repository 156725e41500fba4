from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PlaceParts:
    city: Optional[str] = None
    region: Optional[str] = None


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def split_place(place: Optional[str]) -> PlaceParts:
    """
    Split "city, region" on the first comma.

    A place without a comma is all city; anything after the first comma,
    further commas included, is the region.
    """
    if not place:
        return PlaceParts()

    city, sep, region = place.partition(",")
    if not sep:
        return PlaceParts(city=_clean(city))
    return PlaceParts(city=_clean(city), region=_clean(region))


def join_place(city: Optional[str] = None, region: Optional[str] = None) -> str:
    """Join present parts with ", "; empty string when neither is set."""
    return ", ".join(p for p in (_clean(city), _clean(region)) if p)
