from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from gedcom_codec.dates import parse_partial_date
from gedcom_codec.loader.segmenter import GEDCOMNode
from gedcom_codec.places import split_place

# GEDCOM has no parish tag; a NOTE with this prefix carries it instead.
CONGREGATION_PREFIX = "Församling:"
CONGREGATION_NOTE = f"{CONGREGATION_PREFIX} "


def _iter_children(node):
    """Yield child GEDCOMNodes safely."""
    return getattr(node, "children", []) or []


def split_congregation_note(text: Optional[str]) -> Optional[str]:
    """
    Return the congregation carried by a NOTE, or None for any other note.

    The prefix match is case-insensitive; the remainder is trimmed.
    """
    if not text:
        return None
    stripped = text.strip()
    if stripped.lower().startswith(CONGREGATION_PREFIX.lower()):
        return stripped[len(CONGREGATION_PREFIX):].strip()
    return None


def congregation_note(congregation: str) -> str:
    return f"{CONGREGATION_NOTE}{congregation}"


@dataclass
class EventDetails:
    """Fields read from a BIRT/DEAT/RESI/MARR sub-block."""
    date: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    congregation: Optional[str] = None
    notes: List[str] = field(default_factory=list)

    @property
    def note(self) -> Optional[str]:
        return self.notes[-1] if self.notes else None


def read_event_block(node: GEDCOMNode) -> EventDetails:
    """
    Read DATE, PLAC and NOTE lines directly under an event node.

    A NOTE starting with ``Församling:`` sets the congregation; other NOTE
    text is collected in ``notes`` for callers that keep it.
    """
    details = EventDetails()

    for child in _iter_children(node):
        value = (child.value or "").strip()

        if child.tag == "DATE":
            details.date = parse_partial_date(value)
        elif child.tag == "PLAC":
            place = split_place(value)
            details.city = place.city
            details.region = place.region
        elif child.tag == "NOTE":
            congregation = split_congregation_note(value)
            if congregation is not None:
                details.congregation = congregation or None
            elif value:
                details.notes.append(value)

    return details
