from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from gedcom_codec.loader.segmenter import GEDCOMNode
from gedcom_codec.logging import get_logger
from gedcom_codec.registry.utils import EventDetails, _iter_children, read_event_block

log = get_logger(__name__)


@dataclass
class FamilyRecord:
    """
    A FAM record as read from the file, still in GEDCOM pointer space.

    ``marriage`` is set when the record has a MARR line, even an empty one.
    """
    pointer: Optional[str]
    husband: Optional[str] = None
    wife: Optional[str] = None
    children: List[str] = field(default_factory=list)
    marriage: Optional[EventDetails] = None

    @property
    def has_marriage(self) -> bool:
        return self.marriage is not None


def build_family(node: GEDCOMNode) -> FamilyRecord:
    """
    Build a FamilyRecord from a level-0 FAM record.

    PURE FUNCTION:
      - no individual lookup
      - no relationship synthesis
    """
    family = FamilyRecord(pointer=node.pointer)

    for child in _iter_children(node):
        tag = child.tag
        value = (child.value or "").strip()

        if tag == "HUSB":
            family.husband = value or None
        elif tag == "WIFE":
            family.wife = value or None
        elif tag == "CHIL":
            if value:
                family.children.append(value)
        elif tag == "MARR":
            family.marriage = read_event_block(child)
        else:
            log.debug("Line %d: ignoring FAM tag %s", child.lineno, tag)

    return family
