from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Union


Gender = Literal["male", "female", "unknown"]

GENDERS = ("male", "female", "unknown")


def normalize_gender(value: Optional[str]) -> Gender:
    """Map any input onto a known gender; unrecognised or missing is ``unknown``."""
    if value is None:
        return "unknown"
    v = str(value).strip().lower()
    if v in GENDERS:
        return v  # type: ignore[return-value]
    return "unknown"


# -----------------------------
# Individuals
# -----------------------------

@dataclass(slots=True)
class Move:
    """
    A residence change. Moves keep the order they were added in.
    """
    id: str
    date: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    congregation: Optional[str] = None
    note: Optional[str] = None


@dataclass(slots=True)
class Individual:
    """
    One person in the record.

    Dates are partial ISO strings (``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD``).
    ``birth_family_name`` is the maiden/birth surname; export falls back to it
    when ``family_name`` is empty.
    """
    id: str
    given_name: str = ""
    family_name: str = ""
    birth_family_name: Optional[str] = None
    gender: Gender = "unknown"

    date_of_birth: Optional[str] = None
    birth_city: Optional[str] = None
    birth_region: Optional[str] = None
    birth_congregation: Optional[str] = None

    date_of_death: Optional[str] = None
    death_city: Optional[str] = None
    death_region: Optional[str] = None
    death_congregation: Optional[str] = None

    story: str = ""
    moves: List[Move] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.gender = normalize_gender(self.gender)


# -----------------------------
# Relationships
# -----------------------------

@dataclass(slots=True)
class SpouseRelationship:
    """Two people married to each other. ``person1_id``/``person2_id`` carry no role."""
    id: str
    person1_id: str
    person2_id: str
    wedding_date: Optional[str] = None
    wedding_city: Optional[str] = None
    wedding_region: Optional[str] = None
    wedding_congregation: Optional[str] = None

    type: Literal["spouse"] = field(default="spouse", init=False)


@dataclass(slots=True)
class ParentChildRelationship:
    """One child with one or two known parents."""
    id: str
    parent_ids: List[str]
    child_id: str

    type: Literal["parent-child"] = field(default="parent-child", init=False)


Relationship = Union[SpouseRelationship, ParentChildRelationship]


@dataclass(slots=True)
class ImportResult:
    """Result of one GEDCOM import. ``family_count`` is the number of FAM records read."""
    individuals: List[Individual] = field(default_factory=list)
    relationships: List[Relationship] = field(default_factory=list)
    family_count: int = 0

    @property
    def spouse_relationships(self) -> List[SpouseRelationship]:
        return [r for r in self.relationships if isinstance(r, SpouseRelationship)]

    @property
    def parent_child_relationships(self) -> List[ParentChildRelationship]:
        return [r for r in self.relationships if isinstance(r, ParentChildRelationship)]


__all__ = [
    "Gender",
    "GENDERS",
    "normalize_gender",
    "Move",
    "Individual",
    "SpouseRelationship",
    "ParentChildRelationship",
    "Relationship",
    "ImportResult",
]
