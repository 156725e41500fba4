"""
Rebuild GEDCOM family records from independent relationship facts.

The domain model has no family concept: a couple is one spouse relationship and
each of their children is a separate parent-child relationship. GEDCOM wants one
FAM record per couple holding every child. ``FamilyGrouper`` carries all the
state for one export (pointer maps, family counter, families in creation order)
so nothing lives at module level.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Sequence

from gedcom_codec.logging import get_logger
from gedcom_codec.models import (
    Individual,
    ParentChildRelationship,
    Relationship,
    SpouseRelationship,
)

log = get_logger(__name__)


@dataclass
class Family:
    """One FAM block in GEDCOM pointer space."""
    pointer: str
    husband: Optional[str] = None
    wife: Optional[str] = None
    children: List[str] = field(default_factory=list)
    marriage: Optional[SpouseRelationship] = None

    @property
    def parents(self) -> FrozenSet[str]:
        return frozenset(p for p in (self.husband, self.wife) if p)


@dataclass
class FamilyLinks:
    """Reverse index: families each individual pointer is a spouse or child in."""
    spouse_in: Dict[str, List[str]] = field(default_factory=dict)  # FAMS
    child_in: Dict[str, List[str]] = field(default_factory=dict)   # FAMC


class FamilyGrouper:
    """
    Accumulator for one export run.

    Usage:
        grouper = FamilyGrouper(individuals)
        grouper.add_relationships(relationships)
        grouper.families, grouper.links()
    """

    def __init__(self, individuals: Sequence[Individual]):
        self.pointers: Dict[str, str] = {}
        self.individuals: Dict[str, Individual] = {}
        for n, ind in enumerate(individuals, start=1):
            self.pointers[ind.id] = f"@I{n}@"
            self.individuals[ind.id] = ind

        self.families: List[Family] = []

    # ------------------------------------------------------------------
    # Family creation
    # ------------------------------------------------------------------

    def _open_family(self, husband: Optional[str], wife: Optional[str]) -> Family:
        family = Family(pointer=f"@F{len(self.families) + 1}@", husband=husband, wife=wife)
        self.families.append(family)
        return family

    def add_spouse(self, rel: SpouseRelationship) -> Optional[Family]:
        """Open a family for a couple; slots follow the relationship's field order."""
        husband = self.pointers.get(rel.person1_id)
        wife = self.pointers.get(rel.person2_id)
        if husband is None and wife is None:
            log.warning("Spouse relationship %s references no exported individual", rel.id)
            return None

        family = self._open_family(husband, wife)
        family.marriage = rel
        return family

    def find_family(self, parents: FrozenSet[str]) -> Optional[Family]:
        """First family, in creation order, whose parent set equals ``parents``."""
        for family in self.families:
            if family.parents == parents:
                return family
        return None

    def _assign_slots(self, parent_ids: Sequence[str]) -> Family:
        """
        Open a family for parents that are not yet a couple.

        male -> husband, female -> wife, unknown -> first free slot (husband
        first). A parent whose preferred slot is taken gets the other one.
        With two unknown parents the result depends on input order.
        """
        husband: Optional[str] = None
        wife: Optional[str] = None

        for pid in parent_ids:
            pointer = self.pointers.get(pid)
            if pointer is None or pointer in (husband, wife):
                continue

            gender = self.individuals[pid].gender
            if gender == "female":
                prefer_wife = True
            elif gender == "male":
                prefer_wife = False
            else:
                prefer_wife = husband is not None

            if prefer_wife and wife is None:
                wife = pointer
            elif not prefer_wife and husband is None:
                husband = pointer
            elif husband is None:
                husband = pointer
            elif wife is None:
                wife = pointer

        return self._open_family(husband, wife)

    def add_parent_child(self, rel: ParentChildRelationship) -> Optional[Family]:
        """Put the child into the family of its parents, opening one if needed."""
        child = self.pointers.get(rel.child_id)
        if child is None:
            log.warning("Parent-child relationship %s references unknown child", rel.id)
            return None

        parents = frozenset(self.pointers[p] for p in rel.parent_ids if p in self.pointers)
        if not parents:
            log.warning("Parent-child relationship %s references no known parent", rel.id)
            return None

        family = self.find_family(parents)
        if family is None:
            family = self._assign_slots(rel.parent_ids)

        family.children.append(child)
        return family

    def add_relationships(self, relationships: Sequence[Relationship]) -> None:
        """All spouse relationships first, then parent-child, each in input order."""
        for rel in relationships:
            if isinstance(rel, SpouseRelationship):
                self.add_spouse(rel)

        for rel in relationships:
            if isinstance(rel, ParentChildRelationship):
                self.add_parent_child(rel)

    # ------------------------------------------------------------------
    # Reverse links
    # ------------------------------------------------------------------

    def links(self) -> FamilyLinks:
        links = FamilyLinks()
        for family in self.families:
            for spouse in (family.husband, family.wife):
                if spouse:
                    links.spouse_in.setdefault(spouse, []).append(family.pointer)
            for child in family.children:
                links.child_in.setdefault(child, []).append(family.pointer)
        return links


def group_families(
    individuals: Sequence[Individual],
    relationships: Sequence[Relationship],
) -> FamilyGrouper:
    grouper = FamilyGrouper(individuals)
    grouper.add_relationships(relationships)
    return grouper
