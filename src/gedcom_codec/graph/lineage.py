"""
Parent -> child lineage graph.

Guards the relationship set against cycles: a parent-child edge must never make
someone their own ancestor. The check is an explicit query made before the edge
is committed, never a side effect of inserting it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set

from gedcom_codec.exceptions import RelationshipCycleError
from gedcom_codec.models import ParentChildRelationship, Relationship, SpouseRelationship


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    reason: Optional[str] = None


@dataclass
class LineageGraph:
    """Directed graph with one edge per (parent, child) pair."""
    children: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def from_relationships(cls, relationships: Iterable[Relationship]) -> "LineageGraph":
        graph = cls()
        for rel in relationships:
            if isinstance(rel, ParentChildRelationship):
                for parent_id in rel.parent_ids:
                    graph._add_edge(parent_id, rel.child_id)
        return graph

    def _add_edge(self, parent_id: str, child_id: str) -> None:
        kids = self.children.setdefault(parent_id, [])
        if child_id not in kids:
            kids.append(child_id)

    def has_path(self, start_id: str, target_id: str) -> bool:
        """True if ``target_id`` is reachable from ``start_id`` (or is it)."""
        stack = [start_id]
        seen: Set[str] = set()
        while stack:
            node = stack.pop()
            if node == target_id:
                return True
            if node in seen:
                continue
            seen.add(node)
            stack.extend(self.children.get(node, []))
        return False

    def would_create_cycle(self, parent_id: str, child_id: str) -> bool:
        """Adding parent -> child closes a cycle iff the child already reaches the parent."""
        return self.has_path(child_id, parent_id)

    def add_parent_child(self, parent_id: str, child_id: str) -> None:
        if self.would_create_cycle(parent_id, child_id):
            raise RelationshipCycleError(
                f"{parent_id} -> {child_id} would make {parent_id} their own ancestor"
            )
        self._add_edge(parent_id, child_id)

    def descendants(self, person_id: str) -> List[str]:
        """All descendants, nearest generations first."""
        result: List[str] = []
        seen: Set[str] = {person_id}
        queue = list(self.children.get(person_id, []))
        while queue:
            node = queue.pop(0)
            if node in seen:
                continue
            seen.add(node)
            result.append(node)
            queue.extend(self.children.get(node, []))
        return result

    def ancestors(self, person_id: str) -> List[str]:
        """All ancestors, nearest generations first."""
        parents: Dict[str, List[str]] = {}
        for parent_id, kids in self.children.items():
            for kid in kids:
                parents.setdefault(kid, []).append(parent_id)

        result: List[str] = []
        seen: Set[str] = {person_id}
        queue = list(parents.get(person_id, []))
        while queue:
            node = queue.pop(0)
            if node in seen:
                continue
            seen.add(node)
            result.append(node)
            queue.extend(parents.get(node, []))
        return result


def would_create_cycle(
    relationships: Iterable[Relationship], parent_id: str, child_id: str
) -> bool:
    return LineageGraph.from_relationships(relationships).would_create_cycle(parent_id, child_id)


def can_add_parent_child(
    relationships: Iterable[Relationship], parent_id: str, child_id: str
) -> ValidationResult:
    if parent_id == child_id:
        return ValidationResult(False, "A person cannot be their own parent.")
    if would_create_cycle(relationships, parent_id, child_id):
        return ValidationResult(False, "This would create a cycle in the family tree.")
    return ValidationResult(True)


def can_add_spouse(
    relationships: Iterable[Relationship], person_a: str, person_b: str
) -> ValidationResult:
    if person_a == person_b:
        return ValidationResult(False, "A person cannot be married to themselves.")

    pair = {person_a, person_b}
    for rel in relationships:
        if isinstance(rel, SpouseRelationship) and {rel.person1_id, rel.person2_id} == pair:
            return ValidationResult(False, "This marriage already exists.")
    return ValidationResult(True)


def find_cycle_edges(relationships: Iterable[Relationship]) -> List[ParentChildRelationship]:
    """
    Replay parent-child relationships in order and return those whose edge
    would close a cycle given the ones accepted before it.
    """
    graph = LineageGraph()
    rejected: List[ParentChildRelationship] = []

    for rel in relationships:
        if not isinstance(rel, ParentChildRelationship):
            continue
        if any(graph.would_create_cycle(p, rel.child_id) for p in rel.parent_ids):
            rejected.append(rel)
            continue
        for parent_id in rel.parent_ids:
            graph.add_parent_child(parent_id, rel.child_id)

    return rejected
