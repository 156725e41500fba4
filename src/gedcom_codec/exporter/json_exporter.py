"""
json_exporter.py
App-state JSON <-> domain model.

The application keeps its state as
    {"individuals": [...], "relationships": [...]}
with camelCase keys and relationship ``type`` "spouse" or "parent-child".
Optional fields that are unset are omitted on output.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Sequence, Tuple

from gedcom_codec.exceptions import ModelError
from gedcom_codec.logging import get_logger
from gedcom_codec.models import (
    ImportResult,
    Individual,
    Move,
    ParentChildRelationship,
    Relationship,
    SpouseRelationship,
)

log = get_logger(__name__)

# (python attribute, JSON key)
INDIVIDUAL_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("given_name", "givenName"),
    ("family_name", "familyName"),
    ("birth_family_name", "birthFamilyName"),
    ("gender", "gender"),
    ("date_of_birth", "dateOfBirth"),
    ("birth_city", "birthCity"),
    ("birth_region", "birthRegion"),
    ("birth_congregation", "birthCongregation"),
    ("date_of_death", "dateOfDeath"),
    ("death_city", "deathCity"),
    ("death_region", "deathRegion"),
    ("death_congregation", "deathCongregation"),
    ("story", "story"),
)

MOVE_FIELDS = ("date", "city", "region", "congregation", "note")

SPOUSE_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("wedding_date", "weddingDate"),
    ("wedding_city", "weddingCity"),
    ("wedding_region", "weddingRegion"),
    ("wedding_congregation", "weddingCongregation"),
)


def _put(out: Dict[str, Any], key: str, value: Any) -> None:
    if value not in (None, ""):
        out[key] = value


def _require(data: Mapping[str, Any], key: str, what: str) -> Any:
    value = data.get(key)
    if value in (None, ""):
        raise ModelError(f"{what} is missing required field {key!r}: {dict(data)!r}")
    return value


# ---------------------------------------------------------------------------
# Model -> dict
# ---------------------------------------------------------------------------

def move_to_dict(move: Move) -> Dict[str, Any]:
    out: Dict[str, Any] = {"id": move.id}
    for name in MOVE_FIELDS:
        _put(out, name, getattr(move, name))
    return out


def individual_to_dict(ind: Individual) -> Dict[str, Any]:
    out: Dict[str, Any] = {"id": ind.id}
    for attr, key in INDIVIDUAL_FIELDS:
        _put(out, key, getattr(ind, attr))
    out["gender"] = ind.gender
    out["moves"] = [move_to_dict(m) for m in ind.moves]
    return out


def relationship_to_dict(rel: Relationship) -> Dict[str, Any]:
    if isinstance(rel, SpouseRelationship):
        out: Dict[str, Any] = {
            "id": rel.id,
            "type": "spouse",
            "person1Id": rel.person1_id,
            "person2Id": rel.person2_id,
        }
        for attr, key in SPOUSE_FIELDS:
            _put(out, key, getattr(rel, attr))
        return out

    return {
        "id": rel.id,
        "type": "parent-child",
        "parentIds": list(rel.parent_ids),
        "childId": rel.child_id,
    }


def state_to_dict(
    individuals: Sequence[Individual],
    relationships: Sequence[Relationship],
) -> Dict[str, Any]:
    return {
        "individuals": [individual_to_dict(i) for i in individuals],
        "relationships": [relationship_to_dict(r) for r in relationships],
    }


# ---------------------------------------------------------------------------
# dict -> Model
# ---------------------------------------------------------------------------

def move_from_dict(data: Mapping[str, Any], index: int = 0) -> Move:
    # Moves saved by older app versions may lack an id.
    move_id = data.get("id") or f"move-{index + 1}"
    return Move(id=str(move_id), **{name: data.get(name) for name in MOVE_FIELDS})


def individual_from_dict(data: Mapping[str, Any]) -> Individual:
    kwargs = {attr: data.get(key) for attr, key in INDIVIDUAL_FIELDS}
    kwargs["given_name"] = kwargs["given_name"] or ""
    kwargs["family_name"] = kwargs["family_name"] or ""
    kwargs["story"] = kwargs["story"] or ""

    return Individual(
        id=str(_require(data, "id", "Individual")),
        moves=[move_from_dict(m, i) for i, m in enumerate(data.get("moves") or [])],
        **kwargs,
    )


def relationship_from_dict(data: Mapping[str, Any]) -> Relationship:
    rel_type = data.get("type")
    rel_id = str(_require(data, "id", "Relationship"))

    if rel_type == "spouse":
        return SpouseRelationship(
            id=rel_id,
            person1_id=str(_require(data, "person1Id", "Spouse relationship")),
            person2_id=str(_require(data, "person2Id", "Spouse relationship")),
            **{attr: data.get(key) for attr, key in SPOUSE_FIELDS},
        )

    if rel_type == "parent-child":
        parent_ids = [str(p) for p in data.get("parentIds") or [] if p]
        if not parent_ids:
            raise ModelError(f"Parent-child relationship {rel_id} has no parents")
        return ParentChildRelationship(
            id=rel_id,
            parent_ids=parent_ids,
            child_id=str(_require(data, "childId", "Parent-child relationship")),
        )

    raise ModelError(f"Unknown relationship type {rel_type!r} in {rel_id}")


def state_from_dict(data: Mapping[str, Any]) -> ImportResult:
    return ImportResult(
        individuals=[individual_from_dict(i) for i in data.get("individuals") or []],
        relationships=[relationship_from_dict(r) for r in data.get("relationships") or []],
    )


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------

def dumps_state(
    individuals: Sequence[Individual],
    relationships: Sequence[Relationship],
    *,
    pretty: bool = False,
) -> str:
    data = state_to_dict(individuals, relationships)
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def load_state(path: Path) -> ImportResult:
    """Read app-state JSON from disk."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ModelError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ModelError(f"Expected a JSON object in {path}")

    state = state_from_dict(data)
    log.info(
        f"Loaded state from {path}: {len(state.individuals)} individuals, "
        f"{len(state.relationships)} relationships"
    )
    return state


def dump_state(
    path: Path,
    individuals: Sequence[Individual],
    relationships: Sequence[Relationship],
    *,
    pretty: bool = True,
) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_state(individuals, relationships, pretty=pretty), encoding="utf-8")
    log.info(f"State written to: {path}")
    return path
