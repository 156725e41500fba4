"""
GEDCOM text -> individuals + relationships.

Pipeline:
    tokenize_text -> segment_records -> build_individual / build_family
    -> relationship synthesis over the collected family records.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from gedcom_codec.identity import IdFactory, new_id
from gedcom_codec.loader.segmenter import GEDCOMNode, segment_records
from gedcom_codec.loader.tokenizer import tokenize_text
from gedcom_codec.logging import get_logger
from gedcom_codec.models import (
    ImportResult,
    ParentChildRelationship,
    Relationship,
    SpouseRelationship,
)
from gedcom_codec.registry.build_family import FamilyRecord, build_family
from gedcom_codec.registry.build_individual import build_individual

log = get_logger(__name__)


def record_kind(node: GEDCOMNode) -> Optional[str]:
    """
    Classify a level-0 record as "INDI", "FAM" or None (HEAD, TRLR, SOUR, ...).

    The record tag decides; files that put something else there are still
    recognised by an ``@I``/``@F`` pointer.
    """
    if node.tag in ("INDI", "FAM"):
        return node.tag

    pointer = (node.pointer or "").upper()
    if pointer.startswith("@I"):
        return "INDI"
    if pointer.startswith("@F"):
        return "FAM"
    return None


def synthesize_relationships(
    families: List[FamilyRecord],
    id_map: Dict[str, str],
    id_factory: IdFactory = new_id,
) -> List[Relationship]:
    """
    Turn family records into independent relationship facts.

    * One spouse relationship per family with HUSB, WIFE and a MARR line.
    * One parent-child relationship per resolvable child, with whichever
      parents resolve to a known individual.
    """
    relationships: List[Relationship] = []

    for fam in families:
        husband_id = id_map.get(fam.husband) if fam.husband else None
        wife_id = id_map.get(fam.wife) if fam.wife else None

        if fam.marriage is not None and husband_id and wife_id:
            relationships.append(
                SpouseRelationship(
                    id=id_factory(),
                    person1_id=husband_id,
                    person2_id=wife_id,
                    wedding_date=fam.marriage.date,
                    wedding_city=fam.marriage.city,
                    wedding_region=fam.marriage.region,
                    wedding_congregation=fam.marriage.congregation,
                )
            )

        parent_ids = [pid for pid in (husband_id, wife_id) if pid]

        for child_ptr in fam.children:
            child_id = id_map.get(child_ptr)
            if not child_id:
                log.debug("Family %s: unknown child %s", fam.pointer, child_ptr)
                continue
            if not parent_ids:
                log.debug("Family %s: child %s has no known parent", fam.pointer, child_ptr)
                continue

            relationships.append(
                ParentChildRelationship(
                    id=id_factory(),
                    parent_ids=list(parent_ids),
                    child_id=child_id,
                )
            )

    return relationships


def parse_gedcom(text: str, id_factory: IdFactory = new_id) -> ImportResult:
    """
    Parse GEDCOM text into individuals and relationships.

    Never raises on content: malformed lines, unknown tags and unsupported
    dates are skipped. Every individual, move and relationship gets a fresh id
    from ``id_factory``; GEDCOM pointers are only used within this call.
    """
    result = ImportResult()
    id_map: Dict[str, str] = {}
    families: List[FamilyRecord] = []

    for record in segment_records(tokenize_text(text)):
        kind = record_kind(record)

        if kind == "INDI":
            individual = build_individual(record, id_factory)
            if record.pointer:
                id_map[record.pointer] = individual.id
            result.individuals.append(individual)
        elif kind == "FAM":
            families.append(build_family(record))
        else:
            log.debug("Line %d: ignoring record %s", record.lineno, record.tag)

    result.relationships = synthesize_relationships(families, id_map, id_factory)
    result.family_count = len(families)

    log.debug(
        "Parsed %d individuals, %d families, %d relationships",
        len(result.individuals),
        result.family_count,
        len(result.relationships),
    )
    return result
