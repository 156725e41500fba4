from __future__ import annotations

from typing import List, Tuple

from gedcom_codec.identity import IdFactory, new_id
from gedcom_codec.loader.segmenter import GEDCOMNode
from gedcom_codec.logging import get_logger
from gedcom_codec.models import Gender, Individual, Move
from gedcom_codec.registry.utils import _iter_children, read_event_block

log = get_logger(__name__)

SEX_CODES = {"M": "male", "F": "female"}


def parse_name(value: str) -> Tuple[str, str]:
    """
    Split a GEDCOM NAME value into (given, family).

    "Anna Maria /Svensson/" -> ("Anna Maria", "Svensson"); without slashes the
    whole value is the given name.
    """
    parts = (value or "").split("/")
    given = parts[0].strip()
    family = parts[1].strip() if len(parts) > 1 else ""
    return given, family


def parse_sex(value: str) -> Gender:
    return SEX_CODES.get((value or "").strip().upper(), "unknown")  # type: ignore[return-value]


def read_story(node: GEDCOMNode) -> str:
    """
    Rebuild a multi-line note: CONT starts a new line, CONC continues the
    current one.
    """
    lines: List[str] = [node.value or ""]
    for child in _iter_children(node):
        if child.tag == "CONT":
            lines.append(child.value or "")
        elif child.tag == "CONC":
            lines[-1] += child.value or ""
    return "\n".join(lines).strip()


def build_individual(node: GEDCOMNode, id_factory: IdFactory = new_id) -> Individual:
    """
    Build an Individual from a level-0 INDI record.

    PURE FUNCTION apart from drawing fresh ids from ``id_factory``. Unknown
    level-1 tags are ignored.
    """
    individual = Individual(id=id_factory())

    for child in _iter_children(node):
        tag = child.tag

        if tag == "NAME":
            individual.given_name, individual.family_name = parse_name(child.value)

        elif tag == "SEX":
            individual.gender = parse_sex(child.value)

        elif tag == "BIRT":
            event = read_event_block(child)
            individual.date_of_birth = event.date
            individual.birth_city = event.city
            individual.birth_region = event.region
            if event.congregation:
                individual.birth_congregation = event.congregation

        elif tag == "DEAT":
            event = read_event_block(child)
            individual.date_of_death = event.date
            individual.death_city = event.city
            individual.death_region = event.region
            if event.congregation:
                individual.death_congregation = event.congregation

        elif tag == "RESI":
            event = read_event_block(child)
            individual.moves.append(
                Move(
                    id=id_factory(),
                    date=event.date,
                    city=event.city,
                    region=event.region,
                    congregation=event.congregation,
                    note=event.note,
                )
            )

        elif tag == "NOTE":
            individual.story = read_story(child)

        else:
            log.debug("Line %d: ignoring INDI tag %s", child.lineno, tag)

    return individual
