"""
Individuals + relationships -> GEDCOM 5.5.1 text.

Pure: no file access, no config lookups, deterministic for a given input order.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from gedcom_codec.config import DEFAULT_SOURCE
from gedcom_codec.dates import format_partial_date
from gedcom_codec.exporter.family_grouping import Family, FamilyLinks, group_families
from gedcom_codec.logging import get_logger
from gedcom_codec.models import Individual, Move, Relationship
from gedcom_codec.places import join_place
from gedcom_codec.registry.utils import congregation_note

log = get_logger(__name__)

SEX_CODES = {"male": "M", "female": "F"}


def _line(level: int, tag: str, value: Optional[str] = None) -> str:
    if value:
        return f"{level} {tag} {value}"
    return f"{level} {tag}"


def header_lines(source: str = DEFAULT_SOURCE) -> List[str]:
    return [
        "0 HEAD",
        _line(1, "SOUR", source),
        "1 GEDC",
        "2 VERS 5.5.1",
        "2 FORM LINEAGE-LINKED",
        "1 CHAR UTF-8",
    ]


def event_lines(
    tag: str,
    date: Optional[str],
    city: Optional[str],
    region: Optional[str],
    congregation: Optional[str],
    note: Optional[str] = None,
    *,
    always: bool = False,
) -> List[str]:
    """
    A level-1 event with optional DATE, PLAC, congregation NOTE and free NOTE.

    Empty unless some field is set or ``always`` is true.
    """
    gedcom_date = format_partial_date(date)
    place = join_place(city, region)

    if not (always or gedcom_date or place or congregation or note):
        return []

    lines = [_line(1, tag)]
    if gedcom_date:
        lines.append(_line(2, "DATE", gedcom_date))
    if place:
        lines.append(_line(2, "PLAC", place))
    if congregation:
        lines.append(_line(2, "NOTE", congregation_note(congregation)))
    if note:
        lines.append(_line(2, "NOTE", note))
    return lines


def story_lines(story: Optional[str]) -> List[str]:
    """``1 NOTE <first>`` then ``2 CONT <line>`` per following line."""
    if not story:
        return []
    first, *rest = story.replace("\r\n", "\n").split("\n")
    return [_line(1, "NOTE", first)] + [_line(2, "CONT", text) for text in rest]


def move_lines(move: Move) -> List[str]:
    return event_lines(
        "RESI",
        move.date,
        move.city,
        move.region,
        move.congregation,
        move.note,
        always=True,
    )


def individual_lines(ind: Individual, pointer: str, links: FamilyLinks) -> List[str]:
    family_name = ind.family_name or ind.birth_family_name or ""
    lines = [
        f"0 {pointer} INDI",
        f"1 NAME {ind.given_name or ''} /{family_name}/",
        _line(1, "SEX", SEX_CODES.get(ind.gender, "U")),
    ]

    lines += event_lines(
        "BIRT", ind.date_of_birth, ind.birth_city, ind.birth_region, ind.birth_congregation
    )
    lines += event_lines(
        "DEAT", ind.date_of_death, ind.death_city, ind.death_region, ind.death_congregation
    )

    for move in ind.moves or []:
        lines += move_lines(move)

    lines += story_lines(ind.story)

    lines += [_line(1, "FAMS", fam) for fam in links.spouse_in.get(pointer, [])]
    lines += [_line(1, "FAMC", fam) for fam in links.child_in.get(pointer, [])]
    return lines


def family_lines(family: Family) -> List[str]:
    lines = [f"0 {family.pointer} FAM"]
    if family.husband:
        lines.append(_line(1, "HUSB", family.husband))
    if family.wife:
        lines.append(_line(1, "WIFE", family.wife))

    # Only families that came from a spouse relationship are marriages.
    if family.marriage is not None:
        rel = family.marriage
        lines += event_lines(
            "MARR",
            rel.wedding_date,
            rel.wedding_city,
            rel.wedding_region,
            rel.wedding_congregation,
            always=True,
        )

    lines += [_line(1, "CHIL", child) for child in family.children]
    return lines


def generate_gedcom(
    individuals: Sequence[Individual],
    relationships: Sequence[Relationship],
    *,
    source: str = DEFAULT_SOURCE,
) -> str:
    """
    Render individuals and relationships as GEDCOM text.

    Individuals get ``@I<n>@`` in input order; families get ``@F<k>@`` in the
    order they are opened (spouse relationships first, then parent-child
    relationships that match no existing couple).
    """
    grouper = group_families(individuals, relationships)
    links = grouper.links()

    lines = header_lines(source)
    for ind in individuals:
        lines += individual_lines(ind, grouper.pointers[ind.id], links)
    for family in grouper.families:
        lines += family_lines(family)
    lines.append("0 TRLR")

    log.debug(
        "Generated GEDCOM: %d individuals, %d families, %d lines",
        len(individuals),
        len(grouper.families),
        len(lines),
    )
    return "\n".join(lines)
