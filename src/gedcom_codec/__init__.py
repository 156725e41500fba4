"""
GEDCOM interchange codec for a genealogy record-keeping application.

    from gedcom_codec import parse_gedcom, generate_gedcom

    result = parse_gedcom(text)
    text = generate_gedcom(result.individuals, result.relationships)
"""

from gedcom_codec.dates import format_partial_date, parse_partial_date
from gedcom_codec.exporter.gedcom_writer import generate_gedcom
from gedcom_codec.graph import LineageGraph
from gedcom_codec.models import (
    ImportResult,
    Individual,
    Move,
    ParentChildRelationship,
    Relationship,
    SpouseRelationship,
)
from gedcom_codec.places import join_place, split_place
from gedcom_codec.registry.build_registry import parse_gedcom

__version__ = "0.1.0"

__all__ = [
    "parse_gedcom",
    "generate_gedcom",
    "ImportResult",
    "Individual",
    "Move",
    "ParentChildRelationship",
    "Relationship",
    "SpouseRelationship",
    "parse_partial_date",
    "format_partial_date",
    "split_place",
    "join_place",
    "LineageGraph",
]
