from .build_family import FamilyRecord, build_family
from .build_individual import build_individual
from .build_registry import parse_gedcom, record_kind, synthesize_relationships

__all__ = [
    "FamilyRecord",
    "build_family",
    "build_individual",
    "parse_gedcom",
    "record_kind",
    "synthesize_relationships",
]
