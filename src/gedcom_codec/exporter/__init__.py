from .family_grouping import Family, FamilyGrouper, FamilyLinks, group_families
from .gedcom_writer import generate_gedcom
from .json_exporter import (
    dump_state,
    dumps_state,
    load_state,
    state_from_dict,
    state_to_dict,
)

__all__ = [
    "Family",
    "FamilyGrouper",
    "FamilyLinks",
    "group_families",
    "generate_gedcom",
    "dump_state",
    "dumps_state",
    "load_state",
    "state_from_dict",
    "state_to_dict",
]
