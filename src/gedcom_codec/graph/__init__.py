from .lineage import (
    LineageGraph,
    ValidationResult,
    can_add_parent_child,
    can_add_spouse,
    find_cycle_edges,
    would_create_cycle,
)

__all__ = [
    "LineageGraph",
    "ValidationResult",
    "can_add_parent_child",
    "can_add_spouse",
    "find_cycle_edges",
    "would_create_cycle",
]
