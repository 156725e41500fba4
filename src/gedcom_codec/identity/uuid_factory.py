# src/gedcom_codec/identity/uuid_factory.py
from __future__ import annotations

import itertools
import uuid
from typing import Callable


IdFactory = Callable[[], str]


def new_id() -> str:
    """Fresh opaque identifier for an imported individual, move or relationship."""
    return str(uuid.uuid4())


def sequential_ids(prefix: str = "id") -> IdFactory:
    """
    Deterministic factory yielding ``<prefix>-1``, ``<prefix>-2``, ...

    Each call returns an independent counter, so two imports never share state.
    """
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


__all__ = [
    "IdFactory",
    "new_id",
    "sequential_ids",
]
