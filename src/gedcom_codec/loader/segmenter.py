# src/gedcom_codec/loader/segmenter.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from gedcom_codec.logging import get_logger

from .tokenizer import Token

log = get_logger(__name__)


@dataclass
class GEDCOMNode:
    """
    A hierarchical GEDCOM node produced from a flat token stream.

    A level-1 node owns every following line of a deeper level up to the next
    line at level 1 or 0, so reading a BIRT/DEAT/RESI/NOTE block is a walk
    over ``children`` rather than an index scan over raw lines.

    Attributes:
        level: GEDCOM level number (0 for records, >0 for substructures).
        tag: The GEDCOM tag (HEAD, INDI, BIRT, DATE, NOTE, etc.).
        value: The raw tag value (string).
        pointer: Optional GEDCOM @XREF@ pointer on level-0 records.
        children: Nested GEDCOMNode list ordered as they appeared.
        lineno: Line number in original text (for debugging).
    """

    level: int
    tag: str
    value: str = ""
    pointer: Optional[str] = None
    lineno: int = 0
    children: List["GEDCOMNode"] = field(default_factory=list)

    def add_child(self, child: "GEDCOMNode") -> None:
        self.children.append(child)

    def __repr__(self) -> str:
        ptr = f" {self.pointer}" if self.pointer else ""
        return f"<GEDCOMNode {self.level}{ptr} {self.tag}: {self.value!r}>"


def segment_records(tokens: Iterable[Token]) -> List[GEDCOMNode]:
    """
    Convert a flat token stream into level-0 record nodes with nested children.

    Rules:
        - Level 0 tokens start a new record.
        - A level N token becomes a child of the most recent open node at
          level N-1.
        - A level that jumps by more than one attaches to the deepest open
          node instead of failing.
        - Tokens before the first level-0 line have no record and are dropped.
    """
    records: List[GEDCOMNode] = []
    stack: List[GEDCOMNode] = []  # stack[i] = last open node at depth i

    for tok in tokens:
        node = GEDCOMNode(
            level=tok.level,
            tag=tok.tag,
            value=tok.value,
            pointer=tok.pointer,
            lineno=tok.lineno,
        )

        if tok.level == 0:
            records.append(node)
            stack = [node]
            continue

        if not stack:
            log.debug("Line %d: level %d before any record, skipped", tok.lineno, tok.level)
            continue

        if tok.level > len(stack):
            log.debug(
                "Line %d: level jumped from %d to %d, attaching to deepest node",
                tok.lineno,
                len(stack) - 1,
                tok.level,
            )

        depth = min(tok.level, len(stack))
        stack = stack[:depth]
        stack[-1].add_child(node)
        stack.append(node)

    return records
