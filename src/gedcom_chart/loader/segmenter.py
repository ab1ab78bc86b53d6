# src/gedcom_chart/loader/segmenter.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .tokenizer import Token


@dataclass
class GEDCOMNode:
    """
    One GEDCOM line placed in the record hierarchy.

    Attributes:
        level: GEDCOM level (0 for records).
        tag: The GEDCOM tag.
        value: The line value; after reconstruction this includes CONC/CONT text.
        pointer: Record xref for level-0 records ("@I1@"), else None.
        lineno: Source line number, for diagnostics.
        children: Substructure nodes in source order.
    """

    level: int
    tag: str
    value: str = ""
    pointer: Optional[str] = None
    lineno: int = 0
    children: List["GEDCOMNode"] = field(default_factory=list)

    def add_child(self, child: "GEDCOMNode") -> None:
        self.children.append(child)

    def find_children(self, tag: str) -> List["GEDCOMNode"]:
        """Return all direct children with a given tag."""
        return [c for c in self.children if c.tag == tag]

    def find_first(self, tag: str) -> Optional["GEDCOMNode"]:
        """Return the first direct child with this tag, or None."""
        for c in self.children:
            if c.tag == tag:
                return c
        return None

    def child_value(self, tag: str) -> Optional[str]:
        """Stripped value of the first child with this tag; None when absent or blank."""
        child = self.find_first(tag)
        if child is None:
            return None
        value = (child.value or "").strip()
        return value or None


class GEDCOMStructureError(Exception):
    """Raised when a line's level does not fit under the previous lines."""


def segment_lines(tokens: List[Token]) -> List[GEDCOMNode]:
    """
    Nest a flat token list into level-0 record nodes.

    A level-N line becomes a child of the most recent level-(N-1) line.
    A level may rise by at most one from one line to the next.
    """
    records: List[GEDCOMNode] = []
    open_nodes: List[GEDCOMNode] = []  # open_nodes[level] = latest node at that level

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
            open_nodes = [node]
            continue

        if not open_nodes:
            raise GEDCOMStructureError(
                f"Line {tok.lineno}: level {tok.level} line before any level 0 record"
            )
        if tok.level > len(open_nodes):
            raise GEDCOMStructureError(
                f"Line {tok.lineno}: level jumped from {len(open_nodes) - 1} to {tok.level}"
            )

        del open_nodes[tok.level:]
        open_nodes[-1].add_child(node)
        open_nodes.append(node)

    return records
