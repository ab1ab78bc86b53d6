# src/gedcom_chart/loader/value_reconstructor.py

"""
Fold GEDCOM CONC / CONT continuation lines into their parent's value.

    CONC: append the text directly (long NAME, PLAC or NOTE split mid-word).
    CONT: append a newline, then the text.

After reconstruction the continuation nodes are gone, so every downstream
reader (names, places, occupations) sees one complete value.
"""

from __future__ import annotations

from typing import List

from .segmenter import GEDCOMNode

_CONTINUATION_TAGS = {"CONC", "CONT"}


def _reconstruct_node(node: GEDCOMNode) -> None:
    """Rebuild `node.value` in place and recurse into the remaining children."""
    parts = [node.value or ""]
    kept: List[GEDCOMNode] = []

    for child in node.children:
        tag = (child.tag or "").upper()
        if tag == "CONC":
            parts.append(child.value or "")
        elif tag == "CONT":
            parts.append("\n" + (child.value or ""))
        else:
            _reconstruct_node(child)
            kept.append(child)

    node.value = "".join(parts)
    node.children = kept


def reconstruct_values(records: List[GEDCOMNode]) -> List[GEDCOMNode]:
    """
    Reconstruct every value below the given records.

    Returns the same list, mutated in place.
    """
    for rec in records:
        _reconstruct_node(rec)
    return records
