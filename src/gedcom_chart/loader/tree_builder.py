# src/gedcom_chart/loader/tree_builder.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .segmenter import GEDCOMNode, segment_lines
from .tokenizer import Token
from .value_reconstructor import reconstruct_values


@dataclass
class GEDCOMTree:
    """
    Level-0 records of one GEDCOM file (HEAD, INDI, FAM, ..., TRLR) in file
    order, indexed by tag. The record graph is built from this.
    """

    records: List[GEDCOMNode]

    by_tag: Dict[str, List[GEDCOMNode]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.by_tag = {}
        for record in self.records:
            if record.tag:
                self.by_tag.setdefault(record.tag.upper(), []).append(record)

    def find_records_by_tag(self, tag: str) -> List[GEDCOMNode]:
        """All level-0 records with this tag (case-insensitive)."""
        if not tag:
            return []
        return list(self.by_tag.get(tag.upper(), []))


def build_tree(tokens: Iterable[Token], *, reconstruct: bool = True) -> GEDCOMTree:
    """
    tokens -> nested records -> CONC/CONT folded -> GEDCOMTree

    `reconstruct=False` keeps continuation lines as child nodes.
    """
    records = segment_lines(list(tokens))
    if reconstruct:
        reconstruct_values(records)
    return GEDCOMTree(records=records)
