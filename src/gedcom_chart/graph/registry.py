from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from gedcom_chart.graph.builders import build_family, build_individual
from gedcom_chart.graph.entities import Family, Individual, Sex
from gedcom_chart.graph.xref import normalize_pointer
from gedcom_chart.loader.tree_builder import GEDCOMTree


@dataclass(slots=True)
class RecordGraph:
    """
    Read-only view of a GEDCOM file's individuals and families, indexed by xref.

    Accessors resolve xrefs and return None (or skip) when a reference
    does not resolve.
    """
    individuals: Dict[str, Individual] = field(default_factory=dict)
    families: Dict[str, Family] = field(default_factory=dict)

    def register_individual(self, ind: Individual) -> None:
        self.individuals[ind.xref] = ind

    def register_family(self, fam: Family) -> None:
        self.families[fam.xref] = fam

    def get_individual(self, pointer: Optional[str]) -> Optional[Individual]:
        key = normalize_pointer(pointer)
        return self.individuals.get(key) if key else None

    def get_family(self, pointer: Optional[str]) -> Optional[Family]:
        key = normalize_pointer(pointer)
        return self.families.get(key) if key else None

    # -----------------------------
    # Relationship accessors
    # -----------------------------

    def famc_of(self, ind: Individual) -> Optional[Family]:
        return self.get_family(ind.famc)

    def fams_of(self, ind: Individual) -> List[Family]:
        families = (self.get_family(ptr) for ptr in ind.fams)
        return [fam for fam in families if fam is not None]

    def husband_of(self, fam: Family) -> Optional[Individual]:
        return self.get_individual(fam.husband)

    def wife_of(self, fam: Family) -> Optional[Individual]:
        return self.get_individual(fam.wife)

    def children_of(self, fam: Family) -> List[Individual]:
        children = (self.get_individual(ptr) for ptr in fam.children)
        return [child for child in children if child is not None]

    def partner_in(self, fam: Family, ind: Individual) -> Optional[Individual]:
        """
        The other spouse of `fam`, seen from `ind`.

        Decided by position in the family first, by sex when `ind` is not
        listed as a spouse.
        """
        if fam.husband == ind.xref:
            return self.wife_of(fam)
        if fam.wife == ind.xref:
            return self.husband_of(fam)
        if ind.sex is Sex.MALE:
            return self.wife_of(fam)
        return self.husband_of(fam)

    def find_by_name(self, text: str) -> List[Individual]:
        """Individuals whose names contain `text` (case-insensitive, slashes ignored)."""
        needle = text.strip().lower()
        found: List[Individual] = []
        for ind in self.individuals.values():
            names = " ".join(ind.names).replace("/", "").lower()
            if needle in names:
                found.append(ind)
        return found


def link_entities(graph: RecordGraph) -> None:
    """
    Fill in links that only one side of the file records.

    A FAM's HUSB/WIFE adds the family to that individual's FAMS when
    missing (appended after the INDI's own order); a FAM's CHIL sets the
    child's FAMC when the INDI has none. Idempotent.
    """
    for fam in graph.families.values():
        for spouse_ptr in (fam.husband, fam.wife):
            spouse = graph.get_individual(spouse_ptr)
            if spouse is not None and fam.xref not in spouse.fams:
                spouse.fams.append(fam.xref)

        for child_ptr in fam.children:
            child = graph.get_individual(child_ptr)
            if child is not None and child.famc is None:
                child.famc = fam.xref


def build_graph(tree: GEDCOMTree) -> RecordGraph:
    graph = RecordGraph()

    for node in tree.find_records_by_tag("INDI"):
        graph.register_individual(build_individual(node))
    for node in tree.find_records_by_tag("FAM"):
        graph.register_family(build_family(node))

    link_entities(graph)
    return graph
