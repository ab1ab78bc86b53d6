from __future__ import annotations

from typing import Optional

from gedcom_chart.graph.entities import Family, Individual, Sex
from gedcom_chart.graph.events import extract_events
from gedcom_chart.graph.xref import looks_like_pointer, normalize_pointer
from gedcom_chart.loader.segmenter import GEDCOMNode


def _pointer_of(node: GEDCOMNode) -> Optional[str]:
    """
    Xref carried by a link line.

    "1 FAMS @F1@" keeps the xref in the value; hand-built nodes may set
    `pointer` instead.
    """
    if node.pointer:
        return normalize_pointer(node.pointer)
    if looks_like_pointer(node.value):
        return normalize_pointer(node.value)
    return None


def build_individual(node: GEDCOMNode) -> Individual:
    """
    Build an Individual from an INDI record node.

    PURE FUNCTION: links are kept as xrefs; resolution happens in RecordGraph.
    """
    if node.tag.upper() != "INDI":
        raise ValueError(f"Expected INDI node, got {node.tag}")
    if not node.pointer:
        raise ValueError(f"INDI node at line {node.lineno} is missing its xref")

    individual = Individual(
        xref=normalize_pointer(node.pointer),
        sex=Sex.from_gedcom(node.child_value("SEX")),
        lineno=node.lineno,
    )

    for name_node in node.find_children("NAME"):
        full = (name_node.value or "").strip()
        if full:
            individual.names.append(full)

    for famc in node.find_children("FAMC"):
        ptr = _pointer_of(famc)
        if ptr:
            individual.famc = ptr
            break

    for fams in node.find_children("FAMS"):
        ptr = _pointer_of(fams)
        if ptr and ptr not in individual.fams:
            individual.fams.append(ptr)

    for occu in node.find_children("OCCU"):
        value = (occu.value or "").strip()
        if value:
            individual.occupations.append(value)

    individual.events = extract_events(node)
    return individual


def build_family(node: GEDCOMNode) -> Family:
    """Build a Family from a FAM record node."""
    if node.tag.upper() != "FAM":
        raise ValueError(f"Expected FAM node, got {node.tag}")
    if not node.pointer:
        raise ValueError(f"FAM node at line {node.lineno} is missing its xref")

    family = Family(xref=normalize_pointer(node.pointer), lineno=node.lineno)

    husband = node.find_first("HUSB")
    wife = node.find_first("WIFE")
    family.husband = _pointer_of(husband) if husband is not None else None
    family.wife = _pointer_of(wife) if wife is not None else None

    for chil in node.find_children("CHIL"):
        ptr = _pointer_of(chil)
        if ptr:
            family.children.append(ptr)

    family.unmarried = (node.child_value("_UMR") or "").upper() == "Y"
    family.events = extract_events(node)
    return family
