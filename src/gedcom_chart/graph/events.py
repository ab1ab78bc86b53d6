# src/gedcom_chart/graph/events.py

from __future__ import annotations

from typing import Dict, List

from gedcom_chart.graph.entities import EventEntry, EventRecord
from gedcom_chart.loader.segmenter import GEDCOMNode


# ---------------------------------------------------------------------------
# Event Tag Definitions (GEDCOM 5.5.1 / 5.5.5)
# ---------------------------------------------------------------------------

INDIVIDUAL_EVENT_TAGS: set[str] = {
    "BIRT", "CHR", "CHRA", "BAPM", "BARM", "BASM", "BLES",
    "ADOP", "CONF", "FCOM", "GRAD", "ORDN", "EMIG", "IMMI",
    "NATU", "CENS", "PROB", "WILL", "RETI", "DEAT", "BURI",
    "CREM", "EVEN",
}

FAMILY_EVENT_TAGS: set[str] = {
    "MARR", "MARB", "MARC", "MARL", "MARS",
    "ENGA", "ANUL", "DIV", "DIVF",
}

# Administrative "record last changed" structure; dated, but not a life event.
CHANGE_TAG = "CHAN"


def is_event_tag(tag: str) -> bool:
    """Return True if the tag is any known individual or family event tag."""
    if not tag:
        return False
    t = tag.upper()
    return t in INDIVIDUAL_EVENT_TAGS or t in FAMILY_EVENT_TAGS


def is_event_node(node: GEDCOMNode) -> bool:
    """
    Known event tags, plus any other substructure carrying a DATE
    (RESI, OCCU, EDUC, CHAN, custom _TAGs ...).
    """
    return is_event_tag(node.tag) or node.find_first("DATE") is not None


def _trim(s: str | None) -> str | None:
    if s is None:
        return None
    s = s.strip()
    return s or None


def build_event(node: GEDCOMNode) -> EventEntry:
    """
    Convert an event node into an EventRecord.

    A childless event line ("1 DEAT Y") has nothing to structure and is
    returned as its bare value.
    """
    if not node.children:
        return (node.value or "").strip()

    return EventRecord(
        tag=node.tag.upper(),
        date=node.child_value("DATE"),
        place=node.child_value("PLAC"),
        age=node.child_value("AGE"),
        value=_trim(node.value),
        lineno=node.lineno,
    )


def extract_events(record: GEDCOMNode) -> Dict[str, List[EventEntry]]:
    """Collect the event nodes directly under an INDI or FAM record, by tag, in order."""
    events: Dict[str, List[EventEntry]] = {}
    for child in record.children:
        if is_event_node(child):
            events.setdefault(child.tag.upper(), []).append(build_event(child))
    return events
