from __future__ import annotations

from .builders import build_family, build_individual
from .entities import (
    STILLBORN_AGE,
    EventEntry,
    EventRecord,
    Family,
    Individual,
    Sex,
    is_sentinel,
)
from .registry import RecordGraph, build_graph, link_entities
from .xref import bare_xref, normalize_pointer, normalize_pointer_set

__all__ = [
    "STILLBORN_AGE",
    "EventEntry",
    "EventRecord",
    "Family",
    "Individual",
    "RecordGraph",
    "Sex",
    "bare_xref",
    "build_family",
    "build_graph",
    "build_individual",
    "is_sentinel",
    "link_entities",
    "normalize_pointer",
    "normalize_pointer_set",
]
