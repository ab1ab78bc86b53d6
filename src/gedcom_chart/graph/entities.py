from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Union

from gedcom_chart.graph.xref import bare_xref


# -----------------------------
# Small atoms
# -----------------------------

class Sex(Enum):
    MALE = "M"
    FEMALE = "F"
    UNKNOWN = "U"

    @classmethod
    def from_gedcom(cls, value: Optional[str]) -> "Sex":
        v = (value or "").strip().upper()[:1]
        if v == "M":
            return cls.MALE
        if v == "F":
            return cls.FEMALE
        return cls.UNKNOWN

    @property
    def label(self) -> Optional[str]:
        """Chart keyword for the sex, None when unknown."""
        if self is Sex.MALE:
            return "male"
        if self is Sex.FEMALE:
            return "female"
        return None


# AGE value GEDCOM uses for a child born dead.
STILLBORN_AGE = "STILLBORN"

# Bare values of a childless event line that only say "this happened".
SENTINEL_EVENT_VALUES = frozenset({"Y", "0", ""})


@dataclass(slots=True)
class EventRecord:
    """
    An event line with substructure (BIRT, DEAT, MARR, RESI, CHAN, ...).

    `date`, `place` and `age` keep the raw GEDCOM values; rendering
    normalizes them.
    """
    tag: str
    date: Optional[str] = None
    place: Optional[str] = None
    age: Optional[str] = None
    value: Optional[str] = None
    lineno: Optional[int] = None


# An event line without substructure is kept as its bare value, e.g. the
# "Y" of "1 DEAT Y". Consumers must check for EventRecord before use.
EventEntry = Union[EventRecord, str]


def is_sentinel(entry: object) -> bool:
    return isinstance(entry, str) and entry.strip().upper() in SENTINEL_EVENT_VALUES


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True)
class Individual:
    xref: str

    names: List[str] = field(default_factory=list)
    sex: Sex = Sex.UNKNOWN
    famc: Optional[str] = None
    fams: List[str] = field(default_factory=list)
    events: Dict[str, List[EventEntry]] = field(default_factory=dict)
    occupations: List[str] = field(default_factory=list)
    lineno: Optional[int] = None

    @property
    def display_xref(self) -> str:
        return bare_xref(self.xref)

    @property
    def name(self) -> Optional[str]:
        return self.names[0] if self.names else None

    @property
    def occupation(self) -> Optional[str]:
        if not self.occupations:
            return None
        return ", ".join(self.occupations)

    def event(self, tag: str) -> Optional[EventEntry]:
        entries = self.events.get(tag.upper())
        return entries[0] if entries else None

    def iter_events(self) -> Iterator[Tuple[str, EventEntry]]:
        for tag, entries in self.events.items():
            for entry in entries:
                yield tag, entry

    @property
    def birth(self) -> Optional[EventEntry]:
        return self.event("BIRT")

    @property
    def baptism(self) -> Optional[EventEntry]:
        return self.event("BAPM")

    @property
    def christening(self) -> Optional[EventEntry]:
        return self.event("CHR")

    @property
    def death(self) -> Optional[EventEntry]:
        return self.event("DEAT")

    @property
    def burial(self) -> Optional[EventEntry]:
        return self.event("BURI")

    @property
    def cremation(self) -> Optional[EventEntry]:
        return self.event("CREM")


@dataclass(slots=True)
class Family:
    xref: str

    husband: Optional[str] = None
    wife: Optional[str] = None
    children: List[str] = field(default_factory=list)
    events: Dict[str, List[EventEntry]] = field(default_factory=dict)
    unmarried: bool = False
    lineno: Optional[int] = None

    @property
    def display_xref(self) -> str:
        return bare_xref(self.xref)

    def event(self, tag: str) -> Optional[EventEntry]:
        entries = self.events.get(tag.upper())
        return entries[0] if entries else None

    @property
    def marriage(self) -> Optional[EventEntry]:
        return self.event("MARR")

    @property
    def marriage_date(self) -> Optional[str]:
        marriage = self.marriage
        if isinstance(marriage, EventRecord):
            return marriage.date
        return None
