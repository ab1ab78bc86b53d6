r"""
Event fields.

A rendered event looks like::

    \tbirth = {1850-03-01}{Springfield},
    \tdeath- = {1901},
    \tbirth+ = {1852}{}{out of wedlock},

The tag suffix tells genealogytree what follows: ``-`` date only, nothing
for date and place, ``+`` date, place and a modifier note.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from gedcom_chart.chart.text import normalize_place
from gedcom_chart.dates import normalize_date
from gedcom_chart.graph.entities import EventRecord, is_sentinel
from gedcom_chart.logging import get_logger

log = get_logger(__name__)


class BirthNote(Enum):
    OUT_OF_WEDLOCK = "out of wedlock"
    STILLBORN = "stillborn"


def format_event(
    tag: str,
    event: object,
    indent: int,
    note: Optional[BirthNote] = None,
) -> str:
    """
    Render one event as a field line; "" means "leave it out".

    At indent 0 the line has no tabs and no trailing separator, which is
    the form embedded in family options.
    """
    if event is None or is_sentinel(event):
        return ""
    if not isinstance(event, EventRecord):
        log.warning("Skipping %s: not an event record (%r)", tag, event)
        return ""
    if not event.date:
        return ""

    place = normalize_place(event.place) if event.place else ""

    if note is not None:
        modifier = "+"
    elif place:
        modifier = ""
    else:
        modifier = "-"

    line = f"{tag}{modifier} = {{{normalize_date(event.date)}}}"
    if place or note is not None:
        line += f"{{{place}}}"
    if note is not None:
        line += f"{{{note.value}}}"

    if indent > 0:
        return "\t" * indent + line + ",\n"
    return line
