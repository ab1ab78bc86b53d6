from __future__ import annotations

from typing import Optional, Tuple

from gedcom_chart.chart.emitter import NodeEmitter
from gedcom_chart.chart.events import BirthNote, format_event
from gedcom_chart.chart.options import ChartOptions, MarriagePlacement
from gedcom_chart.chart.text import escape_occupation, normalize_name
from gedcom_chart.dates import first_year, is_before, same_date
from gedcom_chart.graph.entities import STILLBORN_AGE, EventRecord, Family, Individual
from gedcom_chart.graph.events import CHANGE_TAG
from gedcom_chart.graph.registry import RecordGraph

# (earliest, latest) before any year is seen; unchanged means "no data".
FLORUIT_DEFAULT: Tuple[str, str] = ("9999", "0000")


def birth_note(individual: Individual, graph: RecordGraph) -> Optional[BirthNote]:
    """
    Modifier for the birth field.

    Out of wedlock: the parents' family is flagged unmarried (_UMR Y), or
    its marriage comes strictly after the birth. Stillborn (wins over out
    of wedlock): the death carries AGE STILLBORN or falls on the birth date.
    """
    birth = individual.birth
    if not isinstance(birth, EventRecord):
        return None

    note: Optional[BirthNote] = None

    parents = graph.famc_of(individual)
    if parents is not None:
        if parents.unmarried:
            note = BirthNote.OUT_OF_WEDLOCK
        elif parents.marriage_date and is_before(birth.date, parents.marriage_date):
            note = BirthNote.OUT_OF_WEDLOCK

    death = individual.death
    if isinstance(death, EventRecord):
        if (death.age or "").strip().upper() == STILLBORN_AGE:
            note = BirthNote.STILLBORN
        elif same_date(death.date, birth.date):
            note = BirthNote.STILLBORN

    return note


def compute_floruit(individual: Individual) -> Tuple[str, str]:
    """Earliest and latest year over every dated event except CHAN."""
    earliest, latest = FLORUIT_DEFAULT
    for tag, entry in individual.iter_events():
        if tag == CHANGE_TAG or not isinstance(entry, EventRecord):
            continue
        year = first_year(entry.date)
        if year is None:
            continue
        earliest = min(earliest, year)
        latest = max(latest, year)
    return earliest, latest


def _marriage_family(
    individual: Individual,
    graph: RecordGraph,
    options: ChartOptions,
    family: Optional[Family],
) -> Optional[Family]:
    # A spouse drawn inside a union shows that union's marriage, not their first one.
    if family is not None:
        return family
    for fam in graph.fams_of(individual):
        if not options.is_ignored(fam.xref):
            return fam
    return None


def _shows_marriage(options: ChartOptions, spouse_role: bool) -> bool:
    if options.marriage is MarriagePlacement.PROBAND:
        return not spouse_role
    if options.marriage is MarriagePlacement.SPOUSE:
        return spouse_role
    return False


def render_individual(
    emitter: NodeEmitter,
    kind: str,
    individual: Individual,
    indent: int,
    *,
    graph: RecordGraph,
    options: ChartOptions,
    spouse_role: bool = False,
    family: Optional[Family] = None,
) -> None:
    """
    Write one person's node: ``kind[id=I1]{ ...fields... }``.

    `family` is the union the person is shown in, when there is one; it
    is the source of the marriage field under the proband/spouse
    placements (otherwise the first family as spouse is used).
    """
    emitter.open_block(indent, kind, f"id={individual.display_xref}")
    inner = indent + 1

    if individual.sex.label:
        emitter.field(inner, individual.sex.label)

    if individual.name:
        emitter.field(inner, f"name = {{{normalize_name(individual)}}}")

    if individual.birth is not None:
        emitter.write(
            format_event("birth", individual.birth, inner, birth_note(individual, graph))
        )

    if individual.baptism is not None:
        emitter.write(format_event("baptism", individual.baptism, inner))
    elif individual.christening is not None:
        emitter.write(format_event("baptism", individual.christening, inner))

    emitter.write(format_event("death", individual.death, inner))
    emitter.write(format_event("burial", individual.burial, inner))
    emitter.write(format_event("cremation", individual.cremation, inner))

    if individual.occupation:
        emitter.field(inner, f"profession = {{{escape_occupation(individual.occupation)}}}")

    if _shows_marriage(options, spouse_role):
        fam = _marriage_family(individual, graph, options, family)
        if fam is not None:
            emitter.write(format_event("marriage", fam.marriage, inner))

    if options.floruit:
        earliest, latest = compute_floruit(individual)
        if (earliest, latest) != FLORUIT_DEFAULT:
            emitter.field(inner, f"floruit- = {{{earliest}/{latest}}}")

    emitter.close_block(indent)
