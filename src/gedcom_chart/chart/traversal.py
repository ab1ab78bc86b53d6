"""
Ancestor / descendant walk that writes the genealogytree node structure.

Shapes produced by ``ChartBuilder.build``::

    parent[...]{            child[...]{             sandclock[...]{
        g[id=I1]{...}           g[id=I1]{...}           parent[...]{ ... }
        parent[...]{ ... }      p[id=I2]{...}           p[id=I9]{...}
        p[id=I7]{...}           child[...]{ ... }       child[...]{
    }                           union[...]{                 g[id=I1]{...}
                                    p[id=I5]{...}           c[id=I4]{...}
                                    c[id=I6]{...}       }
                                }                   }
                            }

Generation counts include the proband's own generation: two ancestor
generations are the proband and the parents.
"""

from __future__ import annotations

import io
from enum import Enum
from typing import Optional, Set

from gedcom_chart.chart.emitter import NodeEmitter
from gedcom_chart.chart.events import format_event
from gedcom_chart.chart.individual import render_individual
from gedcom_chart.chart.options import ChartOptions, MarriagePlacement
from gedcom_chart.core.exceptions import RecordNotFoundError, UsageError
from gedcom_chart.graph.entities import Family, Individual
from gedcom_chart.graph.registry import RecordGraph
from gedcom_chart.logging import get_logger

log = get_logger(__name__)

PARENT = "parent"
CHILD = "child"
UNION = "union"
SANDCLOCK = "sandclock"

SUBJECT_KIND = "g"
SPOUSE_KIND = "p"


class Direction(Enum):
    ANCESTORS = "ancestors"
    DESCENDANTS = "descendants"


class ChartBuilder:
    """
    Walks a RecordGraph from one proband and writes nodes through a NodeEmitter.

    The only state kept across calls is the set of xrefs on the current
    recursion path, which stops a malformed file with circular FAMC/FAMS
    links from recursing until the generation budget runs out on a loop.
    """

    def __init__(self, graph: RecordGraph, emitter: NodeEmitter, options: ChartOptions):
        self.graph = graph
        self.emitter = emitter
        self.options = options
        self._path: Set[str] = set()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _trace(self, indent: int, title: str, individual: Individual) -> None:
        log.debug(
            "%s: %s (%s)",
            title,
            individual.name or "?",
            individual.display_xref,
            extra={"indent": indent},
        )

    def _family_of_origin(self, individual: Individual) -> Optional[Family]:
        family = self.graph.famc_of(individual)
        if family is None or self.options.is_ignored(family.xref):
            return None
        return family

    def _first_family(self, individual: Individual) -> Optional[Family]:
        for family in self.graph.fams_of(individual):
            if not self.options.is_ignored(family.xref):
                return family
        return None

    def family_options(self, family: Optional[Family]) -> Optional[str]:
        """
        Node options for a family: ``id=F1`` plus, under the family
        marriage placement, ``family database={marriage = {...}{...}}``.
        """
        if family is None:
            return None

        options = f"id={family.display_xref}"
        if self.options.marriage is MarriagePlacement.FAMILY:
            marriage = format_event("marriage", family.marriage, 0)
            if marriage:
                options += f", family database={{{marriage}}}"
        return options

    def _render(self, kind: str, individual: Individual, indent: int, **kwargs) -> None:
        render_individual(
            self.emitter,
            kind,
            individual,
            indent,
            graph=self.graph,
            options=self.options,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------

    def traverse(
        self,
        direction: Direction,
        individual: Individual,
        indent: int,
        generations: int,
    ) -> None:
        """Write the relatives of `individual` in `direction`, `generations` deep."""
        if generations < 1:
            return
        if direction is Direction.ANCESTORS:
            self._ancestors(individual, indent, generations)
        else:
            self._descendants(individual, indent, generations)

    def _recurse(
        self,
        direction: Direction,
        individual: Individual,
        indent: int,
        generations: int,
        node_type: str,
        options: Optional[str] = None,
    ) -> None:
        if individual.xref in self._path:
            log.warning(
                "Skipping %s (%s): already on the current line, the file has a circular link",
                individual.name or "?",
                individual.display_xref,
                extra={"indent": indent},
            )
            return

        if generations <= 1:
            self._render(node_type[0], individual, indent)
            return

        self.emitter.open_block(indent, node_type, options)
        self._render(SUBJECT_KIND, individual, indent + 1)
        self._path.add(individual.xref)
        self.traverse(direction, individual, indent + 1, generations - 1)
        self._path.discard(individual.xref)
        self.emitter.close_block(indent)

    def _ancestors(self, individual: Individual, indent: int, generations: int) -> None:
        family = self._family_of_origin(individual)
        if family is None:
            return

        for title, parent in (
            ("Father", self.graph.husband_of(family)),
            ("Mother", self.graph.wife_of(family)),
        ):
            if parent is None or self.options.is_ignored(parent.xref):
                continue
            self._trace(indent, title, parent)
            self._recurse(
                Direction.ANCESTORS,
                parent,
                indent,
                generations,
                PARENT,
                self.family_options(self._family_of_origin(parent)),
            )

    def _descendants(self, individual: Individual, indent: int, generations: int) -> None:
        first = True
        for family in self.graph.fams_of(individual):
            if self.options.is_ignored(family.xref):
                continue

            # The first family lives directly in the caller's node; later
            # ones get a union node of their own.
            level = indent
            if not first:
                self.emitter.open_block(indent, UNION, self.family_options(family))
                level = indent + 1

            spouse = self.graph.partner_in(family, individual)
            if spouse is not None and not self.options.is_ignored(spouse.xref):
                self._trace(level, "Spouse", spouse)
                self._render(SPOUSE_KIND, spouse, level, spouse_role=True, family=family)

            for child in self.graph.children_of(family):
                if self.options.is_ignored(child.xref):
                    continue
                self._trace(level, "Child", child)
                self._recurse(
                    Direction.DESCENDANTS,
                    child,
                    level,
                    generations,
                    CHILD,
                    self.family_options(self._first_family(child)),
                )

            if not first:
                self.emitter.close_block(indent)
            first = False

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------

    def build(self, proband_xref: str, ancestors: int = 0, descendants: int = 0) -> None:
        """
        Write the whole chart for `proband_xref`.

        Raises:
            UsageError: a count is negative, or neither count is positive.
            RecordNotFoundError: the proband xref is not in the graph.
        """
        if ancestors < 0 or descendants < 0:
            raise UsageError("Generation counts must not be negative")
        if ancestors == 0 and descendants == 0:
            raise UsageError("You must request ancestors or descendants (or both)")

        proband = self.graph.get_individual(proband_xref)
        if proband is None:
            raise RecordNotFoundError(f"No individual with xref {proband_xref!r}")
        if self.options.is_ignored(proband.xref):
            log.warning("Proband %s is on the ignore list; nothing to draw", proband.display_xref)
            return

        log.debug("Ancestor generations requested: %d", ancestors)
        log.debug("Descendant generations requested: %d", descendants)

        self._path = {proband.xref}
        emitter = self.emitter

        if ancestors > 0 and descendants > 0:
            log.debug("Making a sandclock chart")
            emitter.open_block(0, SANDCLOCK, self.family_options(self._family_of_origin(proband)))
            self.traverse(Direction.ANCESTORS, proband, 1, ancestors - 1)
            emitter.open_block(1, CHILD, self.family_options(self._first_family(proband)))
            self._trace(2, "Proband", proband)
            self._render(SUBJECT_KIND, proband, 2)
            self.traverse(Direction.DESCENDANTS, proband, 2, descendants - 1)
            emitter.close_block(1)
            emitter.close_block(0)
        elif ancestors > 0:
            log.debug("Making a parent chart")
            emitter.open_block(0, PARENT, self.family_options(self._family_of_origin(proband)))
            self._trace(1, "Proband", proband)
            self._render(SUBJECT_KIND, proband, 1)
            self.traverse(Direction.ANCESTORS, proband, 1, ancestors - 1)
            emitter.close_block(0)
        else:
            log.debug("Making a child chart")
            emitter.open_block(0, CHILD, self.family_options(self._first_family(proband)))
            self._trace(1, "Proband", proband)
            self._render(SUBJECT_KIND, proband, 1)
            self.traverse(Direction.DESCENDANTS, proband, 1, descendants - 1)
            emitter.close_block(0)

        self._path.clear()


def render_chart(
    graph: RecordGraph,
    proband_xref: str,
    ancestors: int = 0,
    descendants: int = 0,
    options: Optional[ChartOptions] = None,
) -> str:
    """Build a chart into a string."""
    buffer = io.StringIO()
    builder = ChartBuilder(graph, NodeEmitter(buffer), options or ChartOptions())
    builder.build(proband_xref, ancestors, descendants)
    return buffer.getvalue()
