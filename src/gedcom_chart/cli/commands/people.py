from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from gedcom_chart.cli.utils import load_gedcom
from gedcom_chart.dates.normalizer import normalize_date
from gedcom_chart.graph.entities import EventRecord, Individual

console = Console()


def _event_date(individual: Individual, tag: str) -> str:
    event = individual.event(tag)
    if isinstance(event, EventRecord) and event.date:
        return normalize_date(event.date)
    return ""


def people_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Only list individuals whose name contains this text",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log load timing",
    ),
):
    """
    List individuals, to help pick a proband xref.
    """
    graph = load_gedcom(gedcom, verbose=verbose)
    people = graph.find_by_name(name) if name else list(graph.individuals.values())

    table = Table(title=f"Individuals in {gedcom.name}")
    table.add_column("Xref", style="bold")
    table.add_column("Name")
    table.add_column("Birth")
    table.add_column("Death")

    for individual in people:
        table.add_row(
            individual.display_xref,
            individual.name or "",
            _event_date(individual, "BIRT"),
            _event_date(individual, "DEAT"),
        )

    console.print(table)
