from __future__ import annotations

import io
from pathlib import Path
from typing import List, Optional

import typer

from gedcom_chart.chart.options import ChartOptions
from gedcom_chart.cli.utils import err_console, setup_run, write_text
from gedcom_chart.core.context import ChartContext
from gedcom_chart.core.exceptions import ChartExecutionError, RecordNotFoundError, UsageError
from gedcom_chart.core.pipeline import ChartPipeline
from gedcom_chart.loader.segmenter import GEDCOMStructureError
from gedcom_chart.loader.tokenizer import GedcomSyntaxError
from gedcom_chart.logging import get_logger


def chart_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    xref: str = typer.Option(
        ...,
        "--xref",
        "-x",
        help="Xref of the proband, e.g. I12 or @I12@",
    ),
    ancestors: int = typer.Option(
        0,
        "--ancestors",
        "-a",
        help="Ancestor generations, counting the proband",
    ),
    descendants: int = typer.Option(
        0,
        "--descendants",
        "-d",
        help="Descendant generations, counting the proband",
    ),
    marriage: Optional[str] = typer.Option(
        None,
        "--marriage",
        help="Where to put the marriage event: family, proband or spouse",
    ),
    ignore: Optional[List[str]] = typer.Option(
        None,
        "--ignore",
        help="Xref of an individual or family to leave out (repeatable)",
    ),
    floruit: Optional[bool] = typer.Option(
        None,
        "--floruit/--no-floruit",
        help="Add a floruit range built from all dated events",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Trace the traversal on stderr",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write the chart to a file instead of stdout",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="YAML config file (defaults to config/gedcom_chart.yml)",
    ),
):
    """
    Write a genealogytree chart for one individual.
    """
    try:
        cfg = setup_run(config, debug)
        options = ChartOptions.from_config(
            cfg,
            marriage=marriage,
            ignore=ignore,
            floruit=floruit,
        )
    except (UsageError, FileNotFoundError) as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2)

    buffer = io.StringIO()
    ctx = ChartContext(
        config=cfg,
        logger=get_logger("pipeline"),
        options=options,
        input_path=str(gedcom),
        proband=xref,
        ancestors=ancestors,
        descendants=descendants,
        output=buffer,
    )

    try:
        ChartPipeline(ctx).run()
    except (UsageError, RecordNotFoundError) as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2)
    except (GedcomSyntaxError, GEDCOMStructureError, ChartExecutionError) as exc:
        err_console.print(f"[bold red]Failed:[/bold red] {exc}")
        raise typer.Exit(code=1)

    # Nothing reaches stdout unless the whole chart was built.
    write_text(buffer.getvalue(), out=out)
