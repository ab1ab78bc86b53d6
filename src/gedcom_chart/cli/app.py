from __future__ import annotations

import typer

from gedcom_chart.cli.commands.chart import chart_command
from gedcom_chart.cli.commands.people import people_command

app = typer.Typer(
    name="gedcom-chart",
    help="Draw genealogytree charts from GEDCOM files",
    add_completion=False,
)

app.command("chart")(chart_command)
app.command("people")(people_command)


def main():
    app()


if __name__ == "__main__":
    main()
