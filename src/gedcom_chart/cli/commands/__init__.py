"""
CLI command modules for gedcom_chart.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_chart.cli.commands.chart import chart_command
from gedcom_chart.cli.commands.people import people_command

__all__ = [
    "chart_command",
    "people_command",
]
