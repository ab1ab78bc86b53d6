"""
genealogytree chart generation.

    from gedcom_chart.chart import ChartOptions, render_chart

    text = render_chart(graph, "@I1@", ancestors=3, options=ChartOptions())
"""

from __future__ import annotations

from .emitter import NodeEmitter
from .events import BirthNote, format_event
from .individual import FLORUIT_DEFAULT, birth_note, compute_floruit, render_individual
from .options import ChartOptions, MarriagePlacement
from .text import escape_occupation, normalize_name, normalize_place
from .traversal import ChartBuilder, Direction, render_chart

__all__ = [
    "BirthNote",
    "ChartBuilder",
    "ChartOptions",
    "Direction",
    "FLORUIT_DEFAULT",
    "MarriagePlacement",
    "NodeEmitter",
    "birth_note",
    "compute_floruit",
    "escape_occupation",
    "format_event",
    "normalize_name",
    "normalize_place",
    "render_chart",
    "render_individual",
]
