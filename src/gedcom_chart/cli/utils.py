from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_chart.config import ChartConfig, load_config, set_config
from gedcom_chart.graph.registry import RecordGraph
from gedcom_chart.logging import get_logger, reconfigure, set_debug
from gedcom_chart.parser_core import GEDCOMParser

# Charts go to stdout; everything meant for a human goes to stderr.
err_console = Console(stderr=True)


def setup_run(config_path: Optional[Path], debug: bool) -> ChartConfig:
    """
    Load the config (explicit path or the repo default), make it current,
    and rebuild the log handlers from it.
    """
    cfg = set_config(load_config(config_path))
    reconfigure()
    if debug or cfg.debug:
        set_debug(True)
    return cfg


def load_gedcom(path: Path, *, verbose: bool = False) -> RecordGraph:
    """Tokenize, segment and link a GEDCOM file."""
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()
    graph = GEDCOMParser().run(path)
    elapsed = time.perf_counter() - t0

    if verbose:
        get_logger("cli").debug("Loaded %s in %.2fs", path, elapsed)

    return graph


def write_text(payload: str, *, out: Optional[Path]) -> None:
    """Write chart text to a file, or to stdout."""
    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        # The chart already ends with a newline.
        typer.echo(payload, nl=False)
