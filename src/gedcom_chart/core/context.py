from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, TextIO


@dataclass
class ChartContext:
    """
    Shared pipeline context.
    Passed from the CLI into the pipeline; carries the run's inputs.
    """

    config: Any
    logger: Any
    options: Any

    input_path: Optional[str] = None
    proband: Optional[str] = None
    ancestors: int = 0
    descendants: int = 0
    output: Optional[TextIO] = None
