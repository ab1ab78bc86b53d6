"""
Logging package for ``gedcom_chart``.

Use ``get_logger(__name__)`` in modules to share the stderr diagnostic
handler (and the optional log file).
"""

from .logger import (
    IndentFilter,
    get_logger,
    reconfigure,
    set_debug,
)

__all__ = [
    "IndentFilter",
    "get_logger",
    "reconfigure",
    "set_debug",
]
