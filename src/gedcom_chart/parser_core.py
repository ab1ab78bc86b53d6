"""
parser_core.py
GEDCOM file -> RecordGraph, with logging around each stage.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

from gedcom_chart.config import get_config
from gedcom_chart.graph.registry import RecordGraph, build_graph
from gedcom_chart.loader.tokenizer import Token, tokenize_file, tokenize_lines
from gedcom_chart.loader.tree_builder import GEDCOMTree, build_tree
from gedcom_chart.logging import get_logger


class GEDCOMParser:
    """
    High-level loader:
      - tokenizes
      - builds the record tree (CONC/CONT folded)
      - builds the record graph of individuals and families
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("parser_core")

        self.tokens: List[Token] = []
        self.tree: Optional[GEDCOMTree] = None
        self.graph: Optional[RecordGraph] = None

    def _build(self) -> RecordGraph:
        self.tree = build_tree(self.tokens)
        self.graph = build_graph(self.tree)
        self.log.debug(
            "Record graph ready: %d individuals, %d families",
            len(self.graph.individuals),
            len(self.graph.families),
        )
        return self.graph

    def run(self, input_path: Union[str, Path]) -> RecordGraph:
        """Full load sequence for a file on disk."""
        self.log.debug("Tokenizing GEDCOM input: %s", input_path)
        try:
            self.tokens = list(tokenize_file(input_path))
        except Exception:
            self.log.exception("Tokenization failed.")
            raise

        self.log.debug("Token count = %d", len(self.tokens))
        return self._build()

    def parse_lines(self, lines: Iterable[str]) -> RecordGraph:
        """Load from in-memory lines (tests, stdin)."""
        self.tokens = list(tokenize_lines(lines))
        return self._build()


def parse_gedcom_text(text: str) -> RecordGraph:
    return GEDCOMParser().parse_lines(text.splitlines())
