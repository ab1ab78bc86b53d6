# src/gedcom_chart/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    from gedcom_chart.loader import tokenize_file, build_tree

    tree = build_tree(tokenize_file("family.ged"))
"""

from __future__ import annotations

from .segmenter import GEDCOMNode, GEDCOMStructureError, segment_lines
from .tokenizer import GedcomSyntaxError, Token, tokenize_file, tokenize_line, tokenize_lines
from .tree_builder import GEDCOMTree, build_tree
from .value_reconstructor import reconstruct_values

__all__ = [
    "Token",
    "GedcomSyntaxError",
    "GEDCOMNode",
    "GEDCOMStructureError",
    "GEDCOMTree",
    "tokenize_file",
    "tokenize_line",
    "tokenize_lines",
    "segment_lines",
    "build_tree",
    "reconstruct_values",
]
