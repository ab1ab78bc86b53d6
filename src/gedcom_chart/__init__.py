"""
gedcom_chart: GEDCOM -> LaTeX genealogytree charts.
"""

__version__ = "0.1.0"
