from __future__ import annotations

from .normalizer import (
    CIRCA_MARKER,
    MONTHS,
    first_year,
    is_before,
    normalize_date,
    parse_date,
    same_date,
)

__all__ = [
    "CIRCA_MARKER",
    "MONTHS",
    "first_year",
    "is_before",
    "normalize_date",
    "parse_date",
    "same_date",
]
