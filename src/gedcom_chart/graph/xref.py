# src/gedcom_chart/graph/xref.py
from __future__ import annotations

from typing import Iterable, Optional, Set


def normalize_pointer(pointer: Optional[str]) -> Optional[str]:
    """
    Normalize a GEDCOM xref to its wrapped, upper-case form.

        'I1'     -> '@I1@'
        ' @f3@ ' -> '@F3@'
        ''       -> None
    """
    if pointer is None:
        return None

    p = pointer.strip().upper()
    if not p:
        return None

    return "@" + p.strip("@") + "@"


def bare_xref(pointer: Optional[str]) -> str:
    """Xref without the '@' wrapping, as used in chart ids ('@I1@' -> 'I1')."""
    if not pointer:
        return ""
    return pointer.strip().strip("@")


def looks_like_pointer(value: Optional[str]) -> bool:
    if not value:
        return False
    v = value.strip()
    return len(v) >= 3 and v.startswith("@") and v.endswith("@") and not v.startswith("@#")


def normalize_pointer_set(pointers: Iterable[str]) -> Set[str]:
    """Normalize a collection of user-supplied xrefs, dropping blanks."""
    normalized = (normalize_pointer(p) for p in pointers)
    return {p for p in normalized if p}
