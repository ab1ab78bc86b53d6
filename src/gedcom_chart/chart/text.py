"""Place and name fragments for genealogytree fields."""

from __future__ import annotations

import re
from typing import Optional, Union

from gedcom_chart.graph.entities import Individual

_SURNAME_RE = re.compile(r"/([^/]+)/")
_NICKNAME_RE = re.compile(r'"([^"]+)"')


def normalize_place(raw: Optional[str]) -> str:
    """
    Keep the most specific element of a comma hierarchy.

        'Springfield, Illinois, USA' -> 'Springfield'
    """
    if not raw:
        return ""
    return raw.split(",", 1)[0].strip()


def normalize_name(subject: Union[Individual, str, None]) -> str:
    """
    Mark up a GEDCOM NAME value.

        'John "Jack" /Smith/' -> 'John \\nick{Jack} \\surn{Smith}'

    Only the first surname span and the first nickname span are replaced.
    """
    if isinstance(subject, Individual):
        name = subject.name
    else:
        name = subject
    if not name:
        return ""

    name = _SURNAME_RE.sub(lambda m: "\\surn{" + m.group(1) + "}", name, count=1)
    name = _NICKNAME_RE.sub(lambda m: "\\nick{" + m.group(1) + "}", name, count=1)
    return name.strip()


def escape_occupation(text: str) -> str:
    """Escape LaTeX's alignment character in free text."""
    return text.replace("&", "\\&")
