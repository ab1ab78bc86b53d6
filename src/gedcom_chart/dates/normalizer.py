# src/gedcom_chart/dates/normalizer.py

"""
GEDCOM date handling.

Two views of the same DATE value:

* ``normalize_date`` rewrites it into genealogytree's date syntax
  (``1900-03-15``, ``(caAD)1850``, ``/1850``, ``1800/1810``). It is
  best-effort and returns unrecognized input unchanged.
* ``parse_date`` picks out its date or range bounds, which ``is_before``
  uses to order two dates.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple


# ---------------------------------------------------------------------------
# Months
# ---------------------------------------------------------------------------

MONTHS = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "SEPT": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}

CIRCA_MARKER = "(caAD)"


# ---------------------------------------------------------------------------
# genealogytree rendering
# ---------------------------------------------------------------------------

_MONTH_NAMES = "JAN|FEB|MAR|APR|MAY|JUN|JUL|AUG|SEP|OCT|NOV|DEC"

_CALENDAR_ESCAPE_RE = re.compile(r"^@#D[A-Z ]+@\s*", re.IGNORECASE)
_CIRCA_RE = re.compile(r"^(?:ABT|EST|CAL)\s+", re.IGNORECASE)
_DAY_MONTH_YEAR_RE = re.compile(
    rf"(?:(?<!\d)(\d{{1,2}})\s+)?\b({_MONTH_NAMES})\s+(\d{{4}})\b",
    re.IGNORECASE,
)
_BEFORE_RE = re.compile(r"^BEF\s+(.*)$", re.IGNORECASE)
_AFTER_RE = re.compile(r"^AFT\s+(.*)$", re.IGNORECASE)
_FROM_TO_RE = re.compile(r"^FROM\s+(.*?)\s+TO\s+(.*)$", re.IGNORECASE)
_FROM_RE = re.compile(r"^FROM\s+(.*)$", re.IGNORECASE)
_TO_RE = re.compile(r"^TO\s+(.*)$", re.IGNORECASE)
_BETWEEN_RE = re.compile(r"^BET\s+(.*?)\s+AND\s+(.*)$", re.IGNORECASE)
_ANNOTATION_RE = re.compile(r"\s+\([^)]+\)")
_YEAR_RE = re.compile(r"(?<!\d)(\d{4})(?!\d)")


def _iso_date(match: re.Match) -> str:
    day, month, year = match.group(1), match.group(2), match.group(3)
    iso = f"{year}-{MONTHS[month.upper()]:02d}"
    if day is not None:
        iso += f"-{int(day):02d}"
    return iso


def normalize_date(raw: Optional[str]) -> str:
    """
    Rewrite a GEDCOM DATE value in genealogytree syntax.

        'ABT 1850'            -> '(caAD)1850'
        '15 MAR 1900'         -> '1900-03-15'
        'MAR 1900'            -> '1900-03'
        'BEF 1850'            -> '/1850'
        'AFT 1850'            -> '1850/'
        'FROM 1900 TO 1910'   -> '1900/1910'
        'BET 1800 AND 1810'   -> '1800/1810'
        '1 JAN 1750 (Julian)' -> '1750-01-01'

    Anything not recognized passes through unchanged. Already-normalized
    values ('1900-03-15') come back as they went in.
    """
    if raw is None:
        return ""

    date = _CALENDAR_ESCAPE_RE.sub("", str(raw).strip())
    date = _CIRCA_RE.sub(CIRCA_MARKER, date)
    date = _DAY_MONTH_YEAR_RE.sub(_iso_date, date)

    date = _BEFORE_RE.sub(r"/\1", date)
    date = _AFTER_RE.sub(r"\1/", date)
    if _FROM_TO_RE.match(date):
        date = _FROM_TO_RE.sub(r"\1/\2", date)
    elif _FROM_RE.match(date):
        date = _FROM_RE.sub(r"\1/", date)
    else:
        date = _TO_RE.sub(r"/\1", date)
    date = _BETWEEN_RE.sub(r"\1/\2", date)

    return _ANNOTATION_RE.sub("", date, count=1)


def first_year(raw: Optional[str]) -> Optional[str]:
    """Return the first free-standing 4-digit year in a DATE value, if any."""
    if not raw:
        return None
    match = _YEAR_RE.search(raw)
    return match.group(1) if match else None


# ---------------------------------------------------------------------------
# Structured parsing
# ---------------------------------------------------------------------------

# Leading words that qualify a single date without moving it.
QUALIFIERS = frozenset(
    {
        "abt", "abt.", "about", "circa", "c.", "ca.",
        "bef", "bef.", "before",
        "aft", "aft.", "after",
        "cal", "cal.", "calculated",
        "est", "est.", "estimated",
        "int",
    }
)


def _strip_annotations(raw: str) -> str:
    """Drop a leading '@#DJULIAN@' escape and a trailing '(...)' annotation."""
    s = _CALENDAR_ESCAPE_RE.sub("", raw.strip())
    if s.endswith(")"):
        idx = s.rfind("(")
        if idx > 0:
            s = s[:idx].strip()
    return s


def _parse_year(token: str) -> Optional[int]:
    token = token.strip()
    if token.isdigit() and len(token) in (3, 4):
        return int(token)
    return None


def _parse_simple_date(tokens: List[str]) -> Optional[str]:
    """'1900', 'JAN 1900' or '1 JAN 1900' (no qualifier) as '1900[-01[-01]]', else None."""
    if len(tokens) == 1:
        year = _parse_year(tokens[0])
        return f"{year:04d}" if year is not None else None

    if len(tokens) == 2:
        mon = MONTHS.get(tokens[0].upper())
        year = _parse_year(tokens[1])
        if mon is not None and year is not None:
            return f"{year:04d}-{mon:02d}"
        return None

    if len(tokens) == 3:
        day_token, mon_token, year_token = tokens
        mon = MONTHS.get(mon_token.upper())
        year = _parse_year(year_token)
        if mon is not None and year is not None and day_token.isdigit():
            return f"{year:04d}-{mon:02d}-{int(day_token):02d}"

    return None


def _split_on(tokens: List[str], separator: str) -> Optional[Tuple[List[str], List[str]]]:
    for i, t in enumerate(tokens):
        if t.lower() == separator:
            return tokens[:i], tokens[i + 1 :]
    return None


def parse_date(raw: Optional[str]) -> Dict[str, Optional[str]]:
    """
    Pick the comparable dates out of a GEDCOM DATE value.

        '1 JAN 1900'        -> date='1900-01-01'
        'ABT 1900'          -> date='1900'
        'BET 1800 AND 1810' -> start='1800', end='1810'
        'TO 1910'           -> end='1910'

    Returns a dict with keys date, start and end; each is None when the
    value does not carry it or it cannot be parsed.
    """
    result: Dict[str, Optional[str]] = {"date": None, "start": None, "end": None}
    if not raw:
        return result

    tokens = _strip_annotations(str(raw)).replace(",", " ").split()
    if not tokens:
        return result

    head = tokens[0].lower()

    if head in ("bet", "between"):
        split = _split_on(tokens[1:], "and")
        if split:
            result["start"] = _parse_simple_date(split[0])
            result["end"] = _parse_simple_date(split[1])
            return result

    if head == "from":
        split = _split_on(tokens[1:], "to")
        if split:
            result["start"] = _parse_simple_date(split[0])
            result["end"] = _parse_simple_date(split[1])
        else:
            result["start"] = _parse_simple_date(tokens[1:])
        return result

    if head == "to":
        result["end"] = _parse_simple_date(tokens[1:])
        return result

    remaining = tokens[1:] if head in QUALIFIERS else tokens
    result["date"] = _parse_simple_date(remaining)
    return result


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

def _sort_key(raw: Optional[str]) -> Optional[Tuple[int, ...]]:
    """(year[, month[, day]]) of the date, or of a range's first known bound."""
    info = parse_date(raw)
    value = info["date"] or info["start"] or info["end"]
    if not value:
        return None
    return tuple(int(part) for part in value.split("-"))


def is_before(date_a: Optional[str], date_b: Optional[str]) -> bool:
    """
    True when date A strictly precedes date B.

    Both dates are compared at the coarser of their two precisions, so
    'MAR 1900' is not before '1900'. Unparseable input is never before
    anything.
    """
    key_a = _sort_key(date_a)
    key_b = _sort_key(date_b)
    if key_a is None or key_b is None:
        return False

    width = min(len(key_a), len(key_b))
    return key_a[:width] < key_b[:width]


def same_date(date_a: Optional[str], date_b: Optional[str]) -> bool:
    """True when both values render to the same non-empty genealogytree date."""
    a = normalize_date(date_a)
    return bool(a) and a == normalize_date(date_b)
