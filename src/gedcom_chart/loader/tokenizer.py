# src/gedcom_chart/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union


@dataclass(frozen=True)
class Token:
    """
    One GEDCOM line, split into its parts.

    Attributes:
        lineno: 1-based line number in the source.
        level: GEDCOM level (0 for records, 1+ for substructures).
        pointer: Record xref in front of the tag, e.g. "@I1@", else None.
        tag: GEDCOM tag, e.g. "INDI", "BIRT", "DATE", "_UMR".
        value: Everything after the tag (may be empty). Pointer values such
            as the "@F1@" of "1 FAMS @F1@" stay here.
        raw: The line without its line terminator.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str
    raw: str


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line does not follow <level> [<xref>] <tag> [<value>]."""


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Split a single GEDCOM line into a Token.

    Leading whitespace is tolerated (some exporters indent by level).
    Exactly one space separates the parts; the value keeps any further
    spacing as-is.

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "2 DATE ABT 1850"
    """
    raw = _strip_eol(line)
    if lineno <= 1:
        raw = raw.lstrip("\ufeff")

    text = raw.lstrip()
    if not text:
        raise GedcomSyntaxError(f"Line {lineno}: empty line")

    level_str, _, rest = text.partition(" ")
    if not level_str.isdigit():
        raise GedcomSyntaxError(
            f"Line {lineno}: level is not numeric -> {level_str!r} in {raw!r}"
        )
    rest = rest.lstrip(" ")
    if not rest:
        raise GedcomSyntaxError(f"Line {lineno}: missing tag after level -> {raw!r}")

    pointer: Optional[str] = None
    if rest.startswith("@"):
        pointer, _, rest = rest.partition(" ")
        rest = rest.lstrip(" ")
        if not rest:
            raise GedcomSyntaxError(
                f"Line {lineno}: xref {pointer!r} is not followed by a tag -> {raw!r}"
            )

    tag, _, value = rest.partition(" ")

    return Token(
        lineno=lineno,
        level=int(level_str),
        pointer=pointer,
        tag=tag,
        value=value,
        raw=raw,
    )


def tokenize_lines(lines: Iterable[str]) -> Iterator[Token]:
    """
    Yield a Token for every non-blank line.

    Line numbers count blank lines too, so they match the source.
    """
    for lineno, raw_line in enumerate(lines, start=1):
        if not _strip_eol(raw_line).strip():
            continue
        yield tokenize_line(raw_line, lineno=lineno)


def tokenize_file(path: Union[str, Path]) -> Iterator[Token]:
    """
    Yield Tokens for a GEDCOM file on disk.

    Raises:
        FileNotFoundError: if `path` is not a file.
        GedcomSyntaxError: if a line is syntactically invalid.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    with file_path.open("r", encoding="utf-8-sig", errors="replace") as f:
        yield from tokenize_lines(f)
