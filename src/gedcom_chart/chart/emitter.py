from __future__ import annotations

from typing import Optional, TextIO


class NodeEmitter:
    """
    Writes genealogytree nodes to a text stream.

    Keeps no stack: every ``open_block(d, ...)`` must be matched by one
    ``close_block(d)`` from the same caller.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream

    @staticmethod
    def _tabs(indent: int) -> str:
        return "\t" * indent

    def open_block(self, indent: int, kind: str, options: Optional[str] = None) -> None:
        """Write ``kind[options]{`` on its own line."""
        head = kind if options is None else f"{kind}[{options}]"
        self.stream.write(f"{self._tabs(indent)}{head}{{\n")

    def close_block(self, indent: int) -> None:
        self.stream.write(f"{self._tabs(indent)}}}\n")

    def field(self, indent: int, text: str) -> None:
        """Write a plain field line followed by the field separator."""
        self.stream.write(f"{self._tabs(indent)}{text},\n")

    def write(self, fragment: str) -> None:
        """Write an already formatted fragment (e.g. from format_event) verbatim."""
        if fragment:
            self.stream.write(fragment)
