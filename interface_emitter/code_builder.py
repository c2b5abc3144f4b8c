"""Indentation-aware text buffer used to assemble generated source."""

import re

from .exceptions import InvalidIndentState

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class CodeBuilder:
    """Growable text buffer that tracks an indent depth.

    Whole lines get the current indent applied automatically. Raw fragments
    are appended verbatim so that a single physical line can be composed
    from several pieces (see ``append_indented_no_break``/``append_raw``/
    ``append_line_break``).
    """

    def __init__(self, indent_width: int = 4, newline: str = "\n") -> None:
        self._parts: list[str] = []
        self._depth = 0
        self._indent_width = indent_width
        self._newline = newline

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def current_indent(self) -> str:
        return " " * (self._depth * self._indent_width)

    def indent(self) -> None:
        self._depth += 1

    def dedent(self) -> None:
        if self._depth == 0:
            raise InvalidIndentState("dedent() called at indent depth 0")
        self._depth -= 1

    def append_line(self, text: str = "") -> None:
        self._parts.append(f"{self.current_indent}{text}{self._newline}")

    def append_raw(self, text: str) -> None:
        self._parts.append(text)

    def append_line_break(self) -> None:
        self._parts.append(self._newline)

    def append_indented_no_break(self, text: str) -> None:
        self._parts.append(f"{self.current_indent}{text}")

    def append_reflowed(self, doc: str) -> None:
        """Append a multi-line block re-indented to the current depth.

        Leading whitespace of every line is replaced by the current indent.
        Empty or whitespace-only blocks append nothing.
        """
        if not doc or doc.isspace():
            return
        lines = _LINE_BREAK.split(doc)
        if lines[-1] == "":
            lines.pop()
        for line in lines:
            self.append_line(line.lstrip())

    def render(self) -> str:
        return "".join(self._parts)
