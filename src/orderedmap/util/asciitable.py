from __future__ import annotations

import re
from typing import Iterator, Sequence, TextIO

from termcolor import colored

REGEX_ANSI_ESCAPE = re.compile(
    r"""
    \x1B  # ESC
    (?:   # 7-bit C1 Fe (except CSI)
        [@-Z\\-_]
    |     # or [ for CSI, followed by a control sequence
        \[
        [0-?]*  # Parameter bytes
        [ -/]*  # Intermediate bytes
        [@-~]   # Final byte
    )
""",
    re.VERBOSE,
)


def visible_width(text: str) -> int:
    return len(REGEX_ANSI_ESCAPE.sub("", text))


class AsciiTable:
    """A minimal column aligned table. The first row printed is the header, rendered in bold."""

    def __init__(self, headers: Sequence[str] = ()) -> None:
        self.headers: list[str] = list(headers)
        self.rows: list[Sequence[str]] = []

    def __iter__(self) -> Iterator[Sequence[str]]:
        yield self.headers
        yield from self.rows

    def __len__(self) -> int:
        return len(self.rows)

    def add_row(self, *cells: object) -> None:
        if len(cells) != len(self.headers):
            raise ValueError(f"expected {len(self.headers)} cells, got {len(cells)}")
        self.rows.append([str(cell) for cell in cells])

    def widths(self) -> list[int]:
        return [max(visible_width(row[col_idx]) for row in self) for col_idx in range(len(self.headers))]

    def render(self, color: bool = True) -> list[str]:
        """Returns the table as a list of lines. The header is separated from the body by a dashed line."""

        widths = self.widths()
        lines: list[str] = []
        for row_idx, row in enumerate(self):
            cells = [x + " " * (widths[col_idx] - visible_width(x)) for col_idx, x in enumerate(row)]
            if row_idx == 0 and color:
                cells = [colored(x, attrs=["bold"]) for x in cells]
            if row_idx == 1:
                lines.append("  ".join("-" * width for width in widths))
            lines.append("  ".join(cells).rstrip())
        if not self.rows:
            lines.append("  ".join("-" * width for width in widths))
        return lines

    def print(self, fp: TextIO | None = None, color: bool = True) -> None:
        for line in self.render(color):
            print(line, file=fp)
