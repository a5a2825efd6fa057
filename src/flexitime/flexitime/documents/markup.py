"""Org-style markup helpers for generated data blocks.

A block looks like::

    #+BEGIN: workday
    | date | day-len | ... |
    |------+---------+-----|
    | 2024-03-01 | 7.50 | ... |
    #+TBLFM: @2$5=vsum(@3..@>);T
    #+END:

Older documents may hold a single bare data row without header/separator.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence

from .model import TableBlock

_BEGIN = re.compile(r"^\s*#\+BEGIN:\s+(\S+)", re.IGNORECASE)
_END = re.compile(r"^\s*#\+END:?\s*$", re.IGNORECASE)
_SEPARATOR = re.compile(r"^\s*\|[-+|\s]*-[-+|\s]*$")


def find_block(lines: Sequence[str], name: str) -> Optional[tuple[int, int]]:
    """Indices of the begin and end marker lines of the named block."""
    for i, line in enumerate(lines):
        m = _BEGIN.match(line)
        if not m or m.group(1) != name:
            continue
        for j in range(i + 1, len(lines)):
            if _END.match(lines[j]):
                return i, j
        return None
    return None


def split_cells(line: str) -> tuple[str, ...]:
    inner = line.strip()
    if inner.startswith("|"):
        inner = inner[1:]
    if inner.endswith("|"):
        inner = inner[:-1]
    return tuple(cell.strip() for cell in inner.split("|"))


def parse_table(lines: Sequence[str]) -> list[tuple[str, ...]]:
    """Data rows of a pipe table; rows above the first separator are the header."""
    table_lines = [line for line in lines if line.lstrip().startswith("|")]

    first_sep = next((i for i, line in enumerate(table_lines) if _SEPARATOR.match(line)), None)
    if first_sep is not None:
        table_lines = table_lines[first_sep + 1:]

    return [split_cells(line) for line in table_lines if not _SEPARATOR.match(line)]


def read_block_rows(text: str, name: str) -> Optional[list[tuple[str, ...]]]:
    lines = text.splitlines()
    span = find_block(lines, name)
    if span is None:
        return None
    begin, end = span
    return parse_table(lines[begin + 1:end])


def format_row(cells: Sequence[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def render_block(name: str, table: TableBlock) -> list[str]:
    separator = "|" + "+".join("-" * (len(h) + 2) for h in table.header) + "|"
    out = [f"#+BEGIN: {name}", format_row(table.header), separator]
    out.extend(format_row(row) for row in table.rows)
    if table.formulas:
        out.append("#+TBLFM: " + "::".join(table.formulas))
    out.append("#+END:")
    return out


def replace_block(text: str, name: str, table: TableBlock) -> str:
    lines = text.splitlines()
    block = render_block(name, table)

    span = find_block(lines, name)
    if span is None:
        if lines and lines[-1].strip():
            lines.append("")
        lines.extend(block)
    else:
        begin, end = span
        lines[begin:end + 1] = block
    return "\n".join(lines) + "\n"
