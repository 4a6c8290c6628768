"""Parsers for the plain-text edge and node-keyword files.

Both files use one record per line::

    <node>: <id>,<id>,...

In the edge file the ids are edge targets of ``<node>``; in the keyword file
they are the keywords attached to ``<node>``.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator


@dataclass(frozen=True)
class Record:
    """One parsed ``<node>: <ids>`` line."""

    line_number: int
    node: int
    values: tuple[int, ...]


def parse_id_list(text: str) -> tuple[int, ...]:
    """Parse ``"1,2,3"`` into integers, tolerating surrounding commas/space."""
    stripped = text.strip().strip(",").strip()
    if not stripped:
        return ()
    values = []
    for item in stripped.split(","):
        item = item.strip()
        try:
            values.append(int(item))
        except ValueError:
            raise ValueError(f"invalid integer {item!r}") from None
    return tuple(values)


def parse_keyword_list(text: str) -> list[int]:
    """Parse a query keyword list such as ``"1,2,3"``."""
    keywords = list(parse_id_list(text))
    if not keywords:
        raise ValueError("keyword list is empty")
    return keywords


def iter_records(path: str | Path) -> Iterator[Record]:
    """Yield records from a ``<node>: <ids>`` file, skipping blank lines."""
    with open(path, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, 1):
            if not line.strip():
                continue
            head, sep, tail = line.partition(":")
            if not sep:
                raise ValueError(f"expect ':' at line {line_number} in {path}")
            try:
                node = int(head.strip())
                values = parse_id_list(tail)
            except ValueError as exc:
                raise ValueError(f"{exc} at line {line_number} in {path}") from exc
            yield Record(line_number=line_number, node=node, values=values)

