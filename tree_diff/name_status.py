"""
Parsing of `git diff --name-status --no-renames -z` output.

The stream is a flat sequence of NUL terminated tokens alternating
between a one-letter status and a path. Each path starts with the name
of the directory tree it came from (the diff is run on sibling
directories from their common parent), and that first segment is
stripped so names are relative to the compared trees.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List

from .errors import DiffParseError


class Operation(Enum):
    """Kind of change git reported for a file."""

    ADD = "A"
    DELETE = "D"
    MODIFIED = "M"


OP_BY_CHAR: Dict[str, Operation] = {
    "A": Operation.ADD,
    "D": Operation.DELETE,
    "M": Operation.MODIFIED,
}


@dataclass(frozen=True)
class FileChange:
    """
    A file that differs between two directory trees.

    name is relative to the compared trees, without the tree name.
    """

    name: str
    operation: Operation


def parse_name_status(text: str) -> List[FileChange]:
    """
    Parse NUL delimited name-status output into FileChange records.

    Order follows git's output. Unknown statuses and paths without a
    tree-name prefix raise DiffParseError: they mean git was invoked
    differently than expected or speaks a format we do not understand.
    """

    changes: List[FileChange] = []
    tokens: Iterator[str] = iter(text.split("\0"))
    for status in tokens:
        if not status:
            continue

        operation = OP_BY_CHAR.get(status)
        if operation is None:
            raise DiffParseError(f"Unknown type '{status}'. Text:\n{text}")

        path = next(tokens, None)
        if path is None:
            raise DiffParseError(
                f"Missing path after type '{status}'. Text:\n{text}"
            )

        _, sep, name = path.partition("/")
        if not sep or not name:
            raise DiffParseError(
                f"Path '{path}' is not prefixed with a tree name. Text:\n{text}"
            )

        changes.append(FileChange(name=name, operation=operation))

    return changes
