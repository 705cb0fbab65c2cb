"""Classification of pipe operators in a command line."""

from __future__ import annotations

import re

_PIPE_RUN = re.compile(r"\|+")


def pipe_kinds(s: str) -> list[int]:
    """Describe the pipe operator in front of each command segment.

    The first entry is always 0 (nothing precedes the first command). Each
    following entry is 1 for a single ``|`` and 2 for a double ``||``. Runs
    of three or more pipe characters add no entry.
    """
    kinds = [0]
    for match in _PIPE_RUN.finditer(s):
        width = len(match.group())
        if width <= 2:
            kinds.append(width)
    return kinds