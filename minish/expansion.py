"""Expansion of ``$NAME`` references in command words."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Optional

from minish.chars import is_alnum

_SINGLE_QUOTE = "'"
_QUOTES = frozenset(("'", '"'))


def is_name_char(c: str) -> bool:
    """True for a character allowed in a variable name (ASCII letter or digit)."""
    return is_alnum(c)


def _name_end(s: str, start: int) -> int:
    end = start
    while end < len(s) and is_name_char(s[end]):
        end += 1
    return end


def expand_variables(s: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Replace each ``$NAME`` in s with its value from env.

    A name is the run of ASCII letters and digits after the ``$``. References
    inside single quotes are left alone; double quotes do not prevent
    expansion. A ``$`` not followed by a name character stays as it is.
    Quote characters are kept. Returns None when a referenced variable is
    not defined. env defaults to the process environment.
    """
    if env is None:
        env = os.environ
    out: list[str] = []
    open_quote: Optional[str] = None
    i = 0
    while i < len(s):
        ch = s[i]
        if open_quote is not None and ch == open_quote:
            open_quote = None
        elif open_quote is None and ch in _QUOTES:
            open_quote = ch
        if (
            ch == "$"
            and open_quote != _SINGLE_QUOTE
            and i + 1 < len(s)
            and is_name_char(s[i + 1])
        ):
            end = _name_end(s, i + 1)
            value = env.get(s[i + 1 : end])
            if value is None:
                return None
            out.append(value)
            i = end
            continue
        out.append(ch)
        i += 1
    return "".join(out)