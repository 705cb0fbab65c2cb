"""Quote inspection and removal for command words."""

from __future__ import annotations

from itertools import takewhile

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
_QUOTES = frozenset((SINGLE_QUOTE, DOUBLE_QUOTE))
_GROUPING = frozenset((SINGLE_QUOTE, DOUBLE_QUOTE, " "))


def has_unclosed_quote(s: str) -> bool:
    """True when a single or double quote in s is left open.

    A quote character inside a span opened by the other kind of quote is
    treated as ordinary text.
    """
    open_quote = None
    for ch in s:
        if open_quote is None:
            if ch in _QUOTES:
                open_quote = ch
        elif ch == open_quote:
            open_quote = None
    return open_quote is not None


def has_char(s: str, c: str) -> bool:
    """True when c occurs in s."""
    return c in s


def has_dollar(s: str) -> bool:
    """True when s contains a ``$``."""
    return "$" in s


def has_quote(s: str) -> bool:
    """True when s contains a single or double quote."""
    return any(ch in _QUOTES for ch in s)


def _is_visible(ch: str) -> bool:
    return "!" <= ch <= "~"


def strip_quotes(s: str) -> str:
    """Remove quote characters that delimit spans of s.

    Strings without quotes are returned unchanged. Otherwise leading
    non-printable characters and spaces are dropped, and each quote (or
    space) opens a span that runs to the next identical character; the
    span's contents are kept while its delimiters are removed.
    """
    if not has_quote(s):
        return s
    start = next((i for i, ch in enumerate(s) if _is_visible(ch)), len(s))
    chars = iter(s[start:])
    out: list[str] = []
    for ch in chars:
        if ch in _GROUPING:
            out.extend(takewhile(lambda x, delim=ch: x != delim, chars))
        else:
            out.append(ch)
    return "".join(out)