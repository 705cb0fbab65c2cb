"""Splitting command lines into words while respecting quotes."""

from __future__ import annotations

from collections.abc import Callable

_QUOTES = frozenset(("'", '"'))
_BLANKS = frozenset((" ", "\t"))
_OPERATORS = frozenset((">", "<", "|"))
_MAX_OPERATOR_LENGTH = 2


def _word_end(s: str, start: int, is_break: Callable[[str], bool]) -> int:
    """Index just past the word starting at start.

    The word stops at a break character outside quotes; a quoted span runs to
    the matching quote and is part of the word.
    """
    pos = start
    while pos < len(s) and not is_break(s[pos]):
        if s[pos] in _QUOTES:
            close = s.find(s[pos], pos + 1)
            if close < 0:
                raise ValueError(f"unclosed quote at index {pos} in {s!r}")
            pos = close + 1
        else:
            pos += 1
    return pos


def _check_sep(sep: str) -> None:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")


def _words(s: str, sep: str) -> list[str]:
    _check_sep(sep)
    words: list[str] = []
    pos = 0
    while pos < len(s):
        if s[pos] == sep:
            pos += 1
            continue
        end = _word_end(s, pos, lambda ch: ch == sep)
        words.append(s[pos:end])
        pos = end
    return words


def count_words(s: str, sep: str) -> int:
    """Number of words in s separated by sep, ignoring sep inside quotes.

    Raises ValueError when a quote is left open.
    """
    return len(_words(s, sep))


def minisplit(s: str, sep: str) -> list[str]:
    """Split s on sep, keeping quoted spans (and their quotes) intact.

    Empty words are dropped. Raises ValueError when a quote is left open.
    """
    return _words(s, sep)


def microsplit(s: str) -> list[str]:
    """Split a command line into words and redirection/pipe operators.

    Spaces and tabs separate words. Each run of ``<``, ``>`` and ``|``
    outside quotes becomes one token of its own. Quoted spans stay inside
    their word with the quotes kept. Raises ValueError for an operator run
    longer than two characters or for an unclosed quote.
    """
    tokens: list[str] = []
    pos = 0
    while pos < len(s):
        ch = s[pos]
        if ch in _BLANKS:
            pos += 1
        elif ch in _OPERATORS:
            end = pos
            while end < len(s) and s[end] in _OPERATORS:
                end += 1
            if end - pos > _MAX_OPERATOR_LENGTH:
                raise ValueError(f"operator {s[pos:end]!r} is too long")
            tokens.append(s[pos:end])
            pos = end
        else:
            end = _word_end(s, pos, lambda c: c in _BLANKS or c in _OPERATORS)
            tokens.append(s[pos:end])
            pos = end
    return tokens