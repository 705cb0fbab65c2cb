"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

import operator
from typing import Union

CharLike = Union[str, int]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: CharLike) -> int:
    """Return the character code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _between(code: int, low: str, high: str) -> bool:
    return ord(low) <= code <= ord(high)


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _between(code, "A", "Z") or _between(code, "a", "z")


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return _between(_code(c), "0", "9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII code (32..126)."""
    return 32 <= _code(c) <= 126


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if _between(code, "a", "z"):
        code -= 32
    return _same_kind(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if _between(code, "A", "Z"):
        code += 32
    return _same_kind(c, code)


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps to a signed 32-bit integer.
    """
    pos = 0
    length = len(s)
    while pos < length and s[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and s[pos] in "+-":
        if s[pos] == "-":
            sign = -1
        pos += 1
    number = 0
    while pos < length and "0" <= s[pos] <= "9":
        number = number * 10 + (ord(s[pos]) - ord("0"))
        pos += 1
    return _wrap_int32(number * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    n = operator.index(n)
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)