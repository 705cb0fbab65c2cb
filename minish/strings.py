"""String helpers with the edge-case behaviour of the classic C string routines.

Positions are returned as indices (or None when nothing is found) and new
strings are returned rather than written into caller-provided buffers.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional

NUL = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_size(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Number of characters in s."""
    return len(s)


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first c in s.

    Searching for the NUL character finds the end of the string, so its
    index is len(s). Returns None when c does not occur.
    """
    _check_char(c)
    if c == NUL:
        index = s.find(c)
        return len(s) if index < 0 else index
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last c in s; NUL gives len(s); None when absent."""
    _check_char(c)
    if c == NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters of a and b.

    Returns 0 when they are equal over that span, otherwise the difference
    of the character codes at the first position where they differ. The
    end of a string counts as code 0.
    """
    _check_size(n, "n")
    for x, y in zip((a + NUL)[:n], (b + NUL)[:n]):
        if x != y:
            return ord(x) - ord(y)
        if x == NUL:
            break
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of the first needle lying wholly within the first n characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    _check_size(n, "n")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text, truncated to size - 1 characters, and the full
    length of src. A size of 0 copies nothing.
    """
    _check_size(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters.

    Returns the resulting text and the length the full concatenation would
    need: len(src) plus the smaller of size and len(dest).
    """
    _check_size(size, "size")
    if size == 0:
        return dest, len(src)
    room = max(size - 1 - len(dest), 0)
    total = len(src) + min(size, len(dest))
    return dest + src[:room], total


def strdup(s: str) -> str:
    """Return a copy of s."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from index start; empty past the end."""
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(s) or length == 0:
        return ""
    return s[start : start + length]


def strjoin(a: str, b: str) -> str:
    """Concatenate a and b."""
    if a is None or b is None:
        raise ValueError("both strings are required")
    return a + b


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    if s is None or charset is None:
        raise ValueError("both the string and the character set are required")
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> list[str]:
    """Split s on every sep, dropping empty words."""
    _check_char(sep)
    if s is None:
        raise ValueError("a string is required")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, char) for every character of s."""
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(s: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call f(index, char) for every character of s, in order.

    When f returns a character, it replaces the one at that index in place;
    returning None leaves the character unchanged.
    """
    for index, char in enumerate(s):
        replacement = f(index, char)
        if replacement is not None:
            s[index] = replacement