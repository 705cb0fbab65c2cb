"""Formatted output and direct writes to file descriptors."""

from __future__ import annotations

import operator
import os
import sys
from collections.abc import Iterator
from typing import Any, Optional, Union

from minish.chars import itoa

_UINT32_MASK = 2**32 - 1
_POINTER_MASK = 2**64 - 1
_NULL_TEXT = "(null)"


class FormatError(ValueError):
    """Raised for a malformed format string or a missing argument."""


def _to_int32(value: int) -> int:
    return ((value + 2**31) & _UINT32_MASK) - 2**31


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{spec}") from None


def _char_text(value: Union[str, int]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _pointer_value(value: Any) -> int:
    try:
        return operator.index(value) & _POINTER_MASK
    except TypeError:
        return id(value) & _POINTER_MASK


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        raise FormatError(f"unknown conversion %{spec}")
    value = _next_arg(args, spec)
    if spec == "c":
        return _char_text(value)
    if spec == "s":
        return _NULL_TEXT if value is None else str(value)
    if spec == "p":
        return "0x" + format(_pointer_value(value), "x")
    number = operator.index(value)
    if spec in "di":
        return itoa(_to_int32(number))
    unsigned = number & _UINT32_MASK
    if spec == "u":
        return str(unsigned)
    return format(unsigned, spec)


def format_printf(fmt: str, *args: Any) -> str:
    """Render fmt with the conversions %c %s %p %d %i %u %x %X and %%.

    No flags, widths or precisions are understood. A ``%`` followed by any
    other character, or by nothing, raises FormatError.
    """
    values = iter(args)
    chars = iter(fmt)
    pieces: list[str] = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format string ends with a lone '%'")
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered format to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: Union[str, int], fd: int) -> None:
    """Write one character (or one byte given as an integer) to fd."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write_all(fd, c.encode())
    else:
        _write_all(fd, bytes([operator.index(c) & 0xFF]))


def put_str_fd(s: Optional[str], fd: int) -> None:
    """Write s to fd; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode())


def put_endl_fd(s: Optional[str], fd: int) -> None:
    """Write s followed by a newline to fd; None writes nothing."""
    if s is None:
        return
    _write_all(fd, (s + "\n").encode())


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of a signed 32-bit integer to fd."""
    _write_all(fd, itoa(n).encode())