"""Writing characters, strings and numbers, and a small printf.

The formatter understands ``%c %s %d %i %u %x %X %p`` and ``%%``. Integer
conversions follow 32-bit C semantics (``%p`` uses 64 bits); a missing
string prints ``(null)`` and a null pointer prints ``(nil)``. An unknown
conversion character prints nothing and consumes no argument.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

CharLike = Union[str, int]

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _stream(file: Optional[TextIO]) -> TextIO:
    return sys.stdout if file is None else file


def _as_char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c & 0xFF)


def _as_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _signed32(n: int) -> int:
    return ((n + 2**31) & _UINT32) - 2**31


def put_char(c: CharLike, file: Optional[TextIO] = None) -> None:
    """Write one character."""
    _stream(file).write(_as_char(c))


def put_str(s: str, file: Optional[TextIO] = None) -> None:
    """Write a string."""
    _stream(file).write(s)


def put_endl(s: str, file: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    _stream(file).write(s + "\n")


def put_nbr(n: int, file: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    _stream(file).write(str(_as_int(n, "d")))


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _as_char(_next_arg(args, spec))
    if spec == "s":
        value = _next_arg(args, spec)
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a string, got {type(value).__name__}")
        return value
    if spec in ("d", "i"):
        return str(_signed32(_as_int(_next_arg(args, spec), spec)))
    if spec == "u":
        return str(_as_int(_next_arg(args, spec), spec) & _UINT32)
    if spec == "x":
        return f"{_as_int(_next_arg(args, spec), spec) & _UINT32:x}"
    if spec == "X":
        return f"{_as_int(_next_arg(args, spec), spec) & _UINT32:X}"
    if spec == "p":
        value = _next_arg(args, spec)
        address = 0 if value is None else _as_int(value, spec) & _UINT64
        return "(nil)" if address == 0 else f"0x{address:x}"
    return ""


def format(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` using the supported conversions."""
    pieces = []
    remaining = iter(args)
    characters = iter(fmt)
    for ch in characters:
        if ch == "%":
            pieces.append(_convert(next(characters, ""), remaining))
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text and return the number of characters written."""
    text = format(fmt, *args)
    _stream(file).write(text)
    return len(text)