"""String helpers with bounded-copy and C-style comparison semantics.

Positions are returned as indices (or ``None`` when nothing is found).
The bounded copy helpers return the resulting string together with the
length the full operation would have produced, so truncation can be
detected by comparing that length with the size limit.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, TypeVar, Union

CharLike = Union[str, int]
T = TypeVar("T")


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``.

    Searching for the NUL character finds the end of the string, as the
    terminator is considered part of it. Returns ``None`` when absent.
    """
    ch = _char(c)
    index = s.find(ch)
    if index != -1:
        return index
    return len(s) if ch == "\0" else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or ``None``.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    index = s.rfind(ch)
    if index != -1:
        return index
    return len(s) if ch == "\0" else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns zero when equal, otherwise the difference of the first
    differing character codes; the end of a string counts as code 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for pos in range(n):
        a = ord(s1[pos]) if pos < len(s1) else 0
        b = ord(s2[pos]) if pos < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` wholly inside the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns ``None`` when absent.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index == -1 else index


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of the string yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on a single separator character, dropping empty pieces."""
    return [word for word in s.split(_char(sep)) if word]


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters (terminator included).

    Returns the resulting buffer contents and ``len(src)``. With a size of
    zero or less the destination is left unchanged.
    """
    if size <= 0:
        return dst, len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting contents and the length the full concatenation
    would have; when ``size`` does not exceed ``len(dst)`` the destination
    is unchanged and the length reported is ``size + len(src)``.
    """
    dst_len = len(dst)
    if size <= dst_len:
        return dst, size + len(src)
    return dst + src[:size - 1 - dst_len], dst_len + len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(buf: MutableSequence[T], func: Callable[[int, T], Optional[T]]) -> None:
    """Call ``func(index, item)`` for every item of ``buf`` in place.

    A result other than ``None`` replaces the item at that index.
    """
    for index, item in enumerate(list(buf)):
        replacement = func(index, item)
        if replacement is not None:
            buf[index] = replacement