"""Byte-buffer helpers: filling, copying, searching and comparing.

Buffers are ``bytearray`` objects (or any mutable sequence of byte values).
Counts that are negative raise ``ValueError``; counts that reach past the
end of a buffer raise ``IndexError``.
"""

from __future__ import annotations

from typing import MutableSequence, Optional, Sequence

Buffer = MutableSequence[int]
ReadBuffer = Sequence[int]


def _check_span(n: int, *spans: tuple[ReadBuffer, int]) -> None:
    if n < 0:
        raise ValueError("count must not be negative")
    for buffer, offset in spans:
        if offset < 0:
            raise ValueError("offset must not be negative")
        if offset + n > len(buffer):
            raise IndexError(
                f"{n} bytes at offset {offset} exceed a buffer of {len(buffer)} bytes"
            )


def _byte_at(buffer: ReadBuffer, index: int) -> int:
    return buffer[index] if index < len(buffer) else 0


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (low 8 bits) and return it."""
    _check_span(n, (buf, 0))
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> Buffer:
    """Zero the first ``n`` bytes of ``buf`` and return it."""
    return memset(buf, 0, n)


def memcpy(dest: Buffer, src: ReadBuffer, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest`` and return it."""
    _check_span(n, (dest, 0), (src, 0))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy ``n`` bytes from offset ``src`` to offset ``dest`` within ``buf``.

    The regions may overlap; the result is as if the source bytes were
    first copied aside. Returns ``buf``.
    """
    _check_span(n, (buf, dest), (buf, src))
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(buf: ReadBuffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (low 8 bits) among the first ``n``.

    Returns ``None`` when no such byte is found.
    """
    _check_span(n, (buf, 0))
    target = c & 0xFF
    return next((index for index, byte in enumerate(buf[:n]) if byte == target), None)


def memcmp(a: ReadBuffer, b: ReadBuffer, n: int) -> int:
    """Compare up to ``n`` bytes of ``a`` and ``b``.

    Comparison stops early at a zero byte in ``a``; bytes past the end of a
    buffer count as zero. Returns the difference of the first differing
    bytes, or zero. When ``a`` begins with a zero byte the result is
    ``-b[0]`` whatever ``n`` is.
    """
    if n < 0:
        raise ValueError("count must not be negative")
    for index in range(n):
        left = _byte_at(a, index)
        if left == 0:
            break
        right = _byte_at(b, index)
        if left != right:
            return left - right
    if _byte_at(a, 0) == 0:
        return -_byte_at(b, 0)
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("nmemb and size must not be negative")
    return bytearray(nmemb * size)