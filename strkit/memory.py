"""Byte-buffer routines: search, compare, copy and fill."""

from __future__ import annotations

BytesLike = bytes | bytearray | memoryview


def _byte_value(c: int | str | bytes) -> int:
    """Reduce *c* to a single unsigned byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c) & 0xFF
    if isinstance(c, (bytes, bytearray)):
        if len(c) != 1:
            raise ValueError("expected a single byte")
        return c[0]
    if isinstance(c, int):
        return c & 0xFF
    raise TypeError(f"cannot interpret {type(c).__name__} as a byte")


def _signed(byte: int) -> int:
    return byte - 256 if byte >= 128 else byte


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")


def _copy_length(src: bytes, n: int) -> int:
    """Number of bytes taken from *src*: copying ends after the first NUL past the start."""
    padded = src + b"\0"
    stop = padded.find(0, 1)
    limit = len(padded) if stop == -1 else stop + 1
    return min(n, limit)


def memchr(data: BytesLike, c: int | str | bytes, n: int) -> int | None:
    """Return the index of the first byte equal to *c* among the first *n* bytes.

    The scan also ends at a NUL byte; the end of *data* counts as one.
    Returns None when the byte is not found.
    """
    _check_count(n)
    target = _byte_value(c)
    if n == 0:
        return None
    window = bytes(data[:n])
    for index, byte in enumerate(window):
        if byte == target:
            return index
        if byte == 0:
            return None
    if len(window) < n and target == 0:
        return len(window)
    return None


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first *n* bytes; return the signed difference of the first mismatch."""
    _check_count(n)
    if n > len(a) or n > len(b):
        raise ValueError("byte count exceeds buffer length")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return _signed(x) - _signed(y)
    return 0


def memcpy(dest: bytearray | memoryview, src: BytesLike, n: int) -> bytearray | memoryview:
    """Copy up to *n* bytes of *src* into *dest* in place and return *dest*.

    Copying stops once a NUL byte (other than the first byte) has been
    copied; the end of *src* counts as a NUL byte.
    """
    _check_count(n)
    source = bytes(src)
    count = _copy_length(source, n)
    if count > len(dest):
        raise ValueError("destination buffer is too small")
    dest[:count] = (source + b"\0")[:count]
    return dest


def memset(buf: bytearray | memoryview, c: int | str | bytes, n: int) -> bytearray | memoryview:
    """Fill the first *n* bytes of *buf* with *c* in place and return *buf*."""
    _check_count(n)
    if n > len(buf):
        raise ValueError("byte count exceeds buffer length")
    buf[:n] = bytes([_byte_value(c)]) * n
    return buf