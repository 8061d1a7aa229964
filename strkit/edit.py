"""Operations that build new strings from existing ones."""

from __future__ import annotations

from string import ascii_lowercase, ascii_uppercase

from .search import strlen

_DEFAULT_TRIM = " \t\n"
_UPPER = str.maketrans(ascii_lowercase, ascii_uppercase)
_LOWER = str.maketrans(ascii_uppercase, ascii_lowercase)


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, not {type(value).__name__}")
    return value


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError("character count must not be negative")


def strncat(dest: str, src: str, n: int) -> str:
    """Return *dest* followed by at most *n* characters of *src*."""
    _check_count(n)
    return dest[: strlen(dest)] + src[: strlen(src)][:n]


def strncpy(dest: str, src: str, n: int) -> str:
    """Return the buffer *dest* after copying up to *n* characters of *src* over its start.

    Copying stops once a NUL character (other than the first) has been
    copied; the end of *src* counts as one. The rest of *dest* is kept.
    """
    _check_count(n)
    padded = src + "\0"
    stop = padded.find("\0", 1)
    limit = len(padded) if stop == -1 else stop + 1
    chunk = padded[: min(n, limit)]
    return chunk + dest[len(chunk):]


def to_upper(s: str) -> str:
    """Copy of *s* with ASCII letters a-z made upper case."""
    return _require_str(s, "s").translate(_UPPER)


def to_lower(s: str) -> str:
    """Copy of *s* with ASCII letters A-Z made lower case."""
    return _require_str(s, "s").translate(_LOWER)


def trim(src: str, trim_chars: str | None) -> str:
    """Strip leading and trailing *trim_chars* from *src*.

    Without trim characters, spaces, tabs and newlines are stripped.
    """
    text = _require_str(src, "src")
    text = text[: strlen(text)]
    chars = trim_chars[: strlen(trim_chars)] if trim_chars else ""
    return text.strip(chars or _DEFAULT_TRIM)


def insert(src: str, s: str, start_index: int) -> str:
    """Return *src* with *s* inserted at *start_index*."""
    text = _require_str(src, "src")
    piece = _require_str(s, "s")
    text = text[: strlen(text)]
    piece = piece[: strlen(piece)]
    if not 0 <= start_index <= len(text):
        raise IndexError(f"start index {start_index} out of range for length {len(text)}")
    return text[:start_index] + piece + text[start_index:]