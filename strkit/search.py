"""Search and comparison over NUL-terminated text."""

from __future__ import annotations


def _cstr(s: str) -> str:
    """The part of *s* before the first NUL character."""
    return s.partition("\0")[0]


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    if isinstance(c, int):
        return chr(c)
    raise TypeError(f"cannot interpret {type(c).__name__} as a character")


def strlen(s: str) -> int:
    """Length of *s* up to, not including, the first NUL character."""
    return len(_cstr(s))


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first *c* in *s*; the terminator counts as part of the string."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last *c* in *s*; the terminator counts as part of the string."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strpbrk(s: str, accept: str) -> int | None:
    """Index of the first character of *s* that occurs in *accept*, or None."""
    wanted = set(_cstr(accept))
    return next((i for i, ch in enumerate(_cstr(s)) if ch in wanted), None)


def strcspn(s: str, reject: str) -> int:
    """Length of the leading part of *s* made of characters not in *reject*."""
    text = _cstr(s)
    rejected = set(_cstr(reject))
    return next((i for i, ch in enumerate(text) if ch in rejected), len(text))


def strstr(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of *needle* in *haystack*, or None."""
    index = _cstr(haystack).find(_cstr(needle))
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most *n* characters; return the difference at the first mismatch."""
    if n < 0:
        raise ValueError("character count must not be negative")
    left = _cstr(a) + "\0"
    right = _cstr(b) + "\0"
    for x, y in zip(left[:n], right[:n]):
        if x != y:
            return ord(x) - ord(y)
        if x == "\0":
            break
    return 0