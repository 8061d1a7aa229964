"""A small sprintf supporting %c, %d, %f, %s, %u and %%."""

from __future__ import annotations

import math
from collections.abc import Callable

from .format_spec import FormatError, FormatSpec, parse_spec

_NULL_TEXT = "(null)"
_DEFAULT_FLOAT_PRECISION = 6
_BITS = {None: 32, "h": 16, "l": 64}


def _cstr(s: str) -> str:
    return s.partition("\0")[0]


def _require_int(value: object) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer, not {type(value).__name__}")
    return value


def _wrap_signed(number: int, bits: int) -> int:
    number &= (1 << bits) - 1
    return number - (1 << bits) if number >= 1 << (bits - 1) else number


def _pad(spec: FormatSpec, text: str) -> str:
    width = spec.width or 0
    return text.ljust(width) if spec.minus else text.rjust(width)


def _sign(spec: FormatSpec, negative: bool) -> str:
    if negative:
        return "-"
    if spec.plus:
        return "+"
    if spec.space:
        return " "
    return ""


def format_char(spec: FormatSpec, value: int | str) -> str:
    """Render one character, padded to the field width."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("expected a single character")
        sym = value
    else:
        sym = chr(_require_int(value) & 0xFF)
    if spec.width is None:
        return ""
    return _pad(FormatSpec(minus=spec.minus, width=spec.width or 1), sym)


def format_int(spec: FormatSpec, value: int) -> str:
    """Render a signed integer truncated to the width its length modifier names."""
    number = _wrap_signed(_require_int(value), _BITS[spec.length])
    digits = "" if number == 0 and spec.precision == 0 else str(abs(number))
    if spec.precision:
        digits = digits.zfill(spec.precision)
    return _pad(spec, _sign(spec, number < 0) + digits)


def format_unsigned(spec: FormatSpec, value: int) -> str:
    """Render an unsigned integer truncated to the width its length modifier names."""
    number = _require_int(value) & ((1 << _BITS[spec.length]) - 1)
    digits = str(number)
    if spec.precision:
        digits = digits.zfill(spec.precision)
    return _pad(spec, digits)


def _fixed(number: float, precision: int) -> str:
    """Digits of a non-negative finite *number* with *precision* decimals."""
    rev: list[str] = []
    if number == 0:
        rev.extend("0" * precision)
        if precision > 0:
            rev.append(".")
        rev.append("0")
        return "".join(reversed(rev))
    shifted = 0 < number < 1
    if shifted:
        number += 1
    scaled = math.ceil(number * 10**precision - 0.5)
    for digit in reversed(str(scaled)):
        if len(rev) == precision and precision != 0:
            rev.append(".")
        rev.append("0" if shifted and len(rev) == precision + 1 else digit)
    return "".join(reversed(rev))


def format_float(spec: FormatSpec, value: float) -> str:
    """Render a number in fixed-point notation, six decimals by default."""
    if not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, not {type(value).__name__}")
    number = float(value)
    precision = _DEFAULT_FLOAT_PRECISION if spec.precision is None else spec.precision
    negative = number < 0
    if math.isnan(number):
        body = "nan"
    elif math.isinf(number):
        body = "inf"
    else:
        body = _fixed(abs(number), precision)
    return _pad(spec, _sign(spec, negative) + body)


def format_str(spec: FormatSpec, value: str | None) -> str:
    """Render a string, cut to the precision and padded to the width."""
    if value is None:
        text = _NULL_TEXT
    elif isinstance(value, str):
        text = _cstr(value)
    else:
        raise TypeError(f"expected a string, not {type(value).__name__}")
    if spec.precision is not None:
        text = text[: spec.precision]
    return _pad(spec, text)


_FORMATTERS: dict[str, Callable[[FormatSpec, object], str]] = {
    "c": format_char,
    "d": format_int,
    "f": format_float,
    "s": format_str,
    "u": format_unsigned,
}


def sprintf(fmt: str, *args: object) -> str:
    """Format *args* according to *fmt* and return the resulting text."""
    text = _cstr(fmt)
    remaining = iter(args)
    pieces: list[str] = []
    pos = 0
    while (at := text.find("%", pos)) >= 0:
        pieces.append(text[pos:at])
        spec, pos = parse_spec(text, at)
        if spec.is_literal_percent:
            pieces.append("%")
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise FormatError("not enough arguments", at) from None
        pieces.append(_cstr(_FORMATTERS[spec.specifier](spec, value)))
    pieces.append(text[pos:])
    return "".join(pieces)