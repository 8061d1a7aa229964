# strkit

Familiar C string and memory routines for Python, together with a small
`printf`-style formatter.

Every routine works on Python values. Text is treated as NUL-terminated:
anything after a `"\0"` character is ignored. Functions that search return an
index, or `None` when nothing is found. Functions that build text return new
strings. Only `memcpy` and `memset` write into the buffer they are given (a
`bytearray` or writable `memoryview`) and return that same buffer.

## Installation

```
pip install strkit
```

The package needs Python 3.10 or later and has no runtime dependencies.

## Modules

| Module | Contents |
| --- | --- |
| `strkit.memory` | `memchr`, `memcmp`, `memcpy`, `memset` |
| `strkit.search` | `strlen`, `strchr`, `strrchr`, `strpbrk`, `strcspn`, `strstr`, `strncmp` |
| `strkit.edit` | `strncat`, `strncpy`, `to_upper`, `to_lower`, `trim`, `insert` |
| `strkit.format_spec` | `parse_spec`, `FormatSpec`, `FormatError` |
| `strkit.formatting` | `sprintf`, `format_char`, `format_int`, `format_unsigned`, `format_float`, `format_str` |

## Examples

### Searching

```python
from strkit.search import strchr, strstr, strcspn, strncmp

strchr("School 21", " ")                # 6
strchr("School 21", "\0")               # 9: the terminator counts
strstr("12332334", "23")                # 1
strcspn("some string", "fo")            # 1
strncmp("qwertyuiop", "qwertyuiop", 9)  # 0
```

### Editing

```python
from strkit.edit import trim, insert, strncat, strncpy, to_upper, to_lower

trim("00101010string00010", "01")  # "string"
trim("  1  string   1  ", "")      # "1  string   1"  (no trim characters: spaces, tabs, newlines)
insert("foo", "buzz", 3)           # "foobuzz"
strncat("foo", "buzz", 2)          # "foobu"
strncpy("foo", "buzz", 3)          # "buz"
to_upper("qwertyuiop")             # "QWERTYUIOP"
to_lower("QWErty")                 # "qwerty"
```

`to_upper` and `to_lower` change only the ASCII letters. `insert` raises
`IndexError` when the index lies past the end of the text, and `to_upper`,
`to_lower`, `trim` and `insert` raise `TypeError` when given something that
is not a string.

### Memory

```python
from strkit.memory import memchr, memcmp, memset

buf = bytearray(b"string")
memset(buf, ord("0"), 3)           # bytearray(b"000ing")
memcmp(b"123abc", b"1a3bc", 3)     # -47: difference of the first mismatching bytes
memchr(b"School 21", " ", 9)       # 6
```

### Formatting

`sprintf` understands the flags `-`, `+` and space, a width, a precision, the
length modifiers `h` and `l`, and the conversions `c`, `d`, `f`, `s`, `u`, as
well as `%%`. Integers are truncated to 16 bits with `h`, 32 bits without a
modifier and 64 bits with `l`.

```python
from strkit.formatting import sprintf

sprintf("This is a simple value %d", 69)  # "This is a simple value 69"
sprintf("%+12d", 69)                      # "         +69"
sprintf("%-16u|", 14140)                  # "14140           |"
sprintf("%.4s", "denis classniy")         # "deni"
sprintf("%5c", "!")                       # "    !"
sprintf("%s", None)                       # "(null)"
sprintf("%f", 0.0)                        # "0.000000"
sprintf("%%")                             # "%"
```

A malformed conversion, or too few arguments, raises
`strkit.format_spec.FormatError` (a `ValueError`), whose `position` attribute
gives the index of the offending `%`.

`parse_spec(fmt, pos)` parses a single conversion starting at the `%` at index
`pos` and returns a `FormatSpec` together with the index just past it. The
`format_*` functions render one value for a given `FormatSpec`.

## What the package does not do

There is no lookup from error numbers to error messages, and no tokenizer.
The formatter supports only the conversions listed above; there are no
hexadecimal, octal, exponent or pointer conversions and no `0` or `#` flags.

## Running the tests

```
pip install "strkit[test]"
pytest
```