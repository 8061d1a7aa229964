import pytest

from strkit.edit import insert, strncat, strncpy, to_lower, to_upper, trim


@pytest.mark.parametrize(
    "dest, src, n, expected",
    [
        ("foo", "buzz", 4, "foobuzz"),
        ("foo1", "buzz", 4, "foo1buzz"),
        ("foo2", "buzz", 4, "foo2buzz"),
        ("foo", "", 4, "foo"),
        ("foo", "buzz", 2, "foobu"),
    ],
)
def test_strncat(dest, src, n, expected):
    assert strncat(dest, src, n) == expected


def test_strncat_negative_count():
    with pytest.raises(ValueError):
        strncat("a", "b", -1)


@pytest.mark.parametrize(
    "dest, src, n, expected",
    [
        ("", "buzz", 3, "buz"),
        ("", "buzz-buzz", 3, "buz"),
        ("foo", "buzz-buzz", 3, "buz"),
        ("foo", "buzz", 3, "buz"),
        ("foo", "buzz", 0, "foo"),
        ("", "", 0, ""),
        ("", "Key was rejected by service", 27, "Key was rejected by service"),
        ("Hello, world!", "Good", 5, "Good\0, world!"),
        ("Hello, world!", "\0", 1, "\0ello, world!"),
    ],
)
def test_strncpy(dest, src, n, expected):
    assert strncpy(dest, src, n) == expected


def test_strncpy_stops_after_terminator():
    assert strncpy("xxxxxx", "ab", 5) == "ab\0xxx"


@pytest.mark.parametrize(
    "s, expected",
    [
        ("qwertyuiop", "QWERTYUIOP"),
        ("\nf\t\\a123123", "\nF\t\\A123123"),
        ("IRILETHJ", "IRILETHJ"),
        ("", ""),
        ("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"),
        ("_?};!234", "_?};!234"),
        ("é", "é"),
    ],
)
def test_to_upper(s, expected):
    assert to_upper(s) == expected


@pytest.mark.parametrize(
    "s, expected",
    [
        ("QWErty", "qwerty"),
        ("\nH\t\\G123123", "\nh\t\\g123123"),
        ("irilethj", "irilethj"),
        ("", ""),
        ("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"),
        ("_?};!234", "_?};!234"),
    ],
)
def test_to_lower(s, expected):
    assert to_lower(s) == expected


def test_to_upper_none():
    with pytest.raises(TypeError):
        to_upper(None)


def test_to_lower_none():
    with pytest.raises(TypeError):
        to_lower(None)


@pytest.mark.parametrize(
    "src, chars, expected",
    [
        ("00010string", "01", "string"),
        ("string00010", "01", "string"),
        ("00101010string00010", "01", "string"),
        ("  1  string   1  ", " ", "1  string   1"),
        ("  1  string   1  ", "", "1  string   1"),
        ("\t 1  string \n", None, "1  string"),
        ("eeeeeeeeeeee", "01", "eeeeeeeeeeee"),
        ("", "01", ""),
        ("", "", ""),
        (" Good morning!    ", " ", "Good morning!"),
        (
            "+!0-aeoi2o3i23iuhuhh3O*YADyagsduyoaweq213",
            "+!0-aeoi2o3i23iuhuhh3O*YADyagsduyoaweq213",
            "",
        ),
        ("     &#@\n\n\t Hello, World! *&#@ \n\t   ", " &#@\n\t", "Hello, World! *"),
    ],
)
def test_trim(src, chars, expected):
    assert trim(src, chars) == expected


@pytest.mark.parametrize("chars", ["", None])
def test_trim_none_source(chars):
    with pytest.raises(TypeError):
        trim(None, chars)


@pytest.mark.parametrize(
    "src, s, index, expected",
    [
        ("foo", "buzz", 0, "buzzfoo"),
        ("foo", "buzz", 3, "foobuzz"),
        ("foo", "", 3, "foo"),
        ("", "buzz", 0, "buzz"),
        ("foo", "buzz", 1, "fbuzzoo"),
    ],
)
def test_insert(src, s, index, expected):
    assert insert(src, s, index) == expected


@pytest.mark.parametrize("src, s", [(None, "buzz"), ("foo", None)])
def test_insert_none(src, s):
    with pytest.raises(TypeError):
        insert(src, s, 0)


@pytest.mark.parametrize(
    "src, s, index",
    [
        ("", "", 100),
        ("diary", "ction", 8),
        ("hello, world!", "hELLO, WORLD!", 20),
        ("foo", "x", -1),
    ],
)
def test_insert_out_of_range(src, s, index):
    with pytest.raises(IndexError):
        insert(src, s, index)