import pytest

from fractscope.chars import toupper
from fractscope.transform import split, strjoin, strmapi, striteri, strtrim, substr


def test_substr_takes_requested_slice():
    assert substr("fractal", 2, 3) == "fractal"[2:5]


def test_substr_clips_to_end():
    assert substr("julia", 1, 100) == "julia"[1:]


def test_substr_start_past_end_is_empty():
    assert substr("abc", 3, 2) == ""
    assert substr(b"abc", 10, 2) == b""


def test_substr_none_passes_through():
    assert substr(None, 0, 1) is None


def test_substr_stops_at_terminator():
    assert substr("ab\0cd", 0, 5) == "ab"


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_concatenates():
    assert strjoin("mandel", "brot") == "mandel" + "brot"
    assert strjoin(b"x\0ignored", b"y") == b"xy"


def test_strjoin_length_invariant():
    left, right = "julia", "set"
    assert len(strjoin(left, right)) == len(left) + len(right)


def test_strtrim_removes_both_ends():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  -a b- ", " -") == "a b"


def test_strtrim_everything_trimmed_is_empty():
    assert strtrim("aaaa", "a") == ""
    assert strtrim("", "a") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim(" word ", "") == " word "


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_without_separator_gives_one_word():
    assert split("single", ",") == ["single"]


def test_split_only_separators_is_empty():
    assert split(",,,", ",") == []


def test_split_bytes_with_int_separator():
    assert split(b"a,b,,c", ord(",")) == [b"a", b"b", b"c"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strmapi_receives_indexes():
    seen = []

    def record(index, ch):
        seen.append(index)
        return ch.upper()

    assert strmapi("abc", record) == "ABC"
    assert seen == [0, 1, 2]


def test_striteri_replaces_in_place():
    buffer = bytearray(b"abc\0def")
    striteri(buffer, lambda index, code: toupper(code))
    assert buffer == bytearray(b"ABC\0def")


def test_striteri_none_keeps_items():
    items = ["a", "b"]
    visited = []
    striteri(items, lambda index, item: visited.append((index, item)))
    assert items == ["a", "b"]
    assert visited == [(0, "a"), (1, "b")]