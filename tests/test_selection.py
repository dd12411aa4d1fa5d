"""Tests de validación de selecciones."""

import pytest

from core.errors import InvalidSelection
from core.services.selection import is_affirmative, parse_selection


@pytest.mark.parametrize(
    "raw, count, expected",
    [
        ("1", 1, 0),
        ("3", 3, 2),
        (" 2 \n", 5, 1),
        ("+4", 4, 3),
    ],
)
def test_parse_selection_accepts_in_range(raw, count, expected):
    assert parse_selection(raw, count) == expected


@pytest.mark.parametrize(
    "raw, count",
    [
        ("0", 3),
        ("4", 3),
        ("-1", 3),
        ("", 3),
        ("abc", 3),
        ("2abc", 3),
        ("1.5", 3),
        ("1_0", 10),
        ("٣", 10),
        ("２", 10),
        ("1 0", 10),
        ("1", 0),
    ],
)
def test_parse_selection_rejects(raw, count):
    with pytest.raises(InvalidSelection) as excinfo:
        parse_selection(raw, count)
    assert excinfo.value.count == count


def test_parse_selection_covers_whole_range():
    count = 7
    for number in range(-2, count + 3):
        if 1 <= number <= count:
            assert parse_selection(str(number), count) == number - 1
        else:
            with pytest.raises(InvalidSelection):
                parse_selection(str(number), count)


@pytest.mark.parametrize("answer", ["y", "Y", " y \n"])
def test_is_affirmative_yes(answer):
    assert is_affirmative(answer)


@pytest.mark.parametrize("answer", ["", "n", "N", "yes", "yy", "sure"])
def test_is_affirmative_anything_else(answer):
    assert not is_affirmative(answer)
