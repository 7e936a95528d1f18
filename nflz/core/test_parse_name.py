from __future__ import annotations

import pytest

from nflz.core.errors import ErrorKind, ParseError
from nflz.core.parse_name import parse_filename, count_digits


def test_parse_simple_filename() -> None:
    entry = parse_filename("paris (100).png")

    assert entry.original_name == "paris (100).png"
    assert entry.prefix == "paris ("
    assert entry.suffix == ").png"
    assert entry.value == 100
    assert entry.number_text == "100"
    assert entry.extension == ".png"


@pytest.mark.parametrize(
    "name,prefix,suffix,value",
    [
        ("img (100).jpg", "img (", ").jpg", 100),
        ("(100) foobar.png", "(", ") foobar.png", 100),
        ("img (1) 100)", "img (", ") 100)", 1),
        ("scan(3)", "scan(", ")", 3),
        ("holiday (12) final.tar.gz", "holiday (", ") final.tar.gz", 12),
    ],
)
def test_prefix_and_suffix_are_kept_verbatim(name, prefix, suffix, value) -> None:
    entry = parse_filename(name)
    assert entry.prefix == prefix
    assert entry.suffix == suffix
    assert entry.value == value
    assert entry.prefix + entry.number_text + entry.suffix == name


def test_leading_zeros_are_accepted() -> None:
    entry = parse_filename("paris (007).jpg")
    assert entry.value == 7
    assert entry.number_text == "007"


def test_multiple_numbered_groups_rejected() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_filename("invalid (100) (19231).jpg")

    assert exc_info.value.kind is ErrorKind.MULTIPLE_NUMBERED_GROUPS
    assert exc_info.value.filename == "invalid (100) (19231).jpg"
    assert "exactly one numbered group" in str(exc_info.value)
    assert "found 2" in str(exc_info.value)


@pytest.mark.parametrize(
    "name",
    [
        "plain.jpg",
        "img ().jpg",
        "img (-1).jpg",
        "img (1a).jpg",
        "img 12.jpg",
        "img (١).jpg",  # Arabic-Indic digit one
    ],
)
def test_no_numbered_group_rejected(name) -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_filename(name)

    assert exc_info.value.kind is ErrorKind.NO_NUMBERED_GROUP
    assert "found 0" in str(exc_info.value)


def test_shape_key_includes_extension() -> None:
    jpg = parse_filename("a (1).jpg")
    png = parse_filename("a (2).png")
    other_jpg = parse_filename("a (3).jpg")

    assert jpg.shape_key != png.shape_key
    assert jpg.shape_key == other_jpg.shape_key
    assert jpg.shape_key.extension == ".jpg"
    assert jpg.shape_key.pattern() == "a (#).jpg"


def test_with_width_pads_value() -> None:
    entry = parse_filename("paris (7).jpg")
    assert entry.with_width(3) == "paris (007).jpg"
    assert entry.with_width(1) == "paris (7).jpg"


@pytest.mark.parametrize(
    "value,expected",
    [(0, 1), (1, 1), (9, 1), (10, 2), (99, 2), (100, 3), (999, 3), (1000, 4), (10**20, 21)],
)
def test_count_digits(value, expected) -> None:
    assert count_digits(value) == expected


def test_count_digits_rejects_negative() -> None:
    with pytest.raises(ValueError):
        count_digits(-1)
