import math

import pytest

from singing_bowl.calculator import PYTHAGOREAN_COMMA
from singing_bowl.ratio import parse_ratio_text, parse_thickness_ratio, validate_thickness_ratio


def test_parse_pythagorean_comma():
    assert parse_thickness_ratio("531441", "524288") == PYTHAGOREAN_COMMA
    assert parse_ratio_text("531441/524288") == PYTHAGOREAN_COMMA
    assert parse_ratio_text(" 3 / 2 ") == 1.5


def test_parse_decimal_text():
    assert math.isclose(parse_ratio_text("1.0136"), 1.0136)


@pytest.mark.parametrize(
    "numerator, denominator",
    [("1", "0"), ("abc", "2"), ("1", ""), ("-3", "2"), ("0", "5"), ("nan", "1"), ("inf", "1")],
)
def test_parse_rejects_invalid_pairs(numerator, denominator):
    with pytest.raises(ValueError):
        parse_thickness_ratio(numerator, denominator)


@pytest.mark.parametrize("ratio", [0, -1.0, float("inf"), float("nan"), "x", None])
def test_validate_rejects(ratio):
    with pytest.raises(ValueError):
        validate_thickness_ratio(ratio)


def test_validate_accepts_numeric_strings():
    assert validate_thickness_ratio("1.25") == 1.25
    assert validate_thickness_ratio(2) == 2.0
