import pytest

from bud.currency import format_cents, parse_amount, split_amount, to_cents, to_int


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("12", 12),
        ("  -7", -7),
        ("+5", 5),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        ("50\n", 50),
    ],
)
def test_to_int_follows_leading_integer_rules(text, expected):
    assert to_int(text) == expected


def test_to_cents_keeps_sign_of_major_part():
    assert to_cents("10", "50") == 1050
    assert to_cents("-12", "50") == -1250
    assert to_cents("0", "00") == 0


def test_negative_minor_only_amount_cannot_be_expressed():
    # "-0.50": the sign sits on a zero major part and is lost, the minor part
    # is then added as a positive magnitude.
    assert to_cents("-0", "50") == 50
    assert parse_amount("-0.50") == 50


def test_minor_part_is_not_range_checked():
    assert to_cents("10", "5") == 1005
    assert to_cents("10", "500") == 1500


def test_non_numeric_parts_parse_as_zero():
    assert to_cents("abc", "de") == 0
    assert to_cents("3", "xx") == 300


def test_split_amount_accepts_comma_or_period():
    assert split_amount("10.50") == ("10", "50")
    assert split_amount("10,50") == ("10", "50")
    assert split_amount("-800.00 rent for march") == ("-800", "00")


def test_split_amount_requires_both_parts():
    assert split_amount("10") is None
    assert split_amount("10.") is None
    assert split_amount("10.   ") is None
    # A line terminator is a token of its own, so it serves as a zero minor part.
    assert split_amount("10.\n") == ("10", "\n")
    assert parse_amount("10.\n") == 1000
    # Leading separators are skipped, leaving no minor part.
    assert split_amount(".50") is None
    assert parse_amount("42") is None


def test_split_amount_stops_major_at_first_separator():
    # Thousands separators are not understood: "1,234.56" is 1 and 234.
    assert split_amount("1,234.56") == ("1", "234.56")
    assert parse_amount("1,234.56") == 334
    assert split_amount("10..50") == ("10", ".50")
    assert parse_amount("10..50") == 1000


def test_format_cents():
    assert format_cents(1550) == "15.50"
    assert format_cents(-80000) == "-800.00"
    assert format_cents(5) == "0.05"
    assert format_cents(0) == "0.00"
