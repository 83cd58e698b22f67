import pytest

from classicds.date import Date, days_in_month, parse_date


def test_february_in_common_year():
    assert days_in_month(2023, 2) == 28


def test_leap_years_add_a_day_to_february():
    assert days_in_month(2024, 2) == days_in_month(2023, 2) + 1
    assert days_in_month(2000, 2) == days_in_month(2024, 2)
    assert days_in_month(1900, 2) == days_in_month(2023, 2)


def test_non_february_months_ignore_leap_years():
    for month in range(1, 13):
        if month != 2:
            assert days_in_month(2024, month) == days_in_month(2023, month)


@pytest.mark.parametrize("month", [0, 13, -1])
def test_invalid_month_raises(month):
    with pytest.raises(ValueError):
        days_in_month(2024, month)


def test_default_date():
    assert Date() == Date(2025, 1, 8)


def test_str_format():
    assert str(Date(2024, 4, 22)) == "2024.4.22"


@pytest.mark.parametrize(
    "start, days",
    [
        (Date(2024, 4, 22), 6666),
        (Date(2000, 1, 7), 1234567),
        (Date(1980, 2, 6), 999),
        (Date(2024, 2, 29), 365),
    ],
)
def test_add_then_subtract_round_trip(start, days):
    assert (start + days) - days == start
    assert (start - days) + days == start


def test_negative_add_is_subtract():
    d = Date(2024, 4, 22)
    assert d + (-100) == d - 100
    assert d - (-100) == d + 100


def test_addition_is_associative():
    d = Date(1999, 12, 15)
    assert (d + 30) + 45 == d + 75


def test_increment_steps_match_addition():
    d = Date(2023, 11, 20)
    walker = Date(2023, 11, 20)
    for _ in range(400):
        walker.increment()
    assert walker == d + 400


def test_decrement_crosses_month_boundary():
    d = Date(2006, 4, 1)
    d.decrement()
    assert d == Date(2006, 3, 31)
    assert d.increment() == Date(2006, 4, 1)


def test_year_rollover():
    assert Date(2024, 12, 31) + 1 == Date(2025, 1, 1)


@pytest.mark.parametrize("month", range(1, 13))
def test_last_day_plus_one_starts_a_month(month):
    last = Date(2024, month, days_in_month(2024, month))
    nxt = last + 1
    assert nxt.day == 1
    assert nxt > last
    assert nxt - 1 == last


def test_ordering():
    d1, d2, d3 = Date(2025, 1, 1), Date(2025, 1, 2), Date(2025, 1, 3)
    assert d2 > d1
    assert d3 > d2
    assert d1 < d3
    assert d1 <= d1
    assert d1 >= d1
    assert not d1 < d1
    assert d1 != d2


def test_in_place_add_keeps_identity():
    d = Date(2024, 1, 31)
    original = d
    d += 1
    assert d is original
    assert d > Date(2024, 1, 31)


def test_binary_add_does_not_mutate():
    d = Date(2024, 1, 31)
    _ = d + 10
    assert d == Date(2024, 1, 31)


def test_compare_with_other_type():
    assert (Date() == "2025.1.8") is False


def test_parse_date_round_trip():
    d = Date(2024, 4, 22)
    assert parse_date(f"{d.year} {d.month} {d.day}") == d


@pytest.mark.parametrize("text", ["abc", "2024 4", "2024 x 1", ""])
def test_parse_date_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_date(text)