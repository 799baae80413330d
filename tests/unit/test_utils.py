"""Unit tests for date and money helpers"""

from datetime import date
from decimal import Decimal

import pytest

from booking_payments.utils.date_utils import (
    days_in_month,
    first_of_next_month,
    is_last_day_of_month,
    last_day_of_month,
    lease_duration_months,
    same_month,
)
from booking_payments.utils.money import cents_to_dollars, dollars_to_cents, round_half_up


@pytest.mark.parametrize(
    "year, month, expected",
    [(2025, 1, 31), (2025, 2, 28), (2024, 2, 29), (2100, 2, 28), (2000, 2, 29), (2025, 4, 30)],
)
def test_days_in_month(year, month, expected):
    assert days_in_month(year, month) == expected


def test_month_boundaries():
    assert last_day_of_month(date(2024, 2, 10)) == date(2024, 2, 29)
    assert is_last_day_of_month(date(2025, 2, 28)) is True
    assert is_last_day_of_month(date(2024, 2, 28)) is False
    assert first_of_next_month(date(2025, 1, 31)) == date(2025, 2, 1)
    assert first_of_next_month(date(2024, 12, 15)) == date(2025, 1, 1)
    assert same_month(date(2025, 1, 1), date(2025, 1, 31)) is True
    assert same_month(date(2024, 1, 1), date(2025, 1, 1)) is False


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (date(2025, 1, 1), date(2025, 1, 31), 1),
        (date(2025, 1, 28), date(2025, 1, 31), 1),
        (date(2025, 1, 15), date(2025, 2, 15), 1),
        (date(2025, 1, 1), date(2025, 3, 31), 3),
        (date(2025, 1, 1), date(2025, 6, 29), 5),
        (date(2025, 1, 1), date(2025, 6, 30), 6),
        (date(2025, 1, 15), date(2025, 7, 15), 6),
        (date(2025, 1, 1), date(2025, 12, 31), 12),
    ],
)
def test_lease_duration_months(start, end, expected):
    assert lease_duration_months(start, end) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(2.5, 3), (-2.5, -3), (Decimal("0.4999"), 0), (Decimal("548.39"), 548), (7, 7)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_dollar_cent_conversion():
    assert dollars_to_cents(1000) == 100000
    assert dollars_to_cents(10.005) == 1001
    assert dollars_to_cents(Decimal("19.99")) == 1999
    assert cents_to_dollars(54839) == Decimal("548.39")
