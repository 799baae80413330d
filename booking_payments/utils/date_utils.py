"""Date manipulation utilities"""

import calendar
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta


def days_in_month(year: int, month: int) -> int:
    """Number of days in a calendar month (leap-year aware)"""
    return calendar.monthrange(year, month)[1]


def last_day_of_month(day: date) -> date:
    return day.replace(day=days_in_month(day.year, day.month))


def is_last_day_of_month(day: date) -> bool:
    return day.day == days_in_month(day.year, day.month)


def first_of_next_month(day: date) -> date:
    return day.replace(day=1) + relativedelta(months=1)


def same_month(a: date, b: date) -> bool:
    return (a.year, a.month) == (b.year, b.month)


def lease_duration_months(start: date, end: date) -> int:
    """
    Whole calendar months covered by an inclusive date range, at least 1.

    Jan 1 - Jun 30 is 6 months; Jan 15 - Jul 15 is 6 months and a day, so 6.
    """
    delta = relativedelta(end + timedelta(days=1), start)
    return max(1, delta.years * 12 + delta.months)
