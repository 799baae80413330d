"""Partial-month rent proration"""

from datetime import date
from decimal import Decimal

from booking_payments.domain.models import ProratedRent
from booking_payments.utils.date_utils import days_in_month
from booking_payments.utils.money import round_half_up


def prorate_amount(monthly_amount: int, days_in_month: int, days_to_charge: int) -> int:
    """
    Partial-period amount: round(monthly_amount * days_to_charge / days_in_month).

    Callers guarantee 0 < days_to_charge <= days_in_month. The product is taken
    before dividing so the only rounding step is the final one.
    """
    return round_half_up(Decimal(monthly_amount * days_to_charge) / Decimal(days_in_month))


def calculate_prorated_rent(monthly_rent: int, period_start: date, period_end: date | None = None) -> ProratedRent:
    """
    Rent due for a period inside one calendar month.

    - Starting on the 1st and running to month end (or no end given): full rent
    - Starting on the 1st and ending early: days 1..period_end.day (last-month proration)
    - Starting after the 1st: period_start.day through period_end (or month end)

    period_end, when given, must fall in period_start's month.
    """
    month_days = days_in_month(period_start.year, period_start.month)
    end_day = period_end.day if period_end is not None else month_days

    if period_start.day == 1 and end_day == month_days:
        return ProratedRent(
            amount=monthly_rent,
            days_in_month=month_days,
            days_to_charge=month_days,
            daily_rate=Decimal(monthly_rent) / Decimal(month_days),
            is_prorated=False,
        )

    if period_start.day == 1:
        days_to_charge = end_day
    else:
        days_to_charge = min(end_day, month_days) - period_start.day + 1

    return ProratedRent(
        amount=prorate_amount(monthly_rent, month_days, days_to_charge),
        days_in_month=month_days,
        days_to_charge=days_to_charge,
        daily_rate=Decimal(monthly_rent) / Decimal(month_days),
        is_prorated=True,
    )
