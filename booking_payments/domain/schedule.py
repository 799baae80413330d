"""Monthly rent payment schedule generation"""

from datetime import date, datetime, timezone
from typing import List

from booking_payments.domain.models import RentPayment
from booking_payments.domain.proration import calculate_prorated_rent
from booking_payments.utils.date_utils import first_of_next_month, same_month


def generate_rent_payments(
    booking_id: str,
    monthly_rent: int,
    start_date: date,
    end_date: date,
    payment_method_id: str,
    authorized_at: datetime | None = None,
) -> List[RentPayment]:
    """
    Generate one RentPayment per calendar month of a booking.

    Requirements:
    - First payment due on the start date; prorated when the booking starts after the 1st
    - Every later payment due on the 1st of its month
    - Last month prorated when the booking ends before that month's last day
      (Feb 28 in a leap year is not the last day)
    - Each period rounded on its own, no carry of remainders
    - Only the first payment is pre-authorized (authorized_at, default now UTC)

    Args:
        booking_id: Owning booking reference
        monthly_rent: Full monthly rent, in cents
        start_date: First day of the booking
        end_date: Last day of the booking (inclusive), not before start_date
        payment_method_id: External payment method copied onto every payment
        authorized_at: Pre-authorization timestamp for the first payment

    Example:
        Jan 15 - Feb 15 2025 at 1000:
        Jan 15 (17/31 days) -> 548, Feb 1 (15/28 days) -> 536
    """
    if authorized_at is None:
        authorized_at = datetime.now(timezone.utc)

    payments: List[RentPayment] = []

    def add_payment(period_start: date, period_end: date | None) -> None:
        prorated = calculate_prorated_rent(monthly_rent, period_start, period_end)
        payments.append(
            RentPayment(
                booking_id=booking_id,
                amount=prorated.amount,
                due_date=period_start,
                stripe_payment_method_id=payment_method_id,
                payment_authorized_at=None if payments else authorized_at,
                proration=prorated.details,
            )
        )

    cursor = start_date
    if start_date.day != 1:
        # Partial first month, through month end or the end date if it comes first
        add_payment(start_date, end_date if same_month(start_date, end_date) else None)
        cursor = first_of_next_month(start_date)

    # cursor is always a 1st here; stop once it passes the end date's month
    while cursor <= end_date:
        add_payment(cursor, end_date if same_month(cursor, end_date) else None)
        cursor = first_of_next_month(cursor)

    return payments
