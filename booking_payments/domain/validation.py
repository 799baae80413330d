"""Breakdown reconciliation"""

from typing import Iterable

from booking_payments.config import pricing
from booking_payments.domain.charges import calculate_total_from_charges
from booking_payments.domain.models import Charge, ValidationResult


def validate_charge_breakdown(
    charges: Iterable[Charge], expected_total: int, tolerance_cents: int | None = None
) -> ValidationResult:
    """
    Compare the applied-charge total against an independently computed total.

    Valid when the difference is within tolerance (1 cent by default) to absorb
    per-component rounding. Never raises; the caller decides what to do.
    """
    if tolerance_cents is None:
        tolerance_cents = pricing.validation_tolerance_cents

    actual_total = calculate_total_from_charges(charges)
    difference = actual_total - expected_total

    return ValidationResult(
        valid=abs(difference) <= tolerance_cents,
        difference=difference,
        actual_total=actual_total,
    )
