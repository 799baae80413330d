"""Booking-creation use case: deposit breakdown, rent schedule and per-payment breakdowns"""

import logging
from datetime import date, datetime
from typing import List, Tuple

from booking_payments.config import PricingSettings
from booking_payments.domain.breakdown import build_deposit_charges, build_monthly_rent_charges
from booking_payments.domain.exceptions import InvalidDateRangeError
from booking_payments.domain.fees import FeeCalculator
from booking_payments.domain.models import (
    BookingPaymentPlan,
    BookingTerms,
    ChargeBreakdown,
    PetTerms,
    RentPayment,
    ValidationResult,
)
from booking_payments.domain.proration import prorate_amount
from booking_payments.domain.schedule import generate_rent_payments
from booking_payments.domain.validation import validate_charge_breakdown
from booking_payments.infrastructure.observability.logging import log_breakdown_mismatch, log_schedule_generated
from booking_payments.infrastructure.observability.metrics import record_breakdown, record_schedule, record_validation
from booking_payments.utils.date_utils import lease_duration_months


def prepare_booking_payments(
    booking_id: str,
    terms: BookingTerms,
    start_date: date,
    end_date: date,
    payment_method_id: str,
    include_card_fee: bool = False,
    pricing: PricingSettings | None = None,
    authorized_at: datetime | None = None,
) -> BookingPaymentPlan:
    """
    Build every payment artifact for a new booking.

    Flow:
    1. Validate the date range
    2. Itemize the deposit payment (deposits + transfer fee + optional card fee)
    3. Generate the monthly rent schedule on rent + pet rent
    4. Itemize each scheduled payment with the tiered platform fee
    5. Reconcile every breakdown against an independently computed total
    6. Record metrics and logs
    """
    if end_date < start_date:
        raise InvalidDateRangeError(f"End date {end_date} is before start date {start_date}")

    fees = FeeCalculator(pricing)
    tolerance = fees.pricing.validation_tolerance_cents
    validations: List[ValidationResult] = []

    # Deposit payment
    deposit_breakdown = build_deposit_charges(
        terms.security_deposit,
        PetTerms(count=terms.pet_count, amount_per_pet=terms.pet_deposit_per_pet),
        include_card_fee,
        fees,
    )
    record_breakdown("deposit", include_card_fee)
    validations.append(
        _reconcile(booking_id, "deposit", deposit_breakdown, _expected_deposit_total(terms, include_card_fee, fees), tolerance)
    )

    # Rent schedule
    duration_months = lease_duration_months(start_date, end_date)
    payments = generate_rent_payments(
        booking_id,
        terms.monthly_rent + terms.monthly_pet_rent,
        start_date,
        end_date,
        payment_method_id,
        authorized_at=authorized_at,
    )

    rent_breakdowns: List[ChargeBreakdown] = []
    for payment in payments:
        breakdown = _rent_breakdown(payment, terms, duration_months, include_card_fee, fees)
        record_breakdown("monthly_rent", include_card_fee)
        rent_breakdowns.append(breakdown)

        expected = _expected_rent_total(payment, terms, duration_months, include_card_fee, fees)
        validations.append(_reconcile(booking_id, "monthly_rent", breakdown, expected, tolerance))

    prorated_count = sum(1 for p in payments if p.is_prorated)
    record_schedule(len(payments), prorated_count)
    log_schedule_generated(
        booking_id,
        payment_count=len(payments),
        prorated_count=prorated_count,
        total_rent_cents=sum(p.amount for p in payments),
        duration_months=duration_months,
    )

    return BookingPaymentPlan(
        booking_id=booking_id,
        duration_months=duration_months,
        deposit_breakdown=deposit_breakdown,
        rent_payments=payments,
        rent_breakdowns=rent_breakdowns,
        validations=validations,
    )


def _expected_deposit_total(terms: BookingTerms, include_card_fee: bool, fees: FeeCalculator) -> int:
    pet_deposit = terms.pet_count * terms.pet_deposit_per_pet if terms.pet_count > 0 else 0
    subtotal = terms.security_deposit + pet_deposit + fees.transfer_fee
    if include_card_fee:
        return fees.total_with_credit_card_fee(subtotal)
    return subtotal


def _rent_components(payment: RentPayment, terms: BookingTerms) -> Tuple[int, int]:
    """Base rent and pet rent for one payment, each prorated on its own"""
    if not payment.is_prorated:
        return terms.monthly_rent, terms.monthly_pet_rent

    days_in_month = payment.proration.days_in_month
    days_to_charge = payment.proration.days_to_charge
    base_rent = prorate_amount(terms.monthly_rent, days_in_month, days_to_charge)
    pet_rent = prorate_amount(terms.monthly_pet_rent, days_in_month, days_to_charge) if terms.monthly_pet_rent else 0
    return base_rent, pet_rent


def _expected_rent_total(
    payment: RentPayment,
    terms: BookingTerms,
    duration_months: int,
    include_card_fee: bool,
    fees: FeeCalculator,
) -> int:
    # Same principal the breakdown itemizes; fees recomputed from it directly
    principal = sum(_rent_components(payment, terms))
    total = principal + fees.service_fee(principal, duration_months)
    if include_card_fee:
        return fees.total_with_credit_card_fee(total)
    return total


def _rent_breakdown(
    payment: RentPayment,
    terms: BookingTerms,
    duration_months: int,
    include_card_fee: bool,
    fees: FeeCalculator,
) -> ChargeBreakdown:
    base_rent, pet_total = _rent_components(payment, terms)

    pet_rent: PetTerms | None = None
    if terms.monthly_pet_rent:
        pet_rent = PetTerms(
            count=terms.pet_count,
            amount_per_pet=terms.pet_rent_per_pet,
            prorated_amount=pet_total if payment.is_prorated else None,
        )

    proration = payment.proration if payment.is_prorated else None
    return build_monthly_rent_charges(base_rent, pet_rent, duration_months, include_card_fee, proration, fees)


def _reconcile(
    booking_id: str, kind: str, breakdown: ChargeBreakdown, expected_total: int, tolerance: int
) -> ValidationResult:
    result = validate_charge_breakdown(breakdown.charges, expected_total, tolerance)
    record_validation(kind, result.valid)
    if not result.valid:
        log_breakdown_mismatch(booking_id, kind, expected_total, result.actual_total, result.difference)
    else:
        logging.debug("Breakdown reconciled", extra={"booking_id": booking_id, "breakdown_kind": kind})
    return result
