"""
Charge builders - one constructor per category.

Every builder returns a new immutable Charge with amounts in cents.
"""

from dataclasses import replace
from typing import Iterable, Optional, Sequence

from booking_payments.domain.fees import FeeCalculator
from booking_payments.domain.models import (
    Charge,
    ChargeBreakdown,
    ChargeCategory,
    PRINCIPAL_CATEGORIES,
    ProrationDetails,
)
from booking_payments.utils.money import round_half_up


# Principal charges

def create_base_rent_charge(amount: int, proration: Optional[ProrationDetails] = None) -> Charge:
    """Base rent as given; proration only records where an already-prorated figure came from"""
    metadata = proration.as_metadata() if proration is not None else {}
    return Charge(category=ChargeCategory.BASE_RENT, amount=round_half_up(amount), metadata=metadata)


def create_security_deposit_charge(amount: int) -> Charge:
    return Charge(category=ChargeCategory.SECURITY_DEPOSIT, amount=round_half_up(amount))


def create_pet_rent_charge(pet_count: int, pet_rent_per_pet: int, prorated_amount: Optional[int] = None) -> Charge:
    """prorated_amount replaces count * rate for a partial month; the metadata keeps both factors"""
    metadata = {"pet_count": pet_count, "pet_rent_per_pet": pet_rent_per_pet}
    amount = pet_count * pet_rent_per_pet
    if prorated_amount is not None:
        metadata["prorated"] = True
        amount = prorated_amount
    return Charge(category=ChargeCategory.PET_RENT, amount=round_half_up(amount), metadata=metadata)


def create_pet_deposit_charge(pet_count: int, pet_deposit_per_pet: int) -> Charge:
    return Charge(
        category=ChargeCategory.PET_DEPOSIT,
        amount=round_half_up(pet_count * pet_deposit_per_pet),
        metadata={"pet_count": pet_count, "pet_deposit_per_pet": pet_deposit_per_pet},
    )


# Fees

def create_platform_fee_charge(
    principal_base: int, duration_months: int, fees: FeeCalculator | None = None
) -> Charge:
    fees = fees or FeeCalculator()
    return Charge(
        category=ChargeCategory.PLATFORM_FEE,
        amount=fees.service_fee(principal_base, duration_months),
        metadata=fees.service_fee_metadata(duration_months),
    )


def create_credit_card_fee_charge(
    base: int, is_applied: bool = True, fees: FeeCalculator | None = None
) -> Charge:
    """is_applied=False itemizes the fee for display without charging it"""
    fees = fees or FeeCalculator()
    return Charge(
        category=ChargeCategory.CREDIT_CARD_FEE,
        amount=fees.credit_card_fee(base),
        is_applied=is_applied,
        metadata=fees.credit_card_fee_metadata(base),
    )


def create_transfer_fee_charge(fees: FeeCalculator | None = None) -> Charge:
    fees = fees or FeeCalculator()
    return Charge(
        category=ChargeCategory.TRANSFER_FEE,
        amount=fees.transfer_fee,
        metadata={"flat_fee": True},
    )


def create_discount_charge(amount: int, reason: str | None = None) -> Charge:
    """Always stored negative: 5000 and -5000 both become -5000"""
    return Charge(
        category=ChargeCategory.DISCOUNT,
        amount=-abs(round_half_up(amount)),
        metadata={"reason": reason},
    )


# Helpers

def calculate_total_from_charges(charges: Iterable[Charge]) -> int:
    """Sum of applied charges, fees and discounts included"""
    return sum(c.amount for c in charges if c.is_applied)


def calculate_base_from_charges(charges: Iterable[Charge]) -> int:
    """Sum of principal charges (rent and deposits), regardless of is_applied"""
    return sum(c.amount for c in charges if c.category in PRINCIPAL_CATEGORIES)


def build_charge_breakdown(charges: Sequence[Charge]) -> ChargeBreakdown:
    # Both totals are summed from the charges; neither is derived from the other
    return ChargeBreakdown(
        charges=tuple(charges),
        base_amount=calculate_base_from_charges(charges),
        total_amount=calculate_total_from_charges(charges),
    )


def find_charge_by_category(charges: Iterable[Charge], category: ChargeCategory) -> Charge | None:
    return next((c for c in charges if c.category == category), None)


def toggle_charge_application(charge: Charge) -> Charge:
    return replace(charge, is_applied=not charge.is_applied)

