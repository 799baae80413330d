"""Charge breakdowns for deposit transactions and monthly rent"""

from typing import List, Optional, Union

from booking_payments.domain.charges import (
    build_charge_breakdown,
    calculate_total_from_charges,
    create_base_rent_charge,
    create_credit_card_fee_charge,
    create_pet_deposit_charge,
    create_pet_rent_charge,
    create_platform_fee_charge,
    create_security_deposit_charge,
    create_transfer_fee_charge,
)
from booking_payments.domain.fees import FeeCalculator
from booking_payments.domain.models import Charge, ChargeBreakdown, PetTerms, ProrationDetails

# A bare amount is treated as a single pet at that rate
PetAmount = Union[PetTerms, int, None]


def _pet_terms(pet: PetAmount) -> Optional[PetTerms]:
    if pet is None:
        return None
    if isinstance(pet, int):
        pet = PetTerms(count=1, amount_per_pet=pet)
    if pet.count <= 0 or pet.amount_per_pet <= 0:
        return None
    return pet


def build_deposit_charges(
    security_deposit: int,
    pet_deposit: PetAmount = None,
    include_card_fee: bool = False,
    fees: FeeCalculator | None = None,
) -> ChargeBreakdown:
    """
    Itemize the one-time deposit payment.

    Order: security deposit, pet deposit, flat transfer fee, card fee.
    The card fee is self-inclusive on deposits + transfer fee. The base
    amount counts deposits only.

    Example ($1000 deposit, card):
        100000 + 700 transfer = 100700
        card fee = round(100700 / 0.97) - 100700 = 3114
        total 103814
    """
    fees = fees or FeeCalculator()
    charges: List[Charge] = [create_security_deposit_charge(security_deposit)]

    pet = _pet_terms(pet_deposit)
    if pet is not None:
        charges.append(create_pet_deposit_charge(pet.count, pet.amount_per_pet))

    charges.append(create_transfer_fee_charge(fees))

    if include_card_fee:
        amount_before_card_fee = calculate_total_from_charges(charges)
        charges.append(create_credit_card_fee_charge(amount_before_card_fee, True, fees))

    return build_charge_breakdown(charges)


def build_monthly_rent_charges(
    base_rent: int,
    pet_rent: PetAmount = None,
    duration_months: int = 1,
    include_card_fee: bool = False,
    proration: ProrationDetails | None = None,
    fees: FeeCalculator | None = None,
) -> ChargeBreakdown:
    """
    Itemize one monthly rent payment.

    Order: base rent, pet rent, platform fee on (rent + pet rent), card fee on
    (rent + pet rent + platform fee). base_rent is used as given; proration
    only attaches day counts to the base rent charge.
    """
    fees = fees or FeeCalculator()
    charges: List[Charge] = [create_base_rent_charge(base_rent, proration)]

    pet = _pet_terms(pet_rent)
    if pet is not None:
        charges.append(create_pet_rent_charge(pet.count, pet.amount_per_pet, pet.prorated_amount))

    principal_base = sum(c.amount for c in charges)
    charges.append(create_platform_fee_charge(principal_base, duration_months, fees))

    if include_card_fee:
        amount_before_card_fee = calculate_total_from_charges(charges)
        charges.append(create_credit_card_fee_charge(amount_before_card_fee, True, fees))

    return build_charge_breakdown(charges)
