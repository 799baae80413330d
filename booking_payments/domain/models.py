"""Domain models - pure Python dataclasses representing charges and scheduled payments"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple


class ChargeCategory(str, Enum):
    """Closed set of line-item categories"""

    BASE_RENT = "BASE_RENT"
    SECURITY_DEPOSIT = "SECURITY_DEPOSIT"
    PET_RENT = "PET_RENT"
    PET_DEPOSIT = "PET_DEPOSIT"
    PLATFORM_FEE = "PLATFORM_FEE"
    CREDIT_CARD_FEE = "CREDIT_CARD_FEE"
    TRANSFER_FEE = "TRANSFER_FEE"
    DISCOUNT = "DISCOUNT"


# Rent and deposits; fees and discounts never count toward the base amount
PRINCIPAL_CATEGORIES = frozenset(
    {
        ChargeCategory.BASE_RENT,
        ChargeCategory.PET_RENT,
        ChargeCategory.SECURITY_DEPOSIT,
        ChargeCategory.PET_DEPOSIT,
    }
)

MONTHLY_RENT = "MONTHLY_RENT"


@dataclass(frozen=True)
class Charge:
    """Single line item, amount in cents (negative only for discounts)"""

    category: ChargeCategory
    amount: int
    is_applied: bool = True
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)  # audit/display only

    def __post_init__(self) -> None:
        # Read-only copy; the caller's dict stays detached
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))


@dataclass(frozen=True)
class ChargeBreakdown:
    """Itemized charges with principal and applied totals"""

    charges: Tuple[Charge, ...]
    base_amount: int
    total_amount: int


@dataclass(frozen=True)
class PetTerms:
    """
    Per-pet pricing: count * amount_per_pet.

    prorated_amount carries an already-prorated period total while keeping
    the real count and monthly per-pet rate for the charge metadata.
    """

    count: int
    amount_per_pet: int
    prorated_amount: Optional[int] = None


@dataclass(frozen=True)
class ProrationDetails:
    """Day counts behind a partial-month amount"""

    days_in_month: int
    days_to_charge: int

    def as_metadata(self) -> Dict[str, Any]:
        return {
            "days_in_month": self.days_in_month,
            "days_to_charge": self.days_to_charge,
            "prorated": self.days_to_charge < self.days_in_month,
        }


@dataclass(frozen=True)
class ProratedRent:
    """Amount due for one month-bounded period"""

    amount: int
    days_in_month: int
    days_to_charge: int
    daily_rate: Decimal
    is_prorated: bool

    @property
    def details(self) -> ProrationDetails:
        return ProrationDetails(days_in_month=self.days_in_month, days_to_charge=self.days_to_charge)


@dataclass(frozen=True)
class RentPayment:
    """Single scheduled rent collection"""

    booking_id: str
    amount: int
    due_date: date
    stripe_payment_method_id: str
    payment_authorized_at: Optional[datetime]  # set on the first payment only
    type: str = MONTHLY_RENT
    proration: Optional[ProrationDetails] = None

    @property
    def is_prorated(self) -> bool:
        return self.proration is not None and self.proration.days_to_charge < self.proration.days_in_month


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of reconciling a breakdown against an expected total"""

    valid: bool
    difference: int  # actual - expected
    actual_total: int


@dataclass(frozen=True)
class BookingTerms:
    """Monetary terms of a booking, all in cents"""

    monthly_rent: int
    security_deposit: int
    pet_count: int = 0
    pet_rent_per_pet: int = 0
    pet_deposit_per_pet: int = 0

    @property
    def monthly_pet_rent(self) -> int:
        return self.pet_count * self.pet_rent_per_pet if self.pet_count > 0 else 0


@dataclass
class BookingPaymentPlan:
    """Everything produced for a booking at creation time"""

    booking_id: str
    duration_months: int
    deposit_breakdown: ChargeBreakdown
    rent_payments: List[RentPayment]
    rent_breakdowns: List[ChargeBreakdown]
    validations: List[ValidationResult]

    @property
    def all_valid(self) -> bool:
        return all(v.valid for v in self.validations)
