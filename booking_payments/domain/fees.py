"""Percentage and flat fee calculations"""

from decimal import Decimal
from typing import Any, Dict

from booking_payments.config import PricingSettings, pricing as default_pricing
from booking_payments.utils.money import round_half_up

PERCENT = Decimal(100)


def as_percent(rate: Decimal) -> float:
    """0.015 -> 1.5, the form rates are recorded in charge metadata"""
    return float(rate * PERCENT)


class FeeCalculator:
    """
    Computes fee amounts from an explicit pricing configuration.

    Fee tiers:
    - Service fee: short-term rate below the threshold (default 3% under 6 months),
      long-term rate at or above it (default 1.5%)
    - Card fee: self-inclusive, so the processor's cut of the total leaves the base intact
    - Transfer fee: flat, deposits only
    """

    def __init__(self, pricing: PricingSettings | None = None):
        # PricingSettings bounds every rate to [0, 1)
        self.pricing = pricing or default_pricing

    def service_fee_tier(self, duration_months: int) -> str:
        if duration_months < self.pricing.service_fee_threshold_months:
            return "short_term"
        return "long_term"

    def service_fee_rate(self, duration_months: int) -> Decimal:
        if self.service_fee_tier(duration_months) == "short_term":
            return self.pricing.service_fee_short_term_rate
        return self.pricing.service_fee_long_term_rate

    def service_fee(self, principal_base: int, duration_months: int) -> int:
        """round(principal_base * tiered rate); principal_base is rent + pet rent, never deposits"""
        return round_half_up(principal_base * self.service_fee_rate(duration_months))

    def service_fee_metadata(self, duration_months: int) -> Dict[str, Any]:
        return {
            "rate": as_percent(self.service_fee_rate(duration_months)),
            "duration_months": duration_months,
            "rate_type": self.service_fee_tier(duration_months),
        }

    def credit_card_fee(self, base: int) -> int:
        """
        Self-inclusive card fee: round(base / (1 - rate)) - base.

        $1000.00 at 3% -> total 103093 (rounded from 103092.78), fee 3093;
        the processor keeps 3% of 103093 and ~100000 remains.
        """
        total = Decimal(base) / (1 - self.pricing.credit_card_fee_rate)
        return round_half_up(total) - base

    def credit_card_fee_metadata(self, base: int) -> Dict[str, Any]:
        return {
            "rate": as_percent(self.pricing.credit_card_fee_rate),
            "base_amount": base,
            "calculation": "self_inclusive",
        }

    def total_with_credit_card_fee(self, base: int) -> int:
        return base + self.credit_card_fee(base)

    def reverse_credit_card_fee(self, total: int) -> int:
        """Base amount recovered from a total that already includes the card fee"""
        return round_half_up(total * (1 - self.pricing.credit_card_fee_rate))

    @property
    def transfer_fee(self) -> int:
        return self.pricing.transfer_fee_cents
