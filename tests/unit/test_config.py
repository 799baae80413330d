"""Unit tests for pricing configuration"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from booking_payments.config import PricingSettings


def test_default_pricing():
    pricing = PricingSettings()

    assert pricing.transfer_fee_cents == 700
    assert pricing.service_fee_short_term_rate == Decimal("0.03")
    assert pricing.service_fee_long_term_rate == Decimal("0.015")
    assert pricing.service_fee_threshold_months == 6
    assert pricing.credit_card_fee_rate == Decimal("0.03")
    assert pricing.validation_tolerance_cents == 1


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PRICING_TRANSFER_FEE_CENTS", "500")
    monkeypatch.setenv("PRICING_CREDIT_CARD_FEE_RATE", "0.029")

    pricing = PricingSettings()

    assert pricing.transfer_fee_cents == 500
    assert pricing.credit_card_fee_rate == Decimal("0.029")


@pytest.mark.parametrize(
    "overrides",
    [
        {"credit_card_fee_rate": Decimal("1")},
        {"service_fee_short_term_rate": Decimal("-0.01")},
        {"transfer_fee_cents": -1},
        {"service_fee_threshold_months": 0},
    ],
)
def test_invalid_pricing_rejected(overrides):
    with pytest.raises(ValidationError):
        PricingSettings(**overrides)
