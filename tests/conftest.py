"""Pytest fixtures for testing"""

import logging
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from booking_payments.config import PricingSettings
from booking_payments.domain.fees import FeeCalculator


@pytest.fixture
def booking_id() -> str:
    return "test-booking-123"


@pytest.fixture
def payment_method_id() -> str:
    return "pm_test_123"


@pytest.fixture
def authorized_at() -> datetime:
    """Fixed pre-authorization timestamp so schedules compare equal"""
    return datetime(2025, 1, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def pricing() -> PricingSettings:
    return PricingSettings(
        transfer_fee_cents=700,
        service_fee_short_term_rate=Decimal("0.03"),
        service_fee_long_term_rate=Decimal("0.015"),
        service_fee_threshold_months=6,
        credit_card_fee_rate=Decimal("0.03"),
        validation_tolerance_cents=1,
    )


@pytest.fixture
def fees(pricing: PricingSettings) -> FeeCalculator:
    return FeeCalculator(pricing)


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() changes to the root logger"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
