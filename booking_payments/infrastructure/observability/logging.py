"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from booking_payments.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str | None = None) -> None:
    """Configure structured JSON logging (defaults to settings.log_level)"""
    logger = logging.getLogger()
    logger.setLevel(level or settings.log_level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_schedule_generated(
    booking_id: str,
    payment_count: int,
    prorated_count: int,
    total_rent_cents: int,
    duration_months: int,
) -> None:
    """Log the rent schedule produced for a booking"""
    logging.info(
        "Rent schedule generated",
        extra={
            "booking_id": booking_id,
            "step": "schedule_generated",
            "payment_count": payment_count,
            "prorated_count": prorated_count,
            "total_rent_cents": total_rent_cents,
            "duration_months": duration_months,
        },
    )


def log_breakdown_mismatch(
    booking_id: str,
    kind: str,
    expected_total_cents: int,
    actual_total_cents: int,
    difference_cents: int,
) -> None:
    """Log a breakdown that failed reconciliation"""
    logging.warning(
        "Charge breakdown out of tolerance",
        extra={
            "booking_id": booking_id,
            "step": "breakdown_validation",
            "breakdown_kind": kind,
            "expected_total_cents": expected_total_cents,
            "actual_total_cents": actual_total_cents,
            "difference_cents": difference_cents,
        },
    )
