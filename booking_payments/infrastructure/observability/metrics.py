"""Prometheus metrics for charge breakdowns and rent schedules"""

from prometheus_client import Counter, Histogram

# Breakdown metrics
breakdown_counter = Counter(
    "booking_charge_breakdowns_total",
    "Charge breakdowns built",
    ["kind", "card_fee"],  # deposit | monthly_rent, true | false
)

breakdown_validation_failure_counter = Counter(
    "booking_charge_breakdown_validation_failures_total",
    "Breakdowns whose total missed the expected total by more than the tolerance",
    ["kind"],
)

# Schedule metrics
rent_payments_counter = Counter(
    "booking_rent_payments_scheduled_total",
    "Rent payments scheduled",
    ["prorated"],  # true | false
)

schedule_length_histogram = Histogram(
    "booking_rent_schedule_length",
    "Number of rent payments per booking",
    buckets=[1, 2, 3, 6, 12, 24],
)


def record_breakdown(kind: str, include_card_fee: bool) -> None:
    breakdown_counter.labels(kind=kind, card_fee=str(include_card_fee).lower()).inc()


def record_validation(kind: str, valid: bool) -> None:
    if not valid:
        breakdown_validation_failure_counter.labels(kind=kind).inc()


def record_schedule(payment_count: int, prorated_count: int) -> None:
    """Record schedule size and how many periods were prorated"""
    schedule_length_histogram.observe(payment_count)
    rent_payments_counter.labels(prorated="true").inc(prorated_count)
    rent_payments_counter.labels(prorated="false").inc(payment_count - prorated_count)
