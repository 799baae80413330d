"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidDateRangeError(DomainException):
    """Booking end date falls before its start date"""

    pass
