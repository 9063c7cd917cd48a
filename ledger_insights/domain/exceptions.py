"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class UnknownPeriodError(DomainException):
    """Requested date-range preset does not exist"""

    pass
