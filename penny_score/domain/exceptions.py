"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidProfileError(DomainException):
    """Profile carries a NaN, infinite or overflowing number and cannot be scored"""

    def __init__(self, field_name: str, value: float, reason: str = "must be a finite number"):
        super().__init__(f"Field '{field_name}' {reason}, got {value!r}")
        self.field_name = field_name
        self.value = value
