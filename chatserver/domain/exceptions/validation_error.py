"""
DomainValidationError - Raised when a business rule is violated.
Maps to: HTTP 400 Bad Request
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidMembership(DomainValidationError):
    """Chat member list or name breaks the membership rules."""


class InvalidArgument(DomainValidationError):
    """An argument is rejected before any store access (e.g. chat id 0)."""
