"""
Authentication errors raised by the credential store and token service.

Token errors map to HTTP 401. SigningError and MalformedCredential are
infrastructure failures (HTTP 500): the key or the stored hash is unusable.
"""


class AuthenticationError(Exception):
    """Base class for rejected tokens."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class InvalidToken(AuthenticationError):
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ExpiredToken(AuthenticationError):
    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class MalformedToken(AuthenticationError):
    def __init__(self, message: str = "Malformed token"):
        super().__init__(message)


class SigningError(Exception):
    """The signing key is missing or unusable."""


class MalformedCredential(Exception):
    """A stored password hash could not be parsed."""
