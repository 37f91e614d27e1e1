"""Auth commands."""

from .signin import SigninCommand, SigninHandler
from .signup import SignupCommand, SignupHandler, SignupResult

__all__ = [
    "SigninCommand",
    "SigninHandler",
    "SignupCommand",
    "SignupHandler",
    "SignupResult",
]
