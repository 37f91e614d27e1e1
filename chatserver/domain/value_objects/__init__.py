"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass or Enum)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from chatserver.domain.value_objects.user_email import UserEmail
from chatserver.domain.value_objects.chat_type import ChatType

__all__ = [
    "UserEmail",
    "ChatType",
]
