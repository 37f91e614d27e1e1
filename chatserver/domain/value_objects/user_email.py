"""
UserEmail Value Object - Wraps user email with validation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserEmail:
    value: str  # stored lower-cased so uniqueness is case-insensitive

    def __post_init__(self):
        normalized = (self.value or "").strip().lower()
        if not normalized or "@" not in normalized:
            raise ValueError(f"Invalid user email: {self.value}")
        local, _, domain = normalized.rpartition("@")
        if not local or not domain:
            raise ValueError(f"Invalid user email: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
