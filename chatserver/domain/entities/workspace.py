"""
Workspace Entity - Tenant boundary; owns users and chats.
"""

from dataclasses import dataclass
from datetime import datetime

# owner_id sentinel for a workspace nobody has claimed yet
UNOWNED = 0


@dataclass
class Workspace:
    id: int
    name: str
    owner_id: int
    created_at: datetime

    @property
    def is_owned(self) -> bool:
        return self.owner_id != UNOWNED

    def is_owned_by(self, user_id: int) -> bool:
        return self.is_owned and self.owner_id == user_id
