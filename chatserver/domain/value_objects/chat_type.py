"""
ChatType Value Object - Derived classification of a chat.

The type is never set directly; it follows from name presence, member
count and the public flag:

    name  | members | public | type
    ------+---------+--------+----------------
    no    | == 2    |   -    | single
    no    | != 2    |   -    | group
    yes   | any     | true   | public_channel
    yes   | any     | false  | private_channel
"""

from enum import Enum
from typing import Optional


class ChatType(str, Enum):
    SINGLE = "single"
    GROUP = "group"
    PUBLIC_CHANNEL = "public_channel"
    PRIVATE_CHANNEL = "private_channel"

    @classmethod
    def classify(cls, name: Optional[str], member_count: int, public: bool) -> "ChatType":
        if name is None:
            return cls.SINGLE if member_count == 2 else cls.GROUP
        return cls.PUBLIC_CHANNEL if public else cls.PRIVATE_CHANNEL
