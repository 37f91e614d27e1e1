"""
Chat Entity - A conversation between workspace members.

ChatSpec is the caller-supplied shape (name, members, public flag) used by
both create and update. Its checks run in a fixed order and the first
failing rule wins:

1. at least MIN_MEMBERS members
2. more than MAX_UNNAMED_MEMBERS members requires a name
3. every member id is distinct and resolves to an existing user (needs the
   store, so the caller passes in the ids it found)

Members are counted as given; a repeated id fails rule 3. Any name,
including an empty one, makes the chat a channel.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from chatserver.domain.exceptions.validation_error import InvalidMembership
from chatserver.domain.value_objects.chat_type import ChatType

MIN_MEMBERS = 2
MAX_UNNAMED_MEMBERS = 8


@dataclass(frozen=True)
class ChatSpec:
    members: tuple[int, ...]
    name: Optional[str] = None
    public: bool = False

    @classmethod
    def of(
        cls, members: Iterable[int], name: Optional[str] = None, public: bool = False
    ) -> ChatSpec:
        return cls(members=tuple(members), name=name, public=public)

    @property
    def member_count(self) -> int:
        return len(self.members)

    @property
    def chat_type(self) -> ChatType:
        return ChatType.classify(self.name, self.member_count, self.public)

    def check_shape(self) -> None:
        """Rules 1 and 2; no store access."""
        if self.member_count < MIN_MEMBERS:
            raise InvalidMembership("too few members")
        if self.member_count > MAX_UNNAMED_MEMBERS and self.name is None:
            raise InvalidMembership("name required for large group")

    def check_members_exist(self, existing_ids: Iterable[int]) -> None:
        """Rule 3, given the subset of member ids the store knows about."""
        known = set(existing_ids)
        distinct = set(self.members)
        if len(distinct) != self.member_count or not distinct <= known:
            raise InvalidMembership("unknown member")


@dataclass
class Chat:
    id: int
    ws_id: int
    name: Optional[str]
    type: ChatType
    members: list[int] = field(default_factory=list)
    created_at: Optional[datetime] = None

    @property
    def member_count(self) -> int:
        return len(self.members)
