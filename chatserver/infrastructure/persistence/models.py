"""
ORM tables.

workspaces.owner_id carries no foreign key: 0 means "unowned" and the
users -> workspaces reference would otherwise be circular.
"""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Enum, ForeignKey, Integer, String

from chatserver.domain.value_objects.chat_type import ChatType
from chatserver.infrastructure.persistence.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WorkspaceRow(Base):
    __tablename__ = "workspaces"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), unique=True, nullable=False)
    owner_id = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class UserRow(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    ws_id = Column(Integer, ForeignKey("workspaces.id"), nullable=False, index=True)
    fullname = Column(String(64), nullable=False)
    email = Column(String(64), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class ChatRow(Base):
    __tablename__ = "chats"

    id = Column(Integer, primary_key=True, autoincrement=True)
    ws_id = Column(Integer, ForeignKey("workspaces.id"), nullable=False, index=True)
    name = Column(String(64), nullable=True)
    type = Column(
        Enum(
            ChatType,
            name="chat_type",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )
    members = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
