"""
Persistence Layer - Database implementations.

Contains SQLAlchemy (asyncio) repository implementations for domain ports.
"""

from chatserver.infrastructure.persistence.database import (
    Base,
    create_engine,
    create_session_factory,
    init_db,
)
from chatserver.infrastructure.persistence.sqlalchemy_chat_repository import (
    SqlAlchemyChatRepository,
)
from chatserver.infrastructure.persistence.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from chatserver.infrastructure.persistence.sqlalchemy_workspace_repository import (
    SqlAlchemyWorkspaceRepository,
)
from chatserver.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "Base",
    "create_engine",
    "create_session_factory",
    "init_db",
    "SqlAlchemyChatRepository",
    "SqlAlchemyUserRepository",
    "SqlAlchemyWorkspaceRepository",
    "SqlAlchemyUnitOfWork",
]
