"""
Dishka DI Container Setup.

Two providers:
- InfrastructureProvider: config-driven singletons (engine, key pair, token
  service, password hasher) and the per-request AsyncSession. Tests build
  it with their own config to point at a throwaway database.
- ApplicationProvider: repositories, unit of work and command/query handlers,
  all request-scoped and wired through the abstract ports.

Dishka concepts:
- Scope.APP = created once, shared by every request, finalized on close()
- Scope.REQUEST = created per HTTP request
- Generator providers run their cleanup when the scope closes

Flow:
  Container → AsyncSession → SqlAlchemyChatRepository → CreateChatHandler
                                        ↓
                              uses ChatRepository interface
"""

import logging
from datetime import timedelta
from typing import AsyncIterable, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from chatserver.application.commands.auth import SigninHandler, SignupHandler
from chatserver.application.commands.chats import (
    CreateChatHandler,
    DeleteChatHandler,
    UpdateChatHandler,
)
from chatserver.application.queries.chats import GetChatHandler, ListChatsHandler
from chatserver.application.queries.workspaces import (
    GetWorkspaceHandler,
    ListWorkspaceUsersHandler,
)
from chatserver.config.settings import Config
from chatserver.domain.ports.repositories import (
    ChatRepository,
    UserRepository,
    WorkspaceRepository,
)
from chatserver.domain.ports.unit_of_work import UnitOfWork
from chatserver.infrastructure.persistence import (
    SqlAlchemyChatRepository,
    SqlAlchemyUnitOfWork,
    SqlAlchemyUserRepository,
    SqlAlchemyWorkspaceRepository,
    create_engine,
    create_session_factory,
)
from chatserver.infrastructure.security import (
    PasswordHasher,
    TokenKeys,
    TokenService,
    load_token_keys_from_config,
)

logger = logging.getLogger(__name__)


class InfrastructureProvider(Provider):
    def __init__(self, config: type[Config] = Config, keys: Optional[TokenKeys] = None):
        super().__init__()
        self._config = config
        self._keys = keys

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_engine(self) -> AsyncIterable[AsyncEngine]:
        engine = create_engine(self._config.DATABASE_URL, echo=self._config.DB_ECHO)
        yield engine
        await engine.dispose()
        logger.info("Database engine disposed.")

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        """
        One session per request. Anything not committed by a handler is
        rolled back when the session closes.
        """
        async with session_factory() as session:
            yield session

    # ==================== SECURITY ====================

    @provide(scope=Scope.APP)
    def get_token_keys(self) -> TokenKeys:
        return self._keys or load_token_keys_from_config(self._config)

    @provide(scope=Scope.APP)
    def get_token_service(self, keys: TokenKeys) -> TokenService:
        return TokenService(
            keys,
            issuer=self._config.JWT_ISSUER,
            audience=self._config.JWT_AUDIENCE,
            ttl=timedelta(seconds=self._config.TOKEN_TTL_SECONDS),
        )

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return PasswordHasher()


class ApplicationProvider(Provider):
    scope = Scope.REQUEST

    # ==================== REPOSITORIES ====================

    @provide
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return SqlAlchemyUserRepository(session)

    @provide
    def get_workspace_repository(self, session: AsyncSession) -> WorkspaceRepository:
        return SqlAlchemyWorkspaceRepository(session)

    @provide
    def get_chat_repository(self, session: AsyncSession) -> ChatRepository:
        return SqlAlchemyChatRepository(session)

    @provide
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        return SqlAlchemyUnitOfWork(session)

    # ==================== AUTH HANDLERS ====================

    @provide
    def get_signup_handler(
        self,
        user_repository: UserRepository,
        workspace_repository: WorkspaceRepository,
        unit_of_work: UnitOfWork,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> SignupHandler:
        return SignupHandler(
            user_repository,
            workspace_repository,
            unit_of_work,
            password_hasher,
            token_service,
        )

    @provide
    def get_signin_handler(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> SigninHandler:
        return SigninHandler(user_repository, password_hasher, token_service)

    # ==================== CHAT HANDLERS ====================

    @provide
    def get_create_chat_handler(
        self,
        chat_repository: ChatRepository,
        user_repository: UserRepository,
        unit_of_work: UnitOfWork,
    ) -> CreateChatHandler:
        return CreateChatHandler(chat_repository, user_repository, unit_of_work)

    @provide
    def get_update_chat_handler(
        self,
        chat_repository: ChatRepository,
        user_repository: UserRepository,
        unit_of_work: UnitOfWork,
    ) -> UpdateChatHandler:
        return UpdateChatHandler(chat_repository, user_repository, unit_of_work)

    @provide
    def get_delete_chat_handler(
        self,
        chat_repository: ChatRepository,
        workspace_repository: WorkspaceRepository,
        unit_of_work: UnitOfWork,
    ) -> DeleteChatHandler:
        return DeleteChatHandler(chat_repository, workspace_repository, unit_of_work)

    @provide
    def get_get_chat_handler(self, chat_repository: ChatRepository) -> GetChatHandler:
        return GetChatHandler(chat_repository)

    @provide
    def get_list_chats_handler(self, chat_repository: ChatRepository) -> ListChatsHandler:
        return ListChatsHandler(chat_repository)

    # ==================== WORKSPACE HANDLERS ====================

    @provide
    def get_get_workspace_handler(
        self, workspace_repository: WorkspaceRepository
    ) -> GetWorkspaceHandler:
        return GetWorkspaceHandler(workspace_repository)

    @provide
    def get_list_workspace_users_handler(
        self, workspace_repository: WorkspaceRepository
    ) -> ListWorkspaceUsersHandler:
        return ListWorkspaceUsersHandler(workspace_repository)


def create_container(
    config: type[Config] = Config, keys: Optional[TokenKeys] = None
) -> AsyncContainer:
    """
    Create and configure the DI container.

    - Call this ONCE per app instance; the app's lifespan closes it
    - keys overrides the PEM files named in config (tests pass generated keys)
    """
    return make_async_container(InfrastructureProvider(config, keys), ApplicationProvider())
