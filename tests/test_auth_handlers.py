import logging

import pytest

from chatserver.application.commands.auth import (
    SigninCommand,
    SigninHandler,
    SignupCommand,
    SignupHandler,
)
from chatserver.domain.exceptions import EmailAlreadyExists, OwnershipAssignmentFailed
from chatserver.domain.value_objects.user_email import UserEmail
from chatserver.infrastructure.security import PasswordHasher
from fakes import (
    FakeUnitOfWork,
    InMemoryStore,
    InMemoryUserRepository,
    InMemoryWorkspaceRepository,
)


class CountingHasher(PasswordHasher):
    def __init__(self):
        super().__init__()
        self.verifications = 0
        self.dummy_verifications = 0

    def verify(self, password, password_hash):
        self.verifications += 1
        return super().verify(password, password_hash)

    def verify_dummy(self, password):
        self.dummy_verifications += 1
        return super().verify_dummy(password)


class RacingUserRepository(InMemoryUserRepository):
    """Misses the email on lookup, as if the other insert had not committed yet."""

    async def get_by_email(self, email):
        return None


class LosingWorkspaceRepository(InMemoryWorkspaceRepository):
    """Someone else always claims the workspace first."""

    async def claim_ownership(self, workspace, user_id):
        raise OwnershipAssignmentFailed(workspace.id, user_id)


def _command(workspace="acme", fullname="Luffy", email="luffy@acme.org", password="hunter42"):
    return SignupCommand(workspace=workspace, fullname=fullname, email=UserEmail(email), password=password)


def _signup_handler(store, hasher, token_service, user_repo=None, workspace_repo=None):
    uow = FakeUnitOfWork(store)
    handler = SignupHandler(
        user_repo or InMemoryUserRepository(store),
        workspace_repo or InMemoryWorkspaceRepository(store),
        uow,
        hasher,
        token_service,
    )
    return handler, uow


@pytest.mark.asyncio
async def test_first_signup_creates_and_owns_workspace(password_hasher, token_service):
    store = InMemoryStore()
    handler, uow = _signup_handler(store, password_hasher, token_service)

    result = await handler.execute(_command())

    [workspace] = store.workspaces.values()
    assert workspace.name == "acme"
    assert workspace.owner_id == result.user.id
    assert result.user.ws_id == workspace.id
    claims_user = token_service.verify(result.token)
    assert (claims_user.id, claims_user.ws_id, claims_user.email) == (
        result.user.id,
        result.user.ws_id,
        result.user.email,
    )
    assert uow.commits == 1


@pytest.mark.asyncio
async def test_second_signup_joins_without_taking_ownership(password_hasher, token_service):
    store = InMemoryStore()
    handler, _ = _signup_handler(store, password_hasher, token_service)
    first = await handler.execute(_command())
    second = await handler.execute(_command(fullname="Zoro", email="zoro@acme.org"))

    assert second.user.ws_id == first.user.ws_id
    assert len(store.workspaces) == 1
    assert store.workspaces[first.user.ws_id].owner_id == first.user.id


@pytest.mark.asyncio
async def test_password_is_stored_hashed(password_hasher, token_service):
    store = InMemoryStore()
    handler, _ = _signup_handler(store, password_hasher, token_service)
    result = await handler.execute(_command())

    stored = store.users[result.user.id].password_hash
    assert stored != "hunter42"
    assert stored.startswith("$argon2id$")
    assert password_hasher.verify("hunter42", stored)


@pytest.mark.asyncio
async def test_duplicate_email_is_a_conflict_without_writes(password_hasher, token_service):
    store = InMemoryStore()
    handler, _ = _signup_handler(store, password_hasher, token_service)
    await handler.execute(_command())
    before = store.snapshot()

    with pytest.raises(EmailAlreadyExists):
        await handler.execute(_command(workspace="other", fullname="Imposter"))

    assert store.snapshot() == before


@pytest.mark.asyncio
async def test_insert_time_email_conflict_rolls_back_new_workspace(password_hasher, token_service):
    store = InMemoryStore()
    seed, _ = _signup_handler(store, password_hasher, token_service)
    await seed.execute(_command())

    handler, uow = _signup_handler(
        store, password_hasher, token_service, user_repo=RacingUserRepository(store)
    )
    with pytest.raises(EmailAlreadyExists):
        await handler.execute(_command(workspace="newco"))

    assert uow.rollbacks == 1
    assert [ws.name for ws in store.workspaces.values()] == ["acme"]
    assert len(store.users) == 1


@pytest.mark.asyncio
async def test_lost_ownership_claim_still_signs_up(password_hasher, token_service, caplog):
    store = InMemoryStore()
    handler, uow = _signup_handler(
        store,
        password_hasher,
        token_service,
        workspace_repo=LosingWorkspaceRepository(store),
    )
    with caplog.at_level(logging.WARNING, logger="chatserver"):
        result = await handler.execute(_command())

    assert result.token
    assert uow.commits == 1
    assert store.workspaces[result.user.ws_id].owner_id == 0
    assert "without ownership" in caplog.text


@pytest.mark.asyncio
async def test_signin_returns_token_for_valid_credentials(password_hasher, token_service):
    store = InMemoryStore()
    signup, _ = _signup_handler(store, password_hasher, token_service)
    created = await signup.execute(_command())

    handler = SigninHandler(InMemoryUserRepository(store), password_hasher, token_service)
    token = await handler.execute(SigninCommand(email="LUFFY@acme.org", password="hunter42"))

    assert token is not None
    assert token_service.verify(token).id == created.user.id


@pytest.mark.asyncio
async def test_signin_does_one_verification_for_unknown_and_wrong(token_service):
    hasher = CountingHasher()
    store = InMemoryStore()
    signup, _ = _signup_handler(store, hasher, token_service)
    await signup.execute(_command())
    handler = SigninHandler(InMemoryUserRepository(store), hasher, token_service)

    wrong_password = await handler.execute(SigninCommand(email="luffy@acme.org", password="nope"))
    assert (hasher.verifications, hasher.dummy_verifications) == (1, 0)

    unknown_email = await handler.execute(SigninCommand(email="nobody@acme.org", password="nope"))
    assert (hasher.verifications, hasher.dummy_verifications) == (1, 1)

    not_an_email = await handler.execute(SigninCommand(email="garbage", password="nope"))
    assert (hasher.verifications, hasher.dummy_verifications) == (1, 2)

    assert wrong_password is None
    assert unknown_email is None
    assert not_an_email is None
