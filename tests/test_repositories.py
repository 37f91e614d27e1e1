import pytest

from chatserver.domain.entities.chat import ChatSpec
from chatserver.domain.exceptions import (
    DuplicateWorkspace,
    EmailAlreadyExists,
    OwnershipAssignmentFailed,
)
from chatserver.domain.value_objects import ChatType, UserEmail
from chatserver.infrastructure.persistence import (
    SqlAlchemyChatRepository,
    SqlAlchemyUnitOfWork,
    SqlAlchemyUserRepository,
    SqlAlchemyWorkspaceRepository,
)


@pytest.fixture()
def repos(session):
    return (
        SqlAlchemyUserRepository(session),
        SqlAlchemyWorkspaceRepository(session),
        SqlAlchemyChatRepository(session),
    )


async def _user(users, workspace, name):
    return await users.create(workspace.id, name.title(), UserEmail(f"{name}@acme.org"), "hash")


@pytest.mark.asyncio
async def test_create_and_find_workspace(repos):
    _, workspaces, _ = repos
    created = await workspaces.create("acme")

    assert created.id > 0
    assert created.owner_id == 0
    assert (await workspaces.get_by_name("acme")).id == created.id
    assert (await workspaces.get_by_id(created.id)).name == "acme"
    assert await workspaces.get_by_name("nope") is None


@pytest.mark.asyncio
async def test_duplicate_workspace_keeps_session_usable(repos):
    users, workspaces, _ = repos
    acme = await workspaces.create("acme")

    with pytest.raises(DuplicateWorkspace):
        await workspaces.create("acme")

    # the savepoint rolled back, the outer transaction is intact
    luffy = await _user(users, acme, "luffy")
    assert luffy.ws_id == acme.id


@pytest.mark.asyncio
async def test_duplicate_email(repos):
    users, workspaces, _ = repos
    acme = await workspaces.create("acme")
    await _user(users, acme, "luffy")

    with pytest.raises(EmailAlreadyExists):
        await _user(users, acme, "luffy")


@pytest.mark.asyncio
async def test_get_by_email_returns_hash(repos):
    users, workspaces, _ = repos
    acme = await workspaces.create("acme")
    luffy = await _user(users, acme, "luffy")

    record = await users.get_by_email(UserEmail("Luffy@ACME.org"))
    assert record.id == luffy.id
    assert record.password_hash == "hash"
    assert record.to_user().id == luffy.id
    assert await users.get_by_email(UserEmail("zoro@acme.org")) is None


@pytest.mark.asyncio
async def test_existing_ids(repos):
    users, workspaces, _ = repos
    acme = await workspaces.create("acme")
    luffy = await _user(users, acme, "luffy")
    zoro = await _user(users, acme, "zoro")

    assert await users.existing_ids([luffy.id, zoro.id, 999]) == {luffy.id, zoro.id}
    assert await users.existing_ids([]) == set()


@pytest.mark.asyncio
async def test_update_owner_to_member(repos):
    users, workspaces, _ = repos
    acme = await workspaces.create("acme")
    luffy = await _user(users, acme, "luffy")

    updated = await workspaces.update_owner(acme, luffy.id)

    assert updated.owner_id == luffy.id
    assert (await workspaces.get_by_id(acme.id)).owner_id == luffy.id


@pytest.mark.asyncio
async def test_update_owner_to_outsider_fails(repos):
    users, workspaces, _ = repos
    acme = await workspaces.create("acme")
    other = await workspaces.create("other")
    buggy = await _user(users, other, "buggy")

    with pytest.raises(OwnershipAssignmentFailed):
        await workspaces.update_owner(acme, buggy.id)
    with pytest.raises(OwnershipAssignmentFailed):
        await workspaces.update_owner(acme, 999)
    assert (await workspaces.get_by_id(acme.id)).owner_id == 0


@pytest.mark.asyncio
async def test_claim_ownership_only_once(repos):
    users, workspaces, _ = repos
    acme = await workspaces.create("acme")
    luffy = await _user(users, acme, "luffy")
    zoro = await _user(users, acme, "zoro")

    await workspaces.claim_ownership(acme, luffy.id)
    with pytest.raises(OwnershipAssignmentFailed):
        await workspaces.claim_ownership(acme, zoro.id)

    # an explicit transfer is still allowed
    transferred = await workspaces.update_owner(acme, zoro.id)
    assert transferred.owner_id == zoro.id


@pytest.mark.asyncio
async def test_list_members(repos):
    users, workspaces, _ = repos
    acme = await workspaces.create("acme")
    other = await workspaces.create("other")
    luffy = await _user(users, acme, "luffy")
    await _user(users, other, "buggy")
    zoro = await _user(users, acme, "zoro")

    members = await workspaces.list_members(acme.id)
    assert [user.id for user in members] == [luffy.id, zoro.id]


@pytest.mark.asyncio
async def test_chat_lifecycle(repos):
    users, workspaces, chats = repos
    acme = await workspaces.create("acme")
    ids = [(await _user(users, acme, name)).id for name in ("luffy", "zoro", "nami")]

    chat = await chats.create(acme.id, ChatSpec.of(ids[:2]))
    assert chat.type == ChatType.SINGLE
    assert (await chats.get_by_id(chat.id)).members == ids[:2]

    updated = await chats.update(chat.id, ChatSpec.of(ids, name="pub", public=True))
    assert updated.type == ChatType.PUBLIC_CHANNEL
    assert updated.members == ids
    assert (await chats.get_by_id(chat.id)).name == "pub"
    assert [c.id for c in await chats.list_by_workspace(acme.id)] == [chat.id]

    assert await chats.delete(chat.id) is True
    assert await chats.delete(chat.id) is False
    assert await chats.get_by_id(chat.id) is None
    assert await chats.update(chat.id, ChatSpec.of(ids)) is None


@pytest.mark.asyncio
async def test_rollback_discards_uncommitted_writes(session, repos):
    _, workspaces, _ = repos
    uow = SqlAlchemyUnitOfWork(session)
    await workspaces.create("kept")
    await uow.commit()
    await workspaces.create("dropped")
    await uow.rollback()

    assert await workspaces.get_by_name("kept") is not None
    assert await workspaces.get_by_name("dropped") is None
