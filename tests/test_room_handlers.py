import asyncio

import pytest

from roomchat.application.commands.rooms import (
    CreateRoomCommand,
    CreateRoomHandler,
    GetOrCreateDirectRoomCommand,
    GetOrCreateDirectRoomHandler,
)
from roomchat.application.queries.rooms import (
    GetRoomDetailHandler,
    GetRoomDetailQuery,
    ListRoomsHandler,
    ListRoomsQuery,
    RoomExistsHandler,
    RoomExistsQuery,
)
from roomchat.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
    RoomAlreadyExistsError,
    StorageError,
)
from roomchat.domain.value_objects import RoomId, RoomKind, UserId
from tests.conftest import ALICE, BOB, CAROL


def _ids(*raw):
    return tuple(UserId(r) for r in raw)


# ==================== ROOM REGISTRY ====================


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "member_ids",
    [(ALICE, BOB), (BOB, ALICE), (CAROL, ALICE, BOB, ALICE), (ALICE,)],
)
async def test_create_room_then_detail_returns_exact_members(room_repo, member_ids):
    room = await CreateRoomHandler(room_repo).execute(
        CreateRoomCommand(member_ids=_ids(*member_ids), name="Trip")
    )
    detail = await GetRoomDetailHandler(room_repo).execute(
        GetRoomDetailQuery(room_id=room.id)
    )

    assert sorted(m.user_id.value for m in detail.members) == sorted(set(member_ids))
    assert len(detail.member_ids) == len(set(detail.member_ids))
    assert detail.kind is RoomKind.GROUP
    assert detail.name == "Trip"


@pytest.mark.asyncio
async def test_create_room_without_members_fails(room_repo, store):
    with pytest.raises(DomainValidationError):
        await CreateRoomHandler(room_repo).execute(CreateRoomCommand(member_ids=()))
    assert store.room_count() == 0


@pytest.mark.asyncio
async def test_create_room_blank_name_becomes_none(room_repo):
    room = await CreateRoomHandler(room_repo).execute(
        CreateRoomCommand(member_ids=_ids(ALICE), name="   ")
    )
    assert room.name is None


@pytest.mark.asyncio
async def test_create_room_rejects_overlong_name(room_repo):
    with pytest.raises(DomainValidationError):
        await CreateRoomHandler(room_repo).execute(
            CreateRoomCommand(member_ids=_ids(ALICE), name="x" * 1000)
        )


@pytest.mark.asyncio
async def test_create_room_with_unknown_user_fails(room_repo, store):
    with pytest.raises(EntityNotFoundError):
        await CreateRoomHandler(room_repo).execute(
            CreateRoomCommand(member_ids=_ids(ALICE, 4242))
        )
    assert store.room_count() == 0


@pytest.mark.asyncio
async def test_room_detail_unknown_room(room_repo):
    with pytest.raises(EntityNotFoundError):
        await GetRoomDetailHandler(room_repo).execute(
            GetRoomDetailQuery(room_id=RoomId(404))
        )


@pytest.mark.asyncio
async def test_room_detail_rejects_non_member_viewer(room_repo):
    room = await CreateRoomHandler(room_repo).execute(
        CreateRoomCommand(member_ids=_ids(ALICE, BOB))
    )
    with pytest.raises(AccessDeniedError):
        await GetRoomDetailHandler(room_repo).execute(
            GetRoomDetailQuery(room_id=room.id, viewer_id=UserId(CAROL))
        )


@pytest.mark.asyncio
async def test_room_exists(room_repo):
    room = await CreateRoomHandler(room_repo).execute(
        CreateRoomCommand(member_ids=_ids(ALICE))
    )
    handler = RoomExistsHandler(room_repo)

    assert await handler.execute(RoomExistsQuery(room_id=room.id)) is True
    assert await handler.execute(RoomExistsQuery(room_id=RoomId(999))) is False


@pytest.mark.asyncio
async def test_list_rooms_only_returns_memberships_in_id_order(room_repo):
    create = CreateRoomHandler(room_repo)
    r1 = await create.execute(CreateRoomCommand(member_ids=_ids(ALICE, BOB)))
    await create.execute(CreateRoomCommand(member_ids=_ids(BOB, CAROL)))
    r3 = await create.execute(CreateRoomCommand(member_ids=_ids(CAROL, ALICE)))

    rooms = await ListRoomsHandler(room_repo).execute(ListRoomsQuery(user_id=UserId(ALICE)))

    assert [r.id for r in rooms] == [r1.id, r3.id]
    assert all(r.has_member(UserId(ALICE)) for r in rooms)


@pytest.mark.asyncio
async def test_list_rooms_pages_with_after_cursor(room_repo):
    create = CreateRoomHandler(room_repo)
    created = [
        await create.execute(CreateRoomCommand(member_ids=_ids(ALICE))) for _ in range(5)
    ]
    handler = ListRoomsHandler(room_repo)

    first = await handler.execute(ListRoomsQuery(user_id=UserId(ALICE), limit=2))
    second = await handler.execute(
        ListRoomsQuery(user_id=UserId(ALICE), limit=2, after=first[-1].id)
    )

    assert [r.id for r in first + second] == [r.id for r in created[:4]]


@pytest.mark.asyncio
async def test_list_rooms_rejects_zero_limit(room_repo):
    with pytest.raises(DomainValidationError):
        await ListRoomsHandler(room_repo).execute(
            ListRoomsQuery(user_id=UserId(ALICE), limit=0)
        )


# ==================== ROOM RESOLVER ====================


@pytest.mark.asyncio
async def test_direct_room_is_symmetric_and_idempotent(room_repo, store):
    handler = GetOrCreateDirectRoomHandler(room_repo)

    first = await handler.execute(GetOrCreateDirectRoomCommand(UserId(ALICE), UserId(BOB)))
    second = await handler.execute(GetOrCreateDirectRoomCommand(UserId(BOB), UserId(ALICE)))
    third = await handler.execute(GetOrCreateDirectRoomCommand(UserId(ALICE), UserId(BOB)))

    assert first.id == second.id == third.id
    assert first.kind is RoomKind.DIRECT
    assert first.name is None
    assert first.member_ids == [UserId(ALICE), UserId(BOB)]
    assert store.room_count() == 1


@pytest.mark.asyncio
async def test_direct_room_rejects_self_pair(room_repo, store):
    with pytest.raises(DomainValidationError):
        await GetOrCreateDirectRoomHandler(room_repo).execute(
            GetOrCreateDirectRoomCommand(UserId(ALICE), UserId(ALICE))
        )
    assert store.room_count() == 0


@pytest.mark.asyncio
async def test_direct_room_ignores_two_member_group(room_repo, store):
    group = await CreateRoomHandler(room_repo).execute(
        CreateRoomCommand(member_ids=_ids(ALICE, BOB), name="Just us")
    )
    direct = await GetOrCreateDirectRoomHandler(room_repo).execute(
        GetOrCreateDirectRoomCommand(UserId(ALICE), UserId(BOB))
    )

    assert direct.id != group.id
    assert direct.kind is RoomKind.DIRECT
    assert store.room_count() == 2


@pytest.mark.asyncio
async def test_concurrent_direct_room_requests_create_one_room(room_repo, store):
    handler = GetOrCreateDirectRoomHandler(room_repo)
    commands = [
        GetOrCreateDirectRoomCommand(UserId(ALICE), UserId(BOB))
        if i % 2
        else GetOrCreateDirectRoomCommand(UserId(BOB), UserId(ALICE))
        for i in range(10)
    ]

    rooms = await asyncio.gather(*(handler.execute(c) for c in commands))

    assert len({room.id for room in rooms}) == 1
    assert store.room_count() == 1


@pytest.mark.asyncio
async def test_direct_room_fails_when_lost_race_room_is_missing(room_repo):
    class VanishingRepository(type(room_repo)):
        async def get_by_pair_key(self, pair_key):
            return None

        async def create(self, draft):
            raise RoomAlreadyExistsError(pair_key=draft.pair_key.value)

    handler = GetOrCreateDirectRoomHandler(VanishingRepository(room_repo._store))

    with pytest.raises(StorageError):
        await handler.execute(GetOrCreateDirectRoomCommand(UserId(ALICE), UserId(BOB)))


@pytest.mark.asyncio
async def test_direct_room_scenario_lists_one_room(room_repo):
    handler = GetOrCreateDirectRoomHandler(room_repo)
    first = await handler.execute(GetOrCreateDirectRoomCommand(UserId(7), UserId(12)))
    second = await handler.execute(GetOrCreateDirectRoomCommand(UserId(7), UserId(12)))

    rooms = await ListRoomsHandler(room_repo).execute(ListRoomsQuery(user_id=UserId(7)))

    assert first.id == second.id
    assert [r.id for r in rooms] == [first.id]
