from datetime import datetime, timezone

import pytest

from roomchat.domain.entities.message import Message, MessageDraft
from roomchat.domain.entities.room import RoomDraft
from roomchat.domain.entities.user import User
from roomchat.domain.exceptions import DomainValidationError
from roomchat.domain.value_objects import MessageId, PairKey, RoomId, RoomKind, UserId


def test_pair_key_is_order_independent():
    assert PairKey.of(UserId(12), UserId(7)) == PairKey.of(UserId(7), UserId(12))
    assert PairKey.of(UserId(12), UserId(7)).value == "7:12"


def test_pair_key_rejects_self_pair():
    with pytest.raises(DomainValidationError):
        PairKey.of(UserId(7), UserId(7))


@pytest.mark.parametrize("raw", ["12:7", "7", "a:b", "7:7", "0:3"])
def test_pair_key_rejects_non_canonical_values(raw):
    with pytest.raises(ValueError):
        PairKey(raw)


@pytest.mark.parametrize("raw", [0, -3, True, "7"])
def test_user_id_rejects_invalid_values(raw):
    with pytest.raises(ValueError):
        UserId(raw)


def test_group_draft_deduplicates_and_sorts_members():
    draft = RoomDraft.group("Trip", [UserId(31), UserId(7), UserId(31), UserId(12)])

    assert draft.kind is RoomKind.GROUP
    assert draft.member_ids == (UserId(7), UserId(12), UserId(31))
    assert draft.pair_key is None


def test_group_draft_requires_members():
    with pytest.raises(DomainValidationError):
        RoomDraft.group("Empty", [])


def test_direct_draft_has_pair_key_and_no_name():
    draft = RoomDraft.direct(UserId(12), UserId(7))

    assert draft.kind is RoomKind.DIRECT
    assert draft.name is None
    assert draft.pair_key == PairKey("7:12")
    assert draft.member_ids == (UserId(7), UserId(12))


@pytest.mark.parametrize("body", ["", "   ", "\n\t"])
def test_message_draft_rejects_blank_body(body):
    with pytest.raises(DomainValidationError):
        MessageDraft.create(RoomId(1), UserId(7), body)


def test_message_order_breaks_timestamp_ties_by_id():
    ts = datetime(2026, 1, 1, tzinfo=timezone.utc)
    first = Message(MessageId(3), RoomId(1), UserId(7), "a", ts)
    second = Message(MessageId(4), RoomId(1), UserId(7), "b", ts)

    assert first.is_before(second)
    assert not second.is_before(first)


def test_user_display_name_and_member_projection():
    user = User(UserId(7), "Alice", "Martin", role="advisor", profile_image="a.jpg")
    member = user.to_member()

    assert member.display_name == "Alice Martin"
    assert member.avatar_url == "a.jpg"
    assert member.user_id == UserId(7)


def test_user_rejects_unknown_role():
    with pytest.raises(ValueError):
        User(UserId(7), "Alice", "Martin", role="superuser")
