"""
Message repository tests
"""
from datetime import timedelta

import pytest

from data.models import UserRole
from data.repositories import MessageRepository
from utils.exceptions import NotFoundError, ValidationError


@pytest.fixture
def alice(make_user):
    return make_user(UserRole.INFLUENCER, name="Alice")


@pytest.fixture
def bob(make_user):
    return make_user(UserRole.BRAND, name="Bob")


@pytest.fixture
def carol(make_user):
    return make_user(UserRole.BRAND, name="Carol")


def test_send_then_history_ends_with_message(messages, alice, bob):
    messages.send(bob.id, alice.id, "earlier")
    sent = messages.send(alice.id, bob.id, "hello")

    history = messages.history(alice.id, bob.id)
    assert history[-1].id == sent.id
    assert sent.read is False


def test_history_is_symmetric(messages, alice, bob):
    messages.send(alice.id, bob.id, "one")
    messages.send(bob.id, alice.id, "two")
    messages.send(alice.id, bob.id, "three")

    forward = [m.id for m in messages.history(alice.id, bob.id)]
    backward = [m.id for m in messages.history(bob.id, alice.id)]
    assert forward == backward


def test_history_without_messages_is_empty(messages, alice, bob):
    assert messages.history(alice.id, bob.id) == []


def test_history_excludes_other_pairs(messages, alice, bob, carol):
    messages.send(alice.id, bob.id, "for bob")
    messages.send(alice.id, carol.id, "for carol")
    messages.send(carol.id, bob.id, "carol to bob")

    assert [m.content for m in messages.history(alice.id, bob.id)] == ["for bob"]


def test_history_breaks_timestamp_ties_by_id(store, messages, alice, bob):
    first = messages.send(alice.id, bob.id, "first")
    second = messages.send(bob.id, alice.id, "second")
    # Force identical timestamps
    store.messages._records[second.id].created_at = store.messages._records[first.id].created_at

    assert [m.content for m in messages.history(alice.id, bob.id)] == ["first", "second"]


def test_history_orders_by_timestamp(store, messages, alice, bob):
    late = messages.send(alice.id, bob.id, "late")
    early = messages.send(bob.id, alice.id, "early")
    store.messages._records[early.id].created_at = late.created_at - timedelta(minutes=5)

    assert [m.content for m in messages.history(alice.id, bob.id)] == ["early", "late"]


@pytest.mark.parametrize("content", ["", "   ", "\n\t"])
def test_send_rejects_empty_content(messages, alice, bob, content):
    with pytest.raises(ValidationError):
        messages.send(alice.id, bob.id, content)
    assert messages.history(alice.id, bob.id) == []


def test_send_rejects_overlong_content(store, alice, bob):
    repo = MessageRepository(store, max_length=10)
    with pytest.raises(ValidationError):
        repo.send(alice.id, bob.id, "x" * 11)
    assert repo.send(alice.id, bob.id, "x" * 10).content == "x" * 10


def test_send_to_self_is_rejected(messages, alice):
    with pytest.raises(ValidationError):
        messages.send(alice.id, alice.id, "note to self")


def test_send_to_self_when_allowed(store, alice):
    repo = MessageRepository(store, allow_self_messages=True)
    repo.send(alice.id, alice.id, "note to self")
    assert len(repo.history(alice.id, alice.id)) == 1


def test_send_to_unknown_user_raises_not_found(messages, alice):
    with pytest.raises(NotFoundError):
        messages.send(alice.id, 999, "anyone there?")


def test_send_without_participant_validation_accepts_dangling_ids(store):
    repo = MessageRepository(store, validate_participants=False)
    message = repo.send(1, 2, "hi")
    assert message.id == 1


def test_mark_read_is_idempotent(messages, alice, bob):
    messages.send(alice.id, bob.id, "one")
    messages.send(alice.id, bob.id, "two")

    assert messages.mark_read(alice.id, bob.id) is True
    assert messages.mark_read(alice.id, bob.id) is False
    assert all(m.read for m in messages.history(alice.id, bob.id))


def test_mark_read_only_touches_one_direction(messages, alice, bob):
    messages.send(alice.id, bob.id, "to bob")
    messages.send(bob.id, alice.id, "to alice")

    messages.mark_read(alice.id, bob.id)
    by_content = {m.content: m.read for m in messages.history(alice.id, bob.id)}
    assert by_content == {"to bob": True, "to alice": False}


def test_mark_read_with_no_messages(messages, alice, bob):
    assert messages.mark_read(alice.id, bob.id) is False


def test_hello_hi_back_scenario(messages, make_user):
    user1, user2 = make_user(), make_user()
    messages.send(user1.id, user2.id, "hello")
    messages.send(user2.id, user1.id, "hi back")

    assert [m.content for m in messages.history(user1.id, user2.id)] == ["hello", "hi back"]

    conversations = messages.conversations(user1.id)
    assert len(conversations) == 1
    summary = conversations[0]
    assert summary.counterpart_id == user2.id
    assert summary.last_message.content == "hi back"
    assert summary.unread_count == 1

    messages.mark_read(user2.id, user1.id)
    assert messages.conversations(user1.id)[0].unread_count == 0


def test_conversations_sorted_by_latest_activity(messages, alice, bob, carol, make_user):
    dave = make_user(name="Dave")
    messages.send(alice.id, bob.id, "to bob")
    messages.send(carol.id, alice.id, "from carol")
    messages.send(alice.id, dave.id, "to dave")
    messages.send(bob.id, alice.id, "bob again")

    summaries = messages.conversations(alice.id)
    assert [s.counterpart_id for s in summaries] == [bob.id, dave.id, carol.id]
    keys = [s.last_message.sort_key for s in summaries]
    assert keys == sorted(keys, reverse=True)


def test_conversation_unread_matches_history(messages, alice, bob):
    messages.send(bob.id, alice.id, "1")
    messages.send(bob.id, alice.id, "2")
    messages.send(alice.id, bob.id, "3")
    messages.send(bob.id, alice.id, "4")

    summary = messages.conversations(alice.id)[0]
    expected = sum(
        1 for m in messages.history(alice.id, bob.id)
        if m.sender_id == bob.id and not m.read
    )
    assert summary.unread_count == expected == 3
    # Messages Alice sent are never counted as unread for Alice
    assert messages.conversations(bob.id)[0].unread_count == 1


def test_conversations_carry_counterpart_user(messages, alice, bob):
    messages.send(alice.id, bob.id, "hi")
    summary = messages.conversations(alice.id)[0]
    assert summary.counterpart.name == "Bob"


def test_conversations_skip_deleted_counterparts(store, messages, alice, bob, carol):
    messages.send(alice.id, bob.id, "hi bob")
    messages.send(alice.id, carol.id, "hi carol")
    store.users.delete(bob.id)

    summaries = messages.conversations(alice.id)
    assert [s.counterpart_id for s in summaries] == [carol.id]


def test_conversations_for_user_without_messages(messages, alice):
    assert messages.conversations(alice.id) == []


def test_unread_count_across_counterparts(messages, alice, bob, carol):
    messages.send(bob.id, alice.id, "1")
    messages.send(carol.id, alice.id, "2")
    messages.send(alice.id, bob.id, "3")
    assert messages.unread_count(alice.id) == 2

    messages.mark_read(bob.id, alice.id)
    assert messages.unread_count(alice.id) == 1


def test_stats_groups_by_pair(messages, alice, bob, carol):
    messages.send(alice.id, bob.id, "1")
    messages.send(bob.id, alice.id, "2")
    messages.send(carol.id, alice.id, "3")
    messages.mark_read(alice.id, bob.id)

    stats = messages.stats()
    assert stats.total_messages == 3
    assert stats.unread_messages == 2
    assert stats.conversation_count == 2
    assert stats.active_users == 3
