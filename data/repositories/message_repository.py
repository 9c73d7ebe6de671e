"""
Message Data Access Layer
"""
from collections import defaultdict
from typing import Dict, List, Set

from data.models import Message, ConversationSummary, ConversationStats
from data.store import EntityStore
from utils.exceptions import NotFoundError, ValidationError
from utils.time_utils import now
from utils.validators import validate_message_content


class MessageRepository:
    """Direct messages, pairwise history and per-counterpart summaries"""

    def __init__(self, store: EntityStore, max_length: int = 5000,
                 validate_participants: bool = True, allow_self_messages: bool = False):
        self._store = store
        self.max_length = max_length
        self.validate_participants = validate_participants
        self.allow_self_messages = allow_self_messages

    def send(self, sender_id: int, recipient_id: int, content: str) -> Message:
        """Store a new unread message"""
        validate_message_content(content, self.max_length)
        if sender_id == recipient_id and not self.allow_self_messages:
            raise ValidationError("Cannot send a message to yourself")
        if self.validate_participants:
            for user_id in (sender_id, recipient_id):
                if self._store.users.get(user_id) is None:
                    raise NotFoundError(f"User {user_id} not found")

        return self._store.messages.create(Message(
            sender_id=sender_id,
            recipient_id=recipient_id,
            content=content,
            read=False,
            created_at=now()
        ))

    def history(self, user_a: int, user_b: int) -> List[Message]:
        """All messages exchanged between two users, oldest first"""
        participants = {user_a, user_b}
        messages = self._store.messages.list(
            lambda m: {m.sender_id, m.recipient_id} == participants
        )
        return sorted(messages, key=lambda m: m.sort_key)

    def conversations(self, user_id: int) -> List[ConversationSummary]:
        """One summary per counterpart, most recently active first.

        Counterparts whose user record no longer exists are left out.
        """
        latest: Dict[int, Message] = {}
        unread: Dict[int, int] = defaultdict(int)

        for message in self._store.messages.list(lambda m: m.involves(user_id)):
            counterpart_id = message.counterpart_of(user_id)
            current = latest.get(counterpart_id)
            if current is None or message.sort_key > current.sort_key:
                latest[counterpart_id] = message
            if message.recipient_id == user_id and message.sender_id == counterpart_id and not message.read:
                unread[counterpart_id] += 1

        summaries = []
        for counterpart_id, last_message in latest.items():
            counterpart = self._store.users.get(counterpart_id)
            if counterpart is None:
                continue
            summaries.append(ConversationSummary(
                counterpart_id=counterpart_id,
                last_message=last_message,
                unread_count=unread[counterpart_id],
                counterpart=counterpart
            ))

        summaries.sort(key=lambda s: s.last_message.sort_key, reverse=True)
        return summaries

    def mark_read(self, sender_id: int, recipient_id: int) -> bool:
        """Mark every unread message from sender to recipient as read.

        Returns whether anything changed.
        """
        changed = self._store.messages.update_where(
            lambda m: m.sender_id == sender_id and m.recipient_id == recipient_id and not m.read,
            {"read": True}
        )
        return changed > 0

    def unread_count(self, user_id: int) -> int:
        """Unread messages addressed to the user, across all counterparts"""
        return self._store.messages.count(lambda m: m.recipient_id == user_id and not m.read)

    def stats(self) -> ConversationStats:
        """Platform-wide aggregate over all messages in one pass"""
        pairs: Set[frozenset] = set()
        participants: Set[int] = set()
        stats = ConversationStats()

        for message in self._store.messages.list():
            stats.total_messages += 1
            if not message.read:
                stats.unread_messages += 1
            pairs.add(frozenset((message.sender_id, message.recipient_id)))
            participants.update((message.sender_id, message.recipient_id))

        stats.conversation_count = len(pairs)
        stats.active_users = len(participants)
        return stats
