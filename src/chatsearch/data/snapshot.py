"""In-memory client stores loaded from a JSON snapshot."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError
from result import Err, Ok, Result

from chatsearch.models.chats import ChatRecord, MessageRecord
from chatsearch.models.search import SearchStoreState

logger = logging.getLogger(__name__)


class StoreSnapshot(BaseModel):
    """Serialized state of every store search reads from."""

    current_user_id: str | None = None
    last_sync_time: float | None = None
    contact_ids: list[str] | None = None
    chats: list[ChatRecord] = Field(default_factory=list)
    messages: list[MessageRecord] = Field(default_factory=list)
    search: SearchStoreState = Field(default_factory=SearchStoreState)


def load_snapshot(path: Path) -> Result[StoreSnapshot, str]:
    """Read and validate a snapshot file."""
    if not path.exists():
        return Err(f"Snapshot not found: {path}")
    try:
        return Ok(StoreSnapshot.model_validate_json(path.read_bytes()))
    except ValidationError as exc:
        logger.warning("Invalid snapshot %s: %s", path, exc)
        return Err(f"Invalid snapshot {path}: {exc.error_count()} validation error(s)")


class InMemoryStores:
    """Chat directory, contact, search, message and session stores in one object.

    Every update replaces the mapping or state it touches, so consumers that
    memoize on object identity recompute after a change.
    """

    def __init__(self, snapshot: StoreSnapshot | None = None) -> None:
        snapshot = snapshot or StoreSnapshot()
        self._current_user_id = snapshot.current_user_id
        self._last_sync_time = snapshot.last_sync_time
        self._contact_ids = snapshot.contact_ids
        self._chats_by_id: dict[str, ChatRecord] = {chat.id: chat for chat in snapshot.chats}
        self._messages_by_chat_id: dict[str, dict[int, MessageRecord]] = {}
        for message in snapshot.messages:
            self._messages_by_chat_id.setdefault(message.chat_id, {})[message.id] = message
        self._search_state = snapshot.search

    @property
    def chats_by_id(self) -> dict[str, ChatRecord]:
        return self._chats_by_id

    def lookup(self, chat_id: str) -> ChatRecord | None:
        return self._chats_by_id.get(chat_id)

    def contact_ids(self) -> list[str] | None:
        return self._contact_ids

    def get_state(self) -> SearchStoreState:
        return self._search_state

    def get_message(self, chat_id: str, message_id: int) -> MessageRecord | None:
        by_id = self._messages_by_chat_id.get(chat_id)
        if by_id is None:
            return None
        return by_id.get(message_id)

    @property
    def current_user_id(self) -> str | None:
        return self._current_user_id

    @property
    def last_sync_time(self) -> float | None:
        return self._last_sync_time

    def upsert_chats(self, chats: list[ChatRecord]) -> None:
        self._chats_by_id = {**self._chats_by_id, **{chat.id: chat for chat in chats}}

    def add_messages(self, messages: list[MessageRecord]) -> None:
        by_chat = {chat_id: dict(by_id) for chat_id, by_id in self._messages_by_chat_id.items()}
        for message in messages:
            by_chat.setdefault(message.chat_id, {})[message.id] = message
        self._messages_by_chat_id = by_chat

    def evict_message(self, chat_id: str, message_id: int) -> None:
        by_id = self._messages_by_chat_id.get(chat_id)
        if by_id is None or message_id not in by_id:
            return
        remaining = {mid: message for mid, message in by_id.items() if mid != message_id}
        self._messages_by_chat_id = {**self._messages_by_chat_id, chat_id: remaining}

    def set_search_state(self, state: SearchStoreState) -> None:
        self._search_state = state

    def set_contact_ids(self, contact_ids: list[str] | None) -> None:
        self._contact_ids = contact_ids

    def mark_synced(self, last_sync_time: float | None) -> None:
        self._last_sync_time = last_sync_time
