"""Protocol definitions for the stores and helpers search reads from."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol, TypeAlias

from chatsearch.models.chats import ChatRecord, MessageRecord
from chatsearch.models.search import SearchStoreState

ChatsById: TypeAlias = Mapping[str, ChatRecord]


class ChatDirectory(Protocol):
    """Read access to every chat and user the client knows."""

    @property
    def chats_by_id(self) -> ChatsById: ...

    def lookup(self, chat_id: str) -> ChatRecord | None: ...


class ContactStore(Protocol):
    """Ordered local contact ids, ``None`` until the contact list loads."""

    def contact_ids(self) -> list[str] | None: ...


class SearchStore(Protocol):
    """Local, global and message search results written by fetch handlers."""

    def get_state(self) -> SearchStoreState: ...


class MessageCache(Protocol):
    """Messages cached per chat."""

    def get_message(self, chat_id: str, message_id: int) -> MessageRecord | None: ...


class SessionState(Protocol):
    """Current user and sync marker of the client session."""

    @property
    def current_user_id(self) -> str | None: ...

    @property
    def last_sync_time(self) -> float | None: ...


class NameFilter(Protocol):
    """Keeps the ids whose display names match a query."""

    def __call__(self, ids: Sequence[str], chats_by_id: ChatsById, query: str) -> list[str]: ...


class ChatSorter(Protocol):
    """Orders ids by recency, moving pinned ids to the front."""

    def __call__(
        self,
        ids: Sequence[str],
        chats_by_id: ChatsById,
        prioritize_verified: bool = False,
        priority_ids: Sequence[str] | None = None,
    ) -> list[str]: ...
