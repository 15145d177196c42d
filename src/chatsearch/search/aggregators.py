"""Local and global result aggregation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from chatsearch.data.helpers import filter_users_by_name, sort_chat_ids, unique
from chatsearch.search.classifier import (
    MIN_QUERY_LENGTH_FOR_GLOBAL_SEARCH,
    is_global_query,
    is_local_query,
)

if TYPE_CHECKING:
    from chatsearch.data.protocols import ChatSorter, ChatsById, NameFilter

EMPTY_IDS: tuple[str, ...] = ()


def aggregate_local_results(
    query: str | None,
    *,
    current_user_id: str | None,
    contact_ids: Sequence[str] | None,
    local_chat_ids: Sequence[str] | None,
    local_user_ids: Sequence[str] | None,
    chats_by_id: ChatsById,
    name_filter: NameFilter = filter_users_by_name,
    sorter: ChatSorter = sort_chat_ids,
) -> tuple[str, ...]:
    """Merge matching contacts with cached local chat and user ids.

    The current user is always a contact candidate and is pinned to the top
    when it matches.
    """
    if not query or not is_local_query(query):
        return EMPTY_IDS

    contact_ids_with_me = [
        *([current_user_id] if current_user_id else []),
        *(contact_ids or []),
    ]
    found_contact_ids = name_filter(contact_ids_with_me, chats_by_id, query)

    merged = unique([*found_contact_ids, *(local_chat_ids or []), *(local_user_ids or [])])
    pinned = [current_user_id] if current_user_id else None
    return tuple(sorter(merged, chats_by_id, False, pinned))


def aggregate_global_results(
    query: str | None,
    *,
    global_chat_ids: Sequence[str] | None,
    global_user_ids: Sequence[str] | None,
    chats_by_id: ChatsById,
    sorter: ChatSorter = sort_chat_ids,
    min_length: int = MIN_QUERY_LENGTH_FOR_GLOBAL_SEARCH,
) -> tuple[str, ...]:
    """Merge remote directory chat and user ids, never pinning anyone."""
    has_global_peers = global_chat_ids is not None and global_user_ids is not None
    if not is_global_query(query, has_global_peers=has_global_peers, min_length=min_length):
        return EMPTY_IDS

    merged = unique([*(global_chat_ids or []), *(global_user_ids or [])])
    return tuple(sorter(merged, chats_by_id, True))
