"""Default name filter, sorter and message summary helpers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from chatsearch.data.protocols import ChatsById
    from chatsearch.models.chats import MessageRecord

T = TypeVar("T")

MEDIA_SUMMARY_LABELS: dict[str, str] = {
    "photo": "Photo",
    "video": "Video",
    "voice": "Voice message",
    "audio": "Audio",
    "document": "File",
    "sticker": "Sticker",
    "contact": "Contact",
    "location": "Location",
    "poll": "Poll",
}


def unique(items: Iterable[T]) -> list[T]:
    """Drop repeated items, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))


def filter_users_by_name(ids: Sequence[str], chats_by_id: ChatsById, query: str) -> list[str]:
    """Return ids whose name contains the query or whose username starts with it.

    Ids missing from the directory never match. A leading ``@`` is ignored so
    that username mentions match usernames.
    """
    needle = query.strip().lower().removeprefix("@")
    if not needle:
        return list(ids)

    matched: list[str] = []
    for chat_id in ids:
        record = chats_by_id.get(chat_id)
        if record is None:
            continue
        name = record.display_name.lower()
        if needle in name or record.username.lower().startswith(needle):
            matched.append(chat_id)
    return matched


def sort_chat_ids(
    ids: Sequence[str],
    chats_by_id: ChatsById,
    prioritize_verified: bool = False,
    priority_ids: Sequence[str] | None = None,
) -> list[str]:
    """Order ids by last activity, newest first.

    The sort is stable, so ids without activity keep their input order.
    ``priority_ids`` that are present in ``ids`` are moved to the front in the
    order given.
    """

    def sort_key(chat_id: str) -> tuple[bool, float]:
        record = chats_by_id.get(chat_id)
        if record is None:
            return (True, 0)
        verified_first = prioritize_verified and record.is_verified
        return (not verified_first, -record.last_message_at)

    ordered = sorted(ids, key=sort_key)
    if not priority_ids:
        return ordered

    pinned = [chat_id for chat_id in priority_ids if chat_id in ordered]
    return [*pinned, *(chat_id for chat_id in ordered if chat_id not in pinned)]


def get_message_summary_text(message: MessageRecord) -> str:
    """Text used for a message row; empty when nothing renderable is left."""
    text = message.text.strip()
    if text:
        return text
    if message.media_type:
        return MEDIA_SUMMARY_LABELS.get(message.media_type, "")
    return ""
