"""Resolve message search tokens into cached messages."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from chatsearch.data.helpers import get_message_summary_text
from chatsearch.models.search import FoundMessage

if TYPE_CHECKING:
    from chatsearch.data.protocols import ChatDirectory, MessageCache
    from chatsearch.models.chats import ChatRecord, MessageRecord

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = "_"
_MESSAGE_ID_RE = re.compile(r"-?[0-9]+")

EMPTY_MESSAGES: tuple[MessageRecord, ...] = ()


def parse_search_token(token: str) -> tuple[str, int] | None:
    """Split a ``<chat_id>_<message_id>`` token, or ``None`` if malformed."""
    chat_id, separator, message_id = token.partition(TOKEN_SEPARATOR)
    if not separator or not chat_id:
        return None
    if not _MESSAGE_ID_RE.fullmatch(message_id):
        return None
    return chat_id, int(message_id)


def assemble_found_messages(
    found_ids: Sequence[str] | None,
    cache: MessageCache,
    *,
    has_text: bool,
    has_date: bool,
) -> tuple[MessageRecord, ...]:
    """Resolve tokens against the message cache, newest first.

    Tokens for evicted messages or unknown chats are dropped. Ties keep the
    token order.
    """
    if (not has_text and not has_date) or not found_ids:
        return EMPTY_MESSAGES

    resolved: list[MessageRecord] = []
    for token in found_ids:
        parsed = parse_search_token(token)
        if parsed is None:
            logger.debug("Dropping malformed search token %r", token)
            continue
        message = cache.get_message(*parsed)
        if message is None:
            logger.debug("Dropping unresolved search token %r", token)
            continue
        resolved.append(message)

    resolved.sort(key=lambda message: message.date, reverse=True)
    return tuple(resolved)


def lookup_owning_chat(message: MessageRecord, directory: ChatDirectory) -> ChatRecord | None:
    return directory.lookup(message.chat_id)


def renderable_messages(
    messages: Iterable[MessageRecord], directory: ChatDirectory
) -> list[FoundMessage]:
    """Keep hits that have summary text and a known owning chat."""
    rows: list[FoundMessage] = []
    for message in messages:
        text = get_message_summary_text(message)
        chat = lookup_owning_chat(message, directory)
        if not text or chat is None:
            continue
        rows.append(FoundMessage(message=message, chat=chat, summary_text=text))
    return rows
