"""Commands the search view issues to the rest of the client."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class SearchActions(Protocol):
    """Fire-and-forget command interface, one method per action."""

    def open_chat(self, chat_id: str, *, should_replace_history: bool = False) -> None: ...

    def add_recently_found_chat_id(self, chat_id: str) -> None: ...

    def search_messages_global(self, *, type: str, query: str | None) -> None: ...

    def set_global_search_chat_id(self, chat_id: str) -> None: ...


class ActionRecord(BaseModel):
    """One dispatched command."""

    name: str
    payload: dict[str, Any] = Field(default_factory=dict)


class RecordingActions:
    """Records and logs every command instead of executing it."""

    def __init__(self) -> None:
        self.records: list[ActionRecord] = []

    def _record(self, name: str, **payload: Any) -> None:
        logger.info("Dispatching %s %s", name, payload)
        self.records.append(ActionRecord(name=name, payload=payload))

    def open_chat(self, chat_id: str, *, should_replace_history: bool = False) -> None:
        self._record("open_chat", id=chat_id, should_replace_history=should_replace_history)

    def add_recently_found_chat_id(self, chat_id: str) -> None:
        self._record("add_recently_found_chat_id", id=chat_id)

    def search_messages_global(self, *, type: str, query: str | None) -> None:
        self._record("search_messages_global", type=type, query=query)

    def set_global_search_chat_id(self, chat_id: str) -> None:
        self._record("set_global_search_chat_id", id=chat_id)
