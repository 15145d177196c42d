"""Protocol definitions for services."""

from __future__ import annotations

from typing import Protocol

from result import Result

from chatsearch.models.search import ChatResultsView, LoadMoreDirection, SearchQuery, SearchTier


class ChatResultsServiceProtocol(Protocol):
    """Interface for the composite search view."""

    def search(self, query: SearchQuery) -> Result[ChatResultsView, str]: ...

    def handle_load_more(self, direction: LoadMoreDirection) -> bool: ...

    def handle_chat_click(self, chat_id: str) -> None: ...

    def handle_picker_item_click(self, chat_id: str) -> None: ...

    def toggle_show_more(self, tier: SearchTier) -> bool: ...

    def dismiss(self) -> None: ...
