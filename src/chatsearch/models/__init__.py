"""Pydantic models for chatsearch."""

from chatsearch.models.chats import ChatRecord, MessageRecord
from chatsearch.models.search import (
    ChatResultsView,
    FetchingStatus,
    FoundMessage,
    FoundPeers,
    LoadMoreDirection,
    QueryClassification,
    SearchQuery,
    SearchStoreState,
    SearchTier,
    TierWindow,
)

__all__ = [
    "ChatRecord",
    "ChatResultsView",
    "FetchingStatus",
    "FoundMessage",
    "FoundPeers",
    "LoadMoreDirection",
    "MessageRecord",
    "QueryClassification",
    "SearchQuery",
    "SearchStoreState",
    "SearchTier",
    "TierWindow",
]
