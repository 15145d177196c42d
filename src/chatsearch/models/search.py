"""Search models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from chatsearch.models.chats import ChatRecord, MessageRecord


class SearchTier(StrEnum):
    """Result tiers of the composite search view."""

    LOCAL = "local"
    GLOBAL = "global"
    MESSAGES = "messages"


class LoadMoreDirection(StrEnum):
    """Direction reported by the scroll container when it reaches a boundary."""

    BACKWARDS = "backwards"
    FORWARDS = "forwards"


class SearchQuery(BaseModel):
    """Text and/or date hint driving one evaluation of the search view."""

    model_config = ConfigDict(frozen=True)

    text: str | None = None
    date: str | None = None

    @property
    def has_text(self) -> bool:
        return bool(self.text)

    @property
    def has_date(self) -> bool:
        return bool(self.date)

    @property
    def is_empty(self) -> bool:
        return not self.has_text and not self.has_date


class FetchingStatus(BaseModel):
    """Whether a remote chats/messages request is outstanding."""

    chats: bool = False
    messages: bool = False


class FoundPeers(BaseModel):
    """Chat and user ids returned by one search source.

    ``None`` means the source has not answered yet.
    """

    chat_ids: list[str] | None = None
    user_ids: list[str] | None = None


class SearchStoreState(BaseModel):
    """Current contents of the search results store."""

    local_results: FoundPeers = Field(default_factory=FoundPeers)
    global_results: FoundPeers = Field(default_factory=FoundPeers)
    found_ids: list[str] | None = None
    fetching_status: FetchingStatus | None = None


class QueryClassification(BaseModel):
    """Which tiers may aggregate for a query."""

    model_config = ConfigDict(frozen=True)

    is_default: bool = False
    local: bool = False
    global_: bool = False
    messages: bool = False


class TierWindow(BaseModel):
    """Portion of a result tier exposed for rendering."""

    tier: SearchTier
    items: list[str] = Field(default_factory=list)
    total_count: int = 0
    expanded: bool = False
    can_toggle: bool = False


class FoundMessage(BaseModel):
    """A message hit together with the chat that owns it."""

    message: MessageRecord
    chat: ChatRecord
    summary_text: str


class ChatResultsView(BaseModel):
    """Composite result of one search evaluation."""

    query: SearchQuery
    is_default: bool = False
    date_suggestion: str | None = None
    picker_ids: list[str] = Field(default_factory=list)
    local_results: TierWindow = Field(default_factory=lambda: TierWindow(tier=SearchTier.LOCAL))
    global_results: TierWindow = Field(
        default_factory=lambda: TierWindow(tier=SearchTier.GLOBAL)
    )
    messages: list[FoundMessage] = Field(default_factory=list)
    nothing_found: bool = False
