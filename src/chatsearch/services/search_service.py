"""Chat results service — composes the local, global and message tiers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from result import Err, Ok, Result

from chatsearch.config import Config
from chatsearch.data.helpers import filter_users_by_name, sort_chat_ids
from chatsearch.models.search import (
    ChatResultsView,
    LoadMoreDirection,
    SearchQuery,
    SearchStoreState,
    SearchTier,
)
from chatsearch.search.aggregators import (
    EMPTY_IDS,
    aggregate_global_results,
    aggregate_local_results,
)
from chatsearch.search.classifier import classify_query
from chatsearch.search.memo import memoize_last
from chatsearch.search.messages import (
    EMPTY_MESSAGES,
    assemble_found_messages,
    renderable_messages,
)
from chatsearch.search.pagination import PaginationController
from chatsearch.search.throttle import ThrottleGate
from chatsearch.search.window import DisplayWindowState

if TYPE_CHECKING:
    from chatsearch.data.protocols import (
        ChatDirectory,
        ChatSorter,
        ContactStore,
        MessageCache,
        NameFilter,
        SearchStore,
        SessionState,
    )
    from chatsearch.services.actions import SearchActions

logger = logging.getLogger(__name__)


class ChatResultsService:
    """One search session over read-only client stores.

    Holds the only mutable search state: the current query and the show more
    flags of the local and global tiers.
    """

    def __init__(
        self,
        *,
        directory: ChatDirectory,
        contacts: ContactStore,
        search_store: SearchStore,
        message_cache: MessageCache,
        session: SessionState,
        actions: SearchActions,
        gate: ThrottleGate | None = None,
        config: Config | None = None,
        name_filter: NameFilter = filter_users_by_name,
        sorter: ChatSorter = sort_chat_ids,
        on_reset: Callable[[], None] | None = None,
    ) -> None:
        self._config = config or Config()
        self._directory = directory
        self._contacts = contacts
        self._search_store = search_store
        self._message_cache = message_cache
        self._session = session
        self._actions = actions
        self._name_filter = name_filter
        self._sorter = sorter
        self._on_reset = on_reset
        self._query = SearchQuery()
        self._window = DisplayWindowState(self._config.less_list_items_amount)
        self._pagination = PaginationController(
            session=session,
            actions=actions,
            gate=gate or ThrottleGate(self._config.throttle_window_ms),
        )
        self._local_results = memoize_last(aggregate_local_results)
        self._global_results = memoize_last(aggregate_global_results)

    @property
    def query(self) -> SearchQuery:
        return self._query

    @property
    def window(self) -> DisplayWindowState:
        return self._window

    def search(self, query: SearchQuery) -> Result[ChatResultsView, str]:
        """Build the composite view for a query."""
        self._query = query
        try:
            return Ok(self._build_view(query))
        except Exception as exc:
            logger.exception("Search failed for %r", query)
            return Err(f"Search failed: {exc}")

    def local_results(self, query: SearchQuery) -> tuple[str, ...]:
        contact_ids = self._contacts.contact_ids()
        if contact_ids is None:
            return EMPTY_IDS
        state = self._search_store.get_state()
        return self._local_results(
            query.text,
            current_user_id=self._session.current_user_id,
            contact_ids=contact_ids,
            local_chat_ids=state.local_results.chat_ids,
            local_user_ids=state.local_results.user_ids,
            chats_by_id=self._directory.chats_by_id,
            name_filter=self._name_filter,
            sorter=self._sorter,
        )

    def global_results(self, query: SearchQuery) -> tuple[str, ...]:
        if self._contacts.contact_ids() is None:
            return EMPTY_IDS
        state = self._search_store.get_state()
        return self._global_results(
            query.text,
            global_chat_ids=state.global_results.chat_ids,
            global_user_ids=state.global_results.user_ids,
            chats_by_id=self._directory.chats_by_id,
            sorter=self._sorter,
            min_length=self._config.min_query_length_for_global_search,
        )

    def _build_view(self, query: SearchQuery) -> ChatResultsView:
        if query.is_empty:
            return ChatResultsView(query=query, is_default=True)

        if self._contacts.contact_ids() is None:
            # Contact list not loaded: nothing is aggregated and no status is known.
            state = SearchStoreState()
        else:
            state = self._search_store.get_state()

        classification = classify_query(
            query,
            has_global_peers=(
                state.global_results.chat_ids is not None
                and state.global_results.user_ids is not None
            ),
            found_ids=state.found_ids,
            min_global_length=self._config.min_query_length_for_global_search,
        )
        local_ids = self.local_results(query) if classification.local else EMPTY_IDS
        global_ids = self.global_results(query) if classification.global_ else EMPTY_IDS
        if classification.messages:
            found_messages = assemble_found_messages(
                state.found_ids,
                self._message_cache,
                has_text=query.has_text,
                has_date=query.has_date,
            )
        else:
            found_messages = EMPTY_MESSAGES

        status = state.fetching_status
        nothing_found = (
            status is not None
            and not status.chats
            and not status.messages
            and not local_ids
            and not global_ids
            and not found_messages
        )

        return ChatResultsView(
            query=query,
            date_suggestion=query.date or None,
            picker_ids=list(local_ids),
            local_results=self._window.window(SearchTier.LOCAL, local_ids),
            global_results=self._window.window(SearchTier.GLOBAL, global_ids),
            messages=renderable_messages(found_messages, self._directory),
            nothing_found=nothing_found,
        )

    def handle_load_more(self, direction: LoadMoreDirection) -> bool:
        """Scroll boundary reached; page older message results for the current query."""
        if self._query.is_empty:
            return False
        return self._pagination.handle_load_more(direction, self._query.text)

    def handle_chat_click(self, chat_id: str) -> None:
        self._actions.open_chat(chat_id, should_replace_history=True)
        if chat_id != self._session.current_user_id:
            self._actions.add_recently_found_chat_id(chat_id)
        if not self._config.is_single_column_layout:
            self.dismiss()

    def handle_picker_item_click(self, chat_id: str) -> None:
        self._actions.set_global_search_chat_id(chat_id)

    def toggle_show_more(self, tier: SearchTier) -> bool:
        return self._window.toggle(tier)

    def dismiss(self) -> None:
        """End the search session."""
        self._query = SearchQuery()
        self._window.reset()
        if self._on_reset is not None:
            self._on_reset()
