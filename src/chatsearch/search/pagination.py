"""Backward pagination of the message tier."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chatsearch.models.search import LoadMoreDirection

if TYPE_CHECKING:
    from chatsearch.data.protocols import SessionState
    from chatsearch.search.throttle import ThrottleGate
    from chatsearch.services.actions import SearchActions

logger = logging.getLogger(__name__)

TEXT_SEARCH_TYPE = "text"


class PaginationController:
    """Turns scroll boundary events into throttled message search requests."""

    def __init__(
        self,
        *,
        session: SessionState,
        actions: SearchActions,
        gate: ThrottleGate,
    ) -> None:
        self._session = session
        self._actions = actions
        self._gate = gate

    def handle_load_more(self, direction: LoadMoreDirection, query: str | None) -> bool:
        """Request the next page of older message results.

        Returns whether a request was issued. Forward boundaries, an unsynced
        session and throttled calls are all no-ops.
        """
        if direction != LoadMoreDirection.BACKWARDS:
            return False
        if not self._session.last_sync_time:
            logger.debug("Skipping message pagination: session not synced")
            return False

        issued = self._gate(
            lambda: self._actions.search_messages_global(type=TEXT_SEARCH_TYPE, query=query)
        )
        if not issued:
            logger.debug("Message pagination throttled for query %r", query)
        return issued
