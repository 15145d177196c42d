"""Service container with DI wiring."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chatsearch.data.snapshot import InMemoryStores, StoreSnapshot
from chatsearch.search.throttle import ThrottleGate
from chatsearch.services.actions import RecordingActions, SearchActions
from chatsearch.services.search_service import ChatResultsService

if TYPE_CHECKING:
    from chatsearch.config import Config


@dataclass
class ServiceContainer:
    """Holds the stores, command sink and the throttle shared by all sessions."""

    config: Config
    stores: InMemoryStores
    actions: SearchActions
    gate: ThrottleGate
    search_service: ChatResultsService

    @classmethod
    def create(
        cls,
        config: Config,
        snapshot: StoreSnapshot | None = None,
        actions: SearchActions | None = None,
    ) -> ServiceContainer:
        """Factory that wires all dependencies."""
        stores = InMemoryStores(snapshot)
        actions = actions or RecordingActions()
        gate = ThrottleGate(config.throttle_window_ms)

        return cls(
            config=config,
            stores=stores,
            actions=actions,
            gate=gate,
            search_service=_build_session(config, stores, actions, gate),
        )

    def open_session(self, on_reset: Callable[[], None] | None = None) -> ChatResultsService:
        """Start a search session with fresh display window flags."""
        return _build_session(self.config, self.stores, self.actions, self.gate, on_reset)


def _build_session(
    config: Config,
    stores: InMemoryStores,
    actions: SearchActions,
    gate: ThrottleGate,
    on_reset: Callable[[], None] | None = None,
) -> ChatResultsService:
    return ChatResultsService(
        directory=stores,
        contacts=stores,
        search_store=stores,
        message_cache=stores,
        session=stores,
        actions=actions,
        gate=gate,
        config=config,
        on_reset=on_reset,
    )
