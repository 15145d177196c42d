"""Shared fixtures for chatsearch tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from chatsearch.config import Config
from chatsearch.data.snapshot import InMemoryStores, StoreSnapshot
from chatsearch.search.throttle import ThrottleGate
from chatsearch.services.actions import RecordingActions
from chatsearch.services.search_service import ChatResultsService

SAMPLE_SNAPSHOT_PATH = Path(__file__).parent / "data" / "sample_snapshot.json"


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: float = 0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


def action_names(actions: RecordingActions) -> list[str]:
    return [record.name for record in actions.records]


@pytest.fixture
def sample_snapshot_path() -> Path:
    """Path to the sample store snapshot."""
    return SAMPLE_SNAPSHOT_PATH


@pytest.fixture
def sample_snapshot() -> StoreSnapshot:
    return StoreSnapshot.model_validate_json(SAMPLE_SNAPSHOT_PATH.read_bytes())


@pytest.fixture
def stores(sample_snapshot: StoreSnapshot) -> InMemoryStores:
    return InMemoryStores(sample_snapshot)


@pytest.fixture
def actions() -> RecordingActions:
    return RecordingActions()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Config pointing at a temporary state directory."""
    return Config(state_dir=tmp_path / "state")


@pytest.fixture
def service(
    stores: InMemoryStores,
    actions: RecordingActions,
    clock: FakeClock,
    test_config: Config,
) -> ChatResultsService:
    """Search session over the sample snapshot with a manual clock."""
    return ChatResultsService(
        directory=stores,
        contacts=stores,
        search_store=stores,
        message_cache=stores,
        session=stores,
        actions=actions,
        gate=ThrottleGate(test_config.throttle_window_ms, clock=clock),
        config=test_config,
    )
