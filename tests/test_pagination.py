"""Tests for backward pagination of message results."""

from __future__ import annotations

from types import SimpleNamespace

from chatsearch.models.search import LoadMoreDirection
from chatsearch.search.pagination import PaginationController
from chatsearch.search.throttle import ThrottleGate
from chatsearch.services.actions import RecordingActions
from tests.conftest import FakeClock, action_names


def _controller(
    clock: FakeClock, actions: RecordingActions, last_sync_time: float | None = 1.0
) -> PaginationController:
    session = SimpleNamespace(current_user_id="me", last_sync_time=last_sync_time)
    return PaginationController(
        session=session,  # type: ignore[arg-type]
        actions=actions,
        gate=ThrottleGate(500, clock=clock),
    )


def test_backward_boundary_issues_text_search(clock: FakeClock, actions: RecordingActions) -> None:
    controller = _controller(clock, actions)
    assert controller.handle_load_more(LoadMoreDirection.BACKWARDS, "alpine")
    assert len(actions.records) == 1
    record = actions.records[0]
    assert record.name == "search_messages_global"
    assert record.payload == {"type": "text", "query": "alpine"}


def test_forward_boundary_is_ignored(clock: FakeClock, actions: RecordingActions) -> None:
    controller = _controller(clock, actions)
    assert not controller.handle_load_more(LoadMoreDirection.FORWARDS, "alpine")
    assert actions.records == []


def test_unsynced_session_is_noop(clock: FakeClock, actions: RecordingActions) -> None:
    controller = _controller(clock, actions, last_sync_time=None)
    assert not controller.handle_load_more(LoadMoreDirection.BACKWARDS, "alpine")
    assert actions.records == []


def test_rapid_boundary_events_issue_one_fetch(
    clock: FakeClock, actions: RecordingActions
) -> None:
    controller = _controller(clock, actions)
    for _ in range(10):
        controller.handle_load_more(LoadMoreDirection.BACKWARDS, "alpine")
        clock.advance(45)
    assert action_names(actions) == ["search_messages_global"]

    clock.advance(500)
    controller.handle_load_more(LoadMoreDirection.BACKWARDS, "alpine")
    assert action_names(actions) == ["search_messages_global", "search_messages_global"]
