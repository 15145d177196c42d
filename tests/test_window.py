"""Tests for the show more / show less display window."""

from __future__ import annotations

import pytest

from chatsearch.models.search import SearchTier
from chatsearch.search.window import LESS_LIST_ITEMS_AMOUNT, DisplayWindowState

SEVEN_IDS = [f"c{i}" for i in range(7)]


def test_collapsed_window_shows_preview() -> None:
    state = DisplayWindowState()
    window = state.window(SearchTier.LOCAL, SEVEN_IDS)
    assert LESS_LIST_ITEMS_AMOUNT == 5
    assert window.items == SEVEN_IDS[:5]
    assert window.total_count == 7
    assert window.can_toggle
    assert not window.expanded


def test_toggle_exposes_everything() -> None:
    state = DisplayWindowState()
    assert state.toggle(SearchTier.LOCAL)
    window = state.window(SearchTier.LOCAL, SEVEN_IDS)
    assert window.items == SEVEN_IDS
    assert window.expanded
    assert not state.is_expanded(SearchTier.GLOBAL)

    assert not state.toggle(SearchTier.LOCAL)
    assert state.window(SearchTier.LOCAL, SEVEN_IDS).items == SEVEN_IDS[:5]


def test_no_toggle_for_short_lists() -> None:
    state = DisplayWindowState()
    window = state.window(SearchTier.GLOBAL, ("g1", "g2", "g3", "g4", "g5"))
    assert window.items == ["g1", "g2", "g3", "g4", "g5"]
    assert not window.can_toggle


def test_reset_collapses_both_tiers() -> None:
    state = DisplayWindowState()
    state.toggle(SearchTier.LOCAL)
    state.toggle(SearchTier.GLOBAL)
    state.reset()
    assert not state.is_expanded(SearchTier.LOCAL)
    assert not state.is_expanded(SearchTier.GLOBAL)


def test_message_tier_has_no_window() -> None:
    state = DisplayWindowState()
    with pytest.raises(ValueError):
        state.toggle(SearchTier.MESSAGES)
