"""Tests for query classification."""

from __future__ import annotations

import pytest

from chatsearch.models.search import SearchQuery
from chatsearch.search.classifier import (
    MIN_QUERY_LENGTH_FOR_GLOBAL_SEARCH,
    classify_query,
    is_global_query,
    is_local_query,
)


@pytest.mark.parametrize(
    "query",
    [SearchQuery(), SearchQuery(text="", date=""), SearchQuery(text=None, date="")],
)
def test_empty_query_selects_default_view(query: SearchQuery) -> None:
    result = classify_query(query, has_global_peers=True, found_ids=["c1_1"])
    assert result.is_default
    assert not (result.local or result.global_ or result.messages)


def test_bare_mention_disables_local_tier() -> None:
    assert not is_local_query("@")
    assert is_local_query("@a")
    assert is_local_query("a")
    assert not is_local_query("")
    assert not is_local_query(None)


def test_global_requires_min_length_and_remote_peers() -> None:
    assert MIN_QUERY_LENGTH_FOR_GLOBAL_SEARCH == 4
    assert not is_global_query("abc", has_global_peers=True)
    assert is_global_query("abcd", has_global_peers=True)
    assert not is_global_query("abcd", has_global_peers=False)


def test_message_tier_needs_tokens() -> None:
    with_tokens = classify_query(
        SearchQuery(date="2024-05-01"), has_global_peers=False, found_ids=["c1_1"]
    )
    assert with_tokens.messages
    assert not with_tokens.local
    assert not with_tokens.is_default

    without_tokens = classify_query(SearchQuery(text="hello"), has_global_peers=True, found_ids=[])
    assert not without_tokens.messages
    assert without_tokens.local
    assert without_tokens.global_


def test_custom_global_min_length() -> None:
    result = classify_query(
        SearchQuery(text="ab"), has_global_peers=True, found_ids=None, min_global_length=2
    )
    assert result.global_
