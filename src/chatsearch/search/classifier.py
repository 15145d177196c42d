"""Decide which result tiers may run for a query."""

from __future__ import annotations

from collections.abc import Sequence

from chatsearch.models.search import QueryClassification, SearchQuery

MIN_QUERY_LENGTH_FOR_GLOBAL_SEARCH = 4
MENTION_PREFIX = "@"

DEFAULT_CLASSIFICATION = QueryClassification(is_default=True)


def is_local_query(text: str | None) -> bool:
    """A bare ``@`` is too short to match anything locally."""
    if not text:
        return False
    return not (text.startswith(MENTION_PREFIX) and len(text) < 2)


def is_global_query(
    text: str | None,
    *,
    has_global_peers: bool,
    min_length: int = MIN_QUERY_LENGTH_FOR_GLOBAL_SEARCH,
) -> bool:
    if not text or len(text) < min_length:
        return False
    return has_global_peers


def classify_query(
    query: SearchQuery,
    *,
    has_global_peers: bool,
    found_ids: Sequence[str] | None,
    min_global_length: int = MIN_QUERY_LENGTH_FOR_GLOBAL_SEARCH,
) -> QueryClassification:
    """Classify a query into the default view or a set of enabled tiers.

    ``has_global_peers`` is true once a remote search has answered with both
    chat and user ids.
    """
    if query.is_empty:
        return DEFAULT_CLASSIFICATION

    return QueryClassification(
        local=is_local_query(query.text),
        global_=is_global_query(
            query.text, has_global_peers=has_global_peers, min_length=min_global_length
        ),
        messages=bool(found_ids),
    )
