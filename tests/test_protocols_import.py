"""Protocol module smoke test."""

from __future__ import annotations

from chatsearch.data import protocols as data_protocols
from chatsearch.services import protocols


def test_protocols_module_imports() -> None:
    assert hasattr(protocols, "ChatResultsServiceProtocol")
    for name in (
        "ChatDirectory",
        "ContactStore",
        "SearchStore",
        "MessageCache",
        "SessionState",
        "NameFilter",
        "ChatSorter",
    ):
        assert hasattr(data_protocols, name)
