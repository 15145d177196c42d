"""Show more / show less state of the local and global tiers."""

from __future__ import annotations

from collections.abc import Sequence

from chatsearch.models.search import SearchTier, TierWindow

LESS_LIST_ITEMS_AMOUNT = 5

_WINDOWED_TIERS = (SearchTier.LOCAL, SearchTier.GLOBAL)


class DisplayWindowState:
    """Per-tier expanded flags for one search session."""

    def __init__(self, preview_count: int = LESS_LIST_ITEMS_AMOUNT) -> None:
        self._preview_count = preview_count
        self._expanded: dict[SearchTier, bool] = dict.fromkeys(_WINDOWED_TIERS, False)

    def is_expanded(self, tier: SearchTier) -> bool:
        return self._expanded.get(tier, False)

    def toggle(self, tier: SearchTier) -> bool:
        if tier not in self._expanded:
            raise ValueError(f"Tier {tier} has no display window")
        self._expanded[tier] = not self._expanded[tier]
        return self._expanded[tier]

    def reset(self) -> None:
        for tier in self._expanded:
            self._expanded[tier] = False

    def window(self, tier: SearchTier, ids: Sequence[str]) -> TierWindow:
        expanded = self.is_expanded(tier)
        items = list(ids) if expanded else list(ids[: self._preview_count])
        return TierWindow(
            tier=tier,
            items=items,
            total_count=len(ids),
            expanded=expanded,
            can_toggle=len(ids) > self._preview_count,
        )
