"""Configuration for chatsearch."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    state_dir: Path = field(default_factory=lambda: Path.home() / ".cache" / "chatsearch")
    throttle_window_ms: float = 500
    min_query_length_for_global_search: int = 4
    less_list_items_amount: int = 5
    is_single_column_layout: bool = False

    @property
    def snapshot_path(self) -> Path:
        return self.state_dir / "snapshot.json"
