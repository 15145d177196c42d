"""Leading-edge throttle for outgoing fetch requests."""

from __future__ import annotations

import time
from collections.abc import Callable


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


class ThrottleGate:
    """Run at most one action per window.

    The first call in a window runs immediately. Calls made before the window
    closes are dropped; nothing is queued or replayed afterwards.
    """

    def __init__(self, window_ms: float = 500, clock: Callable[[], float] = _monotonic_ms) -> None:
        self._window_ms = window_ms
        self._clock = clock
        self._open_at: float | None = None

    @property
    def window_ms(self) -> float:
        return self._window_ms

    def __call__(self, action: Callable[[], object]) -> bool:
        """Run ``action`` unless the current window already fired.

        Returns whether the action ran.
        """
        now = self._clock()
        if self._open_at is not None and now < self._open_at:
            return False
        self._open_at = now + self._window_ms
        action()
        return True

    def reset(self) -> None:
        self._open_at = None
