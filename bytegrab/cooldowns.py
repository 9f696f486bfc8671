"""Per-key command cooldowns."""

from __future__ import annotations

import time
from collections.abc import Callable, Hashable


class CooldownTracker:
    """Remembers when each key last started a cooldown."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._started: dict[Hashable, float] = {}

    def remaining_cooldown(self, key: Hashable | None, duration: float) -> float | None:
        """Seconds left on ``key``'s cooldown of ``duration``, or None if free."""
        if key is None:
            return None
        started = self._started.get(key)
        if started is None:
            return None
        elapsed = max(0.0, self._clock() - started)
        remaining = duration - elapsed
        return remaining if remaining >= 0 else None

    def start_cooldown(self, key: Hashable | None) -> None:
        """Start a cooldown for ``key`` from now."""
        if key is not None:
            self._started[key] = self._clock()


def format_remaining(seconds: float) -> str:
    """Describe the time left on a cooldown for the user."""
    minutes, secs = divmod(int(seconds), 60)
    if minutes == 0:
        return f"Please wait **{secs} seconds**"
    if minutes == 1:
        return f"Please wait **1 minute and {secs} seconds**"
    return f"Please wait **{minutes} minutes and {secs} seconds**"