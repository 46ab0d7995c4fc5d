"""A tick-counting timer driven by the game's update loop."""

from __future__ import annotations

DEFAULT_TPS = 60


class Timer:
    """Becomes ready after a number of updates derived from a duration."""

    def __init__(self, duration_ms: int, tps: int = DEFAULT_TPS) -> None:
        product = int(duration_ms) * int(tps)
        quotient = abs(product) // 2500
        self.current_ticks = 0
        self.target_ticks = quotient if product >= 0 else -quotient

    def update(self) -> None:
        if self.current_ticks < self.target_ticks:
            self.current_ticks += 1

    def is_ready(self) -> bool:
        return self.current_ticks >= self.target_ticks

    def reset(self) -> None:
        self.current_ticks = 0