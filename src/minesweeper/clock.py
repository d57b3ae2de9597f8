"""
Elapsed-time counter for a Minesweeper game.

The clock holds no timer of its own: the caller advances it with tick(),
normally once per second while the game is in progress.
"""
from dataclasses import dataclass


MAX_DISPLAY_SECONDS = 999


@dataclass
class GameClock:
    """
    Whole-second game clock, capped for a three-digit display.

    Attributes:
        elapsed: Seconds counted so far.
        running: Whether tick() currently advances the clock.
        limit: Highest value elapsed can reach.
    """

    elapsed: int = 0
    running: bool = False
    limit: int = MAX_DISPLAY_SECONDS

    def start(self) -> None:
        """Start counting. Starting a running clock has no effect."""
        self.running = True

    def stop(self) -> None:
        self.running = False

    def reset(self) -> None:
        """Stop the clock and zero it."""
        self.elapsed = 0
        self.running = False

    def tick(self, seconds: int = 1) -> int:
        """
        Advance the clock if it is running.

        Args:
            seconds: Whole seconds to add.

        Returns:
            The elapsed value after the tick.
        """
        if self.running and seconds > 0:
            self.elapsed = min(self.elapsed + seconds, self.limit)
        return self.elapsed
