"""Study timer state.

Hides the countdown bookkeeping from whichever surface drives it. The
surface calls tick() once per second and reacts to the returned flag.
"""

from enum import Enum

from ..config import TIMER_DEFAULT_MINUTES, TIMER_MAX_MINUTES, TIMER_MIN_MINUTES


class TimerStatus(str, Enum):
    READY = "Ready to start"
    RUNNING = "Timer running..."
    PAUSED = "Timer paused"
    FINISHED = "Time's up!"


class StudyTimer:
    """Countdown timer with start/pause/reset and minute presets."""

    def __init__(self, minutes: int = TIMER_DEFAULT_MINUTES):
        self._default_seconds = minutes * 60
        self._remaining = self._default_seconds
        self._running = False
        self._status = TimerStatus.READY

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def running(self) -> bool:
        return self._running

    @property
    def status(self) -> TimerStatus:
        return self._status

    @property
    def display(self) -> str:
        """Remaining time as MM:SS."""
        minutes, seconds = divmod(max(self._remaining, 0), 60)
        return f"{minutes:02d}:{seconds:02d}"

    def start(self) -> bool:
        """Start counting down. Returns False if already running."""
        if self._running:
            return False
        self._running = True
        self._status = TimerStatus.RUNNING
        return True

    def pause(self) -> bool:
        """Pause the countdown. Returns False if not running."""
        if not self._running:
            return False
        self._running = False
        self._status = TimerStatus.PAUSED
        return True

    def reset(self) -> None:
        """Stop and restore the default duration."""
        self._running = False
        self._remaining = self._default_seconds
        self._status = TimerStatus.READY

    def set_minutes(self, minutes: int) -> None:
        """Set the remaining time to a preset number of minutes."""
        self._remaining = minutes * 60

    def set_custom(self, minutes: int) -> bool:
        """Set a user-entered duration.

        Values outside 1..120 minutes are ignored.

        Returns:
            True if the duration was applied
        """
        if TIMER_MIN_MINUTES <= minutes <= TIMER_MAX_MINUTES:
            self.set_minutes(minutes)
            return True
        return False

    def tick(self) -> bool:
        """Advance one second.

        Returns:
            True exactly when this tick finished the countdown
        """
        if not self._running:
            return False
        self._remaining -= 1
        if self._remaining <= 0:
            self._running = False
            self._status = TimerStatus.FINISHED
            return True
        return False
