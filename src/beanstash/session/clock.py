"""Session clock for the status line."""

from datetime import datetime


class SessionClock:
    """Remembers when the session started. Never persisted."""

    SEPARATOR = " • "

    def __init__(self, started_at: datetime | None = None):
        self._started_at = started_at or datetime.now()

    @property
    def started_at(self) -> datetime:
        return self._started_at

    def elapsed_minutes(self, now: datetime | None = None) -> int:
        """Whole minutes since the session started."""
        current = now or datetime.now()
        return int((current - self._started_at).total_seconds() // 60)

    def status_line(self, now: datetime | None = None) -> str:
        """Clock text like ``3:04:05 PM • Mon, Oct 19 • 5m session``.

        The session segment only appears after the first whole minute.
        """
        current = now or datetime.now()
        hour = current.hour % 12 or 12
        time_text = f"{hour}:{current:%M:%S} {current:%p}"
        date_text = f"{current:%a}, {current:%b} {current.day}"

        parts = [time_text, date_text]
        minutes = self.elapsed_minutes(current)
        if minutes > 0:
            parts.append(f"{minutes}m session")
        return self.SEPARATOR.join(parts)
