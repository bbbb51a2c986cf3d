"""Session module for beanstash.

Explicit per-session state that UI handlers hold:
- controller.py: ChatSession (conversation, in-flight request, sidebar)
- clock.py: session start time and status line
- timer.py: study timer countdown
"""

from .clock import SessionClock
from .controller import ChatSession
from .models import TurnResult
from .timer import StudyTimer, TimerStatus

__all__ = [
    "ChatSession",
    "SessionClock",
    "StudyTimer",
    "TimerStatus",
    "TurnResult",
]
