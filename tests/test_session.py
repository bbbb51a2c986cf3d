"""Tests for the chat session controller, clock and study timer."""
import asyncio
from datetime import datetime, timedelta

import pytest

from beanstash.config import FALLBACK_MESSAGE, SYSTEM_PROMPT
from beanstash.conversation import ConversationStore, Role
from beanstash.session import ChatSession, SessionClock, StudyTimer
from beanstash.session.timer import TimerStatus


class TestChatSessionSend:
    """Tests for ChatSession.send."""

    @pytest.mark.asyncio
    async def test_successful_turn(self, session, fake_llm, kv_store):
        """Test that a reply is appended and persisted."""
        result = await session.send("What is 2+2?")

        assert result is not None
        assert not result.failed
        assert result.user_message.content == "What is 2+2?"
        assert result.assistant_message.role == Role.ASSISTANT
        assert result.assistant_message.content == fake_llm.reply
        assert [m.role for m in session.store.messages] == [Role.USER, Role.ASSISTANT]
        assert await kv_store.keys("chat_") == ["chat_" + result.conversation_id]
        assert not session.is_busy

    @pytest.mark.asyncio
    async def test_first_send_adds_sidebar_entry(self, session):
        """Test that a new conversation shows up in the sidebar."""
        result = await session.send("Explain osmosis please")
        await session.send("And diffusion?")

        assert len(session.conversations) == 1
        assert session.conversations[0].id == result.conversation_id
        assert session.conversations[0].title == "Explain osmosis please..."
        assert session.active_conversation_id == result.conversation_id

    @pytest.mark.asyncio
    async def test_request_contents(self, session, fake_llm):
        """Test the request is preamble, prior turns, then the new message."""
        await session.send("first")
        await session.send("second")

        request = fake_llm.calls[1]
        assert [(m.role, m.content) for m in request] == [
            ("system", SYSTEM_PROMPT),
            ("user", "first"),
            ("assistant", fake_llm.reply),
            ("user", "second"),
        ]

    @pytest.mark.asyncio
    async def test_request_parameters(self, conversation_store, fake_llm):
        """Test that model settings are passed through."""
        session = ChatSession(
            conversation_store, fake_llm, model="gpt-4o", temperature=0.2, max_tokens=100
        )
        await session.send("hi")
        assert fake_llm.kwargs[0] == {"model": "gpt-4o", "temperature": 0.2, "max_tokens": 100}

    @pytest.mark.asyncio
    async def test_input_is_trimmed(self, session):
        """Test that surrounding whitespace is removed."""
        result = await session.send("   hello  \n")
        assert result.user_message.content == "hello"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    @pytest.mark.asyncio
    async def test_empty_input_is_ignored(self, session, fake_llm, text):
        """Test that blank input does nothing."""
        assert await session.send(text) is None
        assert fake_llm.calls == []
        assert session.store.messages == []

    @pytest.mark.asyncio
    async def test_failure_appends_fallback(self, conversation_store, failing_llm, kv_store):
        """Test that a malformed reply becomes the fallback message."""
        session = ChatSession(conversation_store, failing_llm)
        result = await session.send("hello?")

        assert result.failed
        assert result.assistant_message.content == FALLBACK_MESSAGE
        stored = await ConversationStore(kv_store).load(result.conversation_id)
        assert [m.content for m in stored] == ["hello?", FALLBACK_MESSAGE]
        assert not session.is_busy

    @pytest.mark.asyncio
    async def test_transport_errors_are_reported_the_same_way(self, conversation_store, make_llm):
        """Test that any provider exception leads to the fallback."""
        llm = make_llm(error=ConnectionError("network unreachable"))
        session = ChatSession(conversation_store, llm)
        result = await session.send("hello?")

        assert result.failed
        assert result.assistant_message.content == FALLBACK_MESSAGE

    @pytest.mark.asyncio
    async def test_custom_prompt_and_fallback(self, conversation_store, make_llm):
        """Test that the preamble and fallback text are configurable."""
        llm = make_llm(error=ValueError("bad"))
        session = ChatSession(
            conversation_store, llm, system_prompt="Be brief.", fallback_message="Oops."
        )
        result = await session.send("hi")
        assert llm.calls[0][0].content == "Be brief."
        assert result.assistant_message.content == "Oops."

    @pytest.mark.asyncio
    async def test_send_while_busy_is_dropped(self, conversation_store, make_llm):
        """Test that only one request is in flight at a time."""
        gate = asyncio.Event()
        llm = make_llm(gate=gate)
        session = ChatSession(conversation_store, llm)

        first = asyncio.create_task(session.send("one"))
        await llm.started.wait()
        assert session.is_busy

        assert await session.send("two") is None

        gate.set()
        result = await first
        assert result.user_message.content == "one"
        assert len(llm.calls) == 1
        assert [m.content for m in session.store.messages if m.role == Role.USER] == ["one"]
        assert not session.is_busy


class TestChatSessionHistory:
    """Tests for new chat, open and clear."""

    @pytest.mark.asyncio
    async def test_new_chat_starts_fresh_conversation(self, session):
        """Test that a new chat gets a new id and keeps the old one stored."""
        first = await session.send("one")
        session.new_chat()
        assert session.active_conversation_id is None

        second = await session.send("two")
        assert second.conversation_id != first.conversation_id
        summaries = await session.refresh_conversations()
        assert [s.id for s in summaries] == [first.conversation_id, second.conversation_id]

    @pytest.mark.asyncio
    async def test_open_then_continue(self, session, fake_llm):
        """Test that an opened conversation is the context for the next send."""
        first = await session.send("remember 42")
        session.new_chat()
        await session.send("unrelated")

        messages = await session.open(first.conversation_id)
        assert [m.content for m in messages] == ["remember 42", fake_llm.reply]

        await session.send("what number?")
        request = fake_llm.calls[-1]
        assert [m.content for m in request[1:]] == ["remember 42", fake_llm.reply, "what number?"]

    @pytest.mark.asyncio
    async def test_clear_history_declined(self, session):
        """Test that declining leaves everything in place."""
        await session.send("keep me")
        assert await session.clear_history(lambda: False) is False
        assert len(await session.refresh_conversations()) == 1

    @pytest.mark.asyncio
    async def test_clear_history_confirmed(self, session, kv_store):
        """Test that confirming removes every conversation."""
        await session.send("one")
        session.new_chat()
        await session.send("two")

        assert await session.clear_history(lambda: True) is True
        assert session.conversations == []
        assert session.active_conversation_id is None
        assert await kv_store.keys("chat_") == []

    @pytest.mark.asyncio
    async def test_clear_history_async_confirmation(self, session):
        """Test that the confirmation callback may be a coroutine."""
        await session.send("one")

        async def confirm():
            return True

        assert await session.clear_history(confirm) is True
        assert await session.refresh_conversations() == []


class TestSessionClock:
    """Tests for SessionClock."""

    def test_status_line_without_session_minutes(self):
        """Test that the session segment is hidden in the first minute."""
        start = datetime(2026, 10, 19, 15, 4, 5)
        clock = SessionClock(started_at=start)
        assert clock.status_line(start + timedelta(seconds=30)) == "3:04:35 PM • Mon, Oct 19"

    def test_status_line_with_session_minutes(self):
        """Test that whole elapsed minutes are shown."""
        start = datetime(2026, 10, 19, 9, 0, 0)
        clock = SessionClock(started_at=start)
        now = start + timedelta(minutes=5, seconds=59)
        assert clock.status_line(now) == "9:05:59 AM • Mon, Oct 19 • 5m session"

    def test_midnight_shows_twelve(self):
        """Test 12-hour formatting at midnight."""
        start = datetime(2026, 1, 2, 0, 0, 1)
        assert SessionClock(started_at=start).status_line(start) == "12:00:01 AM • Fri, Jan 2"

    def test_session_status_line(self, conversation_store, fake_llm):
        """Test that the session exposes its clock text."""
        start = datetime(2026, 10, 19, 12, 0, 0)
        session = ChatSession(conversation_store, fake_llm, clock=SessionClock(started_at=start))
        assert session.status_line(start + timedelta(minutes=61)) == (
            "1:01:00 PM • Mon, Oct 19 • 61m session"
        )


class TestStudyTimer:
    """Tests for StudyTimer."""

    def test_defaults(self):
        """Test the initial 25 minute state."""
        timer = StudyTimer()
        assert timer.remaining_seconds == 25 * 60
        assert timer.display == "25:00"
        assert timer.status is TimerStatus.READY
        assert not timer.running

    def test_start_and_pause(self):
        """Test the running state transitions."""
        timer = StudyTimer()
        assert timer.start() is True
        assert timer.start() is False
        assert timer.status is TimerStatus.RUNNING
        assert timer.pause() is True
        assert timer.pause() is False
        assert timer.status is TimerStatus.PAUSED

    def test_tick_only_counts_while_running(self):
        """Test that a paused timer does not move."""
        timer = StudyTimer(minutes=1)
        assert timer.tick() is False
        assert timer.remaining_seconds == 60
        timer.start()
        timer.tick()
        assert timer.display == "00:59"

    def test_tick_reports_finish_once(self):
        """Test that exactly the final tick reports completion."""
        timer = StudyTimer(minutes=1)
        timer.start()
        results = [timer.tick() for _ in range(60)]
        assert results == [False] * 59 + [True]
        assert timer.status is TimerStatus.FINISHED
        assert not timer.running
        assert timer.tick() is False
        assert timer.display == "00:00"

    def test_reset(self):
        """Test that reset restores the default duration."""
        timer = StudyTimer()
        timer.set_minutes(45)
        timer.start()
        timer.tick()
        timer.reset()
        assert timer.remaining_seconds == 25 * 60
        assert timer.status is TimerStatus.READY
        assert not timer.running

    @pytest.mark.parametrize("minutes,accepted", [(0, False), (1, True), (90, True), (120, True), (121, False)])
    def test_custom_bounds(self, minutes, accepted):
        """Test that custom durations must be between 1 and 120 minutes."""
        timer = StudyTimer()
        assert timer.set_custom(minutes) is accepted
        expected = minutes * 60 if accepted else 25 * 60
        assert timer.remaining_seconds == expected
