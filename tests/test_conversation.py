"""Tests for conversation models and the conversation store."""
import json
import re

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from beanstash.conversation import ConversationStore, ConversationSummary, Message, Role
from beanstash.conversation.models import (
    conversation_id_from_key,
    deserialize_messages,
    generate_conversation_id,
    make_title,
    serialize_messages,
    storage_key,
)
from beanstash.storage import InMemoryKeyValueStore

ID_PATTERN = re.compile(r"^chat_\d+_[0-9a-z]{9}$")


class TestModels:
    """Tests for message models and helpers."""

    def test_message_is_frozen(self):
        """Test that messages cannot be mutated."""
        message = Message(role=Role.USER, content="hi")
        with pytest.raises(ValidationError):
            message.content = "changed"

    def test_message_accepts_role_string(self):
        """Test that roles validate from their string form."""
        assert Message(role="assistant", content="x").role is Role.ASSISTANT

    def test_unknown_role_rejected(self):
        """Test that only user and assistant are valid roles."""
        with pytest.raises(ValidationError):
            Message(role="system", content="x")

    def test_serialized_form(self):
        """Test the stored JSON shape."""
        raw = serialize_messages([Message(role=Role.USER, content="hi")])
        assert json.loads(raw) == [{"role": "user", "content": "hi"}]

    def test_generate_id_format(self):
        """Test the id layout."""
        conversation_id = generate_conversation_id(now_ms=1700000000000)
        assert ID_PATTERN.match(conversation_id)
        assert conversation_id.startswith("chat_1700000000000_")

    def test_storage_key_round_trip(self):
        """Test the key prefix and its inverse."""
        key = storage_key("chat_1_abc")
        assert key == "chat_chat_1_abc"
        assert conversation_id_from_key(key) == "chat_1_abc"

    def test_short_title_still_gets_ellipsis(self):
        """Test that the ellipsis is always appended."""
        assert make_title("Hi") == "Hi..."

    def test_long_title_is_truncated(self):
        """Test that titles keep the first 30 characters."""
        assert make_title("x" * 50) == "x" * 30 + "..."

    @given(st.lists(st.tuples(st.sampled_from(list(Role)), st.text()), max_size=10))
    def test_serialize_round_trip(self, pairs):
        """Property test: stored messages read back equal."""
        messages = [Message(role=role, content=content) for role, content in pairs]
        assert deserialize_messages(serialize_messages(messages)) == messages


class TestConversationStore:
    """Tests for ConversationStore."""

    @pytest.mark.asyncio
    async def test_append_without_id_is_not_persisted(self, conversation_store, kv_store):
        """Test that nothing is written before the conversation has an id."""
        await conversation_store.append(Role.USER, "hi")
        assert len(conversation_store) == 1
        assert await kv_store.keys() == []

    @pytest.mark.asyncio
    async def test_begin_assigns_id_and_title_once(self, conversation_store):
        """Test lazy id assignment."""
        first = conversation_store.begin("What is photosynthesis and how does it work?")
        second = conversation_store.begin("something else")
        assert first == second
        assert ID_PATTERN.match(first)
        assert conversation_store.title == "What is photosynthesis and how..."

    @pytest.mark.asyncio
    async def test_append_writes_through(self, conversation_store, kv_store):
        """Test that every append persists the whole sequence."""
        conversation_id = conversation_store.begin("hi")
        await conversation_store.append(Role.USER, "hi")
        await conversation_store.append(Role.ASSISTANT, "hello")

        raw = await kv_store.get("chat_" + conversation_id)
        assert json.loads(raw) == [
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "hello"},
        ]

    @pytest.mark.asyncio
    async def test_messages_returns_copy(self, conversation_store):
        """Test that callers cannot mutate the store's list."""
        await conversation_store.append(Role.USER, "hi")
        conversation_store.messages.clear()
        assert len(conversation_store) == 1

    @pytest.mark.asyncio
    async def test_load_restores_messages(self, kv_store):
        """Test that a saved conversation loads back in order."""
        writer = ConversationStore(kv_store)
        conversation_id = writer.begin("first question")
        await writer.append(Role.USER, "first question")
        await writer.append(Role.ASSISTANT, "first answer")

        reader = ConversationStore(kv_store)
        messages = await reader.load(conversation_id)

        assert messages == writer.messages
        assert reader.conversation_id == conversation_id
        assert reader.title == "first question..."

    @pytest.mark.asyncio
    async def test_load_does_not_duplicate(self, kv_store):
        """Test that loading twice leaves the stored sequence unchanged."""
        writer = ConversationStore(kv_store)
        conversation_id = writer.begin("q")
        await writer.append(Role.USER, "q")

        reader = ConversationStore(kv_store)
        await reader.load(conversation_id)
        await reader.load(conversation_id)
        assert len(reader) == 1
        assert len(json.loads(await kv_store.get(storage_key(conversation_id)))) == 1

    @pytest.mark.asyncio
    async def test_load_missing_is_empty(self, conversation_store):
        """Test that an unknown id yields an empty conversation."""
        assert await conversation_store.load("chat_0_missing00") == []
        assert conversation_store.conversation_id == "chat_0_missing00"
        assert conversation_store.title is None

    @pytest.mark.asyncio
    async def test_append_after_load_extends_stored_conversation(self, kv_store):
        """Test that a loaded conversation keeps growing under its key."""
        writer = ConversationStore(kv_store)
        conversation_id = writer.begin("q")
        await writer.append(Role.USER, "q")

        reader = ConversationStore(kv_store)
        await reader.load(conversation_id)
        await reader.append(Role.ASSISTANT, "a")

        stored = deserialize_messages(await kv_store.get(storage_key(conversation_id)))
        assert [m.content for m in stored] == ["q", "a"]

    @pytest.mark.asyncio
    async def test_start_new_keeps_storage(self, conversation_store, kv_store):
        """Test that starting over does not delete anything."""
        conversation_store.begin("hi")
        await conversation_store.append(Role.USER, "hi")
        conversation_store.start_new()

        assert conversation_store.conversation_id is None
        assert conversation_store.messages == []
        assert len(await kv_store.keys("chat_")) == 1

    @pytest.mark.asyncio
    async def test_clear_all_only_removes_conversations(self):
        """Test that other keys survive a history clear."""
        kv = InMemoryKeyValueStore(initial={"theme": "dark"})
        conversations = ConversationStore(kv)
        for text in ("one", "two"):
            conversations.start_new()
            conversations.begin(text)
            await conversations.append(Role.USER, text)
        conversation_id = conversations.conversation_id

        assert await conversations.clear_all() == 2
        assert await kv.keys() == ["theme"]
        assert conversations.conversation_id is None
        assert await conversations.load(conversation_id) == []

    @pytest.mark.asyncio
    async def test_list_conversations(self, conversation_store):
        """Test sidebar summaries, oldest first."""
        conversation_store.begin("first chat")
        await conversation_store.append(Role.USER, "first chat")
        first_id = conversation_store.conversation_id
        conversation_store.start_new()
        conversation_store.begin("second chat")
        await conversation_store.append(Role.USER, "second chat")
        second_id = conversation_store.conversation_id

        assert await conversation_store.list_conversations() == [
            ConversationSummary(id=first_id, title="first chat..."),
            ConversationSummary(id=second_id, title="second chat..."),
        ]
