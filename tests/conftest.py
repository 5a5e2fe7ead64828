import sys, pathlib

# Ensure project root is importable
PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

import datetime
from unittest.mock import AsyncMock

import pytest
from telegram import User

from telegram_muxer.bot import MuxBot
from telegram_muxer.events import Category, InboundEvent


BOT_USERNAME = "usernamebot"
CHAT_ID = 42


# --- Pytest fixtures ---

@pytest.fixture
def api():
    """Stand-in for telegram.Bot: every API method is an AsyncMock."""
    return AsyncMock()


@pytest.fixture
def bot(api):
    return MuxBot(api, username=BOT_USERNAME, bot_id=1)


@pytest.fixture
def user():
    return User(id=7, first_name="Alice", is_bot=False)


@pytest.fixture
def make_event(user):
    """Build InboundEvents without going through telegram.Message."""

    def _make(category=Category.TEXT, payload="hello", message_id=1, chat_id=CHAT_ID):
        return InboundEvent(
            category=Category(category),
            payload=payload,
            chat_id=chat_id,
            message_id=message_id,
            sender=user,
            date=datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc),
        )

    return _make


class ListTransport:
    """Transport yielding a fixed list of events, optionally failing at the end."""

    def __init__(self, events, error=None):
        self._events = list(events)
        self._error = error
        self.closed = False

    def close(self):
        self.closed = True

    async def events(self):
        for event in self._events:
            if self.closed:
                return
            yield event
        if self._error is not None:
            raise self._error


@pytest.fixture
def list_transport():
    return ListTransport
