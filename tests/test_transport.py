import datetime
from unittest.mock import AsyncMock

import pytest
from telegram import Chat, Message, Update
from telegram.error import NetworkError, TimedOut

from telegram_muxer.errors import TransportError
from telegram_muxer.events import Category
from telegram_muxer.transport import PollingTransport


DATE = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
CHAT = Chat(id=42, type=Chat.PRIVATE)


def _update(update_id, **kwargs):
    message = Message(message_id=update_id, date=DATE, chat=CHAT, **kwargs)
    return Update(update_id, message=message)


async def _collect(transport, limit):
    events = []
    async for event in transport.events():
        events.append(event)
        if len(events) == limit:
            transport.close()
    return events


@pytest.mark.asyncio
async def test_yields_events_and_advances_offset():
    api = AsyncMock()
    api.get_updates.side_effect = [
        (_update(5, text="one"), _update(6)),  # second has no supported content
        (_update(7, text="two"),),
    ]
    transport = PollingTransport(api, timeout=1)

    events = await _collect(transport, limit=2)

    assert [e.payload for e in events] == ["one", "two"]
    assert all(e.category is Category.TEXT for e in events)
    assert transport.offset == 8
    first, second = api.get_updates.await_args_list
    assert first.kwargs == {"offset": None, "timeout": 1, "allowed_updates": ["message"]}
    assert second.kwargs["offset"] == 7


@pytest.mark.asyncio
async def test_updates_without_message_are_skipped():
    api = AsyncMock()
    api.get_updates.side_effect = [(Update(3),), (_update(4, text="hi"),)]
    transport = PollingTransport(api)

    events = await _collect(transport, limit=1)

    assert [e.message_id for e in events] == [4]
    assert transport.offset == 5


@pytest.mark.asyncio
async def test_timeout_is_an_empty_batch():
    api = AsyncMock()
    api.get_updates.side_effect = [TimedOut(), (_update(1, text="after"),)]

    events = await _collect(PollingTransport(api), limit=1)

    assert [e.payload for e in events] == ["after"]


@pytest.mark.asyncio
async def test_api_failure_becomes_transport_error():
    api = AsyncMock()
    api.get_updates.side_effect = NetworkError("connection reset")

    with pytest.raises(TransportError) as exc_info:
        await _collect(PollingTransport(api), limit=1)

    assert isinstance(exc_info.value.__cause__, NetworkError)


@pytest.mark.asyncio
async def test_api_client_is_opened_and_closed():
    api = AsyncMock()
    api.get_updates.side_effect = [(_update(1, text="x"),)]

    await _collect(PollingTransport(api), limit=1)

    api.__aenter__.assert_awaited_once()
    api.__aexit__.assert_awaited_once()


@pytest.mark.asyncio
async def test_close_stops_in_the_middle_of_a_batch():
    api = AsyncMock()
    api.get_updates.side_effect = [tuple(_update(n, text=f"m{n}") for n in range(1, 6))]
    transport = PollingTransport(api)

    events = await _collect(transport, limit=2)

    assert [e.message_id for e in events] == [1, 2]
    assert transport.offset == 3
    assert api.get_updates.await_count == 1
