"""Update sources feeding the bot.

``Transport`` is the minimal contract the run loop relies on, so tests and
other sources (webhooks, replays) can stand in for Telegram long polling.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Protocol

from telegram.error import TelegramError, TimedOut

from .errors import TransportError
from .events import InboundEvent, event_from_message


logger = logging.getLogger(__name__)

DEFAULT_POLL_TIMEOUT = 20


class Transport(Protocol):
    """Source of inbound events."""

    def events(self) -> AsyncIterator[InboundEvent]:
        ...

    def close(self) -> None:
        ...


class PollingTransport:
    """Long polls ``getUpdates`` on a ``telegram.Bot``."""

    def __init__(self, api: Any, timeout: int = DEFAULT_POLL_TIMEOUT):
        self.api = api
        self.timeout = timeout
        self.offset: int | None = None
        self._closed = False

    def close(self) -> None:
        self._closed = True

    async def events(self) -> AsyncIterator[InboundEvent]:
        async with self.api:
            while not self._closed:
                for update in await self._poll():
                    if self._closed:
                        # left unacknowledged, Telegram resends them on the next poll
                        return
                    self.offset = update.update_id + 1
                    message = update.message
                    if message is None:
                        continue
                    event = event_from_message(message)
                    if event is None:
                        logger.debug(
                            "Skipping unsupported message %s in chat %s",
                            message.message_id,
                            message.chat_id,
                        )
                        continue
                    yield event

    async def _poll(self) -> tuple:
        try:
            return await self.api.get_updates(
                offset=self.offset,
                timeout=self.timeout,
                allowed_updates=["message"],
            )
        except TimedOut:
            logger.debug("getUpdates timed out, polling again")
            return ()
        except TelegramError as exc:
            raise TransportError(f"getUpdates failed: {exc}") from exc
