"""The bot facade: registration surface, outbound helpers and run loop."""

from __future__ import annotations

import asyncio
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Iterable, Optional

from telegram import Bot
from telegram.error import InvalidToken

from .dispatcher import Dispatcher
from .errors import ConfigurationError
from .events import Category, InboundEvent
from .pool import DEFAULT_WORKERS, ExecutionPool
from .registrar import RouteSpec, register_routes
from .router import Router
from .send import SendBuilder
from .transport import DEFAULT_POLL_TIMEOUT, PollingTransport, Transport


logger = logging.getLogger(__name__)


class MuxBot:
    """One Telegram bot: its API client, its routes and its worker pool.

    Several instances can live in one process; each keeps its own username
    for command expansion.
    """

    def __init__(
        self,
        api: Any,
        username: str = "",
        bot_id: Optional[int] = None,
        workers: int = DEFAULT_WORKERS,
        strict_patterns: bool = False,
        poll_timeout: int = DEFAULT_POLL_TIMEOUT,
    ):
        if workers < 1:
            raise ConfigurationError("workers must be at least 1")
        self.api = api
        self.id = bot_id
        self.username = username
        self.workers = workers
        self.poll_timeout = poll_timeout
        self.router = Router(username=username, strict=strict_patterns)
        self.dispatcher = Dispatcher(self.router, self)
        self._transport: Optional[Transport] = None

    @classmethod
    async def connect(cls, token: str, **kwargs) -> "MuxBot":
        """Build a bot from ``token``, asking Telegram for its id and username."""
        api = Bot(token)
        try:
            await api.initialize()
        except InvalidToken as exc:
            raise ConfigurationError(f"Invalid token! ({exc})") from exc
        logger.info("Connected as @%s (id %s)", api.username, api.id)
        return cls(api, username=api.username, bot_id=api.id, **kwargs)

    @classmethod
    async def from_env(cls, var: str = "TELEGRAM_BOT_TOKEN", **kwargs) -> "MuxBot":
        token = os.getenv(var)
        if not token:
            raise ConfigurationError(f"Environment variable {var} is not set")
        return await cls.connect(token, **kwargs)

    @classmethod
    async def from_config(cls, config) -> "MuxBot":
        """Build a bot from a ``BaseConfiguration``.

        With ``telegram.username`` set the ``getMe`` round trip is skipped.
        """
        options = dict(
            workers=config.dispatch.workers,
            strict_patterns=config.dispatch.strict_patterns,
            poll_timeout=config.telegram.poll_timeout,
        )
        if config.telegram.username:
            return cls(Bot(config.telegram.token), username=config.telegram.username, **options)
        return await cls.connect(config.telegram.token, **options)

    def command(self, pattern: str, handler: Callable, name: Optional[str] = None) -> "MuxBot":
        """Command with capture groups: ``"echo (.+)"`` matches ``/echo@bot text``.

        The handler is called as ``handler(bot, event, text, captures)`` where
        ``captures[0]`` is the whole message.
        """
        self.router.command(pattern, handler, name)
        return self

    def simple_command(self, pattern: str, handler: Callable, name: Optional[str] = None) -> "MuxBot":
        """Command without captures, ``handler(bot, event, text)``."""
        self.router.simple_command(pattern, handler, name)
        return self

    def regex(self, pattern: str, handler: Callable, name: Optional[str] = None) -> "MuxBot":
        """Regular expression used as written, with captures."""
        self.router.regex(pattern, handler, name)
        return self

    def simple_regex(self, pattern: str, handler: Callable, name: Optional[str] = None) -> "MuxBot":
        self.router.simple_regex(pattern, handler, name)
        return self

    def any(self, handler: Callable, name: Optional[str] = None) -> "MuxBot":
        """Handler for every message, ``handler(bot, event)``. Useful to log."""
        self.router.observer(handler, name)
        return self

    def on(self, category: Category, handler: Callable, name: Optional[str] = None) -> "MuxBot":
        """Handler for one media category, ``handler(bot, event, payload)``."""
        self.router.media(category, handler, name)
        return self

    def photo(self, handler: Callable) -> "MuxBot":
        return self.on(Category.PHOTO, handler)

    def video(self, handler: Callable) -> "MuxBot":
        return self.on(Category.VIDEO, handler)

    def document(self, handler: Callable) -> "MuxBot":
        return self.on(Category.DOCUMENT, handler)

    def sticker(self, handler: Callable) -> "MuxBot":
        return self.on(Category.STICKER, handler)

    def audio(self, handler: Callable) -> "MuxBot":
        return self.on(Category.AUDIO, handler)

    def voice(self, handler: Callable) -> "MuxBot":
        return self.on(Category.VOICE, handler)

    def all_sound(self, handler: Callable, name: Optional[str] = None) -> "MuxBot":
        """Handler for audio and voice, receiving a ``GeneralSound``."""
        self.router.any_sound(handler, name)
        return self

    def contact(self, handler: Callable) -> "MuxBot":
        return self.on(Category.CONTACT, handler)

    def location(self, handler: Callable) -> "MuxBot":
        return self.on(Category.LOCATION, handler)

    def new_participant(self, handler: Callable) -> "MuxBot":
        """Users joined a group; the payload is a tuple of ``User``."""
        return self.on(Category.NEW_MEMBER, handler)

    def left_participant(self, handler: Callable) -> "MuxBot":
        return self.on(Category.LEFT_MEMBER, handler)

    def new_title(self, handler: Callable) -> "MuxBot":
        return self.on(Category.NEW_TITLE, handler)

    def new_chat_photo(self, handler: Callable) -> "MuxBot":
        return self.on(Category.NEW_CHAT_PHOTO, handler)

    def delete_chat_photo(self, handler: Callable) -> "MuxBot":
        return self.on(Category.DELETED_CHAT_PHOTO, handler)

    def group_chat_created(self, handler: Callable) -> "MuxBot":
        return self.on(Category.GROUP_CREATED, handler)

    def include(self, urlpatterns: Iterable[RouteSpec]) -> "MuxBot":
        register_routes(self.router, urlpatterns)
        return self

    def send(self, chat_id: int) -> SendBuilder:
        return SendBuilder(chat_id, self.api)

    def answer(self, event: InboundEvent) -> SendBuilder:
        """Send to the chat ``event`` came from."""
        return self.send(event.chat_id)

    async def start(self, transport: Optional[Transport] = None) -> None:
        """Dispatch events from ``transport`` (long polling by default).

        Returns when the transport is exhausted or :meth:`stop` is called,
        after every in-flight dispatch has finished. A failing transport
        raises ``TransportError`` once in-flight work has drained.
        """
        self._transport = transport or PollingTransport(self.api, timeout=self.poll_timeout)
        pool = ExecutionPool(self.workers)
        # a worker runs at most one plain handler at a time
        executor = ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="muxer-worker")
        self.dispatcher.executor = executor
        logger.info(
            "Bot @%s started with %d route(s) and %d worker(s)",
            self.username,
            len(self.router),
            self.workers,
        )
        try:
            async for event in self._transport.events():
                await pool.submit(
                    self.dispatcher.dispatch(event),
                    name=f"dispatch-{event.chat_id}-{event.message_id}",
                )
        except Exception:
            logger.exception("Update transport failed, stopping")
            raise
        finally:
            await pool.drain()
            self.dispatcher.executor = None
            executor.shutdown(wait=False)
            self._transport = None
            logger.info("Bot @%s stopped", self.username)

    def stop(self) -> None:
        """Stop pulling new events; in-flight dispatches still complete."""
        if self._transport is not None:
            self._transport.close()

    def run(self, transport: Optional[Transport] = None) -> None:
        """Blocking wrapper around :meth:`start`."""
        try:
            asyncio.run(self.start(transport))
        except KeyboardInterrupt:
            logger.info("Interrupted, exiting")
