"""Routing and dispatch framework for Telegram bots.

This package provides:
    • MuxBot — registration surface, outbound helpers and the run loop.
    • Router — ordered route registry; commands expand to ``^/cmd(?:@bot)?$``.
    • path() / re_path() / media() — Django-style declarative route tables.
    • View classes with ``as_handler()``.
    • SendBuilder — fluent outbound messages (``bot.answer(event).text(...)``).

Every message is dispatched on its own worker (4 by default), so a slow
handler does not block the bot.

Usage example::

    from telegram_muxer import MuxBot

    async def echo(bot, event, text, captures):
        await bot.answer(event).text(f"Echoed: {captures[1]}").end()

    bot = await MuxBot.from_env("TELEGRAM_BOT_TOKEN")
    bot.command("echo (.+)", echo)
    await bot.start()

"""
from .bot import MuxBot
from .dispatcher import Dispatcher
from .errors import ConfigurationError, InvalidPatternError, MuxerError, TransportError
from .events import Category, GeneralSound, InboundEvent, event_from_message
from .pool import ExecutionPool
from .registrar import (
    any_sound,
    media,
    observe,
    path,
    re_path,
    register_routes,
    simple_path,
    simple_re_path,
)
from .router import Route, Router, RouteKind
from .send import SendBuilder
from .transport import PollingTransport, Transport
from .views import CommandView, MediaView, View

__all__ = [
    "MuxBot",
    "Dispatcher",
    "ConfigurationError",
    "InvalidPatternError",
    "MuxerError",
    "TransportError",
    "Category",
    "GeneralSound",
    "InboundEvent",
    "event_from_message",
    "ExecutionPool",
    "any_sound",
    "media",
    "observe",
    "path",
    "re_path",
    "register_routes",
    "simple_path",
    "simple_re_path",
    "Route",
    "Router",
    "RouteKind",
    "SendBuilder",
    "PollingTransport",
    "Transport",
    "CommandView",
    "MediaView",
    "View",
]
