"""Per-event dispatch.

For one :class:`~telegram_muxer.events.InboundEvent` the dispatcher runs, in
registration order:

    1. every observer route;
    2. for text, every pattern/text route whose matcher finds the text;
       for anything else, every media route of the event's category
       (plus "any sound" routes for audio and voice).

Every applicable route fires; a failing handler is logged and the remaining
routes still run.
"""

import asyncio
import functools
import inspect
import logging
from concurrent.futures import Executor
from typing import Any, Callable, Optional

from .events import Category, GeneralSound, InboundEvent
from .patterns import captures
from .router import Route, Router, RouteKind


logger = logging.getLogger(__name__)

SOUND_CATEGORIES = (Category.AUDIO, Category.VOICE)


async def call_handler(handler: Callable, *args: Any, executor: Optional[Executor] = None) -> Any:
    """Await coroutine handlers; run plain callables on a thread of ``executor``.

    Without an executor the loop default one is used.
    """
    if inspect.iscoroutinefunction(handler) or inspect.iscoroutinefunction(
        getattr(handler, "__call__", None)
    ):
        return await handler(*args)
    loop = asyncio.get_running_loop()
    result = await loop.run_in_executor(executor, functools.partial(handler, *args))
    if inspect.isawaitable(result):
        result = await result
    return result


class Dispatcher:
    """Walks a :class:`Router` for each event.

    ``bot`` is passed as the first argument of every handler so handlers can
    answer through it. Plain handlers run on ``executor`` when one is set.
    """

    def __init__(self, router: Router, bot: Any = None, executor: Optional[Executor] = None):
        self.router = router
        self.bot = bot
        self.executor = executor

    async def dispatch(self, event: InboundEvent) -> int:
        """Dispatch ``event``; returns the number of handlers that completed."""
        routes = self.router.all_routes()
        fired = 0

        for route in routes:
            if route.kind is RouteKind.OBSERVER:
                fired += await self._invoke(route, event)

        if event.category is Category.TEXT:
            fired += await self._dispatch_text(routes, event)
        else:
            fired += await self._dispatch_media(routes, event)

        logger.debug(
            "Dispatched %s message %s from chat %s to %d handler(s)",
            event.category.value,
            event.message_id,
            event.chat_id,
            fired,
        )
        return fired

    async def _dispatch_text(self, routes: list[Route], event: InboundEvent) -> int:
        text = event.payload
        fired = 0
        for route in routes:
            if route.kind not in (RouteKind.PATTERN, RouteKind.TEXT):
                continue
            match = route.matches(text)
            if match is None:
                continue
            if route.kind is RouteKind.PATTERN:
                fired += await self._invoke(route, event, text, captures(match))
            else:
                fired += await self._invoke(route, event, text)
        return fired

    async def _dispatch_media(self, routes: list[Route], event: InboundEvent) -> int:
        fired = 0
        for route in routes:
            if route.kind is RouteKind.MEDIA and route.category is event.category:
                fired += await self._invoke(route, event, event.payload)
            elif route.kind is RouteKind.ANY_SOUND and event.category in SOUND_CATEGORIES:
                sound = GeneralSound(event.category, event.payload)
                fired += await self._invoke(route, event, sound)
        return fired

    async def _invoke(self, route: Route, event: InboundEvent, *args: Any) -> bool:
        try:
            await call_handler(route.handler, self.bot, event, *args, executor=self.executor)
        except Exception:
            logger.exception(
                "Handler %s failed on %s message %s (chat %s)",
                route.label,
                event.category.value,
                event.message_id,
                event.chat_id,
            )
            return False
        return True
