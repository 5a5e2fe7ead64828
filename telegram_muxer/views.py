from typing import Any, Awaitable, Callable

from .events import InboundEvent
from .send import SendBuilder


class View:
    """Base View: instance stores `bot`, `event` and the route arguments; override `handle()`."""

    def __init__(self, bot: Any, event: InboundEvent, *args: Any):
        self.bot = bot
        self.event = event
        self.args = args

    async def handle(self):  # noqa: D401
        """Handle the event (override in subclass)."""
        raise NotImplementedError("View must implement handle()")

    def answer(self) -> SendBuilder:
        return self.bot.answer(self.event)

    @classmethod
    def as_handler(cls) -> Callable[..., Awaitable[None]]:
        async def _handler(bot: Any, event: InboundEvent, *args: Any):
            self = cls(bot, event, *args)
            await self.handle()

        _handler.__qualname__ = f"{cls.__qualname__}.as_handler"
        return _handler


class CommandView(View):
    """View for text routes: `text` and, for pattern routes, `captures`."""

    @property
    def text(self) -> str:
        return self.args[0] if self.args else self.event.payload

    @property
    def captures(self) -> list[str]:
        return self.args[1] if len(self.args) > 1 else [self.text]


class MediaView(View):
    """View for media routes: `payload` is the category's content."""

    @property
    def payload(self) -> Any:
        return self.args[0] if self.args else self.event.payload
