"""Views for chat-level events: message log and membership changes."""

import logging

from telegram_muxer.events import Category
from telegram_muxer.views import MediaView, View


logger = logging.getLogger(__name__)


class MessageLogView(View):
    """Logs every message the bot receives."""

    async def handle(self):
        sender = self.event.sender
        who = sender.first_name if sender else "unknown"
        if self.event.category is Category.TEXT:
            logger.info("<%s> %s", who, self.event.text)
        else:
            logger.info("<%s> [%s]", who, self.event.category.value)


class WelcomeView(MediaView):
    async def handle(self):
        names = ", ".join(user.first_name for user in self.payload if not user.is_bot)
        if names:
            await self.answer().text(f"Welcome, {names}!").end()
