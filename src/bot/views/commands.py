"""Text command views: echoes, forwarding and simple outbound examples."""

import asyncio
import logging

from telegram.constants import ChatAction

from telegram_muxer.views import CommandView


logger = logging.getLogger(__name__)

SLEEP_SECONDS = 5

# Demo coordinates sent by /sendlocation
LOCATION = (40.324159, -4.21096)


class HelloView(CommandView):
    async def handle(self):
        sender = self.event.sender
        name = sender.first_name if sender else "there"
        await self.answer().text(f"Hi {name}!").end()


class TellMeView(CommandView):
    """``Tell me <something>`` or ``/hardecho <something>``: repeat the capture."""

    force_reply = False

    async def handle(self):
        sender = self.answer().text(self.captures[1])
        if self.force_reply:
            sender.force(True)
        await sender.end()


class HardEchoView(TellMeView):
    force_reply = True


class SleepView(CommandView):
    """Slow handler; other messages keep being answered meanwhile."""

    async def handle(self):
        await self.answer().text(
            f"Starting, send me another command in the next {SLEEP_SECONDS} seconds..."
        ).end()
        await asyncio.sleep(SLEEP_SECONDS)
        await self.answer().text("End async test").end()


class ForwardMeView(CommandView):
    async def handle(self):
        await self.answer().forward(self.event.chat_id, self.event.message_id).end()


class SendLocationView(CommandView):
    async def handle(self):
        latitude, longitude = LOCATION
        await self.answer().location(latitude, longitude).reply_id(self.event.message_id).end()


class SendActionView(CommandView):
    async def handle(self):
        await self.answer().action(ChatAction.TYPING).end()
