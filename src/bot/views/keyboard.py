"""Views sending and hiding reply keyboards."""

from src.utils import in_rows
from telegram_muxer.views import CommandView


COMMANDS = {
    "/start": "Start the bot!",
    "/keyboard": "Send you a keyboard",
    "/hidekeyboard": "Hide the keyboard",
    "/hardecho": "Echo with force reply",
    "/forwardme": "Forward that message to you",
    "/sleep": "Sleep for 5 seconds without blocking the bot",
    "/showmecommands": "Returns you a keyboard with the simplest commands",
    "/sendlocation": "Sends you a location",
    "/sendaction": "Sends a chat action",
}


class StartView(CommandView):
    async def handle(self):
        lines = [f"{command} - {description}" for command, description in COMMANDS.items()]
        await self.answer().text("Hello! I understand:\n" + "\n".join(lines)).end()


class ShowCommandsView(CommandView):
    async def handle(self):
        await (
            self.answer()
            .text("There you have the commands!")
            .keyboard(in_rows(COMMANDS), one_time=True)
            .end()
        )


class KeyboardView(CommandView):
    async def handle(self):
        await self.answer().text("There you go!").keyboard([["I", "<3"], ["You"]]).end()


class HideKeyboardView(CommandView):
    async def handle(self):
        await self.answer().text("Hidden!").hide(True).end()
