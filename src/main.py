import asyncio
import os
import sys


project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

if project_root not in sys.path:
    sys.path.insert(0, project_root)

import logging

from dotenv import load_dotenv
from pydantic import ValidationError

from src.bot.urls import urlpatterns
from src.settings.settings import configure_logging, load_settings
from telegram_muxer import MuxBot
from telegram_muxer.errors import MuxerError


load_dotenv()

logger = logging.getLogger(__name__)


async def main() -> int:
    try:
        config = load_settings()
    except ValidationError:
        logging.basicConfig(level=logging.INFO)
        logger.critical("TELEGRAM__TOKEN not found in environment variables!")
        return 1
    configure_logging(config)

    try:
        bot = await MuxBot.from_config(config)
    except MuxerError:
        logger.exception("Could not create the bot")
        return 1

    bot.include(urlpatterns)

    logger.info("Bot is running...")
    try:
        await bot.start()
    except MuxerError as exc:
        logger.error("An error occurred: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
