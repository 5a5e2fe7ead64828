import logging

from telegram_muxer.settings.config import BaseConfiguration


def load_settings() -> BaseConfiguration:
    """Read settings from the environment and ``.env``.

    TELEGRAM__TOKEN is required; TELEGRAM__USERNAME, DISPATCH__WORKERS,
    DISPATCH__STRICT_PATTERNS, DEBUG and LOG_LEVEL are optional.
    """
    return BaseConfiguration()


def configure_logging(config: BaseConfiguration) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.effective_log_level,
    )
    # httpx logs every getUpdates request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
