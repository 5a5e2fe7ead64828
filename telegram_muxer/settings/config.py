from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Telegram(BaseModel):
    token: str = Field(..., description="Telegram Bot Token")
    username: str | None = Field(
        None, description="Bot username; looked up with getMe when empty"
    )
    poll_timeout: int = Field(20, ge=0, description="getUpdates long-poll timeout, seconds")


class Dispatch(BaseModel):
    workers: int = Field(4, ge=1, description="Messages dispatched concurrently")
    strict_patterns: bool = Field(
        False, description="Raise on invalid route patterns instead of skipping them"
    )


class BaseConfiguration(BaseSettings):
    telegram: Telegram
    dispatch: Dispatch = Dispatch()
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()
