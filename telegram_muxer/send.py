"""Fluent outbound message builders.

Handlers answer through ``bot.answer(event)`` (or ``bot.send(chat_id)``)::

    await bot.answer(event).text("Hi!").reply_id(event.message_id).end()

Each ``SendBuilder`` method returns a typed sender; its setters return the
sender itself and ``end()`` performs the Bot API call. Only options that were
set are passed to the API, errors (``telegram.error.TelegramError``) are
raised to the caller.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from telegram import (
    ForceReply,
    KeyboardButton,
    LinkPreviewOptions,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ReplyParameters,
)


logger = logging.getLogger(__name__)

KeyboardRows = Sequence[Sequence[Union[str, KeyboardButton]]]


def input_file(reference: str) -> Union[str, Path]:
    """Local files are uploaded, anything else is passed on as a file id or URL."""
    if os.path.isfile(reference):
        return Path(reference)
    return reference


class SendBuilder:
    """Starting point for sending something to one chat."""

    def __init__(self, chat_id: int, api: Any):
        self.chat_id = chat_id
        self.api = api

    def text(self, text: str) -> "SendText":
        return SendText(self, text)

    def photo(self, photo: str) -> "SendPhoto":
        return SendPhoto(self, photo)

    def audio(self, audio: str) -> "SendAudio":
        return SendAudio(self, audio)

    def voice(self, voice: str) -> "SendVoice":
        return SendVoice(self, voice)

    def document(self, document: str) -> "SendDocument":
        return SendDocument(self, document)

    def sticker(self, sticker: str) -> "SendSticker":
        return SendSticker(self, sticker)

    def video(self, video: str) -> "SendVideo":
        return SendVideo(self, video)

    def forward(self, from_chat_id: int, message_id: int) -> "SendForward":
        """Forward ``message_id`` of ``from_chat_id`` into this builder's chat."""
        return SendForward(self, from_chat_id, message_id)

    def action(self, action: str) -> "SendAction":
        """Chat action such as ``telegram.constants.ChatAction.TYPING``."""
        return SendAction(self, action)

    def location(self, latitude: float, longitude: float) -> "SendLocation":
        return SendLocation(self, latitude, longitude)


class _Send:
    method: str = ""

    def __init__(self, send: SendBuilder):
        self.send = send
        self.options: dict[str, Any] = {}

    def params(self) -> dict[str, Any]:
        return {}

    async def end(self):
        send_params = {"chat_id": self.send.chat_id, **self.params(), **self.options}
        logger.debug("%s to chat %s", self.method, self.send.chat_id)
        return await getattr(self.send.api, self.method)(**send_params)


class _Reply(_Send):
    """Senders that accept a reply target and a reply markup.

    Only one markup is sent: the last of ``keyboard``, ``hide``, ``force`` or
    ``markup`` wins.
    """

    def reply_id(self, message_id: int):
        self.options["reply_parameters"] = ReplyParameters(message_id=message_id)
        return self

    def markup(self, reply_markup):
        self.options["reply_markup"] = reply_markup
        return self

    def keyboard(
        self,
        keyboard: Union[ReplyKeyboardMarkup, KeyboardRows],
        one_time: Optional[bool] = None,
        resize: Optional[bool] = None,
    ):
        if not isinstance(keyboard, ReplyKeyboardMarkup):
            keyboard = ReplyKeyboardMarkup(
                keyboard, resize_keyboard=resize, one_time_keyboard=one_time
            )
        return self.markup(keyboard)

    def hide(self, hide: bool = True):
        if hide:
            return self.markup(ReplyKeyboardRemove())
        self.options.pop("reply_markup", None)
        return self

    def force(self, force: bool = True):
        if force:
            return self.markup(ForceReply())
        self.options.pop("reply_markup", None)
        return self


class SendText(_Reply):
    method = "send_message"

    def __init__(self, send: SendBuilder, text: str):
        super().__init__(send)
        self.text = text

    def params(self):
        return {"text": self.text}

    def parse_mode(self, parse_mode: str):
        self.options["parse_mode"] = parse_mode
        return self

    def disable_preview(self, disable: bool = True):
        self.options["link_preview_options"] = LinkPreviewOptions(is_disabled=disable)
        return self


class _SendFile(_Reply):
    field = ""

    def __init__(self, send: SendBuilder, reference: str):
        super().__init__(send)
        self.reference = reference

    def params(self):
        return {self.field: input_file(self.reference)}


class _Captioned(_SendFile):
    def caption(self, caption: str):
        self.options["caption"] = caption
        return self


class _Timed(_SendFile):
    def duration(self, seconds: int):
        self.options["duration"] = seconds
        return self


class SendPhoto(_Captioned):
    method = "send_photo"
    field = "photo"


class SendAudio(_Timed):
    method = "send_audio"
    field = "audio"

    def performer(self, performer: str):
        self.options["performer"] = performer
        return self

    def title(self, title: str):
        self.options["title"] = title
        return self


class SendVoice(_Timed):
    method = "send_voice"
    field = "voice"


class SendDocument(_SendFile):
    method = "send_document"
    field = "document"


class SendSticker(_SendFile):
    method = "send_sticker"
    field = "sticker"


class SendVideo(_Timed, _Captioned):
    method = "send_video"
    field = "video"


class SendForward(_Send):
    method = "forward_message"

    def __init__(self, send: SendBuilder, from_chat_id: int, message_id: int):
        super().__init__(send)
        self.from_chat_id = from_chat_id
        self.message_id = message_id

    def params(self):
        return {"from_chat_id": self.from_chat_id, "message_id": self.message_id}


class SendAction(_Send):
    method = "send_chat_action"

    def __init__(self, send: SendBuilder, action: str):
        super().__init__(send)
        self.action = action

    def params(self):
        return {"action": self.action}


class SendLocation(_Reply):
    method = "send_location"

    def __init__(self, send: SendBuilder, latitude: float, longitude: float):
        super().__init__(send)
        self.latitude = latitude
        self.longitude = longitude

    def params(self):
        return {"latitude": self.latitude, "longitude": self.longitude}
