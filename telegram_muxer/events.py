"""Inbound event model and the python-telegram-bot mapping.

Keeps ``telegram.Message`` details out of the dispatcher: every message is
classified once, here, into exactly one :class:`Category` with its payload.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from telegram import Audio, Message, User, Voice


class Category(str, Enum):
    """Classification of an inbound message used to select routes."""

    TEXT = "text"
    PHOTO = "photo"
    VIDEO = "video"
    DOCUMENT = "document"
    STICKER = "sticker"
    AUDIO = "audio"
    VOICE = "voice"
    CONTACT = "contact"
    LOCATION = "location"
    NEW_MEMBER = "new_member"
    LEFT_MEMBER = "left_member"
    NEW_TITLE = "new_title"
    NEW_CHAT_PHOTO = "new_chat_photo"
    DELETED_CHAT_PHOTO = "deleted_chat_photo"
    GROUP_CREATED = "group_created"


MEDIA_CATEGORIES = tuple(c for c in Category if c is not Category.TEXT)


@dataclass(frozen=True, slots=True)
class GeneralSound:
    """Either an audio track or a voice note, for handlers that accept both."""

    kind: Category
    media: Union[Audio, Voice]

    @property
    def is_voice(self) -> bool:
        return self.kind is Category.VOICE


@dataclass(frozen=True, slots=True)
class InboundEvent:
    """One classified inbound message.

    category:   Category        — the single category the message belongs to
    payload:    Any             — typed content for that category
    chat_id:    int             — originating chat
    sender:     Optional[User]  — author (``None`` for channel posts)
    message_id: int
    date:       datetime        — timestamp reported by Telegram
    message:    Optional[Message] — the raw message, for anything else
    """

    category: Category
    payload: Any
    chat_id: int
    message_id: int
    sender: Optional[User] = None
    date: Optional[datetime.datetime] = None
    message: Optional[Message] = None

    @property
    def text(self) -> Optional[str]:
        return self.payload if self.category is Category.TEXT else None


def classify(message: Message) -> Optional[tuple[Category, Any]]:
    """Return ``(category, payload)`` for ``message`` or ``None`` when unsupported."""
    if message.text is not None:
        return Category.TEXT, message.text
    if message.audio:
        return Category.AUDIO, message.audio
    if message.voice:
        return Category.VOICE, message.voice
    if message.photo:
        return Category.PHOTO, tuple(message.photo)
    # stickers and videos are checked before documents: animations carry both
    if message.sticker:
        return Category.STICKER, message.sticker
    if message.video:
        return Category.VIDEO, message.video
    if message.document:
        return Category.DOCUMENT, message.document
    if message.contact:
        return Category.CONTACT, message.contact
    if message.location:
        return Category.LOCATION, message.location
    if message.new_chat_members:
        return Category.NEW_MEMBER, tuple(message.new_chat_members)
    if message.left_chat_member:
        return Category.LEFT_MEMBER, message.left_chat_member
    if message.new_chat_title:
        return Category.NEW_TITLE, message.new_chat_title
    if message.new_chat_photo:
        return Category.NEW_CHAT_PHOTO, tuple(message.new_chat_photo)
    if message.delete_chat_photo:
        return Category.DELETED_CHAT_PHOTO, message.chat
    if message.group_chat_created or message.supergroup_chat_created:
        return Category.GROUP_CREATED, message.chat
    return None


def event_from_message(message: Message) -> Optional[InboundEvent]:
    """Map a ``telegram.Message`` to an :class:`InboundEvent`."""
    classified = classify(message)
    if classified is None:
        return None
    category, payload = classified
    return InboundEvent(
        category=category,
        payload=payload,
        chat_id=message.chat_id,
        message_id=message.message_id,
        sender=message.from_user,
        date=message.date,
        message=message,
    )
