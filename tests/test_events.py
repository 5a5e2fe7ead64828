import datetime

import pytest
from telegram import (
    Audio,
    Chat,
    Contact,
    Document,
    Location,
    Message,
    PhotoSize,
    Sticker,
    User,
    Video,
    Voice,
)

from telegram_muxer.events import Category, classify, event_from_message


DATE = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
PRIVATE = Chat(id=42, type=Chat.PRIVATE)
GROUP = Chat(id=-100, type=Chat.GROUP, title="Group")
ALICE = User(id=7, first_name="Alice", is_bot=False)
PHOTO = (PhotoSize("p", "up", 90, 90), PhotoSize("p2", "up2", 320, 320))


def _message(chat=PRIVATE, **kwargs):
    return Message(message_id=10, date=DATE, chat=chat, from_user=ALICE, **kwargs)


@pytest.mark.parametrize(
    "kwargs, category",
    [
        ({"text": "hi"}, Category.TEXT),
        ({"photo": PHOTO}, Category.PHOTO),
        ({"video": Video("v", "uv", 10, 10, 3)}, Category.VIDEO),
        ({"document": Document("d", "ud")}, Category.DOCUMENT),
        (
            {"sticker": Sticker("s", "us", 512, 512, False, False, Sticker.REGULAR)},
            Category.STICKER,
        ),
        ({"audio": Audio("a", "ua", 30)}, Category.AUDIO),
        ({"voice": Voice("vo", "uvo", 2)}, Category.VOICE),
        ({"contact": Contact("+100", "Bob")}, Category.CONTACT),
        ({"location": Location(longitude=-4.2, latitude=40.3)}, Category.LOCATION),
        ({"left_chat_member": ALICE}, Category.LEFT_MEMBER),
        ({"new_chat_title": "New"}, Category.NEW_TITLE),
        ({"new_chat_photo": PHOTO}, Category.NEW_CHAT_PHOTO),
    ],
)
def test_each_message_kind_maps_to_one_category(kwargs, category):
    assert classify(_message(**kwargs))[0] is category


def test_text_event_carries_common_fields():
    event = event_from_message(_message(text="/start"))

    assert event.category is Category.TEXT
    assert event.payload == "/start"
    assert event.text == "/start"
    assert event.chat_id == 42
    assert event.message_id == 10
    assert event.sender == ALICE
    assert event.date == DATE
    assert event.message is not None


def test_photo_payload_is_tuple_of_sizes():
    event = event_from_message(_message(photo=PHOTO))
    assert event.payload == PHOTO
    assert event.text is None


def test_new_members_payload_lists_every_user():
    bob = User(id=8, first_name="Bob", is_bot=False)
    event = event_from_message(_message(chat=GROUP, new_chat_members=(ALICE, bob)))

    assert event.category is Category.NEW_MEMBER
    assert event.payload == (ALICE, bob)


def test_group_service_messages_carry_the_chat():
    deleted = event_from_message(_message(chat=GROUP, delete_chat_photo=True))
    created = event_from_message(_message(chat=GROUP, group_chat_created=True))

    assert deleted.category is Category.DELETED_CHAT_PHOTO
    assert deleted.payload == GROUP
    assert created.category is Category.GROUP_CREATED
    assert created.payload == GROUP


def test_unsupported_message_is_not_an_event():
    assert event_from_message(_message()) is None


def test_events_are_frozen():
    event = event_from_message(_message(text="hi"))
    with pytest.raises(AttributeError):
        event.payload = "changed"
