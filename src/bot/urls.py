"""URL configuration for telegram_muxer routes used by this bot."""

from src.bot.views import chat as chat_views
from src.bot.views import commands as command_views
from src.bot.views import keyboard as keyboard_views
from src.bot.views import media as media_views
from telegram_muxer.events import Category
from telegram_muxer.registrar import media, observe, path, re_path, simple_path, simple_re_path


urlpatterns = [
    # Logger
    observe(chat_views.MessageLogView.as_handler(), name="log"),
    # Commands
    simple_path("start", keyboard_views.StartView.as_handler(), name="start"),
    simple_path("showmecommands", keyboard_views.ShowCommandsView.as_handler(), name="show_commands"),
    simple_path("keyboard", keyboard_views.KeyboardView.as_handler(), name="keyboard"),
    simple_path("hidekeyboard", keyboard_views.HideKeyboardView.as_handler(), name="hide_keyboard"),
    simple_path("forwardme", command_views.ForwardMeView.as_handler(), name="forward_me"),
    simple_path("sleep", command_views.SleepView.as_handler(), name="sleep"),
    simple_path("sendlocation", command_views.SendLocationView.as_handler(), name="send_location"),
    simple_path("sendaction", command_views.SendActionView.as_handler(), name="send_action"),
    path("hardecho (.+)", command_views.HardEchoView.as_handler(), name="hard_echo"),
    # Free text
    simple_re_path(r"^Hello!?$", command_views.HelloView.as_handler(), name="hello"),
    re_path(r"^Tell me (.+)$", command_views.TellMeView.as_handler(), name="tell_me"),
    # Media
    media(Category.PHOTO, media_views.PhotoInfoView.as_handler(), name="photo_info"),
    media(Category.AUDIO, media_views.AudioInfoView.as_handler(), name="audio_info"),
    media(Category.VOICE, media_views.VoiceInfoView.as_handler(), name="voice_info"),
    media(Category.DOCUMENT, media_views.DocumentInfoView.as_handler(), name="document_info"),
    media(Category.STICKER, media_views.StickerInfoView.as_handler(), name="sticker_info"),
    media(Category.VIDEO, media_views.VideoInfoView.as_handler(), name="video_info"),
    media(Category.LOCATION, media_views.LocationInfoView.as_handler(), name="location_info"),
    # Membership
    media(Category.NEW_MEMBER, chat_views.WelcomeView.as_handler(), name="welcome"),
]
