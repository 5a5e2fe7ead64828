"""Views answering received media with a description of it."""

from src.utils import describe_photos, or_default
from telegram_muxer.views import MediaView


class _DescribeView(MediaView):
    def describe(self) -> str:
        raise NotImplementedError

    async def handle(self):
        await self.answer().text(self.describe()).reply_id(self.event.message_id).end()


class PhotoInfoView(_DescribeView):
    def describe(self):
        return describe_photos(self.payload)


class AudioInfoView(_DescribeView):
    def describe(self):
        audio = self.payload
        return (
            "Information about the audio:\n"
            f"ID: {audio.file_id}\n"
            f"Duration: {audio.duration} seconds\n"
            f"Performer: {or_default(audio.performer, 'No performer')}\n"
            f"Title: {or_default(audio.title, 'No title')}\n"
            f"MimeType: {or_default(audio.mime_type, 'No mime type')}\n"
            f"File size: {audio.file_size or 0} Bytes"
        )


class VoiceInfoView(_DescribeView):
    def describe(self):
        voice = self.payload
        return (
            "Information about the voice:\n"
            f"ID: {voice.file_id}\n"
            f"Duration: {voice.duration} seconds\n"
            f"MimeType: {or_default(voice.mime_type, 'No mime type')}\n"
            f"File size: {voice.file_size or 0} Bytes"
        )


class DocumentInfoView(_DescribeView):
    def describe(self):
        document = self.payload
        text = (
            "Information about the document:\n"
            f"ID: {document.file_id}\n"
            f"File name: {or_default(document.file_name, 'No name')}\n"
            f"MimeType: {or_default(document.mime_type, 'No mime type')}\n"
            f"File size: {document.file_size or 0} Bytes"
        )
        if document.thumbnail:
            text += "\nThumb:\n" + describe_photos([document.thumbnail])
        return text


class StickerInfoView(_DescribeView):
    def describe(self):
        sticker = self.payload
        text = (
            "Information about the sticker:\n"
            f"ID: {sticker.file_id}\n"
            f"Width: {sticker.width}\n"
            f"Height: {sticker.height}\n"
            f"File size: {sticker.file_size or 0} Bytes"
        )
        if sticker.thumbnail:
            text += "\nThumb:\n" + describe_photos([sticker.thumbnail])
        return text


class VideoInfoView(_DescribeView):
    def describe(self):
        video = self.payload
        text = (
            "Information about the video:\n"
            f"ID: {video.file_id}\n"
            f"Width: {video.width}\n"
            f"Height: {video.height}\n"
            f"Duration: {video.duration}\n"
            f"Mime type: {or_default(video.mime_type, 'No mime type')}\n"
            f"File size: {video.file_size or 0} Bytes"
        )
        if video.thumbnail:
            text += "\nThumb:\n" + describe_photos([video.thumbnail])
        return text


class LocationInfoView(_DescribeView):
    def describe(self):
        location = self.payload
        return (
            "Information of location:\n"
            f"Latitude: {location.latitude}\n"
            f"Longitude: {location.longitude}"
        )
