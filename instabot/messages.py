"""Messages that can be sent to an Instagram user."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from instabot.quick_reply import QuickReply
from instabot.template import GenericTemplateElement, ProductTemplateElement, TemplateType


class MessageType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    FILE = "file"
    VIDEO = "video"
    STICKER = "sticker"
    MEDIA_SHARE = "media_share"
    REACTION = "reaction"
    TEMPLATE = "template"


class StickerType(str, Enum):
    HEART = "like_heart"


class Message(ABC):
    """A message; ``type`` tells which kind it is."""

    type: ClassVar[MessageType]

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the message."""


def _attachment(attachment_type: str, payload: dict[str, Any]) -> dict[str, Any]:
    return {"attachment": {"type": attachment_type, "payload": payload}}


@dataclass
class TextMessage(Message):
    """A text message; the only kind that may carry quick replies."""

    text: str
    quick_replies: list[QuickReply] = field(default_factory=list)
    type: ClassVar[MessageType] = MessageType.TEXT

    def __post_init__(self) -> None:
        self.quick_replies = list(self.quick_replies or [])

    def attach_quick_replies(self, quick_replies: list[QuickReply] | None) -> None:
        """Replace the quick replies of the message."""
        self.quick_replies = list(quick_replies or [])

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"text": self.text}
        if self.quick_replies:
            data["quick_replies"] = [reply.to_dict() for reply in self.quick_replies]
        return data


@dataclass
class ImageMessage(Message):
    image_url: str
    type: ClassVar[MessageType] = MessageType.IMAGE

    def to_dict(self) -> dict[str, Any]:
        return _attachment(self.type.value, {"url": self.image_url})


@dataclass
class AudioMessage(Message):
    audio_url: str
    type: ClassVar[MessageType] = MessageType.AUDIO

    def to_dict(self) -> dict[str, Any]:
        return _attachment(self.type.value, {"url": self.audio_url})


@dataclass
class FileMessage(Message):
    file_url: str
    type: ClassVar[MessageType] = MessageType.FILE

    def to_dict(self) -> dict[str, Any]:
        return _attachment(self.type.value, {"url": self.file_url})


@dataclass
class VideoMessage(Message):
    """A video message; it is sent as a file attachment."""

    video_url: str
    type: ClassVar[MessageType] = MessageType.FILE

    def to_dict(self) -> dict[str, Any]:
        return _attachment(self.type.value, {"url": self.video_url})


@dataclass
class StickerMessage(Message):
    sticker: StickerType = StickerType.HEART
    type: ClassVar[MessageType] = MessageType.STICKER

    def to_dict(self) -> dict[str, Any]:
        return {"attachment": {"type": StickerType(self.sticker).value}}


@dataclass
class MediaShareMessage(Message):
    media_id: str
    type: ClassVar[MessageType] = MessageType.MEDIA_SHARE

    def to_dict(self) -> dict[str, Any]:
        return _attachment(self.type.value, {"id": self.media_id})


@dataclass
class GenericTemplateMessage(Message):
    """A generic template message of at most 10 elements."""

    elements: list[GenericTemplateElement] = field(default_factory=list)
    type: ClassVar[MessageType] = MessageType.TEMPLATE
    template_type: ClassVar[TemplateType] = TemplateType.GENERIC

    def to_dict(self) -> dict[str, Any]:
        return _attachment(
            self.type.value,
            {
                "template_type": self.template_type.value,
                "elements": [element.to_dict() for element in self.elements],
            },
        )


@dataclass
class ProductTemplateMessage(Message):
    """A product template message of at most 10 elements."""

    elements: list[ProductTemplateElement] = field(default_factory=list)
    type: ClassVar[MessageType] = MessageType.TEMPLATE
    template_type: ClassVar[TemplateType] = TemplateType.PRODUCT

    def to_dict(self) -> dict[str, Any]:
        return _attachment(
            self.type.value,
            {
                "template_type": self.template_type.value,
                "elements": [element.to_dict() for element in self.elements],
            },
        )