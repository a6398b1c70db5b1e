"""Event types and the flattened event records built from webhook messaging."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from instabot.payloads import (
    AttachmentPayload,
    Postback,
    Reaction,
    ReplyToStory,
    WebhookQuickReply,
)
from instabot.users import Recipient, Sender


class WebhookEventType(str, Enum):
    TEXT_MESSAGE = "text"
    IMAGE_MESSAGE = "image"
    AUDIO_MESSAGE = "audio"
    VIDEO_MESSAGE = "video"
    FILE_MESSAGE = "file"
    SHARE = "share"
    MESSAGE_REPLY = "message_reply"
    STORY_MENTION = "story_mention"
    STORY_REPLY = "story_reply"
    QUICK_REPLY = "quick_reply"
    REACTION = "reaction"
    MESSAGE_SEEN = "message_seen"
    POST_BACK = "postback"
    ECHO = "echo"
    DELETED = "deleted"
    UNSUPPORTED = "unsupported"


@dataclass
class _Event:
    sender: Sender | None = None
    recipient: Recipient | None = None
    timestamp: int = 0

    @property
    def time(self) -> datetime:
        """The timestamp read as Unix seconds, in UTC.

        Raises OverflowError, ValueError or OSError when out of range.
        """
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)


@dataclass
class PostBackEvent(_Event):
    data: Postback | None = None


@dataclass
class QuickReplyEvent(_Event):
    mid: str = ""
    text: str = ""
    data: WebhookQuickReply | None = None


@dataclass
class StoryMentionEvent(_Event):
    mid: str = ""
    story: ReplyToStory | None = None


@dataclass
class StoryReplyEvent(_Event):
    mid: str = ""
    text: str = ""
    story: ReplyToStory | None = None


@dataclass
class TextMessageEvent(_Event):
    mid: str = ""
    text: str = ""


@dataclass
class MediaMessageEvent(_Event):
    """An image, audio, video or file message."""

    mid: str = ""
    type: WebhookEventType | None = None
    media: AttachmentPayload | None = None


@dataclass
class MessageReplyEvent(_Event):
    mid: str = ""
    text: str = ""
    reply_to_mid: str = ""


@dataclass
class MessageReactionEvent(_Event):
    reaction: Reaction | None = None


@dataclass
class MessageSeenEvent(_Event):
    seen_mid: str = ""


@dataclass
class MessageShareEvent(_Event):
    shared_payload_url: str = ""


@dataclass
class MessageDeleteEvent(_Event):
    deleted_mid: str = ""