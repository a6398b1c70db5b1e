"""Parsing of webhook payloads into typed messaging events."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from instabot.events import (
    MediaMessageEvent,
    MessageDeleteEvent,
    MessageReactionEvent,
    MessageReplyEvent,
    MessageSeenEvent,
    MessageShareEvent,
    PostBackEvent,
    QuickReplyEvent,
    StoryMentionEvent,
    StoryReplyEvent,
    TextMessageEvent,
    WebhookEventType,
)
from instabot.payloads import (
    Change,
    Postback,
    Reaction,
    Read,
    Referral,
    ReplyToStory,
    WebhookMessage,
)
from instabot.users import Recipient, Sender


def _child(data: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = data.get(key)
    return value if isinstance(value, dict) else None


def _classify_message(message: WebhookMessage) -> WebhookEventType | None:
    if message.is_echo:
        return WebhookEventType.ECHO
    if message.is_deleted:
        return WebhookEventType.DELETED
    if message.is_unsupported:
        return WebhookEventType.UNSUPPORTED
    for kind in (
        WebhookEventType.AUDIO_MESSAGE,
        WebhookEventType.FILE_MESSAGE,
        WebhookEventType.IMAGE_MESSAGE,
        WebhookEventType.VIDEO_MESSAGE,
    ):
        if message._first_attachment_is(kind.value):
            return kind
    if message._is_message_reply():
        return WebhookEventType.MESSAGE_REPLY
    if message._is_quick_reply():
        return WebhookEventType.QUICK_REPLY
    if message._first_attachment_is(WebhookEventType.SHARE.value):
        return WebhookEventType.SHARE
    if message._first_attachment_is(WebhookEventType.STORY_MENTION.value):
        return WebhookEventType.STORY_MENTION
    if message._is_story_reply():
        return WebhookEventType.STORY_REPLY
    if message.text:
        return WebhookEventType.TEXT_MESSAGE
    return None


@dataclass
class Messaging:
    """A single messaging event; ``type`` is derived from its content."""

    sender: Sender | None = None
    recipient: Recipient | None = None
    timestamp: int = 0
    message: WebhookMessage | None = None
    read: Read | None = None
    reaction: Reaction | None = None
    referral: Referral | None = None
    post_back: Postback | None = None
    type: WebhookEventType | None = None

    def __post_init__(self) -> None:
        if self.type is None:
            self.type = self._detect_type()

    def _detect_type(self) -> WebhookEventType | None:
        if self.message is not None:
            return _classify_message(self.message)
        if self.read is not None:
            return WebhookEventType.MESSAGE_SEEN
        if self.reaction is not None:
            return WebhookEventType.REACTION
        if self.post_back is not None:
            return WebhookEventType.POST_BACK
        return None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Messaging:
        sender = _child(data, "sender")
        recipient = _child(data, "recipient")
        message = _child(data, "message")
        read = _child(data, "read")
        reaction = _child(data, "reaction")
        referral = _child(data, "referral")
        post_back = _child(data, "postback")
        return cls(
            sender=Sender.from_dict(sender) if sender is not None else None,
            recipient=Recipient.from_dict(recipient) if recipient is not None else None,
            timestamp=int(data.get("timestamp") or 0),
            message=WebhookMessage.from_dict(message) if message is not None else None,
            read=Read.from_dict(read) if read is not None else None,
            reaction=Reaction.from_dict(reaction) if reaction is not None else None,
            referral=Referral.from_dict(referral) if referral is not None else None,
            post_back=Postback.from_dict(post_back) if post_back is not None else None,
        )

    def _common(self) -> dict[str, Any]:
        return {"sender": self.sender, "recipient": self.recipient, "timestamp": self.timestamp}

    def get_post_back_event(self) -> PostBackEvent:
        """Flatten a postback event."""
        return PostBackEvent(**self._common(), data=self.post_back)

    def get_quick_reply_event(self) -> QuickReplyEvent:
        """Flatten a quick reply event."""
        event = QuickReplyEvent(**self._common())
        if self.message is not None:
            event.mid = self.message.mid
            event.text = self.message.text
            event.data = self.message.quick_reply
        return event

    def get_story_mention_event(self) -> StoryMentionEvent:
        """Flatten a story mention event."""
        event = StoryMentionEvent(**self._common())
        if self.message is not None:
            event.mid = self.message.mid
            if self.message.attachments:
                event.story = ReplyToStory(url=self.message.attachments[0].payload.url)
        return event

    def get_story_reply_event(self) -> StoryReplyEvent:
        """Flatten a story reply event."""
        event = StoryReplyEvent(**self._common())
        if self.message is not None:
            event.mid = self.message.mid
            event.text = self.message.text
            if self.message.reply_to is not None:
                event.story = self.message.reply_to.story
        return event

    def get_text_message_event(self) -> TextMessageEvent:
        """Flatten a text message event."""
        event = TextMessageEvent(**self._common())
        if self.message is not None:
            event.mid = self.message.mid
            event.text = self.message.text
        return event

    def get_media_message_event(self) -> MediaMessageEvent:
        """Flatten an image, audio, video or file message event."""
        event = MediaMessageEvent(**self._common(), type=self.type)
        if self.message is not None:
            event.mid = self.message.mid
            if self.message.attachments:
                event.media = self.message.attachments[0].payload
        return event

    def get_message_reply_event(self) -> MessageReplyEvent:
        """Flatten a message reply event."""
        event = MessageReplyEvent(**self._common())
        if self.message is not None:
            event.mid = self.message.mid
            event.text = self.message.text
            if self.message.reply_to is not None:
                event.reply_to_mid = self.message.reply_to.mid
        return event

    def get_message_reaction_event(self) -> MessageReactionEvent:
        """Flatten a reaction event."""
        return MessageReactionEvent(**self._common(), reaction=self.reaction)

    def get_message_seen_event(self) -> MessageSeenEvent:
        """Flatten a message seen event."""
        event = MessageSeenEvent(**self._common())
        if self.read is not None:
            event.seen_mid = self.read.mid
        return event

    def get_message_share_event(self) -> MessageShareEvent:
        """Flatten a share event."""
        event = MessageShareEvent(**self._common())
        if self.message is not None and self.message.attachments:
            event.shared_payload_url = self.message.attachments[0].payload.url
        return event

    def get_message_delete_event(self) -> MessageDeleteEvent:
        """Flatten a message delete event."""
        event = MessageDeleteEvent(**self._common())
        if self.message is not None:
            event.deleted_mid = self.message.mid
        return event


def _messaging_list(items: Any) -> list[Messaging]:
    return [Messaging.from_dict(item) for item in items or [] if isinstance(item, dict)]


@dataclass
class Entry:
    """One entry of a webhook payload."""

    id: str = ""
    time: int = 0
    messaging: list[Messaging] = field(default_factory=list)
    changes: list[Change] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Entry:
        """Build an entry; events under ``message`` are used when ``messaging`` is empty."""
        messaging = _messaging_list(data.get("messaging"))
        if not messaging:
            messaging = _messaging_list(data.get("message"))
        return cls(
            id=data.get("id") or "",
            time=int(data.get("time") or 0),
            messaging=messaging,
            changes=[Change.from_dict(item) for item in data.get("changes") or []],
        )


@dataclass
class WebhookEvent:
    """A webhook payload."""

    object: str = ""
    entries: list[Entry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WebhookEvent:
        if not isinstance(data, dict):
            raise ValueError(f"webhook payload must be an object, not {type(data).__name__}")
        return cls(
            object=data.get("object") or "",
            entries=[Entry.from_dict(item) for item in data.get("entry") or []],
        )

    @classmethod
    def from_json(cls, data: str | bytes) -> WebhookEvent:
        """Parse a JSON payload; raises ValueError when it is not valid."""
        return cls.from_dict(json.loads(data))


def parse_webhook_event(data: str | bytes | dict[str, Any]) -> WebhookEvent:
    """Parse a webhook payload given as JSON text or an already decoded object."""
    if isinstance(data, dict):
        return WebhookEvent.from_dict(data)
    return WebhookEvent.from_json(data)