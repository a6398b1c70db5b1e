"""Payload objects found inside webhook events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _text(data: dict[str, Any], key: str) -> str:
    return data.get(key) or ""


def _child(data: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = data.get(key)
    return value if isinstance(value, dict) else None


@dataclass
class ReplyToStory:
    """Details of a story that was replied to or mentioned."""

    url: str = ""
    id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReplyToStory:
        return cls(url=_text(data, "url"), id=_text(data, "id"))


@dataclass
class ReplyTo:
    """What a message replies to: another message or a story."""

    mid: str = ""
    story: ReplyToStory | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReplyTo:
        story = _child(data, "story")
        return cls(
            mid=_text(data, "mid"),
            story=ReplyToStory.from_dict(story) if story is not None else None,
        )


@dataclass
class AttachmentPayload:
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AttachmentPayload:
        return cls(url=_text(data, "url"))


@dataclass
class Attachment:
    """An attachment such as audio, video, an image or a share."""

    type: str = ""
    payload: AttachmentPayload = field(default_factory=AttachmentPayload)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Attachment:
        payload = _child(data, "payload")
        return cls(
            type=_text(data, "type"),
            payload=AttachmentPayload.from_dict(payload) if payload is not None else AttachmentPayload(),
        )


@dataclass
class ReferralProduct:
    """A shop product."""

    id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReferralProduct:
        return cls(id=_text(data, "id"))


@dataclass
class Referral:
    """A product referral."""

    product: ReferralProduct = field(default_factory=ReferralProduct)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Referral:
        product = _child(data, "product")
        return cls(
            product=ReferralProduct.from_dict(product) if product is not None else ReferralProduct()
        )


@dataclass
class Reaction:
    mid: str = ""
    action: str = ""
    reaction: str = ""
    emoji: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Reaction:
        return cls(
            mid=_text(data, "mid"),
            action=_text(data, "action"),
            reaction=_text(data, "reaction"),
            emoji=_text(data, "emoji"),
        )


@dataclass
class Read:
    """The last message seen."""

    mid: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Read:
        return cls(mid=_text(data, "mid"))


@dataclass
class WebhookQuickReply:
    payload: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WebhookQuickReply:
        return cls(payload=_text(data, "payload"))


@dataclass
class Postback:
    mid: str = ""
    title: str = ""
    payload: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Postback:
        return cls(
            mid=_text(data, "mid"),
            title=_text(data, "title"),
            payload=_text(data, "payload"),
        )


@dataclass
class WebhookMessage:
    """The message part of a messaging event."""

    mid: str = ""
    text: str = ""
    quick_reply: WebhookQuickReply | None = None
    attachments: list[Attachment] = field(default_factory=list)
    reply_to: ReplyTo | None = None
    is_echo: bool = False
    is_unsupported: bool = False
    is_deleted: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WebhookMessage:
        quick_reply = _child(data, "quick_reply")
        reply_to = _child(data, "reply_to")
        return cls(
            mid=_text(data, "mid"),
            text=_text(data, "text"),
            quick_reply=WebhookQuickReply.from_dict(quick_reply) if quick_reply is not None else None,
            attachments=[Attachment.from_dict(item) for item in data.get("attachments") or []],
            reply_to=ReplyTo.from_dict(reply_to) if reply_to is not None else None,
            is_echo=bool(data.get("is_echo")),
            is_unsupported=bool(data.get("is_unsupported")),
            is_deleted=bool(data.get("is_deleted")),
        )

    def _is_quick_reply(self) -> bool:
        return self.quick_reply is not None

    def _is_story_reply(self) -> bool:
        return self.reply_to is not None and self.reply_to.story is not None

    def _is_message_reply(self) -> bool:
        return self.reply_to is not None and self.reply_to.mid != ""

    def _first_attachment_is(self, kind: str) -> bool:
        return bool(self.attachments) and self.attachments[0].type == kind


@dataclass
class Change:
    """An entry of the ``changes`` array; ``value`` is kept as decoded JSON."""

    field: str = ""
    value: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Change:
        return cls(field=_text(data, "field"), value=data.get("value"))


@dataclass
class LeadgenValue:
    ad_id: str = ""
    form_id: str = ""
    leadgen_id: str = ""
    created_time: str = ""
    page_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LeadgenValue:
        return cls(
            ad_id=_text(data, "ad_id"),
            form_id=_text(data, "form_id"),
            leadgen_id=_text(data, "leadgen_id"),
            created_time=_text(data, "created_time"),
            page_id=_text(data, "page_id"),
        )