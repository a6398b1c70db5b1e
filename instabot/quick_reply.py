"""Quick replies for text messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class QuickReplyType(str, Enum):
    TEXT = "text"


@dataclass
class QuickReply:
    """A quick reply item; only text quick replies are supported."""

    title: str
    payload: str
    content_type: QuickReplyType = QuickReplyType.TEXT

    def to_dict(self) -> dict[str, Any]:
        return {
            "content_type": self.content_type.value,
            "title": self.title,
            "payload": self.payload,
        }