"""Template elements used by generic and product template messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from instabot.buttons import Button, ButtonType


class TemplateType(str, Enum):
    PRODUCT = "product"
    GENERIC = "generic"


@dataclass
class TemplateDefaultAction:
    """Action taken when a template element is tapped: opens a URL."""

    url: str
    type: ClassVar[ButtonType] = ButtonType.URL

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "url": self.url}


@dataclass
class GenericTemplateElement:
    """An element of a generic template; at most 3 buttons are supported."""

    title: str
    subtitle: str = ""
    image_url: str = ""
    default_action: TemplateDefaultAction | str | None = None
    buttons: list[Button] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.default_action, str):
            self.default_action = TemplateDefaultAction(self.default_action)
        self.buttons = list(self.buttons or [])

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"title": self.title}
        if self.subtitle:
            data["subtitle"] = self.subtitle
        if self.image_url:
            data["image_url"] = self.image_url
        if self.default_action is not None:
            data["default_action"] = self.default_action.to_dict()
        if self.buttons:
            data["buttons"] = [button.to_dict() for button in self.buttons]
        return data


@dataclass
class ProductTemplateElement:
    product_id: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.product_id}