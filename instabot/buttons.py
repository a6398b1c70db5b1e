"""Buttons that can be attached to template elements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class ButtonType(str, Enum):
    URL = "web_url"
    POST_BACK = "postback"
    CALL = "phone_number"
    LOGIN = "account_link"
    LOGOUT = "account_unlink"
    GAME_PLAY = "game_play"


class Button(ABC):
    """A button; ``type`` tells which kind it is."""

    type: ClassVar[ButtonType]

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the button."""


@dataclass
class URLButton(Button):
    title: str
    url: str
    type: ClassVar[ButtonType] = ButtonType.URL

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "title": self.title, "url": self.url}


@dataclass
class PostBackButton(Button):
    title: str
    payload: str
    type: ClassVar[ButtonType] = ButtonType.POST_BACK

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "title": self.title, "payload": self.payload}


@dataclass
class CallButton(Button):
    title: str
    phone_number: str
    type: ClassVar[ButtonType] = ButtonType.CALL

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "title": self.title, "payload": self.phone_number}


@dataclass
class LogInButton(Button):
    url: str
    type: ClassVar[ButtonType] = ButtonType.LOGIN

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "url": self.url}


@dataclass
class LogOutButton(Button):
    type: ClassVar[ButtonType] = ButtonType.LOGOUT

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value}