"""Successful API responses and decoding of HTTP replies into them."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, TypeVar

from instabot.errors import ErrorResponse, InstabotError
from instabot.ice_breaker import IceBreaker


@dataclass
class SendMessageResponse:
    recipient_id: str = ""
    message_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SendMessageResponse:
        return cls(
            recipient_id=data.get("recipient_id") or "",
            message_id=data.get("message_id") or "",
        )


@dataclass
class SetIceBreakersResponse:
    result: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SetIceBreakersResponse:
        return cls(result=data.get("result") or "")


@dataclass
class IceBreakers:
    """A list of ice breakers."""

    ice_breakers: list[IceBreaker] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IceBreakers:
        return cls(
            ice_breakers=[IceBreaker.from_dict(item) for item in data.get("ice_breakers") or []]
        )


@dataclass
class GetIceBreakersResponse:
    data: list[IceBreakers] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetIceBreakersResponse:
        return cls(data=[IceBreakers.from_dict(item) for item in data.get("data") or []])


@dataclass
class DeleteIceBreakersResponse:
    result: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DeleteIceBreakersResponse:
        return cls(result=data.get("result") or "")


@dataclass
class GetUserProfileResponse:
    id: str = ""
    name: str = ""
    profile_pic: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetUserProfileResponse:
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            profile_pic=data.get("profile_pic") or "",
        )


def check_error(status_code: int, body: str | bytes | None) -> None:
    """Raise ErrorResponse unless the status is 2xx."""
    if status_code // 100 != 2:
        raise ErrorResponse.from_body(status_code, body)


_T = TypeVar("_T")


def decode_response(response_cls: type[_T], status_code: int, body: str | bytes | None) -> _T:
    """Check the status, then decode the first JSON value of the body.

    An empty body or a JSON null gives a response with default values.
    """
    check_error(status_code, body)
    if body is None:
        return response_cls()
    text = body.decode("utf-8") if isinstance(body, (bytes, bytearray)) else body
    text = text.strip()
    if not text:
        return response_cls()
    data, _ = json.JSONDecoder().raw_decode(text)
    if data is None:
        return response_cls()
    if not isinstance(data, dict):
        raise InstabotError(f"cannot decode {type(data).__name__} into {response_cls.__name__}")
    return response_cls.from_dict(data)