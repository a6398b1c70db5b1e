"""HTTP client for the Instagram messaging API."""

from __future__ import annotations

import json
import posixpath
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import requests

from instabot.constants import (
    API_ENDPOINT_BASE,
    API_ENDPOINT_MESSENGER_PROFILE,
    API_ENDPOINT_SEND_MESSAGE,
    PLATFORM,
    user_profile_endpoint,
)
from instabot.errors import MissingPageAccessTokenError
from instabot.ice_breaker import IceBreaker
from instabot.messages import Message
from instabot.responses import (
    DeleteIceBreakersResponse,
    GetIceBreakersResponse,
    GetUserProfileResponse,
    SendMessageResponse,
    SetIceBreakersResponse,
    decode_response,
)

_JSON_CONTENT_TYPE = "application/json; charset=UTF-8"

_T = TypeVar("_T")


def _encode_query(pairs: Iterable[tuple[str, str]]) -> str:
    """Encode query pairs sorted by key, keeping the order of values per key."""
    return urlencode(sorted(pairs, key=lambda pair: pair[0]))


def _join_path(base_path: str, endpoint: str) -> str:
    joined = "/".join(part for part in (base_path, endpoint) if part)
    if not joined:
        return ""
    cleaned = posixpath.normpath(joined)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _parse_endpoint_base(endpoint_base: str) -> str:
    parts = urlsplit(endpoint_base)
    if not (parts.scheme or endpoint_base.startswith("/")):
        raise ValueError(f"invalid URI for request: {endpoint_base!r}")
    return endpoint_base


class Client:
    """Bot client bound to one page access token."""

    def __init__(
        self,
        page_access_token: str,
        *,
        session: requests.Session | None = None,
        endpoint_base: str = API_ENDPOINT_BASE,
    ) -> None:
        if not page_access_token:
            raise MissingPageAccessTokenError()
        self._page_access_token = page_access_token
        self._endpoint_base = _parse_endpoint_base(endpoint_base)
        self._session = session if session is not None else requests.Session()

    def _url(self, endpoint: str, query: Mapping[str, str] | None = None) -> str:
        parts = urlsplit(self._endpoint_base)
        path = _join_path(parts.path, endpoint)
        if query is None:
            pairs = parse_qsl(parts.query, keep_blank_values=True)
        else:
            pairs = list(query.items())
        pairs.append(("access_token", self._page_access_token))
        return urlunsplit((parts.scheme, parts.netloc, path, _encode_query(pairs), parts.fragment))

    def _request(
        self,
        method: str,
        endpoint: str,
        response_cls: type[_T],
        *,
        body: Any = None,
        query: Mapping[str, str] | None = None,
    ) -> _T:
        headers = {}
        data = None
        if body is not None:
            data = (json.dumps(body) + "\n").encode("utf-8")
            headers["Content-Type"] = _JSON_CONTENT_TYPE
        response = self._session.request(
            method, self._url(endpoint, query), data=data, headers=headers
        )
        try:
            return decode_response(response_cls, response.status_code, response.content)
        finally:
            response.close()

    def send_message(self, recipient: str, message: Message) -> SendMessageResponse:
        """Send a message to the user with the given Instagram-scoped id."""
        body = {"recipient": {"id": recipient}, "message": message.to_dict()}
        return self._request("POST", API_ENDPOINT_SEND_MESSAGE, SendMessageResponse, body=body)

    def set_ice_breakers(self, ice_breakers: Iterable[IceBreaker]) -> SetIceBreakersResponse:
        """Set the ice breakers of the account."""
        body = {
            "platform": PLATFORM,
            "ice_breakers": [ice_breaker.to_dict() for ice_breaker in ice_breakers],
        }
        return self._request(
            "POST", API_ENDPOINT_MESSENGER_PROFILE, SetIceBreakersResponse, body=body
        )

    def get_ice_breakers(self) -> GetIceBreakersResponse:
        """Fetch the ice breakers of the account."""
        query = {"fields": "ice_breakers", "platform": PLATFORM}
        return self._request(
            "GET", API_ENDPOINT_MESSENGER_PROFILE, GetIceBreakersResponse, query=query
        )

    def delete_ice_breakers(self) -> DeleteIceBreakersResponse:
        """Delete the ice breakers of the account."""
        return self._request(
            "DELETE",
            API_ENDPOINT_MESSENGER_PROFILE,
            DeleteIceBreakersResponse,
            body={"fields": ["ice_breakers"]},
            query={"platform": PLATFORM},
        )

    def get_user_profile(self, instagram_user_id: str) -> GetUserProfileResponse:
        """Fetch the profile of an Instagram user."""
        return self._request(
            "GET", user_profile_endpoint(instagram_user_id), GetUserProfileResponse
        )