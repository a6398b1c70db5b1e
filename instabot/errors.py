"""Exceptions raised by the client."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


class InstabotError(Exception):
    """Base class for all errors of this package."""


class MissingPageAccessTokenError(InstabotError, ValueError):
    """Raised when a client is created with an empty page access token."""

    def __init__(self, message: str = "missing page access token") -> None:
        super().__init__(message)


@dataclass
class APIError:
    """Error details reported by the API."""

    message: str = ""
    type: str = ""
    code: int = 0
    sub_code: int = 0
    fbtrace_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> APIError:
        return cls(
            message=data.get("message") or "",
            type=data.get("type") or "",
            code=data.get("code") or 0,
            sub_code=data.get("error_subcode") or 0,
            fbtrace_id=data.get("fbtrace_id") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "type": self.type,
            "code": self.code,
            "error_subcode": self.sub_code,
            "fbtrace_id": self.fbtrace_id,
        }


class ErrorResponse(InstabotError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, status_code: int = 0, api_error: APIError | None = None) -> None:
        self.status_code = status_code
        self.api_error = api_error if api_error is not None else APIError()
        super().__init__(self.status_code, self.api_error)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.status_code:
            data["status_code"] = self.status_code
        data["error"] = self.api_error.to_dict()
        return data

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_body(cls, status_code: int, body: str | bytes | None) -> ErrorResponse:
        """Build an error from a response status and body; an unreadable body is ignored."""
        response = cls(status_code)
        try:
            data = json.loads(body)
        except (TypeError, ValueError):
            return response
        if not isinstance(data, dict):
            return response
        if isinstance(data.get("status_code"), int):
            response.status_code = data["status_code"]
        error = data.get("error")
        if isinstance(error, dict):
            response.api_error = APIError.from_dict(error)
        return response