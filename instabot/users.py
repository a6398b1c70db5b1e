"""Sender and recipient of a message or action."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Sender:
    id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Sender:
        return cls(id=data.get("id") or "")


@dataclass
class Recipient:
    id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Recipient:
        return cls(id=data.get("id") or "")