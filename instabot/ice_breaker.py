"""Ice breakers: frequently asked questions shown to new conversations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class IceBreaker:
    question: str
    payload: str

    def to_dict(self) -> dict[str, Any]:
        return {"question": self.question, "payload": self.payload}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IceBreaker:
        return cls(question=data.get("question") or "", payload=data.get("payload") or "")