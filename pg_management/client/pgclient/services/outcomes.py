from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class SubmitOutcome:
    status: str  # "ok" | "invalid" | "rejected"
    message: Optional[str] = None
    field: Optional[str] = None
    data: Any = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @classmethod
    def success(cls, data: Any = None) -> "SubmitOutcome":
        return cls(status="ok", data=data)

    @classmethod
    def invalid(cls, field: str, message: str) -> "SubmitOutcome":
        return cls(status="invalid", field=field, message=message)

    @classmethod
    def rejected(cls, message: str) -> "SubmitOutcome":
        return cls(status="rejected", message=message)
