# pg_management/client/pgclient/context.py
from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator, Optional

from .config import Settings, settings

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    return request_id_ctx.get()


@contextmanager
def request_scope(request_id: str | None = None) -> Iterator[str]:
    """
    Binds a correlation id for every backend call made inside the block.

    - Reuses the caller's id when given (e.g. one id per dialog session)
    - Otherwise generates UUID4
    - Stored in a ContextVar so the HTTP layer and logging can both read it
    """
    rid = request_id or str(uuid.uuid4())
    token = request_id_ctx.set(rid)
    try:
        yield rid
    finally:
        request_id_ctx.reset(token)


@dataclass(frozen=True)
class CurrentContext:
    """
    Who is calling and for which PG location.

    Passed explicitly into every query/command; nothing reads a global
    "selected location".
    """

    pg_location_id: Optional[int] = None
    user_id: Optional[int] = None
    organization_id: Optional[int] = None
    access_token: Optional[str] = None

    @classmethod
    def from_settings(cls, s: Settings | None = None) -> "CurrentContext":
        s = s or settings
        return cls(
            pg_location_id=s.pg_location_id,
            user_id=s.user_id,
            organization_id=s.organization_id,
            access_token=s.access_token,
        )

    def with_location(self, pg_location_id: int) -> "CurrentContext":
        return CurrentContext(
            pg_location_id=int(pg_location_id),
            user_id=self.user_id,
            organization_id=self.organization_id,
            access_token=self.access_token,
        )

    def headers(self) -> dict[str, str]:
        h: dict[str, str] = {}
        if self.access_token:
            h["Authorization"] = f"Bearer {self.access_token}"
        if self.user_id is not None:
            h["x-user-id"] = str(self.user_id)
        if self.organization_id is not None:
            h["x-organization-id"] = str(self.organization_id)
        if self.pg_location_id is not None:
            h["x-pg-location-id"] = str(self.pg_location_id)
        return h
