# pg_management/client/tests/conftest.py
from __future__ import annotations

import copy
import json
from typing import Any, Callable, Union

import httpx
import pytest

from pgclient.clients import PgApiClient
from pgclient.context import CurrentContext
from pgclient.schemas import Tenant

BASE_URL = "http://pg.test"

TENANT_ROW: dict[str, Any] = {
    "s_no": 5,
    "tenant_id": "T-005",
    "name": "Ravi Kumar",
    "pg_id": 3,
    "room_id": 11,
    "bed_id": 21,
    "status": "ACTIVE",
    "check_in_date": "2023-11-01",
    "rooms": {"s_no": 11, "room_no": "101", "rent_price": 9000},
    "beds": {"s_no": 21, "bed_no": "A"},
    "is_rent_paid": False,
    "is_rent_partial": True,
    "is_advance_paid": True,
    "rent_due_amount": 5000,
    "pending_due_amount": 5000,
    "unpaid_months": [{"month_name": "January", "cycle_start": "2024-01-01", "cycle_end": "2024-01-31"}],
}


def ok(data: Any, *, status_code: int = 200, message: str = "OK") -> dict[str, Any]:
    return {
        "success": True,
        "statusCode": status_code,
        "message": message,
        "data": data,
        "timestamp": "2024-02-01T10:00:00.000Z",
    }


def fail(message: str, *, status_code: int = 400, code: str = "BAD_REQUEST") -> dict[str, Any]:
    return {
        "success": False,
        "statusCode": status_code,
        "message": message,
        "error": {"code": code},
        "timestamp": "2024-02-01T10:00:00.000Z",
    }


Reply = Union[tuple[int, Any], Callable[[httpx.Request], Any], Exception]


class FakeBackend:
    """Route table behind httpx.MockTransport; records every request it sees."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Reply] = {}
        self.calls: list[httpx.Request] = []
        self.invalidated: list[list[tuple[str, Any]]] = []

    def on(self, method: str, path: str, payload: Any = None, *, status: int = 200) -> None:
        self.routes[(method.upper(), path)] = (status, payload)

    def raise_on(self, method: str, path: str, exc: Exception) -> None:
        self.routes[(method.upper(), path)] = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        reply = self.routes.get((request.method, request.url.path))
        if reply is None:
            return httpx.Response(404, json=fail("Route not found", status_code=404, code="NOT_FOUND"))
        if isinstance(reply, Exception):
            raise reply
        status, payload = reply
        if isinstance(payload, str):
            return httpx.Response(status, text=payload)
        return httpx.Response(status, json=payload)

    def client(self, ctx: CurrentContext | None = None) -> PgApiClient:
        return PgApiClient(
            ctx or CurrentContext(pg_location_id=3, user_id=9, organization_id=1, access_token="tok-123"),
            base_url=BASE_URL,
            transport=httpx.MockTransport(self.handler),
            on_invalidate=self.invalidated.append,
        )

    def sent(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.calls if r.method == method and r.url.path == path]

    @staticmethod
    def body(request: httpx.Request) -> dict[str, Any]:
        return json.loads(request.content.decode("utf-8"))


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def tenant_row() -> dict[str, Any]:
    return copy.deepcopy(TENANT_ROW)


@pytest.fixture
def tenant(tenant_row: dict[str, Any]) -> Tenant:
    return Tenant.model_validate(tenant_row)
