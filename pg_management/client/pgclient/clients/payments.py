# pg_management/client/pgclient/clients/payments.py
from __future__ import annotations

from typing import Any, Optional

from ..schemas import (
    CreateAdvancePaymentDto,
    CreateRefundPaymentDto,
    CreateTenantPaymentDto,
    DetectPaymentGapsResponse,
    NextPaymentDatesResponse,
    PaymentPage,
    PaymentRecord,
)
from .base import CacheTag, PgApiClient

DASHBOARD_TAGS: list[CacheTag] = [("Dashboard", "SUMMARY"), ("Dashboard", "MONTHLY_METRICS")]


def _void_body(voided_reason: Optional[str]) -> Optional[dict[str, Any]]:
    return {"voided_reason": voided_reason} if voided_reason else None


class RentPaymentsApi:
    def __init__(self, client: PgApiClient) -> None:
        self.client = client

    def search(
        self,
        *,
        tenant_id: Optional[int] = None,
        pg_id: Optional[int] = None,
        status: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> PaymentPage:
        params = {"tenant_id": tenant_id, "pg_id": pg_id, "status": status, "page": page, "limit": limit}
        return self.client.fetch_page("/rent-payments", params=params)

    def get(self, payment_id: int) -> PaymentRecord:
        return self.client.fetch("GET", f"/rent-payments/{int(payment_id)}", PaymentRecord)

    def by_tenant(self, tenant_id: int) -> PaymentPage:
        return self.client.fetch_page(f"/rent-payments/tenant/{int(tenant_id)}")

    def detect_gaps(self, tenant_id: int) -> DetectPaymentGapsResponse:
        return self.client.fetch("GET", f"/rent-payments/gaps/{int(tenant_id)}", DetectPaymentGapsResponse)

    def next_dates(
        self,
        tenant_id: int,
        *,
        rent_cycle_type: Optional[str] = None,
        skip_gaps: Optional[bool] = None,
    ) -> NextPaymentDatesResponse:
        params: dict[str, Any] = {
            "rentCycleType": rent_cycle_type,
            "skipGaps": None if skip_gaps is None else ("true" if skip_gaps else "false"),
        }
        return self.client.fetch(
            "GET",
            f"/rent-payments/next-dates/{int(tenant_id)}",
            NextPaymentDatesResponse,
            params=params,
        )

    def create(self, dto: CreateTenantPaymentDto) -> PaymentRecord:
        out = self.client.fetch("POST", "/rent-payments", PaymentRecord, body=dto.model_dump(exclude_none=True))
        self.client.invalidate(
            [
                ("TenantPayments", "LIST"),
                ("Tenants", "LIST"),
                ("Tenant", dto.tenant_id),
                ("TenantPaymentGaps", dto.tenant_id),
                ("TenantPaymentNextDates", dto.tenant_id),
                *DASHBOARD_TAGS,
            ]
        )
        return out

    def update_status(self, payment_id: int, *, status: str, payment_date: Optional[str] = None) -> Any:
        body: dict[str, Any] = {"status": status}
        if payment_date:
            body["payment_date"] = payment_date
        env = self.client.request("PATCH", f"/rent-payments/{int(payment_id)}/status", body=body)
        self.client.invalidate([("TenantPayments", "LIST"), ("TenantPayment", int(payment_id)), *DASHBOARD_TAGS])
        return env.data

    def void(self, payment_id: int, *, voided_reason: Optional[str] = None) -> Any:
        env = self.client.request("PATCH", f"/rent-payments/{int(payment_id)}/void", body=_void_body(voided_reason))
        self.client.invalidate(
            [("TenantPayments", "LIST"), ("TenantPayment", int(payment_id)), ("Tenants", "LIST"), *DASHBOARD_TAGS]
        )
        return env.data


class AdvancePaymentsApi:
    def __init__(self, client: PgApiClient) -> None:
        self.client = client

    def search(self, **filters: Any) -> PaymentPage:
        # tenant_id, status, month, year, start_date, end_date, room_id, bed_id, page, limit
        return self.client.fetch_page("/advance-payments", params=filters)

    def by_tenant(self, tenant_id: int) -> PaymentPage:
        return self.client.fetch_page(f"/advance-payments/tenant/{int(tenant_id)}")

    def create(self, dto: CreateAdvancePaymentDto) -> Any:
        env = self.client.request("POST", "/advance-payments", body=dto.model_dump(exclude_none=True))
        self.client.invalidate(
            [("AdvancePayments", "LIST"), ("Tenants", "LIST"), ("Tenant", dto.tenant_id), *DASHBOARD_TAGS]
        )
        return env.data

    def update(self, payment_id: int, changes: dict[str, Any]) -> Any:
        env = self.client.request("PATCH", f"/advance-payments/{int(payment_id)}", body=changes)
        self.client.invalidate([("AdvancePayments", "LIST"), ("AdvancePayment", int(payment_id)), *DASHBOARD_TAGS])
        return env.data

    def update_status(self, payment_id: int, *, status: str, payment_date: Optional[str] = None) -> Any:
        body: dict[str, Any] = {"status": status}
        if payment_date:
            body["payment_date"] = payment_date
        env = self.client.request("PATCH", f"/advance-payments/{int(payment_id)}/status", body=body)
        self.client.invalidate([("AdvancePayments", "LIST"), ("AdvancePayment", int(payment_id)), *DASHBOARD_TAGS])
        return env.data

    def delete(self, payment_id: int) -> Any:
        env = self.client.request("DELETE", f"/advance-payments/{int(payment_id)}")
        self.client.invalidate([("AdvancePayments", "LIST"), ("AdvancePayment", int(payment_id)), *DASHBOARD_TAGS])
        return env.data

    def void(self, payment_id: int, *, voided_reason: Optional[str] = None) -> Any:
        env = self.client.request("PATCH", f"/advance-payments/{int(payment_id)}/void", body=_void_body(voided_reason))
        self.client.invalidate([("AdvancePayments", "LIST"), ("AdvancePayment", int(payment_id)), *DASHBOARD_TAGS])
        return env.data


class RefundPaymentsApi:
    def __init__(self, client: PgApiClient) -> None:
        self.client = client

    def search(self, **filters: Any) -> PaymentPage:
        return self.client.fetch_page("/refund-payments", params=filters)

    def get(self, payment_id: int) -> PaymentRecord:
        return self.client.fetch("GET", f"/refund-payments/{int(payment_id)}", PaymentRecord)

    def create(self, dto: CreateRefundPaymentDto) -> Any:
        env = self.client.request(
            "POST",
            "/refund-payments",
            body=dto.model_dump(exclude_none=True),
            headers={"X-Skip-Global-Error": "true"},
        )
        self.client.invalidate(
            [("RefundPayments", "LIST"), ("Tenants", "LIST"), ("Tenant", dto.tenant_id), *DASHBOARD_TAGS]
        )
        return env.data

    def update(self, payment_id: int, changes: dict[str, Any]) -> Any:
        env = self.client.request("PATCH", f"/refund-payments/{int(payment_id)}", body=changes)
        self.client.invalidate([("RefundPayments", "LIST"), ("RefundPayment", int(payment_id)), *DASHBOARD_TAGS])
        return env.data

    def delete(self, payment_id: int) -> Any:
        env = self.client.request("DELETE", f"/refund-payments/{int(payment_id)}")
        self.client.invalidate([("RefundPayments", "LIST"), ("RefundPayment", int(payment_id)), *DASHBOARD_TAGS])
        return env.data
