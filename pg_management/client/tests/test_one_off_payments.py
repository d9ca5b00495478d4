# pg_management/client/tests/test_one_off_payments.py
from __future__ import annotations

from conftest import fail, ok
from pgclient.schemas import Tenant
from pgclient.services import submit_advance, submit_refund


def test_advance_is_recorded_as_paid(backend, tenant):
    backend.on("POST", "/advance-payments", ok({"s_no": 31}))
    out = submit_advance(backend.client(), tenant, amount="15000", payment_date="2024-01-01", payment_method="phonepe")
    assert out.ok
    body = backend.body(backend.sent("POST", "/advance-payments")[0])
    assert body == {
        "tenant_id": 5,
        "pg_id": 3,
        "room_id": 11,
        "bed_id": 21,
        "amount_paid": 15000.0,
        "payment_date": "2024-01-01",
        "payment_method": "PHONEPE",
        "status": "PAID",
    }
    assert ("Tenant", 5) in backend.invalidated[0]


def test_advance_without_date_omits_it(backend, tenant):
    backend.on("POST", "/advance-payments", ok({"s_no": 32}))
    assert submit_advance(backend.client(), tenant, amount=5000, payment_date="").ok
    body = backend.body(backend.calls[0])
    assert "payment_date" not in body


def test_advance_rejects_zero_amount_locally(backend, tenant):
    out = submit_advance(backend.client(), tenant, amount="0", payment_date="2024-01-01")
    assert (out.status, out.field, out.message) == ("invalid", "amount_paid", "Enter valid amount")
    assert backend.calls == []


def test_unknown_payment_method_is_rejected(backend, tenant):
    out = submit_advance(backend.client(), tenant, amount="100", payment_date="2024-01-01", payment_method="CHEQUE")
    assert out.field == "payment_method"
    assert backend.calls == []


def test_refund_requires_room_and_bed(backend, tenant_row):
    t = Tenant.model_validate({**tenant_row, "room_id": None, "rooms": None})
    out = submit_refund(backend.client(), t, amount="2000", payment_date="2024-03-01")
    assert out.field == "room_bed"
    assert backend.calls == []


def test_refund_requires_date(backend, tenant):
    out = submit_refund(backend.client(), tenant, amount="2000", payment_date=" ")
    assert out.field == "payment_date"
    assert backend.calls == []


def test_refund_backend_error_is_surfaced(backend, tenant):
    backend.on("POST", "/refund-payments", fail("Refund exceeds advance paid"), status=400)
    out = submit_refund(backend.client(), tenant, amount="99999", payment_date="2024-03-01", remarks="exit")
    assert out.status == "rejected"
    assert out.message == "Refund exceeds advance paid"
    assert backend.invalidated == []
