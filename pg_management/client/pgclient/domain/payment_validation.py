# pg_management/client/pgclient/domain/payment_validation.py
from __future__ import annotations

from typing import Optional

from ..errors import PaymentValidationError
from ..schemas import PAYMENT_METHODS, CreateTenantPaymentDto, Tenant
from .rent_status import derive_rent_status, to_finite_float


def resolve_room_bed(tenant: Tenant) -> tuple[int, int]:
    """Current allocation: room_id/bed_id, falling back to the nested rooms/beds rows. 0 means unknown."""
    room_id = tenant.room_id or (tenant.rooms.s_no if tenant.rooms else 0) or 0
    bed_id = tenant.bed_id or (tenant.beds.s_no if tenant.beds else 0) or 0
    return int(room_id), int(bed_id)


def require_positive_amount(value: object, *, field: str, message: str) -> float:
    v = to_finite_float(value)
    if v is None or v <= 0:
        raise PaymentValidationError(field, message)
    return v


def require_room_bed(tenant: Tenant) -> tuple[int, int]:
    room_id, bed_id = resolve_room_bed(tenant)
    if not room_id or not bed_id:
        raise PaymentValidationError("room_bed", "Tenant room/bed not found")
    return room_id, bed_id


def require_payment_method(value: str) -> str:
    method = (value or "").strip().upper()
    if method not in PAYMENT_METHODS:
        raise PaymentValidationError("payment_method", f"Unsupported payment method: {value}")
    return method


def build_rent_payment(
    *,
    tenant: Tenant,
    amount_paid: object,
    actual_rent_amount: object,
    cycle_id: Optional[int],
    payment_date: Optional[str],
    payment_method: str,
    remarks: Optional[str] = None,
) -> CreateTenantPaymentDto:
    """
    All checks run before anything is sent; the first failure raises
    PaymentValidationError naming the offending field.
    """
    paid = require_positive_amount(amount_paid, field="amount_paid", message="Enter valid amount paid")
    actual = require_positive_amount(
        actual_rent_amount, field="actual_rent_amount", message="Enter valid rent amount"
    )

    if isinstance(cycle_id, bool) or not isinstance(cycle_id, int) or cycle_id <= 0:
        raise PaymentValidationError("cycle_id", "Please select a rent period")

    if not (payment_date or "").strip():
        raise PaymentValidationError("payment_date", "Select a payment date")

    room_id, bed_id = require_room_bed(tenant)
    method = require_payment_method(payment_method)

    return CreateTenantPaymentDto(
        tenant_id=tenant.s_no,
        pg_id=tenant.pg_id,
        room_id=room_id,
        bed_id=bed_id,
        amount_paid=paid,
        actual_rent_amount=actual,
        payment_date=payment_date.strip(),
        payment_method=method,
        status=derive_rent_status(paid, actual),
        cycle_id=cycle_id,
        remarks=(remarks or "").strip() or None,
    )
