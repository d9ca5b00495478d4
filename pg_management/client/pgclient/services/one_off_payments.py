# pg_management/client/pgclient/services/one_off_payments.py
from __future__ import annotations

import logging
from typing import Optional

from ..clients.base import PgApiClient
from ..clients.payments import AdvancePaymentsApi, RefundPaymentsApi
from ..errors import ApiError, PaymentValidationError
from ..domain.payment_validation import require_payment_method, require_positive_amount, require_room_bed
from ..schemas import CreateAdvancePaymentDto, CreateRefundPaymentDto, Tenant
from .outcomes import SubmitOutcome

log = logging.getLogger("pgclient.payments")


def submit_advance(
    client: PgApiClient,
    tenant: Tenant,
    *,
    amount: object,
    payment_date: Optional[str],
    payment_method: str = "CASH",
    remarks: Optional[str] = None,
) -> SubmitOutcome:
    """Advance (security deposit) is always recorded as PAID."""
    try:
        paid = require_positive_amount(amount, field="amount_paid", message="Enter valid amount")
        room_id, bed_id = require_room_bed(tenant)
        method = require_payment_method(payment_method)
    except PaymentValidationError as e:
        return SubmitOutcome.invalid(e.field, e.message)

    dto = CreateAdvancePaymentDto(
        tenant_id=tenant.s_no,
        pg_id=tenant.pg_id,
        room_id=room_id,
        bed_id=bed_id,
        amount_paid=paid,
        payment_date=(payment_date or "").strip() or None,
        payment_method=method,
        status="PAID",
        remarks=(remarks or "").strip() or None,
    )
    try:
        data = AdvancePaymentsApi(client).create(dto)
    except ApiError as e:
        log.warning("advance payment rejected: %s", e.message, extra={"tenant_id": tenant.s_no})
        return SubmitOutcome.rejected(e.message)

    log.info("advance payment recorded amount=%s", paid, extra={"tenant_id": tenant.s_no})
    return SubmitOutcome.success(data)


def submit_refund(
    client: PgApiClient,
    tenant: Tenant,
    *,
    amount: object,
    payment_date: Optional[str],
    payment_method: str = "CASH",
    remarks: Optional[str] = None,
) -> SubmitOutcome:
    try:
        paid = require_positive_amount(amount, field="amount_paid", message="Enter valid amount")
        room_id, bed_id = require_room_bed(tenant)
        method = require_payment_method(payment_method)
        if not (payment_date or "").strip():
            raise PaymentValidationError("payment_date", "Select a payment date")
    except PaymentValidationError as e:
        return SubmitOutcome.invalid(e.field, e.message)

    dto = CreateRefundPaymentDto(
        tenant_id=tenant.s_no,
        pg_id=tenant.pg_id,
        room_id=room_id,
        bed_id=bed_id,
        amount_paid=paid,
        payment_date=payment_date.strip(),
        payment_method=method,
        status="PAID",
        remarks=(remarks or "").strip() or None,
    )
    try:
        data = RefundPaymentsApi(client).create(dto)
    except ApiError as e:
        log.warning("refund payment rejected: %s", e.message, extra={"tenant_id": tenant.s_no})
        return SubmitOutcome.rejected(e.message)

    log.info("refund payment recorded amount=%s", paid, extra={"tenant_id": tenant.s_no})
    return SubmitOutcome.success(data)
