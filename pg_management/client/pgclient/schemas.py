# pg_management/client/pgclient/schemas.py
from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

PaymentMethod = Literal["GPAY", "PHONEPE", "CASH", "BANK_TRANSFER"]
RentPaymentStatus = Literal["PAID", "PARTIAL", "PENDING"]
RentCycleType = Literal["CALENDAR", "MIDMONTH"]

PAYMENT_METHODS: tuple[str, ...] = ("GPAY", "PHONEPE", "CASH", "BANK_TRANSFER")


class _Wire(BaseModel):
    # Backend mixes camelCase and snake_case keys; accept either on input.
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# -------------------- Envelope --------------------

class ApiErrorBody(_Wire):
    code: Optional[str] = None
    message: Optional[str] = None
    details: Any = None


class ApiEnvelope(_Wire):
    success: bool
    status_code: int = Field(alias="statusCode")
    message: Optional[Union[str, list[str]]] = None
    data: Any = None
    error: Optional[ApiErrorBody] = None
    timestamp: Optional[str] = None
    path: Optional[str] = None


class Pagination(_Wire):
    total: int = 0
    page: int = 1
    limit: int = 0
    total_pages: int = Field(default=0, alias="totalPages")


class PaginatedData(_Wire):
    data: list[dict[str, Any]]
    pagination: Optional[Pagination] = None


# -------------------- Rent cycles --------------------

class RentPaymentGap(_Wire):
    gap_id: Optional[Union[int, str]] = Field(default=None, alias="gapId")
    gap_start: str = Field(alias="gapStart")
    gap_end: str = Field(alias="gapEnd")
    days_missing: int = Field(default=0, alias="daysMissing")
    cycle_id: Optional[int] = None
    remaining_due: Optional[float] = Field(default=None, alias="remainingDue")
    rent_due: Optional[float] = Field(default=None, alias="rentDue")
    total_paid: Optional[float] = Field(default=None, alias="totalPaid")
    due: Optional[float] = None
    expected_from_allocations: Optional[float] = None

    @property
    def key(self) -> str:
        if self.gap_id is not None:
            return str(self.gap_id)
        return f"{self.gap_start}-{self.gap_end}"


class DetectPaymentGapsResponse(_Wire):
    has_gaps: bool = Field(alias="hasGaps")
    gaps: list[RentPaymentGap] = Field(default_factory=list)


class NextPaymentDatesResponse(_Wire):
    suggested_cycle_id: Optional[int] = Field(default=None, alias="suggestedCycleId")
    suggested_start_date: Optional[str] = Field(default=None, alias="suggestedStartDate")
    suggested_end_date: Optional[str] = Field(default=None, alias="suggestedEndDate")


# -------------------- Tenants --------------------

class RoomRef(_Wire):
    s_no: int
    room_no: Optional[str] = None
    rent_price: Optional[float] = None


class BedRef(_Wire):
    s_no: int
    bed_no: Optional[str] = None


class LocationRef(_Wire):
    s_no: int
    location_name: Optional[str] = None


class UnpaidMonth(_Wire):
    month_name: Optional[str] = None
    cycle_start: Optional[str] = None
    cycle_end: Optional[str] = None


class Tenant(_Wire):
    s_no: int
    tenant_id: Optional[str] = None
    name: Optional[str] = None
    phone_no: Optional[str] = None
    pg_id: int
    room_id: Optional[int] = None
    bed_id: Optional[int] = None
    status: Optional[str] = None
    check_in_date: Optional[str] = None
    check_out_date: Optional[str] = None

    rooms: Optional[RoomRef] = None
    beds: Optional[BedRef] = None
    pg_locations: Optional[LocationRef] = None

    is_rent_paid: Optional[bool] = None
    is_rent_partial: Optional[bool] = None
    is_advance_paid: Optional[bool] = None
    rent_due_amount: Optional[float] = None
    partial_due_amount: Optional[float] = None
    pending_due_amount: Optional[float] = None
    pending_months: Optional[int] = None
    unpaid_months: list[UnpaidMonth] = Field(default_factory=list)


# -------------------- Payments --------------------

class PaymentRecord(_Wire):
    """Rent, advance and refund rows share this shape."""

    s_no: int
    tenant_id: Optional[int] = None
    pg_id: Optional[int] = None
    room_id: Optional[int] = None
    bed_id: Optional[int] = None
    amount_paid: float = 0.0
    actual_rent_amount: Optional[float] = None
    payment_date: Optional[str] = None
    payment_method: Optional[str] = None
    status: Optional[str] = None
    remarks: Optional[str] = None
    cycle_id: Optional[int] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    tenant_unavailable_reason: Optional[str] = None


class PaymentPage(BaseModel):
    items: list[PaymentRecord]
    pagination: Optional[Pagination] = None


class CreateTenantPaymentDto(BaseModel):
    tenant_id: int
    pg_id: int
    room_id: int
    bed_id: int
    amount_paid: float
    actual_rent_amount: float
    payment_date: Optional[str] = None
    payment_method: PaymentMethod
    status: RentPaymentStatus
    cycle_id: int
    remarks: Optional[str] = None


class CreateAdvancePaymentDto(BaseModel):
    tenant_id: int
    pg_id: int
    room_id: int
    bed_id: int
    amount_paid: float
    actual_rent_amount: Optional[float] = None
    payment_date: Optional[str] = None
    payment_method: PaymentMethod
    status: Optional[str] = "PAID"
    remarks: Optional[str] = None


class CreateRefundPaymentDto(BaseModel):
    tenant_id: int
    pg_id: int
    room_id: int
    bed_id: int
    amount_paid: float
    actual_rent_amount: Optional[float] = None
    payment_date: str
    payment_method: PaymentMethod
    status: Literal["PAID", "PENDING", "FAILED"] = "PAID"
    remarks: Optional[str] = None
