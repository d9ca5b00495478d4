from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..schemas import Tenant
from .rent_status import safe_num


@dataclass(frozen=True)
class Badge:
    key: str
    label: str


def _amount(v: float) -> str:
    return f"{v:.0f}" if float(v).is_integer() else f"{v:.2f}"


def pending_due(tenant: Tenant) -> Optional[float]:
    if tenant.pending_due_amount is not None:
        return float(tenant.pending_due_amount)
    if tenant.rent_due_amount is not None:
        return float(tenant.rent_due_amount)
    return None


def due_label(tenant: Tenant) -> str:
    due = pending_due(tenant)
    if due is None or due <= 0:
        return ""
    return f"Pending ₹{int(round(due))}"


def room_label(tenant: Tenant) -> str:
    room_no = tenant.rooms.room_no if tenant.rooms else None
    bed_no = tenant.beds.bed_no if tenant.beds else None
    if room_no and bed_no:
        return f"Room {room_no} • Bed {bed_no}"
    if room_no:
        return f"Room {room_no}"
    return f"Room #{tenant.room_id}" if tenant.room_id else ""


def rent_badges(tenant: Tenant) -> list[Badge]:
    """Status chips for the tenant header, in display order."""
    rent_due = safe_num(tenant.rent_due_amount)
    pending = safe_num(tenant.pending_due_amount)
    has_pending_rent = pending > 0 or len(tenant.unpaid_months) > 0

    badges: list[Badge] = []
    if tenant.is_rent_paid:
        badges.append(Badge("rent_paid", "Rent PAID"))
    if tenant.is_advance_paid:
        badges.append(Badge("adv_paid", "Advance Paid"))
    if tenant.is_rent_partial:
        badges.append(Badge("partial", "PARTIAL"))
    if has_pending_rent:
        badges.append(Badge("pending", "PENDING RENT"))
    if rent_due > 0:
        badges.append(Badge("due", f"₹{_amount(rent_due)} DUE"))
    if not tenant.is_advance_paid:
        badges.append(Badge("no_adv", "NO ADVANCE"))
    return badges
