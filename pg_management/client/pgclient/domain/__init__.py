# pg_management/client/pgclient/domain/__init__.py
from .rent_status import derive_rent_status, safe_num, to_finite_float
from .rent_cycles import CycleSelection, CycleSelector, format_gap_label, remaining_due
from .payment_validation import build_rent_payment, resolve_room_bed
from .tenant_summary import Badge, due_label, rent_badges, room_label

__all__ = [
    "Badge",
    "CycleSelection",
    "CycleSelector",
    "build_rent_payment",
    "derive_rent_status",
    "due_label",
    "format_gap_label",
    "remaining_due",
    "rent_badges",
    "resolve_room_bed",
    "room_label",
    "safe_num",
    "to_finite_float",
]
