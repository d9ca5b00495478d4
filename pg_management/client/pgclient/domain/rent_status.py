# pg_management/client/pgclient/domain/rent_status.py
from __future__ import annotations

import math
from typing import Optional


def to_finite_float(x: object) -> Optional[float]:
    """
    Form fields arrive as strings ("9000", " 4000.5 ") or numbers.
    Returns None for blanks, junk, NaN and +/-inf.
    """
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, str):
        x = x.strip()
        if not x:
            return None
    try:
        v = float(x)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return v if math.isfinite(v) else None


def safe_num(x: object) -> float:
    v = to_finite_float(x)
    return 0.0 if v is None else v


def derive_rent_status(amount_paid: float, actual_rent_amount: float) -> str:
    """
    PAID    : amount_paid >= actual_rent_amount
    PARTIAL : 0 < amount_paid < actual_rent_amount
    PENDING : anything else
    """
    if amount_paid >= actual_rent_amount:
        return "PAID"
    if amount_paid > 0:
        return "PARTIAL"
    return "PENDING"
