# pg_management/client/pgclient/domain/rent_cycles.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..schemas import DetectPaymentGapsResponse, NextPaymentDatesResponse, RentPaymentGap
from .rent_status import safe_num


@dataclass(frozen=True)
class CycleSelection:
    cycle_id: Optional[int]
    start: str
    end: str
    suggested_amount: Optional[float]  # None => leave the rent amount field alone
    source: str  # "gap" | "next_period"


def remaining_due(gap: RentPaymentGap) -> float:
    """
    remainingDue when the backend sent it; else rentDue - totalPaid when both
    are known; else rentDue. Non-numbers count as 0.
    """
    if gap.remaining_due is not None:
        return safe_num(gap.remaining_due)
    if gap.rent_due is not None and gap.total_paid is not None:
        return safe_num(gap.rent_due) - safe_num(gap.total_paid)
    return safe_num(gap.rent_due)


def selection_for_gap(gap: RentPaymentGap) -> CycleSelection:
    remaining = remaining_due(gap)
    return CycleSelection(
        cycle_id=gap.cycle_id,
        start=gap.gap_start,
        end=gap.gap_end,
        suggested_amount=max(0.0, remaining) if remaining > 0 else None,
        source="gap",
    )


def selection_for_next_period(nxt: NextPaymentDatesResponse) -> CycleSelection:
    return CycleSelection(
        cycle_id=nxt.suggested_cycle_id,
        start=str(nxt.suggested_start_date or ""),
        end=str(nxt.suggested_end_date or ""),
        suggested_amount=None,
        source="next_period",
    )


def _month_label(value: str) -> str:
    # ISO date or datetime; only the date part matters
    d = date.fromisoformat(value.split("T")[0])
    return d.strftime("%b %Y")


def format_gap_label(gap_start: str, gap_end: str) -> str:
    """'Jan 2024' for a single-month gap, 'Jan 2024 - Feb 2024' when it spans months."""
    try:
        start_label = _month_label(gap_start)
        end_label = _month_label(gap_end)
    except (TypeError, ValueError):
        return f"{gap_start} to {gap_end}"
    return start_label if start_label == end_label else f"{start_label} - {end_label}"


class CycleSelector:
    """
    Holds the gap list of one dialog session and which period is active.

    At most one of (selected gap, suggested next period) is set at any time.
    """

    def __init__(self) -> None:
        self.has_gaps: bool = False
        self.gaps: list[RentPaymentGap] = []
        self.selected_gap_key: Optional[str] = None
        self.suggested: Optional[NextPaymentDatesResponse] = None

    def load(self, resp: DetectPaymentGapsResponse) -> None:
        self.has_gaps = bool(resp.has_gaps)
        self.gaps = list(resp.gaps)
        self.clear()

    def clear(self) -> None:
        self.selected_gap_key = None
        self.suggested = None

    def find_gap(self, key: str) -> Optional[RentPaymentGap]:
        for g in self.gaps:
            if g.key == key:
                return g
        return None

    def toggle_gap(self, gap: Union[RentPaymentGap, str]) -> Optional[CycleSelection]:
        """
        Select a gap, or deselect it when it is already the active one.
        Returns the new selection (None after a deselect).
        """
        key = gap if isinstance(gap, str) else gap.key
        # gap objects from an earlier load are looked up again by key
        g = self.find_gap(key)
        if g is None:
            raise KeyError(f"unknown gap {gap!r}")

        if self.selected_gap_key == g.key:
            self.clear()
            return None

        self.selected_gap_key = g.key
        self.suggested = None
        return selection_for_gap(g)

    def adopt_next_period(self, nxt: NextPaymentDatesResponse) -> CycleSelection:
        self.selected_gap_key = None
        self.suggested = nxt
        return selection_for_next_period(nxt)

    @property
    def selection(self) -> Optional[CycleSelection]:
        if self.selected_gap_key is not None:
            g = self.find_gap(self.selected_gap_key)
            return selection_for_gap(g) if g is not None else None
        if self.suggested is not None:
            return selection_for_next_period(self.suggested)
        return None

    def labels(self) -> list[tuple[str, str, bool]]:
        """(gap key, display label, is_selected) for each gap, in backend order."""
        return [
            (g.key, format_gap_label(g.gap_start, g.gap_end), g.key == self.selected_gap_key)
            for g in self.gaps
        ]
