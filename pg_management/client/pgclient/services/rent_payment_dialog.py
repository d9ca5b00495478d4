# pg_management/client/pgclient/services/rent_payment_dialog.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional, Union

from ..clients.base import PgApiClient
from ..clients.payments import RentPaymentsApi
from ..clients.tenants import TenantsApi
from ..config import settings
from ..errors import ApiError, PaymentValidationError
from ..domain.payment_validation import build_rent_payment
from ..domain.rent_cycles import CycleSelection, CycleSelector
from ..schemas import RentPaymentGap, Tenant
from .outcomes import SubmitOutcome

log = logging.getLogger("pgclient.rent_dialog")

LOAD_PERIODS_FAILED = "Failed to load rent periods"
NEXT_PERIOD_FAILED = "Failed to calculate next rent period"

FormNumber = Union[str, float, int, None]


def today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()


class RentPaymentDialog:
    """
    View-model behind "Add rent payment" for one tenant.

    Flow:
      open()                      -> defaults + gap fetch (+ next period when there are no gaps)
      select_gap() / use_next_period()
      submit()                    -> local validation, POST, tenant re-fetch

    Errors never escape: they land in `error` and in the returned outcome.
    """

    def __init__(
        self,
        client: PgApiClient,
        tenant: Tenant,
        *,
        rent_cycle_type: Optional[str] = None,
    ) -> None:
        self.rent_api = RentPaymentsApi(client)
        self.tenants_api = TenantsApi(client)
        self.tenant = tenant
        self.rent_cycle_type = rent_cycle_type or settings.default_rent_cycle_type

        self.selector = CycleSelector()

        # form
        self.amount_paid: FormNumber = ""
        self.actual_rent_amount: FormNumber = ""
        self.payment_date: str = today_iso()
        self.payment_method: str = settings.default_payment_method
        self.remarks: str = ""

        # active period
        self.cycle_id: Optional[int] = None
        self.start_date: str = ""
        self.end_date: str = ""

        self.loading: bool = False
        self.error: Optional[str] = None
        self.is_open: bool = False

    # ---- lifecycle ----

    def open(self) -> None:
        self.is_open = True
        self.hydrate_defaults()
        self.load_gaps_and_suggested_period()

    def hydrate_defaults(self) -> None:
        self.amount_paid = ""
        self.payment_date = today_iso()
        self.payment_method = settings.default_payment_method
        self.error = None

        rent_price = self.tenant.rooms.rent_price if self.tenant.rooms else None
        self.actual_rent_amount = rent_price if rent_price is not None else ""

    # ---- period selection ----

    def _apply(self, selection: Optional[CycleSelection]) -> None:
        if selection is None:
            self.cycle_id = None
            self.start_date = ""
            self.end_date = ""
            return
        self.cycle_id = selection.cycle_id
        self.start_date = selection.start
        self.end_date = selection.end
        if selection.suggested_amount is not None:
            self.actual_rent_amount = selection.suggested_amount

    def _clear_period(self) -> None:
        self.selector.clear()
        self._apply(None)

    def load_gaps_and_suggested_period(self) -> None:
        tid = self.tenant.s_no
        self.loading = True
        self.error = None
        try:
            gaps = self.rent_api.detect_gaps(tid)
            self.selector.load(gaps)
            self._apply(None)

            if not gaps.has_gaps:
                nxt = self.rent_api.next_dates(tid, rent_cycle_type=self.rent_cycle_type, skip_gaps=True)
                self._apply(self.selector.adopt_next_period(nxt))
        except ApiError as e:
            log.warning("rent periods unavailable: %s", e.message, extra={"tenant_id": tid})
            self._clear_period()
            self.error = LOAD_PERIODS_FAILED
        finally:
            self.loading = False

    def select_gap(self, gap: Union[RentPaymentGap, str]) -> Optional[CycleSelection]:
        selection = self.selector.toggle_gap(gap)
        self._apply(selection)
        return selection

    def use_next_period(self) -> Optional[CycleSelection]:
        tid = self.tenant.s_no
        self.loading = True
        self.error = None
        try:
            nxt = self.rent_api.next_dates(tid, rent_cycle_type=self.rent_cycle_type, skip_gaps=True)
        except ApiError as e:
            log.warning("next rent period unavailable: %s", e.message, extra={"tenant_id": tid})
            self._clear_period()
            self.error = NEXT_PERIOD_FAILED
            return None
        finally:
            self.loading = False

        selection = self.selector.adopt_next_period(nxt)
        self._apply(selection)
        return selection

    @property
    def gaps(self) -> list[RentPaymentGap]:
        return self.selector.gaps

    @property
    def has_gaps(self) -> bool:
        return self.selector.has_gaps

    # ---- submission ----

    def submit(self) -> SubmitOutcome:
        tid = self.tenant.s_no
        try:
            dto = build_rent_payment(
                tenant=self.tenant,
                amount_paid=self.amount_paid,
                actual_rent_amount=self.actual_rent_amount,
                cycle_id=self.cycle_id,
                payment_date=self.payment_date,
                payment_method=self.payment_method,
                remarks=self.remarks,
            )
        except PaymentValidationError as e:
            log.info("rent payment rejected locally: %s", e.message, extra={"tenant_id": tid, "field": e.field})
            self.error = e.message
            return SubmitOutcome.invalid(e.field, e.message)

        try:
            payment = self.rent_api.create(dto)
        except ApiError as e:
            log.warning(
                "rent payment rejected by backend: %s",
                e.message,
                extra={"tenant_id": tid, "cycle_id": dto.cycle_id, "status_code": e.status_code},
            )
            self.error = e.message
            return SubmitOutcome.rejected(e.message)

        log.info(
            "rent payment recorded status=%s amount=%s",
            dto.status,
            dto.amount_paid,
            extra={"tenant_id": tid, "cycle_id": dto.cycle_id, "payment_id": payment.s_no},
        )
        self.error = None
        self.is_open = False
        self.refresh_tenant()
        return SubmitOutcome.success(payment)

    def refresh_tenant(self) -> Tenant:
        """Re-read due amounts and badges; a failed refresh keeps the previous projection."""
        try:
            self.tenant = self.tenants_api.get(self.tenant.s_no)
        except ApiError as e:
            log.warning("tenant refresh failed: %s", e.message, extra={"tenant_id": self.tenant.s_no})
        return self.tenant
