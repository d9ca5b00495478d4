# pg_management/client/pgclient/cli/__main__.py
from __future__ import annotations

import argparse
import sys
from typing import Any, Optional

from pgclient import __version__
from pgclient.clients import PgApiClient, TenantsApi
from pgclient.context import CurrentContext, request_scope
from pgclient.domain import due_label, format_gap_label, remaining_due, rent_badges
from pgclient.errors import ApiError
from pgclient.logging_config import configure_logging
from pgclient.schemas import PAYMENT_METHODS
from pgclient.services import RentPaymentDialog


def _gap_row(g: Any) -> dict[str, Any]:
    return {
        "key": g.key,
        "label": format_gap_label(g.gap_start, g.gap_end),
        "cycle_id": g.cycle_id,
        "start": g.gap_start,
        "end": g.gap_end,
        "remaining_due": remaining_due(g),
    }


def _open_dialog(client: PgApiClient, tenant_id: int, rent_cycle_type: Optional[str]) -> RentPaymentDialog:
    tenant = TenantsApi(client).get(tenant_id)
    dlg = RentPaymentDialog(client, tenant, rent_cycle_type=rent_cycle_type)
    dlg.open()
    return dlg


def cmd_gaps(client: PgApiClient, args: argparse.Namespace) -> int:
    dlg = _open_dialog(client, args.tenant_id, args.rent_cycle_type)
    print(
        {
            "ok": dlg.error is None,
            "error": dlg.error,
            "tenant": dlg.tenant.name,
            "due": due_label(dlg.tenant),
            "badges": [b.label for b in rent_badges(dlg.tenant)],
            "has_gaps": dlg.has_gaps,
            "gaps": [_gap_row(g) for g in dlg.gaps],
            "suggested": {"cycle_id": dlg.cycle_id, "start": dlg.start_date, "end": dlg.end_date}
            if not dlg.has_gaps
            else None,
        }
    )
    return 0 if dlg.error is None else 1


def cmd_next_period(client: PgApiClient, args: argparse.Namespace) -> int:
    dlg = _open_dialog(client, args.tenant_id, args.rent_cycle_type)
    sel = dlg.use_next_period()
    print(
        {
            "ok": sel is not None,
            "error": dlg.error,
            "cycle_id": dlg.cycle_id,
            "start": dlg.start_date,
            "end": dlg.end_date,
        }
    )
    return 0 if sel is not None else 1


def cmd_pay_rent(client: PgApiClient, args: argparse.Namespace) -> int:
    dlg = _open_dialog(client, args.tenant_id, args.rent_cycle_type)
    if args.gap:
        try:
            dlg.select_gap(args.gap)
        except KeyError:
            print({"ok": False, "error": f"No gap with key {args.gap!r}"})
            return 1
    elif args.next_period:
        dlg.use_next_period()

    dlg.amount_paid = args.amount
    if args.rent_amount is not None:
        dlg.actual_rent_amount = args.rent_amount
    if args.date:
        dlg.payment_date = args.date
    dlg.payment_method = args.method
    dlg.remarks = args.remarks or ""

    out = dlg.submit()
    print(
        {
            "ok": out.ok,
            "status": out.status,
            "field": out.field,
            "message": out.message,
            "payment_id": getattr(out.data, "s_no", None),
            "due": due_label(dlg.tenant),
        }
    )
    return 0 if out.ok else 1


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="pgclient")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--base-url", default=None)
    p.add_argument("--pg-location-id", type=int, default=None)
    p.add_argument("--rent-cycle-type", choices=["CALENDAR", "MIDMONTH"], default=None)
    sub = p.add_subparsers(dest="command", required=True)

    g = sub.add_parser("gaps", help="list unpaid/underpaid rent cycles")
    g.add_argument("tenant_id", type=int)
    g.set_defaults(func=cmd_gaps)

    n = sub.add_parser("next-period", help="show the next uncovered rent cycle")
    n.add_argument("tenant_id", type=int)
    n.set_defaults(func=cmd_next_period)

    r = sub.add_parser("pay-rent", help="record a rent payment")
    r.add_argument("tenant_id", type=int)
    r.add_argument("--amount", required=True)
    r.add_argument("--rent-amount", default=None)
    r.add_argument("--date", default=None)
    r.add_argument("--method", default="CASH", choices=list(PAYMENT_METHODS))
    r.add_argument("--remarks", default=None)
    which = r.add_mutually_exclusive_group()
    which.add_argument("--gap", default=None, help="gap key as printed by `gaps`")
    which.add_argument("--next-period", action="store_true")
    r.set_defaults(func=cmd_pay_rent)

    args = p.parse_args(argv)
    configure_logging()

    ctx = CurrentContext.from_settings()
    if args.pg_location_id is not None:
        ctx = ctx.with_location(args.pg_location_id)

    with request_scope(), PgApiClient(ctx, base_url=args.base_url) as client:
        try:
            return int(args.func(client, args))
        except ApiError as e:
            print({"ok": False, "error": e.message, "status_code": e.status_code})
            return 1


if __name__ == "__main__":
    sys.exit(main())
