from __future__ import annotations

import pytest

from conftest import ok
import pgclient.cli.__main__ as cli

JAN_GAP = {"gapId": "g-jan", "gapStart": "2024-01-01", "gapEnd": "2024-01-31", "cycle_id": 7, "rentDue": 9000, "totalPaid": 4000}


@pytest.fixture
def wired(backend, tenant_row, monkeypatch):
    backend.on("GET", "/tenants/5", ok(tenant_row))
    backend.on("GET", "/rent-payments/gaps/5", ok({"hasGaps": True, "gaps": [JAN_GAP]}))
    monkeypatch.setattr(cli, "PgApiClient", lambda ctx, base_url=None: backend.client(ctx))
    monkeypatch.setattr(cli, "configure_logging", lambda: None)
    return backend


def test_gaps_command_lists_labels(wired, capsys):
    assert cli.main(["gaps", "5"]) == 0
    out = capsys.readouterr().out
    assert "'label': 'Jan 2024'" in out
    assert "'remaining_due': 5000.0" in out


def test_pay_rent_for_gap(wired, capsys):
    wired.on("POST", "/rent-payments", ok({"s_no": 90, "amount_paid": 5000, "status": "PAID"}))
    assert cli.main(["--pg-location-id", "3", "pay-rent", "5", "--amount", "5000", "--gap", "g-jan", "--date", "2024-02-02"]) == 0

    (req,) = wired.sent("POST", "/rent-payments")
    body = wired.body(req)
    assert (body["cycle_id"], body["actual_rent_amount"], body["status"]) == (7, 5000.0, "PAID")
    assert req.headers["x-pg-location-id"] == "3"
    assert "'payment_id': 90" in capsys.readouterr().out


def test_pay_rent_without_period_fails_locally(wired, capsys):
    assert cli.main(["pay-rent", "5", "--amount", "5000"]) == 1
    assert wired.sent("POST", "/rent-payments") == []
    assert "Please select a rent period" in capsys.readouterr().out


def test_unknown_gap_key(wired, capsys):
    assert cli.main(["pay-rent", "5", "--amount", "5000", "--gap", "nope"]) == 1
    assert "No gap with key" in capsys.readouterr().out


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--version"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == "pgclient 0.1.0"
