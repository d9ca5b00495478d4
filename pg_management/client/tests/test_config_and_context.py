from __future__ import annotations

import json
import logging

import pytest

from pgclient.config import Settings
from pgclient.context import CurrentContext, get_request_id, request_scope
from pgclient.logging_config import JsonFormatter


def test_prod_refuses_plain_http():
    with pytest.raises(ValueError):
        Settings(app_env="prod", api_base_url="http://api.example.in")
    s = Settings(app_env="prod", api_base_url="https://api.example.in")
    assert s.api_base_url.startswith("https://")


def test_rent_cycle_type_is_normalized():
    assert Settings(default_rent_cycle_type="midmonth").default_rent_cycle_type == "MIDMONTH"
    with pytest.raises(ValueError):
        Settings(default_rent_cycle_type="WEEKLY")


def test_context_from_settings_and_location_switch():
    s = Settings(user_id=9, organization_id=1, pg_location_id=3, access_token="t")
    ctx = CurrentContext.from_settings(s)
    assert ctx.headers()["x-pg-location-id"] == "3"
    moved = ctx.with_location(4)
    assert moved.headers()["x-pg-location-id"] == "4"
    assert moved.user_id == 9
    assert ctx.pg_location_id == 3


def test_request_scope_resets():
    assert get_request_id() is None
    with request_scope() as rid:
        assert get_request_id() == rid
    assert get_request_id() is None


def test_json_formatter_carries_request_id_and_extras():
    record = logging.LogRecord("pgclient.test", logging.INFO, __file__, 1, "rent payment recorded", None, None)
    record.tenant_id = 5
    with request_scope("rid-7"):
        line = json.loads(JsonFormatter().format(record))
    assert line["request_id"] == "rid-7"
    assert line["tenant_id"] == 5
    assert line["message"] == "rent payment recorded"


def test_json_formatter_masks_bearer_tokens():
    record = logging.LogRecord(
        "pgclient.http", logging.WARNING, __file__, 1, "sent Authorization: %s", ("Bearer eyJhbGciOi.abc-123",), None
    )
    record.payment_id = 90
    line = json.loads(JsonFormatter().format(record))
    assert line["message"] == "sent Authorization: Bearer ***"
    assert "eyJ" not in json.dumps(line)
    assert line["payment_id"] == 90
