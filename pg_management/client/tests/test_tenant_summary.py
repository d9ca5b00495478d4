from __future__ import annotations

from pgclient.domain import due_label, rent_badges, resolve_room_bed, room_label
from pgclient.schemas import Tenant


def _t(**kw) -> Tenant:
    return Tenant.model_validate({"s_no": 1, "pg_id": 3, **kw})


def test_due_label_prefers_pending_amount(tenant):
    assert due_label(tenant) == "Pending ₹5000"
    assert due_label(_t(rent_due_amount=1234.6)) == "Pending ₹1235"
    assert due_label(_t(pending_due_amount=0, rent_due_amount=900)) == ""
    assert due_label(_t()) == ""


def test_room_label_variants(tenant):
    assert room_label(tenant) == "Room 101 • Bed A"
    assert room_label(_t(rooms={"s_no": 11, "room_no": "101"})) == "Room 101"
    assert room_label(_t(room_id=11)) == "Room #11"
    assert room_label(_t()) == ""


def test_badges_for_partial_tenant(tenant):
    assert [b.key for b in rent_badges(tenant)] == ["adv_paid", "partial", "pending", "due"]
    assert rent_badges(tenant)[-1].label == "₹5000 DUE"


def test_badges_for_settled_tenant_without_advance():
    keys = [b.key for b in rent_badges(_t(is_rent_paid=True, is_advance_paid=False))]
    assert keys == ["rent_paid", "no_adv"]


def test_room_bed_falls_back_to_nested_rows():
    assert resolve_room_bed(_t(rooms={"s_no": 11}, beds={"s_no": 21})) == (11, 21)
    assert resolve_room_bed(_t(room_id=12, bed_id=22, rooms={"s_no": 11})) == (12, 22)
    assert resolve_room_bed(_t()) == (0, 0)
