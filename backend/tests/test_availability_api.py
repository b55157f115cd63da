"""Availability page API tests."""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest

pytestmark = pytest.mark.asyncio


async def test_availability_view_lists_rows_and_cells(app_context) -> None:
    client = app_context["client"]
    slot_ids = app_context["slot_ids"]
    court_a = str(app_context["court_a_id"])
    court_b = str(app_context["court_b_id"])

    response = await client.get(
        "/api/v1/availability", params={"resourceId": court_a, "date": "2025-11-11"}
    )

    assert response.status_code == 200
    view = response.json()
    assert view["business_id"] == str(app_context["business_id"])
    assert [resource["name"] for resource in view["resources"]] == [
        "Court A",
        "Court B",
    ]
    assert view["selected_resource_id"] == court_a
    assert view["selected_date"] == "2025-11-11"
    assert view["disabled_days"] == [1]
    assert view["selected_date_disabled"] is False
    assert view["no_slots"] is False
    assert view["error"] is None

    rows = view["rows"]
    assert len(rows) == 4
    first = rows[0]
    assert Decimal(first["price"]) == Decimal("20")
    assert first["cells"] == [
        {"resource_id": court_a, "state": "available", "slot_id": str(slot_ids["a_0900"])},
        {"resource_id": court_b, "state": "booked", "slot_id": str(slot_ids["b_0900"])},
    ]
    assert rows[1]["cells"][1] == {
        "resource_id": court_b,
        "state": "unavailable",
        "slot_id": None,
    }
    assert rows[2]["price"] is None
    assert Decimal(view["total"]) == Decimal("0")


async def test_availability_replays_selected_slots(app_context) -> None:
    client = app_context["client"]
    slot_ids = app_context["slot_ids"]

    response = await client.get(
        "/api/v1/availability",
        params=[
            ("resourceId", str(app_context["court_a_id"])),
            ("date", "2025-11-11"),
            ("slotIds", str(slot_ids["a_0900"])),
            ("slotIds", str(slot_ids["b_0900"])),
        ],
    )

    assert response.status_code == 200
    view = response.json()
    assert view["selected_slot_ids"] == [str(slot_ids["a_0900"])]
    assert Decimal(view["total"]) == Decimal("20.00")
    assert view["rows"][0]["cells"][0]["state"] == "selected"


async def test_availability_for_day_without_slots(app_context) -> None:
    response = await app_context["client"].get(
        "/api/v1/availability",
        params={"resourceId": str(app_context["court_b_id"]), "date": "2025-12-01"},
    )

    assert response.status_code == 200
    view = response.json()
    assert view["rows"] == []
    assert view["no_slots"] is True
    assert view["error"] is None
    assert view["disabled_days"] == []


async def test_availability_unknown_resource_returns_404(app_context) -> None:
    response = await app_context["client"].get(
        "/api/v1/availability",
        params={"resourceId": str(uuid.uuid4()), "date": "2025-11-11"},
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Resource not found"


async def test_availability_without_resource_is_empty(app_context) -> None:
    response = await app_context["client"].get(
        "/api/v1/availability", params={"date": "2025-11-11"}
    )

    assert response.status_code == 200
    view = response.json()
    assert view["resources"] == []
    assert view["selected_resource_id"] is None


async def test_availability_rejects_malformed_date(app_context) -> None:
    response = await app_context["client"].get(
        "/api/v1/availability",
        params={"resourceId": str(app_context["court_a_id"]), "date": "11/11/2025"},
    )

    assert response.status_code == 422


async def test_price_selection(app_context) -> None:
    slot_ids = app_context["slot_ids"]

    response = await app_context["client"].post(
        "/api/v1/availability/selection",
        json={
            "resource_id": str(app_context["court_a_id"]),
            "date": "2025-11-11",
            "slot_ids": [
                str(slot_ids["a_1000"]),
                str(slot_ids["a_0900"]),
                str(slot_ids["b_0900"]),
                str(slot_ids["a_next_day"]),
            ],
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["selected_slot_ids"] == [
        str(slot_ids["a_0900"]),
        str(slot_ids["a_1000"]),
    ]
    assert body["rejected_slot_ids"] == [
        str(slot_ids["b_0900"]),
        str(slot_ids["a_next_day"]),
    ]
    assert Decimal(body["total"]) == Decimal("45.00")


async def test_price_selection_unpriced_slot_counts_as_zero(app_context) -> None:
    slot_ids = app_context["slot_ids"]

    response = await app_context["client"].post(
        "/api/v1/availability/selection",
        json={
            "resource_id": str(app_context["court_b_id"]),
            "date": "2025-11-11",
            "slot_ids": [str(slot_ids["b_1100"])],
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["selected_slot_ids"] == [str(slot_ids["b_1100"])]
    assert Decimal(body["total"]) == Decimal("0")


async def test_price_selection_unknown_resource(app_context) -> None:
    response = await app_context["client"].post(
        "/api/v1/availability/selection",
        json={"resource_id": str(uuid.uuid4()), "date": "2025-11-11", "slot_ids": []},
    )

    assert response.status_code == 404


async def test_availability_with_unreachable_store_shows_error(unreachable_store) -> None:
    response = await unreachable_store["client"].get(
        "/api/v1/availability",
        params={"resourceId": str(unreachable_store["court_a_id"]), "date": "2025-11-11"},
    )

    assert response.status_code == 200
    view = response.json()
    assert view["error"] == "Failed to load resources"
    assert view["error_kind"] == "data_access"
    assert view["rows"] == []


async def test_price_selection_with_unreachable_store(unreachable_store) -> None:
    response = await unreachable_store["client"].post(
        "/api/v1/availability/selection",
        json={
            "resource_id": str(unreachable_store["court_a_id"]),
            "date": "2025-11-11",
            "slot_ids": [str(unreachable_store["slot_ids"]["a_0900"])],
        },
    )

    assert response.status_code == 503
    assert response.json()["detail"] == "Failed to load resources"
