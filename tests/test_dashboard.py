from datetime import date

from leasedesk.services.dashboard_service import next_due_date


def test_next_due_date_this_month():
    assert next_due_date(date(2026, 1, 15), None, date(2026, 3, 10)) == date(2026, 3, 15)


def test_next_due_date_on_the_day():
    assert next_due_date(date(2026, 1, 15), None, date(2026, 3, 15)) == date(2026, 3, 15)


def test_next_due_date_rolls_to_next_month():
    assert next_due_date(date(2026, 1, 15), None, date(2026, 3, 20)) == date(2026, 4, 15)


def test_next_due_date_clamps_short_months():
    assert next_due_date(date(2026, 1, 31), None, date(2026, 2, 10)) == date(2026, 2, 28)


def test_next_due_date_before_lease_start():
    assert next_due_date(date(2026, 5, 1), None, date(2026, 3, 1)) == date(2026, 5, 1)


def test_next_due_date_after_lease_end():
    assert next_due_date(date(2025, 1, 1), date(2025, 12, 31), date(2026, 1, 5)) is None


def test_next_due_date_without_lease_start():
    assert next_due_date(None, None, date(2026, 3, 1)) is None


def test_landlord_dashboard_empty(client, landlord):
    response = client.get("/api/v1/dashboard/landlord", headers=landlord["headers"])
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total_buildings"] == 0
    assert data["total_units"] == 0
    assert data["recent_payments"] == []
    assert data["active_buildings"] == []


def test_landlord_dashboard(client, landlord, building, unit, tenant, paystack_event):
    client.post(
        "/api/v1/units",
        json={"building_id": building["id"], "unit_number": "A2", "rent_amount": 9000000},
        headers=landlord["headers"],
    )
    paid = client.post(
        "/api/v1/payments/initialize",
        json={"unit_id": unit["id"], "period": "Feb 2026"},
        headers=tenant["headers"],
    ).json()["data"]["payment"]
    paystack_event("charge.success", paid["id"])
    client.post(
        "/api/v1/payments/initialize",
        json={"unit_id": unit["id"], "period": "Mar 2026"},
        headers=tenant["headers"],
    )

    response = client.get("/api/v1/dashboard/landlord", headers=landlord["headers"])
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total_buildings"] == 1
    assert data["total_units"] == 2
    assert data["occupied_units"] == 1
    assert data["total_collected"] == 15000000
    assert data["total_pending"] == 15000000
    assert [p["id"] for p in data["recent_payments"]] == [paid["id"]]
    assert len(data["active_buildings"]) == 1
    assert data["active_buildings"][0]["vacant_units"] == 1


def test_landlord_dashboard_is_landlord_only(client, tenant):
    response = client.get("/api/v1/dashboard/landlord", headers=tenant["headers"])
    assert response.status_code == 403


def test_tenant_dashboard_without_unit(client, signup):
    walk_in = signup("walkin@example.com", "tenant", "Walk In")
    response = client.get("/api/v1/dashboard/tenant", headers=walk_in["headers"])
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "No unit assigned. Accept an invitation to get started."
    assert body["data"]["profile"]["id"] == walk_in["id"]
    assert body["data"]["unit"] is None
    assert body["data"]["building"] is None
    assert body["data"]["total_paid"] == 0


def test_tenant_dashboard(client, tenant, unit, building):
    response = client.get("/api/v1/dashboard/tenant", headers=tenant["headers"])
    assert response.status_code == 200
    body = response.json()
    assert "message" not in body
    data = body["data"]
    assert data["unit"]["id"] == unit["id"]
    assert data["building"]["id"] == building["id"]
    assert data["total_paid"] == 0
    assert data["last_payment"] is None
    assert data["next_amount"] == 15000000


def test_tenant_dashboard_after_payment(client, tenant, unit, paystack_event):
    payment = client.post(
        "/api/v1/payments/initialize",
        json={"unit_id": unit["id"], "period": "Feb 2026"},
        headers=tenant["headers"],
    ).json()["data"]["payment"]
    paystack_event("charge.success", payment["id"])

    data = client.get("/api/v1/dashboard/tenant", headers=tenant["headers"]).json()["data"]
    assert data["total_paid"] == 15000000
    assert data["last_payment"]["id"] == payment["id"]
    assert data["last_payment"]["status"] == "successful"


def test_landlord_dashboard_excludes_other_landlords_payments(
    client, landlord, unit, tenant, other_landlord, paystack_event
):
    own = client.post(
        "/api/v1/payments/initialize",
        json={"unit_id": unit["id"], "period": "Feb 2026"},
        headers=tenant["headers"],
    ).json()["data"]["payment"]
    paystack_event("charge.success", own["id"])

    other_building = client.post(
        "/api/v1/buildings",
        json={"name": "Harbour View", "address": "3 Marina Road, Lagos Island", "total_units": 2},
        headers=other_landlord["headers"],
    ).json()["data"]
    other_unit = client.post(
        "/api/v1/units",
        json={"building_id": other_building["id"], "unit_number": "B1", "rent_amount": 8000000},
        headers=other_landlord["headers"],
    ).json()["data"]
    other_invitation = client.post(
        "/api/v1/invitations",
        json={"unit_id": other_unit["id"], "email": "second.tenant@example.com"},
        headers=other_landlord["headers"],
    ).json()["data"]
    response = client.post(
        "/api/v1/auth/accept-invite",
        json={
            "token": other_invitation["token"],
            "full_name": "Chidi Nwosu",
            "email": "second.tenant@example.com",
            "password": "tenantpass",
        },
    )
    assert response.status_code == 201, response.text
    other_tenant = {"Authorization": f"Bearer {response.json()['data']['access_token']}"}
    foreign = client.post(
        "/api/v1/payments/initialize",
        json={"unit_id": other_unit["id"], "period": "Feb 2026"},
        headers=other_tenant,
    ).json()["data"]["payment"]
    assert paystack_event("charge.success", foreign["id"]).status_code == 200

    data = client.get("/api/v1/dashboard/landlord", headers=landlord["headers"]).json()["data"]
    assert [p["id"] for p in data["recent_payments"]] == [own["id"]]
    assert data["total_collected"] == 15000000

    data = client.get("/api/v1/dashboard/landlord", headers=other_landlord["headers"]).json()["data"]
    assert [p["id"] for p in data["recent_payments"]] == [foreign["id"]]
    assert data["total_collected"] == 8000000
