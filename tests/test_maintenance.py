import pytest


@pytest.fixture
def maintenance_request(client, tenant):
    response = client.post(
        "/api/v1/maintenance",
        json={"title": "Leaking tap", "description": "Kitchen tap drips all night"},
        headers=tenant["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_create_request(client, tenant, unit, maintenance_request):
    assert maintenance_request["tenant_id"] == tenant["id"]
    assert maintenance_request["unit_id"] == unit["id"]
    assert maintenance_request["building_id"] == unit["building_id"]
    assert maintenance_request["priority"] == "medium"
    assert maintenance_request["status"] == "open"


def test_create_request_with_priority(client, tenant):
    response = client.post(
        "/api/v1/maintenance",
        json={"title": "No power", "description": "Sockets dead", "priority": "urgent"},
        headers=tenant["headers"],
    )
    assert response.status_code == 201
    assert response.json()["message"] == "Maintenance request submitted"
    assert response.json()["data"]["priority"] == "urgent"


def test_create_request_invalid_priority(client, tenant):
    response = client.post(
        "/api/v1/maintenance",
        json={"title": "No power", "description": "Sockets dead", "priority": "whenever"},
        headers=tenant["headers"],
    )
    assert response.status_code == 400


def test_create_request_requires_title_and_description(client, tenant):
    response = client.post(
        "/api/v1/maintenance", json={"title": "Only a title"}, headers=tenant["headers"]
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Title and description are required"


def test_create_request_without_unit(client, signup):
    walk_in = signup("walkin@example.com", "tenant", "Walk In")
    response = client.post(
        "/api/v1/maintenance",
        json={"title": "Leaking tap", "description": "Drips"},
        headers=walk_in["headers"],
    )
    assert response.status_code == 404
    assert response.json()["message"] == "No unit assigned to your account"


def test_list_requests(client, landlord, tenant, other_landlord, maintenance_request):
    for session in (tenant, landlord):
        response = client.get("/api/v1/maintenance", headers=session["headers"])
        assert response.status_code == 200
        data = response.json()["data"]
        assert [r["id"] for r in data] == [maintenance_request["id"]]
        assert data[0]["tenant_name"] == "Ada Okafor"
        assert data[0]["unit_number"] == "A1"
        assert data[0]["building_name"] == "Palm Court"

    response = client.get("/api/v1/maintenance", headers=other_landlord["headers"])
    assert response.json()["data"] == []


def test_update_status(client, landlord, maintenance_request):
    response = client.put(
        f"/api/v1/maintenance/{maintenance_request['id']}/status",
        json={"status": "in_progress"},
        headers=landlord["headers"],
    )
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Request status updated"
    assert body["data"]["status"] == "in_progress"


def test_update_status_invalid(client, landlord, maintenance_request):
    response = client.put(
        f"/api/v1/maintenance/{maintenance_request['id']}/status",
        json={"status": "done-ish"},
        headers=landlord["headers"],
    )
    assert response.status_code == 400


def test_update_status_unknown_request(client, landlord):
    response = client.put(
        "/api/v1/maintenance/does-not-exist/status",
        json={"status": "resolved"},
        headers=landlord["headers"],
    )
    assert response.status_code == 404
    assert response.json()["message"] == "Request not found"


def test_update_status_foreign_building(client, other_landlord, maintenance_request):
    response = client.put(
        f"/api/v1/maintenance/{maintenance_request['id']}/status",
        json={"status": "resolved"},
        headers=other_landlord["headers"],
    )
    assert response.status_code == 403
    assert response.json()["message"] == "Not your building"


def test_update_status_is_landlord_only(client, tenant, maintenance_request):
    response = client.put(
        f"/api/v1/maintenance/{maintenance_request['id']}/status",
        json={"status": "closed"},
        headers=tenant["headers"],
    )
    assert response.status_code == 403
