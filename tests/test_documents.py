LEASE_URL = "https://files.example.com/leases/a1.pdf"


def upload(client, session, file_url=LEASE_URL, **body):
    params = {"file_url": file_url} if file_url is not None else {}
    return client.post("/api/v1/documents", params=params, json=body, headers=session["headers"])


def test_landlord_uploads_to_building(client, landlord, building):
    response = upload(
        client, landlord, name="House rules", type="other", building_id=building["id"], file_size=2048
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Document uploaded successfully"
    data = body["data"]
    assert data["uploaded_by"] == landlord["id"]
    assert data["building_id"] == building["id"]
    assert data["unit_id"] is None
    assert data["file_url"] == LEASE_URL
    assert data["file_size"] == 2048


def test_landlord_uploads_to_unit_takes_its_building(client, landlord, unit):
    response = upload(client, landlord, name="Lease", type="lease_agreement", unit_id=unit["id"])
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["unit_id"] == unit["id"]
    assert data["building_id"] == unit["building_id"]


def test_upload_validation(client, landlord):
    response = upload(client, landlord, type="other")
    assert response.status_code == 400
    assert response.json()["message"] == "Name and type are required"

    response = upload(client, landlord, file_url=None, name="Lease", type="other")
    assert response.status_code == 400
    assert response.json()["message"] == "file_url is required"

    response = upload(client, landlord, name="Lease", type="photo")
    assert response.status_code == 400


def test_landlord_cannot_attach_to_foreign_building(client, other_landlord, building, unit):
    response = upload(client, other_landlord, name="Lease", type="other", building_id=building["id"])
    assert response.status_code == 403

    response = upload(client, other_landlord, name="Lease", type="other", unit_id=unit["id"])
    assert response.status_code == 403


def test_tenant_upload_is_attached_to_their_unit(client, tenant, unit):
    response = upload(client, tenant, name="Receipt", type="receipt")
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["unit_id"] == unit["id"]
    assert data["building_id"] == unit["building_id"]


def test_tenant_cannot_attach_to_another_unit(client, tenant):
    response = upload(client, tenant, name="Receipt", type="receipt", unit_id="some-other-unit")
    assert response.status_code == 403


def test_tenant_without_unit(client, signup):
    walk_in = signup("walkin@example.com", "tenant", "Walk In")
    response = upload(client, walk_in, name="Receipt", type="receipt")
    assert response.status_code == 404

    response = client.get("/api/v1/documents", headers=walk_in["headers"])
    assert response.status_code == 200
    assert response.json()["data"] == []


def test_list_documents(client, landlord, tenant, other_landlord, unit):
    lease = upload(client, landlord, name="Lease", type="lease_agreement", unit_id=unit["id"]).json()["data"]
    receipt = upload(client, tenant, name="Receipt", type="receipt").json()["data"]

    response = client.get("/api/v1/documents", headers=tenant["headers"])
    assert response.status_code == 200
    assert {d["id"] for d in response.json()["data"]} == {lease["id"], receipt["id"]}

    response = client.get("/api/v1/documents", headers=landlord["headers"])
    assert {d["id"] for d in response.json()["data"]} == {lease["id"], receipt["id"]}

    response = client.get("/api/v1/documents", headers=other_landlord["headers"])
    assert response.json()["data"] == []
