def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"name": "LeaseDesk API", "version": "1.0.0"}


def test_signup_creates_profile_and_session(client):
    response = client.post(
        "/api/v1/auth/signup",
        json={
            "email": "Landlord@Example.com",
            "password": "secret123",
            "full_name": "Lola Adeyemi",
            "role": "landlord",
        },
    )
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Account created successfully"
    data = body["data"]
    assert data["access_token"]
    assert data["refresh_token"]
    assert data["token_type"] == "bearer"
    assert data["expires_in"] == 3600
    assert data["user"]["role"] == "landlord"
    assert data["user"]["email"] == "landlord@example.com"
    assert data["user"]["full_name"] == "Lola Adeyemi"


def test_signup_missing_fields(client):
    response = client.post("/api/v1/auth/signup", json={"email": "a@example.com"})
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "bad_request"
    assert body["message"] == "Email, password, full_name, and role are required"


def test_signup_rejects_unknown_role(client):
    response = client.post(
        "/api/v1/auth/signup",
        json={"email": "a@example.com", "password": "pw", "full_name": "A", "role": "admin"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Role must be 'landlord' or 'tenant'"


def test_signup_rejects_malformed_email(client):
    response = client.post(
        "/api/v1/auth/signup",
        json={"email": "not-an-email", "password": "pw", "full_name": "A", "role": "tenant"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request body"


def test_signup_duplicate_email(client, landlord):
    response = client.post(
        "/api/v1/auth/signup",
        json={
            "email": "LANDLORD@example.com",
            "password": "another",
            "full_name": "Someone Else",
            "role": "tenant",
        },
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Signup failed: User already registered"


def test_login(client, landlord):
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "landlord@example.com", "password": "secret123"},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["user"]["id"] == landlord["id"]
    assert data["access_token"]


def test_login_wrong_password(client, landlord):
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "landlord@example.com", "password": "wrong"},
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


def test_login_unknown_user(client):
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "nobody@example.com", "password": "secret123"},
    )
    assert response.status_code == 401


def test_login_missing_fields(client):
    response = client.post("/api/v1/auth/login", json={"email": "landlord@example.com"})
    assert response.status_code == 400
    assert response.json()["message"] == "Email and password are required"


def test_refresh_issues_new_session(client, landlord):
    response = client.post(
        "/api/v1/auth/refresh", json={"refresh_token": landlord["refresh_token"]}
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["user"]["id"] == landlord["id"]
    assert data["access_token"]


def test_refresh_rejects_access_token(client, landlord):
    response = client.post("/api/v1/auth/refresh", json={"refresh_token": landlord["token"]})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired refresh token"


def test_refresh_requires_token(client):
    response = client.post("/api/v1/auth/refresh", json={})
    assert response.status_code == 400


def test_me(client, landlord):
    response = client.get("/api/v1/auth/me", headers=landlord["headers"])
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == landlord["id"]
    assert data["role"] == "landlord"


def test_me_without_header(client):
    response = client.get("/api/v1/auth/me")
    assert response.status_code == 401
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "unauthorized"
    assert body["message"] == "Missing authorization header"


def test_me_with_wrong_scheme(client, landlord):
    response = client.get("/api/v1/auth/me", headers={"Authorization": f"Token {landlord['token']}"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid authorization format"


def test_me_with_garbage_token(client):
    response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


def test_me_with_refresh_token(client, landlord):
    response = client.get(
        "/api/v1/auth/me", headers={"Authorization": f"Bearer {landlord['refresh_token']}"}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


def test_role_guard(client, signup):
    tenant = signup("walkin@example.com", "tenant", "Walk In")
    response = client.get("/api/v1/buildings", headers=tenant["headers"])
    assert response.status_code == 403
    body = response.json()
    assert body["error"] == "forbidden"
    assert body["message"] == "Insufficient permissions"


def test_unknown_route_uses_envelope(client):
    response = client.get("/api/v1/nothing-here")
    assert response.status_code == 404
    assert response.json()["success"] is False
