from __future__ import annotations


def test_register_login_and_profile_flow(client) -> None:
    register_payload = {"email": "Tester@Example.com", "password": "SecretPass123", "name": " Test User "}
    register_response = client.post("/api/auth/register", json=register_payload)
    assert register_response.status_code == 201
    body = register_response.json()
    assert body["token_type"] == "bearer"
    assert body["access_token"]
    assert body["user"]["email"] == "tester@example.com"
    assert body["user"]["name"] == "Test User"
    assert "password" not in body["user"]

    login_response = client.post(
        "/api/auth/login",
        json={"email": "tester@example.com", "password": "SecretPass123"},
    )
    assert login_response.status_code == 200
    token = login_response.json()["access_token"]

    headers = {"Authorization": f"Bearer {token}"}
    me = client.get("/api/users/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["email"] == "tester@example.com"
    assert me.json()["role"] == "user"


def test_duplicate_email_is_rejected(client, register) -> None:
    register("dup@example.com")
    response = client.post(
        "/api/auth/register",
        json={"email": "DUP@example.com", "password": "SecretPass123", "name": "Again"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "User already exists"


def test_register_ignores_admin_fields(client) -> None:
    response = client.post(
        "/api/auth/register",
        json={"email": "evil@example.com", "password": "SecretPass123", "name": "Evil", "role": "admin"},
    )
    assert response.status_code == 201
    assert response.json()["user"]["role"] == "user"


def test_login_with_wrong_password(client, register) -> None:
    register("user@example.com")
    response = client.post("/api/auth/login", json={"email": "user@example.com", "password": "nope-nope"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


def test_me_requires_token(client) -> None:
    assert client.get("/api/users/me").status_code == 401
    bad = client.get("/api/users/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert bad.status_code == 401


def test_profile_update_merges_skills(client, register) -> None:
    user = register("skills@example.com")
    first = client.put("/api/users/me", json={"skills": ["Python"], "bio": "Backend dev"}, headers=user["headers"])
    assert first.status_code == 200
    assert first.json()["user"]["skills"] == ["Python"]

    second = client.put("/api/users/me", json={"skills": ["python", "SQL"]}, headers=user["headers"])
    assert second.status_code == 200
    body = second.json()
    assert body["message"] == "Profile updated successfully"
    assert body["user"]["skills"] == ["Python", "SQL"]
    assert body["user"]["bio"] == "Backend dev"
    assert body["skills_added"] == 2
    assert body["total_skills"] == 2


def test_blank_name_is_ignored(client, register) -> None:
    user = register("name@example.com", name="Original")
    response = client.put("/api/users/me", json={"name": ""}, headers=user["headers"])
    assert response.status_code == 200
    assert response.json()["user"]["name"] == "Original"


def test_public_profile_hides_email(client, register) -> None:
    user = register("public@example.com", name="Public")
    viewer = register("viewer@example.com")
    response = client.get(f"/api/users/{user['id']}", headers=viewer["headers"])
    assert response.status_code == 200
    assert response.json()["name"] == "Public"
    assert "email" not in response.json()

    assert client.get("/api/users/9999").status_code == 404
