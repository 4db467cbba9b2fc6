from datetime import timedelta

from app.core.config import settings
from app.core.security import create_access_token


def login(client, email, password):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def test_login_returns_token(client):
    res = login(client, settings.DEFAULT_ADMIN_EMAIL, settings.DEFAULT_ADMIN_PASSWORD)
    assert res.status_code == 200
    body = res.json()
    assert body["token_type"] == "bearer"
    assert body["expires_in"] == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    assert body["user"]["email"] == settings.DEFAULT_ADMIN_EMAIL
    assert body["user"]["role"] == "admin"
    assert "hashed_password" not in body["user"]


def test_login_wrong_password(client):
    res = login(client, settings.DEFAULT_ADMIN_EMAIL, "not-the-password")
    assert res.status_code == 401
    assert res.json()["detail"] == "Invalid credentials"


def test_profile_requires_token(client):
    res = client.get("/api/auth/profile")
    assert res.status_code == 401
    assert res.json()["detail"] == "Access token required"


def test_profile_rejects_garbage_token(client):
    res = client.get("/api/auth/profile", headers={"Authorization": "Bearer not.a.jwt"})
    assert res.status_code == 401
    assert res.json()["detail"] == "Invalid token"


def test_profile_rejects_expired_token(client):
    token = create_access_token({"sub": "1"}, expires_delta=timedelta(minutes=-5))
    res = client.get("/api/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401
    assert res.json()["detail"] == "Token expired"


def test_profile(client, auth_headers):
    res = client.get("/api/auth/profile", headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["email"] == settings.DEFAULT_ADMIN_EMAIL
    assert res.json()["last_login"] is not None


def test_register_supervisor_and_permissions(client, auth_headers):
    new_user = {
        "email": "supervisor@community.org",
        "name": "Shift Supervisor",
        "password": "supervise123",
        "role": "supervisor",
    }
    res = client.post("/api/auth/register", json=new_user, headers=auth_headers)
    assert res.status_code == 201
    assert res.json()["role"] == "supervisor"

    duplicate = client.post("/api/auth/register", json=new_user, headers=auth_headers)
    assert duplicate.status_code == 409

    token = login(client, new_user["email"], new_user["password"]).json()["access_token"]
    supervisor_headers = {"Authorization": f"Bearer {token}"}

    forbidden = client.post("/api/auth/register", json={
        "email": "another@community.org",
        "name": "Another User",
        "password": "another123",
    }, headers=supervisor_headers)
    assert forbidden.status_code == 403
    assert forbidden.json()["detail"] == "Insufficient permissions"


def test_register_requires_auth(client):
    res = client.post("/api/auth/register", json={
        "email": "nobody@community.org",
        "name": "Nobody",
        "password": "password123",
    })
    assert res.status_code == 401


def test_change_password(client, auth_headers):
    wrong = client.put("/api/auth/change-password", json={
        "current_password": "incorrect",
        "new_password": "brand-new-pass",
    }, headers=auth_headers)
    assert wrong.status_code == 400

    res = client.put("/api/auth/change-password", json={
        "current_password": settings.DEFAULT_ADMIN_PASSWORD,
        "new_password": "brand-new-pass",
    }, headers=auth_headers)
    assert res.status_code == 200

    assert login(client, settings.DEFAULT_ADMIN_EMAIL, "brand-new-pass").status_code == 200
    assert login(client, settings.DEFAULT_ADMIN_EMAIL, settings.DEFAULT_ADMIN_PASSWORD).status_code == 401


def test_logout(client):
    res = client.post("/api/auth/logout")
    assert res.status_code == 200
