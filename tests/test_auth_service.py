from __future__ import annotations

from dataclasses import replace

import pytest

from portfolio.core.config import get_settings
from portfolio.core.security import hash_password, verify_password
from portfolio.services.auth_service import AuthService, InvalidCredentialsError


def test_hash_roundtrip_and_prefix():
    stored = hash_password("hunter2")
    assert stored.startswith("argon2$")
    assert verify_password("hunter2", stored) is True
    assert verify_password("wrong", stored) is False
    assert verify_password("hunter2", stored[len("argon2$"):]) is False
    assert verify_password("hunter2", "argon2$garbage") is False


def test_login_with_plain_password(settings_env):
    svc = AuthService(get_settings())
    assert svc.login("s3cret") == "test-admin-token"
    with pytest.raises(InvalidCredentialsError):
        svc.login("nope")
    with pytest.raises(InvalidCredentialsError):
        svc.login("")


def test_hash_takes_precedence_over_plain_password(settings_env):
    settings = replace(get_settings(), admin_password_hash=hash_password("from-hash"))
    svc = AuthService(settings)
    assert svc.check_password("from-hash") is True
    assert svc.check_password("s3cret") is False


def test_auth_endpoint_and_verify(client):
    bad = client.post("/api/admin/auth", json={"password": "nope"})
    assert bad.status_code == 401
    assert bad.json() == {"error": "Invalid password"}

    resp = client.post("/api/admin/auth", json={"password": "s3cret"})
    assert resp.status_code == 200
    token = resp.json()["token"]
    assert resp.json()["success"] is True

    assert client.get("/api/admin/verify", headers={"Authorization": f"Bearer {token}"}).json() == {"success": True}
    assert client.get("/api/admin/verify").status_code == 401
    assert client.get("/api/admin/verify", headers={"Authorization": f"Basic {token}"}).status_code == 401


def test_auth_endpoint_is_rate_limited(client):
    codes = [client.post("/api/admin/auth", json={"password": "nope"}).status_code for _ in range(11)]
    assert codes[:10] == [401] * 10
    assert codes[10] == 429
