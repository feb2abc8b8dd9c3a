# tests/test_auth.py
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from bloomly.models.core import Family
from bloomly.security import JWT_ALG, decode_token, hash_password, verify_password
from conftest import register


def test_health_needs_no_token(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}
    assert resp.headers["X-Content-Type-Options"] == "nosniff"


def test_register_returns_token_with_family_claims(client, db):
    token = register(client, email="Parent@Example.com")

    claims = decode_token(token, "test-secret")
    family = db.query(Family).one()
    assert claims.family_id == family.id
    assert claims.email == "parent@example.com"
    assert family.email == "parent@example.com"
    assert family.password_hash != "pw123"


def test_token_expires_after_seven_days(token):
    raw = jwt.decode(token, "test-secret", algorithms=[JWT_ALG])
    assert raw["exp"] - raw["iat"] == 7 * 24 * 3600


def test_register_requires_email_and_password(client):
    assert client.post("/auth/register", json={"email": "a@x.com"}).status_code == 400
    assert client.post("/auth/register", json={"password": "pw"}).status_code == 400
    assert client.post("/auth/register", json={"email": "", "password": "pw"}).status_code == 400


def test_register_duplicate_email_is_case_insensitive(client):
    register(client, email="a@x.com")
    resp = client.post("/auth/register", json={"email": "A@X.COM", "password": "other"})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "email exists?"}


def test_login_returns_token_for_same_family(client):
    reg = decode_token(register(client), "test-secret")

    resp = client.post("/auth/login", json={"email": "A@x.com", "password": "pw123"})
    assert resp.status_code == 200
    assert decode_token(resp.json()["token"], "test-secret").family_id == reg.family_id


def test_login_failures_are_indistinguishable(client):
    register(client)

    wrong_pw = client.post("/auth/login", json={"email": "a@x.com", "password": "nope"})
    unknown = client.post("/auth/login", json={"email": "b@x.com", "password": "pw123"})
    assert wrong_pw.status_code == unknown.status_code == 401
    assert wrong_pw.json() == unknown.json() == {"detail": "invalid credentials"}


def test_protected_route_without_token(client):
    resp = client.get("/children")
    assert resp.status_code == 401
    assert resp.json() == {"detail": "missing token"}


def test_protected_route_rejects_bad_tokens(client, token):
    forged = jwt.encode({"fid": "x", "exp": 9999999999}, "wrong-secret", algorithm=JWT_ALG)
    now = datetime.now(timezone.utc)
    expired = jwt.encode(
        {"fid": str(UUID(int=1)), "email": "a@x.com", "exp": now - timedelta(seconds=5)},
        "test-secret",
        algorithm=JWT_ALG,
    )
    for bad in ("garbage", forged, expired):
        resp = client.get("/children", headers={"Authorization": f"Bearer {bad}"})
        assert resp.status_code == 401
        assert resp.json() == {"detail": "invalid token"}

    # not a bearer scheme
    resp = client.get("/children", headers={"Authorization": f"Token {token}"})
    assert resp.status_code == 401


def test_password_hash_roundtrip():
    hashed = hash_password("s3cret")
    assert hashed.startswith("$2b$10$")
    assert verify_password("s3cret", hashed)
    assert not verify_password("s3cre", hashed)
    assert not verify_password("s3cret", "not-a-bcrypt-hash")


def test_login_with_missing_credentials_is_unauthorized(client):
    register(client)

    bodies = [
        {},
        {"email": "", "password": "pw123"},
        {"email": "a@x.com"},
        {"email": "a@x.com", "password": ""},
        {"password": "pw123"},
    ]
    for body in bodies:
        resp = client.post("/auth/login", json=body)
        assert resp.status_code == 401, body
        assert resp.json() == {"detail": "invalid credentials"}

    assert client.post("/auth/login").status_code == 401
