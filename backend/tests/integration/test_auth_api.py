"""Integration tests for authentication endpoints."""

from __future__ import annotations

from tests.factories import AccountPayloadFactory
from tests.helpers.assertions import assert_error


def test_register_and_login(client) -> None:
    """A user can register then obtain a JWT by logging in."""

    payload = AccountPayloadFactory()

    # Register
    resp = client.post("/api/v1/register", json=payload)
    assert resp.status_code == 201
    assert resp.get_json() == {"success": True, "message": "User registered successfully!"}

    # Login
    resp = client.post(
        "/api/v1/login", json={"email": payload["email"], "password": payload["password"]}
    )
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["success"] is True
    assert data["message"] == "User successfully logged in!"
    assert data["accessToken"]


def test_login_token_carries_email_and_role(app, client) -> None:
    from flask_jwt_extended import decode_token

    payload = AccountPayloadFactory()
    client.post("/api/v1/register", json=payload)

    token = client.post("/api/v1/login", json=payload).get_json()["accessToken"]

    claims = decode_token(token)
    assert claims["sub"] == payload["email"]
    assert claims["email"] == payload["email"]
    assert claims["role"] == "user"


def test_register_duplicate_email_is_rejected(client) -> None:
    payload = AccountPayloadFactory()
    assert client.post("/api/v1/register", json=payload).status_code == 201

    resp = client.post("/api/v1/register", json={**payload, "password": "another"})

    assert_error(resp, 400, "User already exist!!!")


def test_login_failures_are_indistinguishable(client) -> None:
    payload = AccountPayloadFactory()
    client.post("/api/v1/register", json=payload)

    wrong_pw = client.post("/api/v1/login", json={"email": payload["email"], "password": "nope"})
    unknown = client.post(
        "/api/v1/login", json={"email": "ghost@example.com", "password": payload["password"]}
    )

    body_a = assert_error(wrong_pw, 401, "Invalid email or password")
    body_b = assert_error(unknown, 401, "Invalid email or password")
    assert body_a["code"] == body_b["code"] == "unauthorized"


def test_register_missing_fields_is_a_validation_error(client) -> None:
    resp = client.post("/api/v1/register", json={"email": "x@example.com"})

    body = assert_error(resp, 400)
    assert body["code"] == "validation_error"
    assert set(body["errors"]) == {"username", "password"}


def test_login_malformed_json_is_rejected(client) -> None:
    resp = client.post("/api/v1/login", data="{not json", content_type="application/json")

    assert_error(resp, 400, "Malformed JSON body")


def _insert_legacy_account(database, email: str, digest: str) -> None:
    database["users"].insert_one(
        {"username": "legacy", "email": email, "password": digest, "role": "user"}
    )


def test_login_with_bcrypt_digest_from_previous_backend(client, database) -> None:
    import bcrypt

    digest = bcrypt.hashpw(b"pw", bcrypt.gensalt(4)).decode()
    _insert_legacy_account(database, "old@example.com", digest)

    ok = client.post("/api/v1/login", json={"email": "old@example.com", "password": "pw"})
    wrong = client.post("/api/v1/login", json={"email": "old@example.com", "password": "nope"})

    assert ok.status_code == 200
    assert ok.get_json()["accessToken"]
    assert_error(wrong, 401, "Invalid email or password")


def test_login_with_unreadable_digest_is_unauthorized(client, database) -> None:
    _insert_legacy_account(database, "broken@example.com", "not-a-digest")

    resp = client.post("/api/v1/login", json={"email": "broken@example.com", "password": "pw"})

    assert_error(resp, 401, "Invalid email or password")


def test_legacy_mixed_case_account_can_log_in_and_blocks_its_twin(client, database) -> None:
    from werkzeug.security import generate_password_hash

    _insert_legacy_account(
        database, "Mixed@Example.com", generate_password_hash("pw", method="pbkdf2:sha256:1000")
    )

    login = client.post("/api/v1/login", json={"email": "mixed@example.com", "password": "pw"})
    twin = client.post(
        "/api/v1/register",
        json={"username": "twin", "email": "mixed@example.com", "password": "other"},
    )

    assert login.status_code == 200
    assert_error(twin, 400, "User already exist!!!")


def test_register_with_null_body_is_a_validation_error(client) -> None:
    resp = client.post("/api/v1/register", data="null", content_type="application/json")

    body = assert_error(resp, 400)
    assert body["code"] == "validation_error"
