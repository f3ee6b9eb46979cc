"""Integration tests for the optional admin guard on mutations."""

from __future__ import annotations

import pytest

from portfolio_api.core.config import TestingConfig
from tests.helpers.assertions import assert_error


class GuardedConfig(TestingConfig):
    REQUIRE_ADMIN_FOR_WRITES = True


@pytest.fixture()
def app_config():
    return GuardedConfig


def test_write_without_token_is_unauthorized(client) -> None:
    resp = client.post("/api/v1/create-project", json={"title": "X"})

    assert_error(resp, 401)


def test_write_with_user_role_is_forbidden(client, issue_token) -> None:
    token = issue_token(email="user@example.com", role="user")

    resp = client.post(
        "/api/v1/create-blog",
        json={"title": "X"},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert_error(resp, 403, "Admin role required")


def test_write_with_admin_role_succeeds(client, issue_token) -> None:
    headers = {"Authorization": f"Bearer {issue_token()}"}

    resp = client.post("/api/v1/create-project", json={"title": "X"}, headers=headers)
    assert resp.status_code == 201
    project_id = resp.get_json()["projectId"]

    assert client.put(f"/api/v1/update-project/{project_id}", json={"t": 1}, headers=headers).status_code == 200
    assert client.delete(f"/api/v1/projects/{project_id}", headers=headers).status_code == 200


def test_reads_and_contact_stay_public(client) -> None:
    assert client.get("/api/v1/projects").status_code == 200
    assert client.get("/api/v1/blogs").status_code == 200
    assert client.post("/api/v1/save-contact", json={"name": "n"}).status_code == 201


def test_guard_off_by_default() -> None:
    assert TestingConfig.REQUIRE_ADMIN_FOR_WRITES is False
