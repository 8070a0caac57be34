from uuid import uuid4

import pytest
from httpx import AsyncClient


def as_admin(account):
    return {"X-Admin-Key": account.api_key}


@pytest.mark.asyncio
async def test_super_admin_creates_account(client: AsyncClient, super_admin, test_data):
    data = test_data.get_copy("bob")
    response = await client.post("/admin/accounts", json=data, headers=as_admin(super_admin))

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "bob"
    assert body["role"] == "admin"
    assert body["status"] == "active"
    assert body["api_key"].startswith("osprey-")
    assert "password_hash" not in body

    login = await client.post(
        "/auth/login", json={"username": "bob", "password": data["password"]}
    )
    assert login.status_code == 200

    fetched = await client.get(f"/admin/accounts/{body['id']}", headers=as_admin(super_admin))
    assert fetched.status_code == 200
    assert "api_key" not in fetched.json()


@pytest.mark.asyncio
async def test_create_duplicate_account(client: AsyncClient, super_admin, alice, test_data):
    data = test_data.get_copy("alice")
    data["email"] = "another@x.com"

    response = await client.post("/admin/accounts", json=data, headers=as_admin(super_admin))

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ACCOUNT_EXISTS"


@pytest.mark.asyncio
async def test_admin_cannot_create_account(client: AsyncClient, alice, test_data):
    response = await client.post(
        "/admin/accounts", json=test_data.get_copy("bob"), headers=as_admin(alice)
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_create_account_requires_credentials(client: AsyncClient, test_data):
    response = await client.post("/admin/accounts", json=test_data.get_copy("bob"))
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_get_account_access_rules(client: AsyncClient, super_admin, alice):
    own = await client.get(f"/admin/accounts/{alice.id}", headers=as_admin(alice))
    assert own.status_code == 200
    assert own.json()["username"] == "alice"

    other = await client.get(f"/admin/accounts/{super_admin.id}", headers=as_admin(alice))
    assert other.status_code == 403

    missing = await client.get(f"/admin/accounts/{uuid4()}", headers=as_admin(super_admin))
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "ACCOUNT_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_own_account(client: AsyncClient, alice):
    response = await client.patch(
        f"/admin/accounts/{alice.id}",
        json={"email": "alice@new.com", "password": "BrandNew123!"},
        headers=as_admin(alice),
    )

    assert response.status_code == 200
    assert response.json()["email"] == "alice@new.com"

    login = await client.post(
        "/auth/login", json={"username": "alice", "password": "BrandNew123!"}
    )
    assert login.status_code == 200


@pytest.mark.asyncio
async def test_admin_cannot_promote_self(client: AsyncClient, alice):
    response = await client.patch(
        f"/admin/accounts/{alice.id}", json={"role": "super_admin"}, headers=as_admin(alice)
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_update_conflict(client: AsyncClient, super_admin, alice):
    response = await client.patch(
        f"/admin/accounts/{alice.id}", json={"username": "root"}, headers=as_admin(super_admin)
    )

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_deactivate_account(client: AsyncClient, super_admin, alice, test_data):
    data = test_data.get("alice")
    login = await client.post(
        "/auth/login", json={"username": data["username"], "password": data["password"]}
    )
    token = login.json()["session"]["token"]

    response = await client.post(
        f"/admin/accounts/{alice.id}/deactivate", headers=as_admin(super_admin)
    )

    assert response.status_code == 200
    assert response.json()["account_id"] == alice.id

    by_session = await client.post("/auth/validate", headers={"X-Session-Token": token})
    by_key = await client.post("/auth/validate", headers=as_admin(alice))
    assert by_session.status_code == 401
    assert by_key.status_code == 401

    relogin = await client.post(
        "/auth/login", json={"username": data["username"], "password": data["password"]}
    )
    assert relogin.status_code == 401

    fetched = await client.get(f"/admin/accounts/{alice.id}", headers=as_admin(super_admin))
    assert fetched.json()["status"] == "inactive"


@pytest.mark.asyncio
async def test_deactivate_requires_super_admin(client: AsyncClient, alice):
    response = await client.post(
        f"/admin/accounts/{alice.id}/deactivate", headers=as_admin(alice)
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_revoke_all_sessions(client: AsyncClient, alice, test_data):
    data = test_data.get("alice")
    tokens = []
    for _ in range(2):
        login = await client.post(
            "/auth/login", json={"username": data["username"], "password": data["password"]}
        )
        tokens.append(login.json()["session"]["token"])

    response = await client.post(
        f"/admin/accounts/{alice.id}/sessions/revoke-all", headers=as_admin(alice)
    )

    assert response.status_code == 200
    assert response.json() == {
        "message": "Successfully revoked 2 session(s)",
        "revoked_count": 2,
    }
    for token in tokens:
        check = await client.post("/auth/validate", headers={"X-Session-Token": token})
        assert check.status_code == 401

    still_valid = await client.post("/auth/validate", headers=as_admin(alice))
    assert still_valid.status_code == 200


@pytest.mark.asyncio
async def test_prune_sessions(client: AsyncClient, super_admin, alice):
    forbidden = await client.post("/admin/sessions/prune", headers=as_admin(alice))
    assert forbidden.status_code == 403

    response = await client.post("/admin/sessions/prune", headers=as_admin(super_admin))
    assert response.status_code == 200
    assert response.json()["removed_count"] == 0
