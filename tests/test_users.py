"""
User and profile endpoint tests — account creation, password change,
and the profile soft-delete lifecycle.
"""
import pytest
from httpx import AsyncClient


async def _create_user(client: AsyncClient, suffix: str) -> dict:
    resp = await client.post("/api/v1/users", json={
        "name": f"user_{suffix}",
        "email": f"{suffix}@example.com",
        "password": "password123",
    })
    assert resp.status_code == 201
    return resp.json()


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_and_get_user(async_client: AsyncClient):
    user = await _create_user(async_client, "newuser")
    assert user["name"] == "user_newuser"
    assert user["email"] == "newuser@example.com"
    assert "password" not in user

    resp = await async_client.get(f"/api/v1/users/{user['id']}")
    assert resp.status_code == 200
    assert resp.json() == user


@pytest.mark.asyncio
async def test_create_user_invalid_email_returns_400(async_client: AsyncClient):
    resp = await async_client.post("/api/v1/users", json={
        "name": "bad",
        "email": "not-an-email",
        "password": "password123",
    })
    assert resp.status_code == 400
    assert resp.json()["status"] == 400


@pytest.mark.asyncio
async def test_create_user_duplicate_email_returns_409(async_client: AsyncClient):
    await _create_user(async_client, "dup")
    resp = await async_client.post("/api/v1/users", json={
        "name": "other",
        "email": "DUP@example.com",
        "password": "password123",
    })
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_create_user_short_password_returns_422(async_client: AsyncClient):
    resp = await async_client.post("/api/v1/users", json={
        "name": "short",
        "email": "short@example.com",
        "password": "123",
    })
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_get_user_not_found(async_client: AsyncClient):
    resp = await async_client.get("/api/v1/users/99999")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_update_password(async_client: AsyncClient):
    user = await _create_user(async_client, "pw")

    resp = await async_client.patch(f"/api/v1/users/{user['id']}/password", json={
        "old_password": "wrong-password",
        "new_password": "newpassword1",
    })
    assert resp.status_code == 401

    resp = await async_client.patch(f"/api/v1/users/{user['id']}/password", json={
        "old_password": "password123",
        "new_password": "newpassword1",
    })
    assert resp.status_code == 200

    # Old password no longer verifies.
    resp = await async_client.patch(f"/api/v1/users/{user['id']}/password", json={
        "old_password": "password123",
        "new_password": "another-one",
    })
    assert resp.status_code == 401


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_profile_lifecycle(async_client: AsyncClient):
    user = await _create_user(async_client, "prof")

    resp = await async_client.post("/api/v1/profiles", json={
        "user_id": user["id"],
        "nickname": "prof_nick",
        "content": "about me",
    })
    assert resp.status_code == 201
    created = resp.json()
    assert created["user_id"] == user["id"]
    assert created["image_path"] is None
    profile_id = created["id"]

    resp = await async_client.patch(f"/api/v1/profiles/{profile_id}", json={"nickname": "renamed"})
    assert resp.status_code == 200
    assert resp.json()["nickname"] == "renamed"
    assert resp.json()["content"] == "about me"

    resp = await async_client.get(f"/api/v1/profiles/{profile_id}")
    assert resp.status_code == 200
    assert resp.json()["nickname"] == "renamed"

    assert (await async_client.delete(f"/api/v1/profiles/{profile_id}")).status_code == 204
    assert (await async_client.get(f"/api/v1/profiles/{profile_id}")).status_code == 404
    assert (await async_client.delete(f"/api/v1/profiles/{profile_id}")).status_code == 409


@pytest.mark.asyncio
async def test_create_profile_unknown_user(async_client: AsyncClient):
    resp = await async_client.post("/api/v1/profiles", json={"user_id": 99999, "nickname": "x"})
    assert resp.status_code == 404
