"""
Follow request endpoint tests.

Requests are directed (sender -> receiver), start PENDING, and are
answered exactly once.
"""
import pytest
from httpx import AsyncClient


async def _create_profiles(client: AsyncClient, suffix: str, count: int = 2) -> list[int]:
    user_resp = await client.post("/api/v1/users", json={
        "name": f"f_{suffix}",
        "email": f"follow_{suffix}@example.com",
        "password": "password123",
    })
    user_id = user_resp.json()["id"]
    ids = []
    for i in range(count):
        resp = await client.post("/api/v1/profiles", json={
            "user_id": user_id,
            "nickname": f"{suffix}_{i}",
        })
        ids.append(resp.json()["id"])
    return ids


@pytest.mark.asyncio
async def test_send_and_accept_follow_request(async_client: AsyncClient):
    sender, receiver = await _create_profiles(async_client, "accept")

    resp = await async_client.post("/api/v1/followers", json={
        "sender_profile_id": sender,
        "receiver_profile_id": receiver,
    })
    assert resp.status_code == 201
    request = resp.json()
    assert request["status"] == "PENDING"

    resp = await async_client.patch(f"/api/v1/followers/{request['id']}", json={
        "request_sender_id": sender,
        "status": "ACCEPTED",
    })
    assert resp.status_code == 200
    assert resp.json()["status"] == "ACCEPTED"

    # Already answered.
    resp = await async_client.patch(f"/api/v1/followers/{request['id']}", json={
        "request_sender_id": sender,
        "status": "REJECTED",
    })
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_follow_request_policy(async_client: AsyncClient):
    sender, receiver = await _create_profiles(async_client, "policy")

    resp = await async_client.post("/api/v1/followers", json={
        "sender_profile_id": sender,
        "receiver_profile_id": sender,
    })
    assert resp.status_code == 400

    payload = {"sender_profile_id": sender, "receiver_profile_id": receiver}
    assert (await async_client.post("/api/v1/followers", json=payload)).status_code == 201
    assert (await async_client.post("/api/v1/followers", json=payload)).status_code == 409

    resp = await async_client.post("/api/v1/followers", json={
        "sender_profile_id": sender,
        "receiver_profile_id": 99999,
    })
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_update_status_wrong_sender(async_client: AsyncClient):
    sender, receiver = await _create_profiles(async_client, "wrong")
    request = (await async_client.post("/api/v1/followers", json={
        "sender_profile_id": sender,
        "receiver_profile_id": receiver,
    })).json()

    resp = await async_client.patch(f"/api/v1/followers/{request['id']}", json={
        "request_sender_id": receiver,
        "status": "ACCEPTED",
    })
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_update_status_unknown_value(async_client: AsyncClient):
    sender, receiver = await _create_profiles(async_client, "enum")
    request = (await async_client.post("/api/v1/followers", json={
        "sender_profile_id": sender,
        "receiver_profile_id": receiver,
    })).json()

    resp = await async_client.patch(f"/api/v1/followers/{request['id']}", json={
        "request_sender_id": sender,
        "status": "BLOCKED",
    })
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_list_followers(async_client: AsyncClient):
    a, b, c = await _create_profiles(async_client, "list", count=3)
    await async_client.post("/api/v1/followers", json={"sender_profile_id": a, "receiver_profile_id": b})
    await async_client.post("/api/v1/followers", json={"sender_profile_id": a, "receiver_profile_id": c})

    resp = await async_client.get("/api/v1/followers")
    assert resp.status_code == 200
    data = resp.json()
    assert [(f["sender_profile_id"], f["receiver_profile_id"]) for f in data] == [(a, c), (a, b)]
