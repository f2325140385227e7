"""
Nainaland Backend — Message Endpoint Tests
============================================

What we test:
    ✅ Anyone can submit the contact form; messages start unread
    ✅ Contact form validation (email, phone, name length)
    ✅ The inbox, read flag and delete require an admin token
    ✅ isRead must be a real boolean
"""

import pytest


class TestSubmitMessage:

    @pytest.mark.asyncio
    async def test_submit_is_public(self, test_client, sample_message_payload):
        response = await test_client.post("/api/messages", json=sample_message_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["isRead"] is False
        assert body["createdAt"]
        assert body["email"] == "kavya@example.com"

    @pytest.mark.asyncio
    async def test_submit_ignores_client_read_flag(self, test_client, sample_message_payload):
        sample_message_payload["isRead"] = True
        response = await test_client.post("/api/messages", json=sample_message_payload)
        assert response.json()["isRead"] is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field,value",
        [
            ("email", "not-an-email"),
            ("phone", "12345"),
            ("name", "K"),
            ("message", ""),
        ],
    )
    async def test_submit_rejects_invalid_field(self, test_client, sample_message_payload, field, value):
        sample_message_payload[field] = value

        response = await test_client.post("/api/messages", json=sample_message_payload)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_submit_rejects_missing_field(self, test_client, sample_message_payload):
        del sample_message_payload["interest"]
        response = await test_client.post("/api/messages", json=sample_message_payload)
        assert response.status_code == 400


class TestInbox:

    @pytest.mark.asyncio
    async def test_list_requires_token(self, test_client):
        response = await test_client.get("/api/messages")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_list_and_get(self, test_client, auth_headers, sample_message_payload):
        await test_client.post("/api/messages", json=sample_message_payload)

        listing = await test_client.get("/api/messages", headers=auth_headers)
        assert [m["id"] for m in listing.json()] == [1]

        single = await test_client.get("/api/messages/1", headers=auth_headers)
        assert single.status_code == 200
        assert single.json()["name"] == "Kavya Rao"

    @pytest.mark.asyncio
    async def test_get_requires_token(self, test_client, sample_message_payload):
        await test_client.post("/api/messages", json=sample_message_payload)
        response = await test_client.get("/api/messages/1")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_get_unknown(self, test_client, auth_headers):
        response = await test_client.get("/api/messages/5", headers=auth_headers)
        assert response.status_code == 404


class TestReadStatus:

    @pytest.mark.asyncio
    async def test_mark_read_and_unread(self, test_client, auth_headers, sample_message_payload):
        await test_client.post("/api/messages", json=sample_message_payload)

        read = await test_client.put(
            "/api/messages/1/read", json={"isRead": True}, headers=auth_headers
        )
        assert read.status_code == 200
        assert read.json()["isRead"] is True

        unread = await test_client.put(
            "/api/messages/1/read", json={"isRead": False}, headers=auth_headers
        )
        assert unread.json()["isRead"] is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"isRead": "true"}, {"isRead": 1}, {}, {"isRead": None}])
    async def test_read_flag_must_be_boolean(self, test_client, auth_headers, sample_message_payload, body):
        await test_client.post("/api/messages", json=sample_message_payload)

        response = await test_client.put("/api/messages/1/read", json=body, headers=auth_headers)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_mark_unknown_message(self, test_client, auth_headers):
        response = await test_client.put(
            "/api/messages/3/read", json={"isRead": True}, headers=auth_headers
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_mark_requires_token(self, test_client, sample_message_payload):
        await test_client.post("/api/messages", json=sample_message_payload)
        response = await test_client.put("/api/messages/1/read", json={"isRead": True})
        assert response.status_code == 401


class TestDeleteMessage:

    @pytest.mark.asyncio
    async def test_delete(self, test_client, auth_headers, sample_message_payload):
        await test_client.post("/api/messages", json=sample_message_payload)

        response = await test_client.delete("/api/messages/1", headers=auth_headers)

        assert response.json() == {"success": True}
        assert (await test_client.get("/api/messages/1", headers=auth_headers)).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_unknown(self, test_client, auth_headers):
        response = await test_client.delete("/api/messages/1", headers=auth_headers)
        assert response.status_code == 404
