"""
Nainaland Backend — Property Endpoint Tests
=============================================

What we test:
    ✅ Public listing, filters and detail in camelCase wire format
    ✅ Admin create/update/delete and their 401/400/404 paths
"""

import pytest


class TestListProperties:

    @pytest.mark.asyncio
    async def test_list_all(self, test_client):
        response = await test_client.get("/api/properties")

        assert response.status_code == 200
        body = response.json()
        assert [p["id"] for p in body] == [1, 2, 3, 4, 5, 6]

    @pytest.mark.asyncio
    async def test_wire_format_is_camel_case(self, test_client):
        response = await test_client.get("/api/properties/1")
        prop = response.json()

        assert set(prop) == {
            "id", "title", "description", "price", "location", "size", "sizeUnit",
            "features", "images", "isFeatured", "propertyType", "createdAt",
        }
        assert prop["sizeUnit"] == "Guntha"
        assert prop["propertyType"] == "Residential"
        assert prop["isFeatured"] is True

    @pytest.mark.asyncio
    async def test_filter_by_type(self, test_client):
        response = await test_client.get("/api/properties", params={"type": "Agricultural"})

        assert response.status_code == 200
        body = response.json()
        assert [p["id"] for p in body] == [2, 6]
        assert all(p["propertyType"] == "Agricultural" for p in body)

    @pytest.mark.asyncio
    async def test_filter_featured(self, test_client):
        response = await test_client.get("/api/properties", params={"featured": "true"})
        assert [p["id"] for p in response.json()] == [1, 5]

    @pytest.mark.asyncio
    async def test_featured_false_returns_everything(self, test_client):
        response = await test_client.get("/api/properties", params={"featured": "false"})
        assert len(response.json()) == 6

    @pytest.mark.asyncio
    async def test_type_wins_over_featured(self, test_client):
        response = await test_client.get(
            "/api/properties", params={"type": "Commercial", "featured": "true"}
        )
        assert [p["id"] for p in response.json()] == [3]

    @pytest.mark.asyncio
    async def test_unknown_type_is_rejected(self, test_client):
        response = await test_client.get("/api/properties", params={"type": "Castle"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_type_with_no_listings(self, test_client):
        response = await test_client.get("/api/properties", params={"type": "FarmHouse"})
        assert response.status_code == 200
        assert response.json() == []


class TestGetProperty:

    @pytest.mark.asyncio
    async def test_get_unknown(self, test_client):
        response = await test_client.get("/api/properties/999")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert body["request_id"]

    @pytest.mark.asyncio
    async def test_get_non_numeric_id(self, test_client):
        response = await test_client.get("/api/properties/abc")
        assert response.status_code == 400


class TestCreateProperty:

    @pytest.mark.asyncio
    async def test_create_requires_token(self, test_client, sample_property_payload):
        response = await test_client.post("/api/properties", json=sample_property_payload)
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_create(self, test_client, auth_headers, sample_property_payload):
        response = await test_client.post(
            "/api/properties", json=sample_property_payload, headers=auth_headers
        )

        assert response.status_code == 201
        created = response.json()
        assert created["id"] == 7
        assert created["createdAt"]
        for key, value in sample_property_payload.items():
            assert created[key] == value

        fetched = await test_client.get("/api/properties/7")
        assert fetched.json() == created

    @pytest.mark.asyncio
    async def test_create_missing_required_field(self, test_client, auth_headers, sample_property_payload):
        del sample_property_payload["propertyType"]

        response = await test_client.post(
            "/api/properties", json=sample_property_payload, headers=auth_headers
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert any("propertyType" in err["loc"] for err in body["details"])

    @pytest.mark.asyncio
    async def test_create_rejects_non_positive_price(self, test_client, auth_headers, sample_property_payload):
        sample_property_payload["price"] = 0
        response = await test_client.post(
            "/api/properties", json=sample_property_payload, headers=auth_headers
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_rejects_unknown_size_unit(self, test_client, auth_headers, sample_property_payload):
        sample_property_payload["sizeUnit"] = "Hectare"
        response = await test_client.post(
            "/api/properties", json=sample_property_payload, headers=auth_headers
        )
        assert response.status_code == 400


class TestUpdateProperty:

    @pytest.mark.asyncio
    async def test_partial_update(self, test_client, auth_headers):
        before = (await test_client.get("/api/properties/2")).json()

        response = await test_client.put(
            "/api/properties/2", json={"price": 9_500_000}, headers=auth_headers
        )

        assert response.status_code == 200
        after = response.json()
        assert after["price"] == 9_500_000
        assert {k: v for k, v in after.items() if k != "price"} == {
            k: v for k, v in before.items() if k != "price"
        }

    @pytest.mark.asyncio
    async def test_update_cannot_change_id_or_created_at(self, test_client, auth_headers):
        before = (await test_client.get("/api/properties/2")).json()

        response = await test_client.put(
            "/api/properties/2",
            json={"id": 77, "createdAt": "2000-01-01T00:00:00Z", "isFeatured": True},
            headers=auth_headers,
        )

        after = response.json()
        assert after["id"] == 2
        assert after["createdAt"] == before["createdAt"]
        assert after["isFeatured"] is True

    @pytest.mark.asyncio
    async def test_update_unknown(self, test_client, auth_headers):
        response = await test_client.put(
            "/api/properties/999", json={"price": 1}, headers=auth_headers
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_invalid_value(self, test_client, auth_headers):
        response = await test_client.put(
            "/api/properties/1", json={"propertyType": "Castle"}, headers=auth_headers
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_requires_token(self, test_client):
        response = await test_client.put("/api/properties/1", json={"price": 1})
        assert response.status_code == 401


class TestDeleteProperty:

    @pytest.mark.asyncio
    async def test_delete(self, test_client, auth_headers):
        response = await test_client.delete("/api/properties/3", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert (await test_client.get("/api/properties/3")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_unknown(self, test_client, auth_headers):
        response = await test_client.delete("/api/properties/999", headers=auth_headers)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_requires_token(self, test_client):
        response = await test_client.delete("/api/properties/1")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_deleted_id_is_not_reused(self, test_client, auth_headers, sample_property_payload):
        await test_client.delete("/api/properties/6", headers=auth_headers)

        response = await test_client.post(
            "/api/properties", json=sample_property_payload, headers=auth_headers
        )
        assert response.json()["id"] == 7
