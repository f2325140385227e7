"""
Nainaland Backend — Testimonial Endpoint Tests
"""

import pytest

NEW_TESTIMONIAL = {
    "name": "Suresh Patil",
    "location": "Belgaum",
    "message": "Smooth paperwork and honest advice on pricing.",
    "rating": 4,
    "image": "https://example.com/suresh.jpg",
}


class TestTestimonialEndpoints:

    @pytest.mark.asyncio
    async def test_list(self, test_client):
        response = await test_client.get("/api/testimonials")

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 3
        assert body[2]["rating"] == 4.5
        assert set(body[0]) == {"id", "name", "location", "message", "rating", "image"}

    @pytest.mark.asyncio
    async def test_get_unknown(self, test_client):
        response = await test_client.get("/api/testimonials/9")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_create(self, test_client, auth_headers):
        response = await test_client.post(
            "/api/testimonials", json=NEW_TESTIMONIAL, headers=auth_headers
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 4
        assert body["name"] == "Suresh Patil"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [-1, 5.5, "five"])
    async def test_create_rejects_bad_rating(self, test_client, auth_headers, rating):
        payload = dict(NEW_TESTIMONIAL, rating=rating)
        response = await test_client.post("/api/testimonials", json=payload, headers=auth_headers)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_requires_token(self, test_client):
        response = await test_client.post("/api/testimonials", json=NEW_TESTIMONIAL)
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_update(self, test_client, auth_headers):
        response = await test_client.put(
            "/api/testimonials/1", json={"rating": 4.5}, headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["rating"] == 4.5
        assert response.json()["name"] == "Priya Desai"

    @pytest.mark.asyncio
    async def test_update_unknown(self, test_client, auth_headers):
        response = await test_client.put(
            "/api/testimonials/9", json={"rating": 3}, headers=auth_headers
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete(self, test_client, auth_headers):
        response = await test_client.delete("/api/testimonials/2", headers=auth_headers)

        assert response.json() == {"success": True}
        assert (await test_client.get("/api/testimonials/2")).status_code == 404
