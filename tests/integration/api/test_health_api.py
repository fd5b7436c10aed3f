import pytest


@pytest.mark.integration
class TestHealthEndpoints:

    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_ready_reports_database_and_cache(self, client):
        response = await client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "database": "ok", "cache": "ok"}

    async def test_ready_with_cache_down(self, client, fake_cache):
        fake_cache.fail = True

        response = await client.get("/ready")

        assert response.status_code == 200
        assert response.json()["cache"] == "unavailable"

    async def test_live(self, client):
        response = await client.get("/live")

        assert response.status_code == 200

    async def test_request_id_is_echoed(self, client):
        response = await client.get("/health", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"

    async def test_unknown_route_uses_error_envelope(self, client):
        response = await client.get("/nowhere")

        assert response.status_code == 404
        assert response.json()["data"] is None
        assert response.json()["errors"]["code"] == "HTTP_ERROR"
