from httpx import AsyncClient


async def test_health(client: AsyncClient):
    """Test basic health check."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_health_ready(client: AsyncClient):
    """Test readiness check with database connection."""
    response = await client.get("/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready", "database": "connected"}


async def test_request_id_header(client: AsyncClient):
    response = await client.get("/health")
    assert response.headers["X-Request-ID"]
