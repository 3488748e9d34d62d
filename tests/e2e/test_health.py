"""End-to-end tests for health endpoints."""


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"
    assert "git_sha" in data


def test_api_test(client):
    response = client.get("/api/test")

    assert response.status_code == 200
    assert response.json()["message"] == "API working!"
