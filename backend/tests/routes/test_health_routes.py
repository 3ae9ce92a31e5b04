class TestHealthRoutes:
    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["service"] == "intertalent-portal-api"
        assert body["timestamp"].endswith("Z")

    def test_root(self, client):
        assert client.get("/").json()["docs"] == "/docs"

    def test_metrics_exposition(self, client, profile_factory):
        profile_factory()
        client.get("/api/v1/profiles")

        response = client.get("/api/v1/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "service_operation_duration_seconds" in response.text
        assert 'operation="search_profiles"' in response.text

    def test_unknown_route_is_problem_json(self, client):
        response = client.get("/api/v1/nope")
        assert response.status_code == 404
        assert response.json()["title"] == "Not Found"
