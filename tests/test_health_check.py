class TestHealthCheck:
    def test_health_returns_200(self, client):
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_reports_store_counts(self, client):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert data["services"]["store"] == {
            "status": "up",
            "phones": 3,
            "cart_lines": 0,
        }

    def test_health_counts_cart_lines(self, api_client):
        api_client.post("/cart", {"phoneId": 1, "quantity": 1}, format="json")
        data = api_client.get("/health").json()
        assert data["services"]["store"]["cart_lines"] == 1


class TestApiDocs:
    def test_schema_is_served(self, client):
        response = client.get("/api/schema")
        assert response.status_code == 200
