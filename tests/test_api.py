"""
Tests for the HTTP API surface
"""

from unittest import mock


class TestSearchCity:

    def test_mumbai(self, client):
        response = client.post("/api/search-city", json={"cityName": "Mumbai"})
        assert response.status_code == 200

        body = response.json()
        assert body["city"]["name"] == "Mumbai"
        assert body["city"]["state"] == "Maharashtra"
        assert len(body["weather"]["forecast"]) <= 7
        assert body["hotels"]
        assert set(body["cityInfo"]) >= {"historicalInfo", "localLanguages", "emergencyContacts", "news"}

    def test_alias_input(self, client):
        body = client.post("/api/search-city", json={"cityName": "  calcutta "}).json()
        assert body["city"]["name"] == "Kolkata"
        assert body["city"]["id"] == 5

    def test_blank_name_rejected(self, client):
        response = client.post("/api/search-city", json={"cityName": "   "})
        assert response.status_code == 400
        assert response.json() == {"message": "City name is required"}

    def test_missing_name_rejected(self, client):
        response = client.post("/api/search-city", json={})
        assert response.status_code == 400
        assert response.json() == {"message": "City name is required"}

    def test_malformed_body_rejected(self, client):
        response = client.post(
            "/api/search-city", content="not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert "message" in response.json()

    def test_unexpected_error_is_generic_500(self, client):
        aggregator = client.app.state.aggregator
        with mock.patch.object(aggregator, "search_city", side_effect=RuntimeError("secret detail")):
            response = client.post("/api/search-city", json={"cityName": "Mumbai"})

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to get travel information"}

    def test_offline_still_succeeds(self, offline_client):
        response = offline_client.post("/api/search-city", json={"cityName": "Chennai"})
        assert response.status_code == 200
        assert response.json()["cityInfo"]["news"][0]["source"] == "Local News"


class TestWeather:

    def test_unknown_city(self, client):
        response = client.get("/api/weather/999")
        assert response.status_code == 404
        assert response.json() == {"message": "City not found"}

    def test_known_city(self, client):
        body = client.get("/api/weather/1").json()
        assert body["cityId"] == 1
        assert set(body) == {
            "id", "cityId", "temperature", "description", "humidity", "windSpeed", "uvIndex", "forecast"
        }

    def test_non_numeric_id(self, client):
        response = client.get("/api/weather/mumbai")
        assert response.status_code == 400
        assert "message" in response.json()


class TestCityInfo:

    def test_unknown_city(self, client):
        response = client.get("/api/city-info/999")
        assert response.status_code == 404
        assert response.json() == {"message": "City not found"}

    def test_known_city(self, client):
        body = client.get("/api/city-info/3").json()
        assert body["cityId"] == 3
        assert body["localLanguages"] == ["Hindi", "English", "Kannada"]
        assert "news" not in body


class TestTransportation:

    def test_curated_city(self, client):
        body = client.get("/api/transportation/Bangalore").json()
        assert body["airports"][0]["code"] == "BLR"
        assert set(body) == {"trainStations", "busRoutes", "localTransport", "airports"}

    def test_generic_city(self, client):
        body = client.get("/api/transportation/nellore").json()
        assert body["trainStations"][0]["name"] == "Nellore Railway Station"

    def test_blank_name(self, client):
        response = client.get("/api/transportation/%20")
        assert response.status_code == 400
        assert response.json() == {"message": "City name is required"}


class TestSearchAnyCity:

    def test_found(self, client):
        response = client.post("/api/search-any-city", json={"cityName": "Goa"})
        assert response.status_code == 200
        assert response.json()["message"] == "Information for Goa loaded from Wikipedia and real-time sources"

    def test_not_found(self, offline_client):
        response = offline_client.post("/api/search-any-city", json={"cityName": "Atlantis"})
        assert response.status_code == 404
        assert response.json()["message"].startswith("Could not find information for Atlantis")

    def test_blank_name_rejected(self, client):
        response = client.post("/api/search-any-city", json={"cityName": ""})
        assert response.status_code == 400


class TestHealth:

    def test_health(self, client):
        body = client.get("/api/health").json()
        assert body["status"] == "healthy"
        assert body["cities"] == 8
        assert set(body) >= {"version", "errors", "timings", "resources"}
        assert "total_errors" in body["errors"]
        assert body["app"]["version"] == body["version"]
        assert set(body["sources"]) == {"weather", "news", "encyclopedia", "reference"}

    def test_fresh_process_has_no_timings(self, client):
        assert client.get("/api/health").json()["timings"] == {}

    def test_counts_failures_of_the_serving_aggregator(self, offline_client):
        offline_client.post("/api/search-city", json={"cityName": "Chennai"})
        body = offline_client.get("/api/health").json()

        assert body["errors"]["errors_by_category"] == {"api_connection": 3}
        assert {"weather.fetch", "news.fetch", "encyclopedia.fetch"} <= set(body["timings"])
