"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from almanac import __version__
from api.main import app


@pytest.fixture
def client() -> TestClient:
    """Test client for the calendar API."""
    return TestClient(app)


class TestMetadataEndpoints:
    """Tests for health and calendar listing endpoints."""

    def test_health(self, client: TestClient) -> None:
        """Health check reports version."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": __version__}

    def test_list_calendars(self, client: TestClient) -> None:
        """All five calendars are listed with their tables."""
        response = client.get("/calendars")
        assert response.status_code == 200
        calendars = {c["calendar"]: c for c in response.json()}
        assert set(calendars) == {"gregorian", "julian", "islamic", "persian", "hebrew"}
        assert len(calendars["hebrew"]["month_names"]) == 13
        assert calendars["hebrew"]["epoch"] == 347995.5
        assert calendars["gregorian"]["weekday_names"][0] == "Sunday"

    def test_year_info(self, client: TestClient) -> None:
        """Year endpoint reports leap status and lengths."""
        response = client.get("/calendars/hebrew/years/5747")
        assert response.status_code == 200
        data = response.json()
        assert data["leap"] is False
        assert data["months"] == 12
        assert data["days"] == 355

        data = client.get("/calendars/persian/years/1399").json()
        assert data["leap"] is True
        assert data["month_lengths"][-1] == 30

    def test_persian_year_zero_422(self, client: TestClient) -> None:
        """Persian year 0 does not exist."""
        response = client.get("/calendars/persian/years/0")
        assert response.status_code == 422
        assert "year 0" in response.json()["detail"]

    def test_unknown_calendar_404(self, client: TestClient) -> None:
        """Unknown calendar names are not found."""
        assert client.get("/calendars/mayan/years/1").status_code == 404
        assert client.get("/today/mayan").status_code == 404

    def test_today(self, client: TestClient) -> None:
        """Today's date is returned with display fields."""
        response = client.get("/today/islamic")
        assert response.status_code == 200
        data = response.json()
        assert data["calendar"] == "islamic"
        assert 1 <= data["month"] <= 12


class TestConvertEndpoint:
    """Tests for /convert and /validate."""

    def test_convert_all(self, client: TestClient) -> None:
        """Converting without targets returns every calendar."""
        response = client.post("/convert", json={
            "source": {"calendar": "gregorian", "year": 2000, "month": 1, "day": 1},
        })
        assert response.status_code == 200
        data = response.json()
        assert data["day_count"] == 2451544.5
        assert data["weekday_index"] == 6
        displays = {d["calendar"]: d["display"] for d in data["dates"]}
        assert displays["hebrew"] == "23 Teveth, 5760"
        assert displays["persian"] == "11 Dey, 1378"

    def test_convert_targets(self, client: TestClient) -> None:
        """Only requested targets are returned."""
        response = client.post("/convert", json={
            "source": {"calendar": "hebrew", "year": 5747, "month": 12, "day": 9},
            "targets": ["gregorian"],
        })
        assert response.status_code == 200
        (only,) = response.json()["dates"]
        assert (only["year"], only["month"], only["day"]) == (1987, 3, 10)

    def test_convert_invalid_date(self, client: TestClient) -> None:
        """Invalid source dates are rejected with 422."""
        response = client.post("/convert", json={
            "source": {"calendar": "gregorian", "year": 2023, "month": 2, "day": 30},
        })
        assert response.status_code == 422
        assert "day 30" in response.json()["detail"]

    def test_convert_unknown_target(self, client: TestClient) -> None:
        """Unknown target calendars are rejected with 422."""
        response = client.post("/convert", json={
            "source": {"calendar": "gregorian", "year": 2000, "month": 1, "day": 1},
            "targets": ["mayan"],
        })
        assert response.status_code == 422

    def test_validate(self, client: TestClient) -> None:
        """Validate echoes valid dates and rejects invalid ones."""
        ok = client.post("/validate", json={"calendar": "hebrew", "year": 5784, "month": 13, "day": 1})
        assert ok.status_code == 200
        assert ok.json()["month"] == 13

        bad = client.post("/validate", json={"calendar": "hebrew", "year": 5747, "month": 13, "day": 1})
        assert bad.status_code == 422
