from datetime import datetime, timedelta

from fastapi.testclient import TestClient
from structlog.testing import capture_logs

from utility_rates.api.main import create_app
from utility_rates.config import AppSettings
from utility_rates.errors import InvalidResponseError, TransportError

from .conftest import StubWeatherClient, reading


def _client(weather_client) -> TestClient:
    return TestClient(create_app(AppSettings(), weather_client=weather_client))


def test_city_rates(stub_client):
    client = _client(stub_client)

    r = client.get("/api/rates/new-york")
    assert r.status_code == 200
    body = r.json()
    assert set(body.keys()) == {"city", "weather", "rates", "generatedAt", "validFor"}
    assert body["city"] == "new-york"
    assert body["weather"] == {"temperature": 90.0, "conditions": "sunny", "humidity": 20.0}
    assert body["validFor"] == "1 hour"
    assert [q["utility"] for q in body["rates"]] == ["Electricity", "Natural Gas", "Water", "Solar Buyback"]
    assert [q["adjustedRate"] for q in body["rates"]] == [0.16, 0.9, 0.006, 0.11]
    assert body["rates"][0] == {
        "utility": "Electricity",
        "baseRate": 0.12,
        "unit": "kWh",
        "weatherAdjustment": 0.04,
        "adjustedRate": 0.16,
        "reason": "High cooling demand due to heat",
    }


def test_city_rates_upstream_error_is_404(stub_client):
    client = _client(stub_client)

    r = client.get("/api/rates/atlantis")
    assert r.status_code == 404
    assert r.json() == {"error": "Failed to fetch weather data", "message": "not found"}


def test_city_rates_every_weather_failure_is_404():
    stub = StubWeatherClient({
        "down": TransportError("connection refused", city="down"),
        "garbled": InvalidResponseError("Invalid JSON from weather service", city="garbled"),
    })
    client = _client(stub)

    for city, message in (("down", "connection refused"), ("garbled", "Invalid JSON from weather service")):
        r = client.get(f"/api/rates/{city}")
        assert r.status_code == 404
        assert r.json()["message"] == message


def test_base_rates_not_treated_as_city(stub_client):
    client = _client(stub_client)

    r = client.get("/api/rates/base")
    assert r.status_code == 200
    assert r.json() == {
        "electricity": {"rate": 0.12, "unit": "kWh"},
        "naturalGas": {"rate": 1.05, "unit": "therm"},
        "water": {"rate": 0.004, "unit": "gallon"},
        "solar": {"rate": 0.08, "unit": "kWh"},
    }
    assert stub_client.calls == []


def test_all_rates(stub_client):
    client = _client(stub_client)

    r = client.get("/api/rates")
    assert r.status_code == 200
    body = r.json()
    assert set(body.keys()) == {"quotes", "generatedAt"}
    assert [q["city"] for q in body["quotes"]] == ["new-york", "london", "tokyo", "sydney", "paris"]
    assert stub_client.calls == ["new-york", "london", "tokyo", "sydney", "paris"]


def test_all_rates_skips_failed_cities_silently(stub_client):
    stub_client.readings["tokyo"] = TransportError("timed out", city="tokyo")
    del stub_client.readings["paris"]
    client = _client(stub_client)

    r = client.get("/api/rates")
    assert r.status_code == 200
    body = r.json()
    assert len(body["quotes"]) == 3
    assert [q["city"] for q in body["quotes"]] == ["new-york", "london", "sydney"]
    assert set(body.keys()) == {"quotes", "generatedAt"}


def test_all_rates_uses_configured_cities():
    stub = StubWeatherClient({"oslo": reading("oslo", 20, "snow", 70)})
    client = TestClient(create_app(AppSettings(rate_cities=["oslo", "nowhere"]), weather_client=stub))

    body = client.get("/api/rates").json()
    assert [q["city"] for q in body["quotes"]] == ["oslo"]
    assert body["quotes"][0]["rates"][1]["adjustedRate"] == 1.5


def test_unknown_route_uses_error_body(stub_client):
    client = _client(stub_client)

    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found", "message": "Not Found"}


def test_generated_at_is_iso_8601_utc(stub_client):
    client = _client(stub_client)

    single = client.get("/api/rates/london").json()
    combined = client.get("/api/rates").json()
    for stamp in (single["generatedAt"], combined["generatedAt"], combined["quotes"][0]["generatedAt"]):
        parsed = datetime.fromisoformat(stamp)
        assert parsed.utcoffset() == timedelta(0)


def test_skipped_city_is_logged(stub_client):
    stub_client.readings["tokyo"] = TransportError("timed out", city="tokyo")
    client = _client(stub_client)

    with capture_logs() as logs:
        r = client.get("/api/rates")
    assert r.status_code == 200

    skipped = [e for e in logs if e["event"] == "rates_city_skipped"]
    assert len(skipped) == 1
    assert skipped[0]["log_level"] == "warning"
    assert skipped[0]["city"] == "tokyo"
    assert skipped[0]["error"] == "timed out"
    assert skipped[0]["error_type"] == "TransportError"
