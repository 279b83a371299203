"""Tests de la API HTTP (FastAPI TestClient)."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from equipment_insights.api import state
from equipment_insights.api.main import app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.delenv("INSIGHTS_API_KEY", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.setenv("INSIGHTS_ENV_FILE", "")
    state.reset_state()
    yield TestClient(app)
    state.reset_state()


# =============================================================================
# TEST 1: PUBLICACIÓN
# =============================================================================

class TestSamplesEndpoints:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_publish_single_sample(self, client, make_payload):
        r = client.post("/samples", json=make_payload(oilLevel=12.5))

        assert r.status_code == 200
        assert r.json() == {"published": 1, "total_samples": 1, "active_alerts": 1}

    def test_publish_batch(self, client, make_payload):
        r = client.post("/samples/batch", json={"samples": [make_payload(), make_payload(angle="bad")]})

        assert r.status_code == 200
        assert r.json() == {"published": 2, "total_samples": 2, "active_alerts": 0}

    def test_publish_rejected_while_reporting(self, client, make_payload):
        state.get_report_guard().begin()

        r = client.post("/samples", json=make_payload())

        assert r.status_code == 409
        assert state.get_session().sample_count == 0


# =============================================================================
# TEST 2: LECTURA
# =============================================================================

class TestReadEndpoints:

    def test_insights_before_enough_data(self, client, make_payload):
        client.post("/samples", json=make_payload())

        body = client.get("/insights").json()

        assert body["sample_count"] == 1
        assert body["insights"]["temperature"] is None
        assert client.get("/insights/temperature").status_code == 404

    def test_insight_by_title(self, client, make_payload):
        client.post("/samples/batch", json={"samples": [make_payload(temperature=10), make_payload(temperature=15)]})

        r = client.get("/insights/Temperature")

        assert r.status_code == 200
        assert r.json()["rate_of_change"] == "50.0%/hour"
        assert r.json()["suggestion"][0] == "✅ Temperature is within safe range."

    def test_unknown_metric(self, client):
        r = client.get("/insights/pressure")

        assert r.status_code == 404
        assert r.json()["detail"] == "Unknown metric: pressure"

    def test_statistics(self, client, make_payload):
        client.post("/samples/batch", json={"samples": [make_payload(voltage=v) for v in (9, 10, 11)]})

        stats = client.get("/statistics").json()["statistics"]["voltage"]

        assert stats == {"min": 9.0, "max": 11.0, "avg": 10.0, "current": 11.0, "count": 3}


# =============================================================================
# TEST 3: ALERTAS
# =============================================================================

class TestAlertEndpoints:

    def test_alert_queue_and_badges(self, client, make_payload):
        client.post("/samples", json=make_payload(oilLevel=12.5, angle=5))

        queue = client.get("/alerts").json()
        badges = client.get("/alerts/badges").json()

        assert queue["modal_visible"] is True
        assert [a["id"] for a in queue["alerts"]] == ["oilLevel:level:low", "angle:range:high"]
        assert queue["alerts"][0]["current_value"] == "12.5%"
        assert badges["angle"]["type"] == "high"

    def test_dismiss_flow(self, client, make_payload):
        client.post("/samples", json=make_payload(oilLevel=12.5, angle=5))

        r = client.post("/alerts/angle:range:high/dismiss")
        assert [a["id"] for a in r.json()["alerts"]] == ["oilLevel:level:low"]

        r = client.post("/alerts/modal", json={"visible": False})
        assert r.json()["modal_visible"] is False

        r = client.post("/alerts/dismiss-all")
        assert r.json() == {"alerts": [], "modal_visible": False}


# =============================================================================
# TEST 4: API KEY Y REPORTE
# =============================================================================

class TestApiKey:

    def test_key_required_when_configured(self, client, make_payload, monkeypatch):
        monkeypatch.setenv("INSIGHTS_API_KEY", "secret")

        assert client.post("/samples", json=make_payload()).status_code == 401
        assert client.post("/samples", json=make_payload(), headers={"X-API-Key": "wrong"}).status_code == 401
        assert client.post("/samples", json=make_payload(), headers={"X-API-Key": "secret"}).status_code == 200

    def test_production_without_key_is_misconfiguration(self, client, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")

        assert client.post("/alerts/dismiss-all").status_code == 500

    def test_reads_do_not_need_key(self, client, monkeypatch):
        monkeypatch.setenv("INSIGHTS_API_KEY", "secret")

        assert client.get("/alerts").status_code == 200


class TestReportEndpoint:

    def test_summary_releases_guard(self, client, make_payload):
        client.post("/samples", json=make_payload(angle=-6))

        body = client.get("/report/summary").json()

        assert body["data_points"] == 1
        assert body["alerts"][0]["id"] == "angle:range:low"
        assert state.get_report_guard().is_reporting is False
