"""
File: tests/test_status_routes.py
Purpose: Route-level tests for status, auth capability, health, index and metrics.
"""

from fastapi.testclient import TestClient
from status_api.config import Settings
from status_api.main import app, create_app

def _client(**overrides) -> TestClient:
    return TestClient(create_app(Settings(_env_file=None, **overrides)))

def test_status_ok():
    """Status route reports success, environment and the simple signup path."""
    c = _client(ENV="staging")
    r = c.get("/api/test")
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["message"]
    assert body["environment"] == "staging"
    assert body["authEndpoints"] == {
        "simple": "/api/auth/simple/signup",
        "regular": "/api/auth/signup",
        "supabase": "/api/auth/supabase/signup",
    }
    assert body["timestamp"].endswith("Z")

def test_status_environment_defaults_to_development(monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    r = _client().get("/api/test")
    assert r.json()["environment"] == "development"

def test_status_blank_environment_falls_back():
    r = _client(ENV="  ").get("/api/test")
    assert r.json()["environment"] == "development"

def test_status_is_idempotent_except_timestamp():
    c = _client(ENV="production")
    first, second = c.get("/api/test").json(), c.get("/api/test").json()
    assert first["timestamp"] <= second["timestamp"]
    first.pop("timestamp")
    second.pop("timestamp")
    assert first == second

def test_auth_capabilities():
    """Exactly three auth subsystems, each with a status; only simple auth has a test path."""
    r = _client().get("/api/test/auth")
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    endpoints = body["endpoints"]
    assert list(endpoints) == ["Simple Auth (Recommended)", "Regular Auth", "Supabase Auth"]
    assert "✅" in endpoints["Simple Auth (Recommended)"]["status"]
    assert endpoints["Simple Auth (Recommended)"]["test"] == "/api/auth/simple/test"
    assert "test" not in endpoints["Regular Auth"]
    assert "test" not in endpoints["Supabase Auth"]
    for entry in endpoints.values():
        assert entry["status"]
        assert entry["signup"].startswith("/api/auth/")
        assert entry["login"].startswith("/api/auth/")
        assert "mode" not in entry

def test_status_root_is_configurable():
    c = _client(STATUS_ROOT="selfcheck")
    assert c.get("/api/selfcheck").status_code == 200
    assert c.get("/api/selfcheck/auth").status_code == 200
    assert c.get("/api/test").status_code == 404

def test_health_routes():
    c = _client(ENV="staging")
    for path in ("/health", "/api/health"):
        r = c.get(path)
        assert r.status_code == 200
        body = r.json()
        assert body["status"] == "OK"
        assert body["environment"] == "staging"
        assert body["uptime"] >= 0

def test_api_index_lists_status_routes():
    r = _client().get("/api")
    assert r.status_code == 200
    endpoints = r.json()["endpoints"]
    assert endpoints["status"] == "/api/test"
    assert endpoints["auth"] == "/api/test/auth"

def test_metrics_counts_requests():
    c = TestClient(app)
    c.get("/api/test")
    r = c.get("/metrics")
    assert r.status_code == 200
    assert "status_api_requests_total" in r.text

def test_metrics_label_by_route_template():
    """Unknown paths share one series; matched routes use their template."""
    c = TestClient(app)
    for i in range(5):
        assert c.get(f"/nope/{i}").status_code == 404
    c.get("/api/health")
    text = c.get("/metrics").text
    assert 'route="/nope/' not in text
    assert 'route="unmatched"' in text
    assert 'route="/api/health"' in text
