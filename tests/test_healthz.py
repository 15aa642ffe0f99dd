"""
Test health and metrics endpoints.
"""


def test_health_check(test_client):
    """Health check reports the service name and version."""
    response = test_client.get("/healthz")

    assert response.status_code == 200
    data = response.json()

    assert data["ok"] is True
    assert "version" in data
    assert data["service"] == "tintscale"


def test_root_points_to_docs(test_client):
    response = test_client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_metrics_count_scale_requests(test_client):
    """Batch scale requests are counted and timed."""
    response = test_client.post("/colors/scales", json={"colors": [{"name": "Primary", "color": "#3b82f6"}]})
    assert response.status_code == 200

    summary = test_client.get("/metrics").json()
    assert summary["counters"]["scale_requests_total"] == 1
    assert summary["timing_stats"]["scale_duration_ms"]["count"] == 1
