"""HTTP API tests against the reference graph."""

import pytest
from fastapi.testclient import TestClient

from kiwiland.api import create_app
from kiwiland.config import AppConfig
from kiwiland.graph import DEFAULT_EDGE_TOKENS, RailwayGraph
from kiwiland.services import RailwayQueryService


@pytest.fixture
def client():
    service = RailwayQueryService(graph=RailwayGraph.from_tokens(DEFAULT_EDGE_TOKENS))
    app = create_app(service=service, config=AppConfig())
    return TestClient(app)


@pytest.mark.parametrize(
    "url,expected",
    [
        ("/api/distance?path=A-B-C", {"distance": 9}),
        ("/api/distance?path=A-D", {"distance": 5}),
        ("/api/distance?path=A-E-D", {"error": "NO SUCH ROUTE"}),
        ("/api/trips/stops?start=C&end=C&maxStops=3", {"count": 2}),
        ("/api/trips/stops?start=A&end=C&exactStops=4", {"count": 3}),
        ("/api/shortest?start=A&end=C", {"distance": 9}),
        ("/api/shortest?start=B&end=B", {"distance": 9}),
        ("/api/routes/max-distance?start=C&end=C&threshold=30", {"count": 7}),
    ],
)
def test_reference_questions(client, url, expected):
    res = client.get(url)

    assert res.status_code == 200
    assert res.json() == expected


def test_health(client):
    res = client.get("/api/health")

    assert res.json() == {"ok": True}


def test_lowercase_towns_are_accepted(client):
    res = client.get("/api/shortest?start=a&end=c")

    assert res.json() == {"distance": 9}


def test_shortest_no_route_is_200(client):
    res = client.get("/api/shortest?start=A&end=A")

    assert res.status_code == 200
    assert res.json() == {"error": "NO SUCH ROUTE"}


@pytest.mark.parametrize(
    "url,message",
    [
        ("/api/distance", "path query param required, e.g. A-B-C"),
        ("/api/distance?path=A", "Provide at least two towns"),
        ("/api/trips/stops?start=C&maxStops=3", "start and end are required"),
        ("/api/trips/stops?start=C&end=C", "Provide exactly one of exactStops or maxStops"),
        (
            "/api/trips/stops?start=C&end=C&maxStops=3&exactStops=2",
            "Provide exactly one of exactStops or maxStops",
        ),
        ("/api/shortest?start=A", "start and end are required"),
        ("/api/routes/max-distance?start=C&end=C", "start, end, threshold are required"),
        (
            "/api/routes/max-distance?start=C&end=C&threshold=inf",
            "threshold must be a finite number",
        ),
    ],
)
def test_validation_errors_are_400(client, url, message):
    res = client.get(url)

    assert res.status_code == 400
    assert res.json() == {"error": message}


def test_overflowing_threshold_is_400(client):
    res = client.get("/api/routes/max-distance?start=C&end=C&threshold=1e309")

    assert res.status_code == 400


def test_malformed_number_is_400(client):
    res = client.get("/api/trips/stops?start=C&end=C&maxStops=three")

    assert res.status_code == 400
    assert "maxStops" in res.json()["error"]


def test_unknown_path_is_404(client):
    res = client.get("/api/nowhere")

    assert res.status_code == 404
    assert res.json() == {"error": "Not Found"}
