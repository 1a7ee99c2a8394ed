import os
import tempfile

import pytest
import requests

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp())

from app import app  # noqa: E402

from conftest import FORECAST_URL, POINTS_URL  # noqa: E402

COORDS = {"latitude": "39.7456", "longitude": "-97.0892"}


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_index(client):
    res = client.get("/")
    assert res.status_code == 200
    assert b'name="latitude"' in res.data
    assert b'name="longitude"' in res.data


def test_health_check(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.data == b"OK"


def test_submit(client, nws):
    res = client.post("/submit", data=COORDS)
    assert res.status_code == 200
    assert b"Sunny" in res.data
    assert b"hot" in res.data


def test_submit_requires_post(client):
    assert client.get("/submit").status_code == 405


def test_submit_missing_fields(client, requests_mock):
    res = client.post("/submit", data={"latitude": "39.7456"})
    assert res.status_code == 400
    assert requests_mock.call_count == 0


def test_submit_upstream_failure(client, requests_mock):
    requests_mock.get(POINTS_URL, exc=requests.exceptions.ConnectionError)
    res = client.post("/submit", data=COORDS)
    assert res.status_code == 502
    assert b"Could not get the forecast" in res.data


def test_api_forecast(client, nws):
    res = client.get("/api/forecast", query_string=COORDS)
    assert res.status_code == 200
    assert res.get_json() == {"shortDescription": "Sunny", "feeling": "hot"}


def test_api_forecast_reports_stage(client, requests_mock, points_body):
    requests_mock.get(POINTS_URL, json=points_body)
    requests_mock.get(FORECAST_URL, status_code=500)
    res = client.get("/api/forecast", query_string=COORDS)
    assert res.status_code == 502
    assert res.get_json()["stage"] == "fetching"


def test_api_forecast_missing_fields(client):
    res = client.get("/api/forecast")
    assert res.status_code == 400
