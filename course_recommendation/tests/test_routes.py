"""
Tests for the HTTP layer.
"""

import pytest
from fastapi.testclient import TestClient

import config
from course_recommendation.logic.constants import FALLBACK_METHOD, PRIMARY_METHOD
from main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_recommend_with_empty_body(client):
    response = client.post("/api/recommend", json={})
    assert response.status_code == 200

    body = response.json()
    assert body["success"] is True
    data = body["data"]
    for key in (
        "probability_Gaming",
        "probability_WebDevelopment",
        "probability_FuzzyLogic",
        "probability_DatabaseDesign",
        "probability_SoftwareValidation_Verification",
    ):
        assert data[key] >= 0.1
    assert data["method"] == PRIMARY_METHOD


def test_recommend_example_request(client):
    response = client.post(
        "/api/recommend",
        json={"cgpa": "3.8", "programming": 4, "gameDevelopment": 4, "difficulty": 2, "learningStyle": 1},
    )
    data = response.json()["data"]
    assert data["firstRecommendedCourse"] == "Gaming"
    assert data["alternativeRecommendedCourse"] == "Web Development"
    assert data["Confidence_Expert"] == data["firstConfidence"]


@pytest.mark.parametrize("content", [b"", b"not json", b"[1, 2, 3]", b'"hello"'])
def test_recommend_never_fails_on_bad_bodies(client, content):
    response = client.post("/api/recommend", content=content, headers={"Content-Type": "application/json"})
    assert response.status_code == 200
    assert response.json()["success"] is True


def test_recommend_uses_fallback_when_primary_disabled(client, monkeypatch):
    monkeypatch.setattr(config, "PRIMARY_SCORER_ENABLED", False)
    data = client.post("/api/recommend", json={"programming": 5}).json()["data"]
    assert data["method"] == FALLBACK_METHOD
    assert "note" in data


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["environment"] == config.APP_ENV
    assert "timestamp" in body


def test_recommend_with_overflowing_values(client):
    response = client.post(
        "/api/recommend",
        json={
            "cgpa": 1.7e308,
            "programming": 1.7e308,
            "multimedia": 1.7e308,
            "softwareEngineering": 1.7e308,
            "webDevelopment": 1.7e308,
            "difficulty": 1,
            "learningStyle": 2,
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["method"] == FALLBACK_METHOD


def test_recommend_survives_unencodable_result(client, monkeypatch):
    import course_recommendation.routes as routes

    real_build_response = routes.build_response
    calls = []

    def build_response_once_broken(result):
        calls.append(result)
        response = real_build_response(result)
        if len(calls) == 1:
            response["data"]["firstConfidence"] = float("inf")
        return response

    monkeypatch.setattr(routes, "build_response", build_response_once_broken)
    response = client.post("/api/recommend", json={})

    assert response.status_code == 200
    assert response.json()["data"]["method"] == FALLBACK_METHOD
