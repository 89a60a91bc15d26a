"""End-to-end tests for poll endpoints."""

import pytest
from fastapi.testclient import TestClient

from ballot.interface.api.app import create_app
from ballot.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


@pytest.fixture
def color_poll(client):
    """A poll named "color" with answers red and blue."""
    response = client.post(
        "/v2/polls",
        json={
            "name": "color",
            "question": "What is your favourite color?",
            "answers": ["red", "blue"],
        },
    )
    assert response.status_code == 201
    return response.json()


def counters(body):
    return [(a["answer"], a["counter"]) for a in body["details"]["answers"]]


class TestPollEndpoints:
    """End-to-end tests for the poll API.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_create_poll(self, client):
        """Should return 201 with a zeroed view and no stats key."""
        # Act
        response = client.post(
            "/v2/polls",
            json={"name": "color", "question": "Favourite?", "answers": ["red", "blue"]},
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["question"] == "Favourite?"
        assert "published_at" in body
        assert "stats" not in body
        assert counters(body) == [("red", 0), ("blue", 0)]

    def test_create_duplicate_poll_conflicts(self, client, color_poll):
        response = client.post(
            "/v2/polls",
            json={"name": "color", "question": "Again?", "answers": ["green"]},
        )

        assert response.status_code == 409

    def test_create_poll_without_answers_is_bad_request(self, client):
        response = client.post(
            "/v2/polls", json={"name": "color", "question": "Favourite?", "answers": []}
        )

        assert response.status_code == 400

    def test_create_poll_with_missing_field_lists_fields(self, client):
        """Schema failures are reported as 400 with the offending fields."""
        response = client.post("/v2/polls", json={"name": "color"})

        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == "Request validation failed"
        assert {f["field"] for f in body["fields"]} == {"question", "answers"}

    def test_create_poll_with_overlong_names_is_bad_request(self, client):
        """Names longer than 255 characters are rejected before storage."""
        long_name = client.post(
            "/v2/polls",
            json={"name": "c" * 300, "question": "Favourite?", "answers": ["red"]},
        )
        long_answer = client.post(
            "/v2/polls",
            json={"name": "color", "question": "Favourite?", "answers": ["r" * 300]},
        )

        assert long_name.status_code == 400
        assert long_answer.status_code == 400
        assert [f["field"] for f in long_answer.json()["fields"]] == ["answers.0"]
        assert client.get("/v2/polls").json() == {"polls": []}

    def test_get_poll(self, client, color_poll):
        response = client.get("/v2/polls/color")

        assert response.status_code == 200
        assert response.json()["published_at"] == color_poll["published_at"]
        assert "stats" not in response.json()

    def test_get_poll_with_stat(self, client, color_poll):
        client.post(
            "/v2/polls/color/vote",
            json={"answers": [{"answer": "red", "counter": 1, "UUID": "voter-1"}]},
        )

        response = client.get("/v2/polls/color", params={"withStat": "true"})

        assert response.status_code == 200
        assert response.json()["stats"] == {"voters": 1, "active_voters": 1}

    def test_get_missing_poll(self, client):
        response = client.get("/v2/polls/missing")

        assert response.status_code == 404

    def test_get_poll_stat(self, client, color_poll):
        response = client.get("/v2/polls/color/stat")

        assert response.status_code == 200
        body = response.json()
        assert body["question"] == "What is your favourite color?"
        assert body["details"] == {"voters": 0, "active_voters": 0}

    def test_list_polls_by_parameter(self, client, color_poll):
        client.post(
            "/v2/polls",
            json={"name": "size", "question": "Which size?", "answers": ["S", "M"]},
        )
        client.post(
            "/v2/polls/size/params",
            json={"params": [{"paramName": "shop", "paramValue": "eu"}]},
        )

        everything = client.get("/v2/polls")
        tagged = client.get("/v2/polls", params={"paramName": "shop", "paramValue": "eu"})

        assert everything.status_code == 200
        assert {p["name"] for p in everything.json()["polls"]} == {"color", "size"}
        assert tagged.json() == {"polls": [{"name": "size", "question": "Which size?"}]}

    def test_list_polls_by_value_alone_matches_any_parameter(self, client, color_poll):
        """A paramValue without paramName does not filter on the value."""
        client.post(
            "/v2/polls",
            json={"name": "size", "question": "Which size?", "answers": ["S", "M"]},
        )
        client.post(
            "/v2/polls/size/params",
            json={"params": [{"paramName": "shop", "paramValue": "eu"}]},
        )

        response = client.get("/v2/polls", params={"paramValue": "nowhere"})

        assert response.status_code == 200
        assert response.json() == {
            "polls": [{"name": "size", "question": "Which size?"}]
        }

    def test_reset_poll(self, client, color_poll):
        client.post(
            "/v2/polls/color/vote",
            json={
                "answers": [
                    {"answer": "red", "counter": 1},
                    {"answer": "blue", "counter": 1},
                ]
            },
        )

        response = client.post(
            "/v2/polls/color/reset", json={"answers": [{"answer": "red"}]}
        )

        assert response.status_code == 201
        assert counters(response.json()) == [("red", 0), ("blue", 1)]

    def test_delete_poll(self, client, color_poll):
        response = client.delete("/v2/polls/color")

        assert response.status_code == 204
        assert client.get("/v2/polls/color").status_code == 404
        assert client.delete("/v2/polls/color").status_code == 404


class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == "0.1.0"
