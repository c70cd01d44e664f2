"""Tests for the leaderboard HTTP endpoints."""

import json
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from scoreboard_api.app_factory import create_app
from scoreboard_core.settings import Settings
from scoreboard_core.storage import InMemoryStorage
from scoreboard_core.store import LeaderboardStore

DEFAULT_BOARD = [
    {"name": "SERVER", "score": 10000},
    {"name": "ADMIN", "score": 7500},
    {"name": "PRO", "score": 5000},
    {"name": "PLAYER", "score": 2500},
    {"name": "NOOB", "score": 1000},
]


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def client(storage):
    app = create_app(Settings(), store=LeaderboardStore(storage))
    with TestClient(app) as c:
        yield c


class TestGetScores:
    def test_returns_default_leaderboard(self, client):
        response = client.get("/get-scores")
        assert response.status_code == 200
        assert response.json() == DEFAULT_BOARD

    def test_returns_default_for_corrupt_storage(self, client, storage):
        storage.write(b"{{{")
        response = client.get("/get-scores")
        assert response.status_code == 200
        assert response.json() == DEFAULT_BOARD

    def test_returns_default_for_deeply_nested_storage(self, client, storage):
        storage.write(b"[" * 200000 + b"]" * 200000)
        response = client.get("/get-scores")
        assert response.status_code == 200
        assert response.json() == DEFAULT_BOARD

    def test_keeps_integer_and_float_scores(self, client):
        client.post("/submit-score", json={"name": "F", "score": 20000.5})
        client.post("/submit-score", json={"name": "I", "score": 30000})
        body = client.get("/get-scores").json()
        assert body[0] == {"name": "I", "score": 30000}
        assert body[1] == {"name": "F", "score": 20000.5}


class TestSubmitScore:
    def test_accepts_valid_score(self, client, storage):
        response = client.post("/submit-score", json={"name": "X", "score": 20000})
        assert response.status_code == 201
        assert response.json() == {"message": "Score saved!"}

        board = client.get("/get-scores").json()
        assert board[0] == {"name": "X", "score": 20000}
        assert len(board) == 6
        assert json.loads(storage.read()) == board

    def test_score_below_cut_still_reports_success(self, client):
        for i in range(10):
            client.post("/submit-score", json={"name": f"HI{i}", "score": 50000 + i})
        response = client.post("/submit-score", json={"name": "LOW", "score": -1})
        assert response.status_code == 201
        board = client.get("/get-scores").json()
        assert len(board) == 10
        assert all(row["name"] != "LOW" for row in board)

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "X", "score": "20000"},
            {"name": 5, "score": 20000},
            {"name": "X"},
            {"score": 1},
            {"name": "X", "score": True},
            [{"name": "X", "score": 1}],
            "X",
            None,
        ],
    )
    def test_rejects_invalid_score_data(self, client, storage, payload):
        response = client.post("/submit-score", json=payload)
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid score data."}
        assert storage.read() is None

    def test_rejects_malformed_json(self, client, storage):
        response = client.post(
            "/submit-score",
            content=b"{name: X",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid score data."}
        assert storage.read() is None

    def test_rejects_deeply_nested_json(self, client, storage):
        response = client.post(
            "/submit-score",
            content=b"[" * 200000 + b"]" * 200000,
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid score data."}
        assert storage.read() is None

    @pytest.mark.parametrize("content_type", ["text/plain", "application/x-www-form-urlencoded"])
    def test_rejects_non_json_content_type(self, client, storage, content_type):
        response = client.post(
            "/submit-score",
            content=b'{"name": "X", "score": 1}',
            headers={"Content-Type": content_type},
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid score data."}
        assert storage.read() is None

    @pytest.mark.parametrize(
        "content_type", ["application/json; charset=utf-8", "application/vnd.game+json"]
    )
    def test_accepts_json_content_types(self, client, content_type):
        response = client.post(
            "/submit-score",
            content=b'{"name": "X", "score": 1}',
            headers={"Content-Type": content_type},
        )
        assert response.status_code == 201

    def test_rejects_empty_body(self, client):
        response = client.post("/submit-score")
        assert response.status_code == 400

    def test_write_failure_returns_500(self, client, storage):
        with patch.object(storage, "write", side_effect=OSError("disk full")):
            response = client.post("/submit-score", json={"name": "X", "score": 1})
        assert response.status_code == 500
        assert response.json() == {"message": "Failed to save score."}
        # server keeps serving afterwards
        assert client.get("/get-scores").json() == DEFAULT_BOARD

    def test_persists_to_file(self, tmp_path):
        scores_file = tmp_path / "scores.json"
        app = create_app(Settings(scores_file=scores_file))
        with TestClient(app) as c:
            c.post("/submit-score", json={"name": "X", "score": 6000})
        stored = json.loads(scores_file.read_text(encoding="utf-8"))
        assert stored[2] == {"name": "X", "score": 6000}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_cors_headers_allow_any_origin(client):
    response = client.get("/get-scores", headers={"Origin": "http://game.example"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_preflight_for_submit(client):
    response = client.options(
        "/submit-score",
        headers={
            "Origin": "http://game.example",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )
    assert response.status_code == 200


class TestStaticFiles:
    def test_serves_static_directory(self, tmp_path):
        static = tmp_path / "public"
        static.mkdir()
        (static / "index.html").write_text("<h1>game</h1>", encoding="utf-8")
        app = create_app(
            Settings(static_dir=static), store=LeaderboardStore(InMemoryStorage())
        )
        with TestClient(app) as c:
            assert c.get("/index.html").text == "<h1>game</h1>"
            assert c.get("/").text == "<h1>game</h1>"
            assert c.get("/get-scores").json() == DEFAULT_BOARD

    def test_missing_static_directory_is_skipped(self, tmp_path):
        app = create_app(
            Settings(static_dir=tmp_path / "missing"),
            store=LeaderboardStore(InMemoryStorage()),
        )
        with TestClient(app) as c:
            assert c.get("/index.html").status_code == 404
