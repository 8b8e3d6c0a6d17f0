"""Tests for the fitness logs endpoints."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from fitstreak.main import app
from fitstreak.schemas.fitness_log import FitnessLogCreate
from fitstreak.services.log_store import LogStore, LogStoreError, get_log_store


class FailingStore(LogStore):
    async def list_logs(self, user_id):
        raise LogStoreError("permission denied for table fitness_logs", status_code=401)

    async def create_log(self, user_id, payload):
        raise LogStoreError("network unreachable")

    async def delete_log(self, user_id, log_id):
        raise LogStoreError("network unreachable")


class TestCreateSchema:
    def test_blank_fields_fall_back(self):
        payload = FitnessLogCreate(duration="", calories=None, weight="")

        assert payload.duration == 0
        assert payload.calories == 0
        assert payload.weight is None
        assert payload.type == "cardio"
        assert payload.date is None

    def test_numeric_strings_are_parsed(self):
        payload = FitnessLogCreate(duration="45", calories="320", weight="68.5", type="strength")

        assert payload.duration == 45
        assert payload.calories == 320
        assert payload.weight == 68.5

    @pytest.mark.parametrize("fields", [
        {"duration": -1},
        {"calories": -50},
        {"weight": 0},
        {"type": "yoga"},
    ])
    def test_invalid_values_rejected(self, fields):
        with pytest.raises(ValidationError):
            FitnessLogCreate(**fields)


class TestLogsEndpoints:
    def test_create_log(self, client):
        response = client.post("/api/logs/", json={
            "duration": 45,
            "type": "strength",
            "calories": 320,
            "weight": 68.2,
        })

        assert response.status_code == 201
        data = response.json()
        assert data["id"]
        assert data["user_id"] == "myself"
        assert data["checked_in"] is True
        assert data["type"] == "strength"
        assert data["duration"] == 45
        assert data["calories"] == 320
        assert data["weight"] == 68.2

    def test_create_with_defaults(self, client):
        response = client.post("/api/logs/", json={})

        assert response.status_code == 201
        data = response.json()
        assert data["duration"] == 0
        assert data["calories"] == 0
        assert data["weight"] is None
        assert data["type"] == "cardio"

    def test_create_rejects_negative_calories(self, client):
        response = client.post("/api/logs/", json={"calories": -10})
        assert response.status_code == 422

    def test_list_newest_first(self, client):
        now = datetime.now(timezone.utc)
        for days_ago in (2, 0, 1):
            client.post("/api/logs/", json={
                "date": (now - timedelta(days=days_ago)).isoformat(),
                "duration": days_ago,
            })

        response = client.get("/api/logs/")

        assert response.status_code == 200
        assert [log["duration"] for log in response.json()] == [0, 1, 2]

    def test_logs_are_scoped_to_user(self, client):
        client.post("/api/logs/", json={"duration": 10})
        client.post("/api/logs/", json={"duration": 20}, headers={"X-User-Id": "friend"})

        mine = client.get("/api/logs/").json()
        theirs = client.get("/api/logs/", headers={"X-User-Id": "friend"}).json()

        assert [log["duration"] for log in mine] == [10]
        assert [log["duration"] for log in theirs] == [20]
        assert theirs[0]["user_id"] == "friend"

    def test_delete_log(self, client):
        log_id = client.post("/api/logs/", json={"duration": 30}).json()["id"]

        response = client.delete(f"/api/logs/{log_id}")

        assert response.status_code == 204
        assert client.get("/api/logs/").json() == []

    def test_delete_missing_log(self, client):
        response = client.delete("/api/logs/does-not-exist")

        assert response.status_code == 404
        assert "does-not-exist" in response.json()["detail"]

    def test_cannot_delete_other_users_log(self, client):
        log_id = client.post("/api/logs/", json={}, headers={"X-User-Id": "friend"}).json()["id"]

        response = client.delete(f"/api/logs/{log_id}")

        assert response.status_code == 404
        assert len(client.get("/api/logs/", headers={"X-User-Id": "friend"}).json()) == 1


class TestStoreFailures:
    @pytest.fixture
    def failing_client(self, client):
        app.dependency_overrides[get_log_store] = lambda: FailingStore()
        return client

    def test_list_failure_is_bad_gateway(self, failing_client):
        response = failing_client.get("/api/logs/")

        assert response.status_code == 502
        assert "permission denied" in response.json()["detail"]

    def test_create_failure_is_bad_gateway(self, failing_client):
        assert failing_client.post("/api/logs/", json={}).status_code == 502

    def test_delete_failure_is_bad_gateway(self, failing_client):
        assert failing_client.delete("/api/logs/abc").status_code == 502

    def test_stats_failure_is_bad_gateway(self, failing_client):
        assert failing_client.get("/api/stats/").status_code == 502


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["status"] == "running"
