import random
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from habit_tracker.dashboard.renderer import DashboardRenderer
from habit_tracker.habits.models import Habit
from habit_tracker.habits.tracker import MOTIVATIONS, HabitTracker
from habit_tracker.main import app, get_renderer, get_tracker

DAY = date(2024, 3, 1)


@pytest.fixture()
def tracker():
    tracker = HabitTracker(rng=random.Random(5))
    tracker.add_habit(Habit("Exercise", "Fitness", "daily", 1))
    tracker.add_habit(Habit("Meditate", "Wellness", "daily", 2))
    return tracker


@pytest.fixture()
def client(tracker, tmp_path):
    app.dependency_overrides[get_tracker] = lambda: tracker
    app.dependency_overrides[get_renderer] = lambda: DashboardRenderer(str(tmp_path))
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_status(client):
    response = client.get("/status")

    assert response.status_code == 200
    assert response.json()["habits"] == 2


def test_list_habits(client):
    data = client.get("/api/habits").json()

    assert data["total"] == 2
    assert [h["number"] for h in data["habits"]] == [1, 2]
    assert data["habits"][0]["name"] == "Exercise"
    assert data["habits"][0]["success_rate"] == 0.0


def test_add_habit__appends_to_tracker(client, tracker):
    response = client.post(
        "/api/habits",
        json={"name": "Read", "category": "Learning", "frequency": "daily", "target": 1},
    )

    assert response.status_code == 201
    assert response.json()["number"] == 3
    assert tracker.habits[-1].name == "Read"


def test_complete_habit__consecutive_days(client, tracker):
    for i in range(3):
        day = (DAY + timedelta(days=i)).isoformat()
        response = client.post(f"/api/habits/1/complete?day={day}")
        assert response.status_code == 200

    data = response.json()
    assert data["streak"] == 3
    assert data["total_completed"] == 3
    assert data["success_rate"] == 100.0
    assert data["on_track"] is True
    assert tracker.habits[1].completion_log == {}


@pytest.mark.parametrize("number", [0, 3])
def test_complete_habit__out_of_range_is_404(client, tracker, number):
    response = client.post(f"/api/habits/{number}/complete")

    assert response.status_code == 404
    assert all(h.total_completed == 0 for h in tracker.habits)


def test_today(client, tracker):
    tracker.mark_habit_complete(1, DAY)

    data = client.get(f"/api/today?day={DAY.isoformat()}").json()

    assert data["day"] == "2024-03-01"
    assert data["completed"] == 1
    assert data["percentage"] == 50.0
    assert data["bar_filled"] == 25
    assert [h["completed"] for h in data["habits"]] == [False, True]


def test_statistics(client):
    data = client.get("/api/statistics").json()

    assert data["categories"] == {"Fitness": 1, "Wellness": 1}
    assert data["total_habits"] == 2
    assert [b["label"] for b in data["distribution"]] == ["90-100%", "70-89%", "50-69%", "Below 50%"]


def test_statistics__empty_tracker_is_409(client, tracker):
    tracker.habits.clear()

    response = client.get("/api/statistics")

    assert response.status_code == 409
    assert response.json()["detail"] == "No habits to display statistics."


def test_motivation(client):
    assert client.get("/api/motivation").json()["message"] in MOTIVATIONS


def test_dashboard_png(client, tracker, tmp_path):
    tracker.mark_habit_complete(0)

    response = client.get("/api/dashboard")

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(b"\x89PNG")
    assert len(list(tmp_path.glob("dashboard-*.png"))) == 1


def test_complete_habit__earliest_date(client):
    response = client.post("/api/habits/1/complete?day=0001-01-01")

    assert response.status_code == 200
    assert response.json()["streak"] == 1
