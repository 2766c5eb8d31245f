import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from gymtrack.main import install_error_handlers
from gymtrack.routers.exercises import router
from gymtrack.services.tracker import GymTracker, get_tracker


@pytest.fixture(name="client")
def client_fixture(lazy_tracker: GymTracker):
    test_app = FastAPI()
    install_error_handlers(test_app)
    test_app.include_router(router, prefix="/api/exercises")
    test_app.dependency_overrides[get_tracker] = lambda: lazy_tracker
    with TestClient(test_app) as client:
        yield client


def test_list_all(client: TestClient):
    response = client.get("/api/exercises/")
    assert response.status_code == 200
    assert len(response.json()) == 170


def test_filter_by_muscle_group(client: TestClient):
    exercises = client.get("/api/exercises/", params={"muscle_group": "triceps"}).json()
    assert exercises
    assert {e["primary_muscle_group"] for e in exercises} == {"triceps"}


def test_filter_by_category(client: TestClient):
    exercises = client.get("/api/exercises/", params={"category": "machine"}).json()
    assert exercises
    assert {e["category"] for e in exercises} == {"machine"}


def test_combined_filters(client: TestClient):
    params = {"muscle_group": "triceps", "category": "bodyweight"}
    exercises = client.get("/api/exercises/", params=params).json()
    assert "Bench Dips" in {e["name"] for e in exercises}
    assert all(e["category"] == "bodyweight" for e in exercises)


def test_search(client: TestClient):
    exercises = client.get("/api/exercises/", params={"q": "bench PRESS"}).json()
    names = {e["name"] for e in exercises}
    assert {"Barbell Bench Press", "Close Grip Bench Press"} <= names


def test_search_with_category(client: TestClient):
    exercises = client.get("/api/exercises/", params={"q": "bench press", "category": "dumbbell"}).json()
    assert exercises
    assert all(e["category"] == "dumbbell" for e in exercises)


def test_unknown_muscle_group(client: TestClient):
    assert client.get("/api/exercises/", params={"muscle_group": "wings"}).status_code == 422


def test_get_exercise(client: TestClient):
    response = client.get("/api/exercises/ex001")
    assert response.status_code == 200
    assert response.json() == {
        "id": "ex001",
        "name": "Barbell Bench Press",
        "primary_muscle_group": "mid-chest",
        "category": "barbell",
        "common_rep_ranges": "5-8",
    }


def test_get_missing_exercise(client: TestClient):
    assert client.get("/api/exercises/ex999").status_code == 404


def test_muscle_groups(client: TestClient):
    groups = client.get("/api/exercises/muscle-groups").json()
    assert len(groups) == 19
    by_id = {g["id"]: g for g in groups}
    assert by_id["mid-chest"]["display_name"]
    assert by_id["mid-chest"]["region"]
