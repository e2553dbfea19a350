"""Tests for the /trainer endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.models import ProgramRequest, Report, SportActivity, Trainee, Trainer, TrainingProgram
from app.models.core import TRAINER_STATUSES


# Profile Tests

def test_get_profile(client: TestClient, trainer: Trainer, auth_headers: dict):
    """Test the profile card and lists of the authenticated trainer."""
    response = client.get("/trainer/profile/", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    card = data["trainer_profile_card"]
    assert card["user_name"] == "coach_lena"
    assert card["email"] == "coach@test.com"
    assert card["status"] == "available"
    assert card["coach_experience"] == 8
    assert card["country"] == "Germany"
    assert data["sports"] == ["running", "strength"]
    assert data["achievements"] == ["Berlin Marathon 2:58"]
    assert data["education"] == ["B.Sc. Sports Science"]


def test_edit_profile(client: TestClient, trainer: Trainer, auth_headers: dict):
    response = client.put(
        "/trainer/profile/",
        headers=auth_headers,
        json={"first_name": "Helena", "coach_experience": 9, "sports": ["cycling"]}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["first_name"] == "Helena"
    assert data["trainer_profile_card"]["coach_experience"] == 9
    assert data["sports"] == ["cycling"]
    # Untouched fields keep their values
    assert data["trainer_profile_card"]["language"] == "en"
    assert data["education"] == ["B.Sc. Sports Science"]


def test_edit_profile_persists(client: TestClient, trainer: Trainer, auth_headers: dict):
    client.put("/trainer/profile/", headers=auth_headers, json={"country": "Spain"})
    response = client.get("/trainer/profile/", headers=auth_headers)
    assert response.json()["trainer_profile_card"]["country"] == "Spain"


def test_edit_profile_invalid_json(client: TestClient, trainer: Trainer, auth_headers: dict):
    """A syntactically invalid body is a 400."""
    response = client.put(
        "/trainer/profile/",
        headers={**auth_headers, "Content-Type": "application/json"},
        content="{not json"
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request payload"


def test_edit_profile_validation_error(client: TestClient, trainer: Trainer, auth_headers: dict):
    """Failed field validation is a 400, not FastAPI's default 422."""
    response = client.put(
        "/trainer/profile/",
        headers=auth_headers,
        json={"coach_experience": -1, "status": "sleeping"}
    )
    assert response.status_code == 400
    data = response.json()
    assert data["message"] == "Invalid request payload"
    assert {tuple(e["loc"])[-1] for e in data["errors"]} == {"coach_experience", "status"}


@pytest.mark.parametrize("status", TRAINER_STATUSES)
def test_edit_profile_accepts_every_trainer_status(
    client: TestClient, trainer: Trainer, auth_headers: dict, status: str
):
    response = client.put("/trainer/profile/", headers=auth_headers, json={"status": status})
    assert response.status_code == 200
    assert response.json()["trainer_profile_card"]["status"] == status


def test_edit_profile_blank_sport(client: TestClient, trainer: Trainer, auth_headers: dict):
    response = client.put("/trainer/profile/", headers=auth_headers, json={"sports": ["yoga", " "]})
    assert response.status_code == 400


# Trainee Tests

def test_get_trainees(client: TestClient, trainees: list[Trainee], auth_headers: dict):
    response = client.get("/trainer/trainees/", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == [{"name": "Max Keller"}, {"name": "Ana Souza"}]


def test_get_trainees_empty(client: TestClient, trainer: Trainer, auth_headers: dict):
    response = client.get("/trainer/trainees/", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []


def test_get_trainees_only_own(client: TestClient, trainees: list[Trainee], other_trainer: Trainer, make_token):
    response = client.get("/trainer/trainees/", headers={"Authorization": make_token(other_trainer.user_id)})
    assert response.status_code == 200
    assert response.json() == []


# Request Tests

def test_get_requests(client: TestClient, program_requests: list[ProgramRequest], auth_headers: dict):
    response = client.get("/trainer/requests/", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 2
    assert data[0] == {"trainee_name": "Max Keller", "date": "2026-11-02", "price": None, "status": "pending"}


def test_set_price(client: TestClient, db: Session, trainer: Trainer, program_requests: list[ProgramRequest], auth_headers: dict):
    request_id = program_requests[0].id
    response = client.put(
        "/trainer/request/set-price",
        headers=auth_headers,
        json={"request_id": request_id, "price": 149.5}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == request_id
    assert data["trainer_id"] == trainer.id
    assert data["trainee_id"] == program_requests[0].trainee_id
    assert data["price"] == 149.5
    assert data["status"] == "priced"
    assert data["description"] == "Plan for Max"

    db.expire_all()
    assert db.get(ProgramRequest, request_id).price == 149.5


def test_set_price_rejects_non_positive(client: TestClient, program_requests: list[ProgramRequest], auth_headers: dict):
    response = client.put(
        "/trainer/request/set-price",
        headers=auth_headers,
        json={"request_id": program_requests[0].id, "price": 0}
    )
    assert response.status_code == 400


def test_set_price_unknown_request(client: TestClient, trainer: Trainer, auth_headers: dict):
    response = client.put("/trainer/request/set-price", headers=auth_headers, json={"request_id": 999, "price": 10})
    assert response.status_code == 404
    assert response.json() == {"message": "Request not found"}


def test_set_price_other_trainers_request(
    client: TestClient, program_requests: list[ProgramRequest], other_trainer: Trainer, make_token
):
    """A trainer cannot price a request addressed to someone else."""
    response = client.put(
        "/trainer/request/set-price",
        headers={"Authorization": make_token(other_trainer.user_id)},
        json={"request_id": program_requests[0].id, "price": 10}
    )
    assert response.status_code == 404


# Program Tests

def test_create_training_program(client: TestClient, db: Session, trainer: Trainer, trainees: list[Trainee], auth_headers: dict):
    response = client.post(
        "/trainer/program",
        headers=auth_headers,
        json={
            "title": "Half marathon build",
            "description": "Ten weeks",
            "trainee_id": trainees[0].id,
            "start_date": "2026-11-02",
            "end_date": "2027-01-11"
        }
    )
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Training program created"
    assert data["success"] is True

    program = db.get(TrainingProgram, data["id"])
    assert program.trainer_id == trainer.id
    assert program.title == "Half marathon build"


def test_create_training_program_ignores_trainer_id_in_body(
    client: TestClient, db: Session, trainer: Trainer, other_trainer: Trainer, auth_headers: dict
):
    response = client.post(
        "/trainer/program",
        headers=auth_headers,
        json={"title": "Base", "trainer_id": other_trainer.id}
    )
    assert response.status_code == 200
    assert db.get(TrainingProgram, response.json()["id"]).trainer_id == trainer.id


def test_create_training_program_missing_title(client: TestClient, trainer: Trainer, auth_headers: dict):
    response = client.post("/trainer/program", headers=auth_headers, json={"description": "No title"})
    assert response.status_code == 400


def test_create_training_program_bad_dates(client: TestClient, trainer: Trainer, auth_headers: dict):
    response = client.post(
        "/trainer/program",
        headers=auth_headers,
        json={"title": "Backwards", "start_date": "2026-12-01", "end_date": "2026-11-01"}
    )
    assert response.status_code == 400


def test_create_training_program_unknown_trainee(client: TestClient, trainer: Trainer, auth_headers: dict):
    response = client.post("/trainer/program", headers=auth_headers, json={"title": "Base", "trainee_id": 999})
    assert response.status_code == 404


def test_add_sport_activity(client: TestClient, db: Session, trainer: Trainer, auth_headers: dict):
    program = TrainingProgram(trainer_id=trainer.id, title="Strength block")
    db.add(program)
    db.commit()

    response = client.put(
        "/trainer/program/sport-activity",
        headers=auth_headers,
        json={
            "program_id": program.id,
            "name": "Back squat",
            "day": "Tuesday",
            "sets": 5,
            "repetitions": 5
        }
    )
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Sport Activity Added successfully"
    assert data["success"] is True

    activity = db.get(SportActivity, data["id"])
    assert activity.program_id == program.id
    assert activity.day == "tuesday"


def test_add_sport_activity_needs_only_valid_token(client: TestClient, db: Session, trainer: Trainer, make_token):
    """Any authenticated user may add activities; no trainer profile is required."""
    program = TrainingProgram(trainer_id=trainer.id, title="Mobility")
    db.add(program)
    db.commit()

    response = client.put(
        "/trainer/program/sport-activity",
        headers={"Authorization": make_token(12345)},
        json={"program_id": program.id, "name": "Hip openers"}
    )
    assert response.status_code == 200


def test_add_sport_activity_bad_day(client: TestClient, auth_headers: dict):
    response = client.put(
        "/trainer/program/sport-activity",
        headers=auth_headers,
        json={"program_id": 1, "name": "Run", "day": "someday"}
    )
    assert response.status_code == 400


def test_add_sport_activity_unknown_program(client: TestClient, auth_headers: dict):
    response = client.put(
        "/trainer/program/sport-activity",
        headers=auth_headers,
        json={"program_id": 999, "name": "Run"}
    )
    assert response.status_code == 404
    assert response.json() == {"message": "Training program not found"}


# Trainer List Tests

def test_get_all_trainers(client: TestClient, trainer: Trainer, other_trainer: Trainer, auth_headers: dict):
    response = client.get("/trainer/trainers", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 2
    first = data[0]
    assert first["id"] == trainer.user_id
    assert first["first_name"] == "Lena"
    assert first["last_name"] == "Rivera"
    assert first["trainer_profile_card"]["email"] == "coach@test.com"
    assert first["trainer_profile_card"]["first_name"] == "Lena"
    assert data[1]["sports"] == ["swimming"]
    assert data[1]["achievements"] == []


# Report Tests

def test_add_report(client: TestClient, db: Session, trainer: Trainer, auth_headers: dict):
    response = client.post("/trainer/add-report", headers=auth_headers, json={"description": "Gym closed on Friday"})
    assert response.status_code == 200
    assert response.json() == {"description": "Gym closed on Friday"}

    report = db.query(Report).one()
    assert report.user_id == trainer.user_id


def test_add_report_uses_token_user_id(client: TestClient, db: Session, trainer: Trainer, make_token):
    """The reporter is taken from the token even when the body names someone else."""
    response = client.post(
        "/trainer/add-report",
        headers={"Authorization": make_token(trainer.user_id)},
        json={"description": "Note", "user_id": 999}
    )
    assert response.status_code == 200
    assert db.query(Report).one().user_id == trainer.user_id


def test_add_report_empty_description(client: TestClient, auth_headers: dict):
    response = client.post("/trainer/add-report", headers=auth_headers, json={"description": ""})
    assert response.status_code == 400


# Week Plan Tests

def test_get_week_plan(client: TestClient, trainer: Trainer, auth_headers: dict):
    response = client.get("/trainer/", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {
        "monday": True,
        "tuesday": False,
        "wednesday": True,
        "thursday": False,
        "friday": True,
        "saturday": False,
        "sunday": False,
    }


def test_get_week_plan_without_active_days(client: TestClient, other_trainer: Trainer, make_token):
    response = client.get("/trainer/", headers={"Authorization": make_token(other_trainer.user_id)})
    assert response.status_code == 200
    assert not any(response.json().values())
