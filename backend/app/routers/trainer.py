"""Trainer endpoints. ``AuthenticatedRoute`` verifies the token before any body is read."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.deps import AuthenticatedRoute, get_current_trainer, get_current_user_id, get_db
from ..models import Trainer
from ..schemas.base import Message, Response
from ..schemas.trainer import (
    AddSportActivity,
    ProgramRequestSetPrice,
    ReportCreate,
    ReportResponse,
    RequestInTrainerPage,
    TraineeInTrainerPage,
    TrainerEdit,
    TrainerProfileCard,
    TrainerResponse,
    TrainerSetPrice,
    TrainingProgramCreate,
    WeekPlan,
)
from ..services import program as program_service
from ..services import report as report_service
from ..services import trainer as trainer_service

logger = logging.getLogger(__name__)

AUTH_RESPONSES = {
    400: {"model": Message, "description": "Authorization header missing or invalid payload"},
    401: {"model": Message, "description": "Invalid JWT token"},
}
NOT_FOUND_RESPONSE = {404: {"model": Message, "description": "Trainer not found"}}

router = APIRouter(route_class=AuthenticatedRoute, responses=AUTH_RESPONSES)


def _trainer_response(trainer: Trainer) -> TrainerResponse:
    user = trainer.user
    card = TrainerProfileCard(
        user_name=trainer.user_name,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        status=trainer.status,
        coach_experience=trainer.coach_experience,
        contact=trainer.contact,
        language=trainer.language,
        country=trainer.country,
    )
    return TrainerResponse(
        trainer_profile_card=card,
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        sports=trainer.sports or [],
        achievements=trainer.achievements or [],
        education=trainer.education or [],
    )


@router.get("/profile/", response_model=TrainerResponse, responses=NOT_FOUND_RESPONSE)
def get_trainer_profile(trainer: Trainer = Depends(get_current_trainer)):
    """Get the authenticated trainer's profile."""
    return _trainer_response(trainer)


@router.put("/profile/", response_model=TrainerResponse, responses=NOT_FOUND_RESPONSE)
def edit_profile(
    payload: TrainerEdit,
    trainer: Trainer = Depends(get_current_trainer),
    db: Session = Depends(get_db),
):
    """Update the authenticated trainer's profile. Omitted fields are left unchanged."""
    updated = trainer_service.edit_trainer_profile(db, trainer.id, payload)
    return _trainer_response(updated)


@router.get("/trainees/", response_model=list[TraineeInTrainerPage], responses=NOT_FOUND_RESPONSE)
def get_trainees(
    trainer: Trainer = Depends(get_current_trainer),
    db: Session = Depends(get_db),
):
    """List the names of the trainer's trainees."""
    trainees = []
    for trainee_id in trainer.trainee_ids:
        trainee = trainer_service.get_trainee_by_id(db, trainee_id)
        trainees.append(TraineeInTrainerPage(name=trainee.name))
    return trainees


@router.get("/requests/", response_model=list[RequestInTrainerPage], responses=NOT_FOUND_RESPONSE)
def get_all_requests(
    trainer: Trainer = Depends(get_current_trainer),
    db: Session = Depends(get_db),
):
    """List program requests addressed to the trainer."""
    return trainer_service.get_requests(db, trainer)


@router.put("/request/set-price", response_model=ProgramRequestSetPrice, responses=NOT_FOUND_RESPONSE)
def set_price(
    payload: TrainerSetPrice,
    trainer: Trainer = Depends(get_current_trainer),
    db: Session = Depends(get_db),
):
    """Set the price of one of the trainer's requests."""
    request = trainer_service.set_price(db, trainer.id, payload)
    return ProgramRequestSetPrice(
        id=request.id,
        trainer_id=trainer.id,
        trainee_id=request.trainee_id,
        price=request.price,
        description=request.description,
        status=request.status,
    )


@router.post("/program", response_model=Response, responses=NOT_FOUND_RESPONSE)
def create_training_program(
    payload: TrainingProgramCreate,
    trainer: Trainer = Depends(get_current_trainer),
    db: Session = Depends(get_db),
):
    """Create a training program owned by the trainer."""
    program = program_service.create_training_program(db, trainer.id, payload)
    return Response(message="Training program created", success=True, id=program.id)


@router.put(
    "/program/sport-activity",
    response_model=Response,
    responses=NOT_FOUND_RESPONSE,
    dependencies=[Depends(get_current_user_id)],
)
def add_sport_activity(
    payload: AddSportActivity,
    db: Session = Depends(get_db),
):
    """Add a sport activity to an existing training program."""
    activity = program_service.add_sport_activity(db, payload)
    return Response(message="Sport Activity Added successfully", success=True, id=activity.id)


@router.get("/trainers", response_model=list[TrainerResponse], dependencies=[Depends(get_current_user_id)])
def get_all_trainers(db: Session = Depends(get_db)):
    """List every trainer profile."""
    return [_trainer_response(t) for t in trainer_service.get_all_trainers(db)]


@router.post("/add-report", response_model=ReportResponse)
def add_report(
    payload: ReportCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """File a report on behalf of the authenticated user."""
    report = report_service.add_report(db, user_id, payload.description)
    return ReportResponse(description=report.description)


@router.get("/", response_model=WeekPlan, responses=NOT_FOUND_RESPONSE)
def get_week_plan_trainer(trainer: Trainer = Depends(get_current_trainer)):
    """Get the weekdays the trainer is active."""
    return WeekPlan.model_validate(trainer_service.get_week_plan(trainer))
