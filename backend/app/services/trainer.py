"""Trainer profile, trainee, request and weekly-plan operations."""

from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session, selectinload

from ..core.errors import NotFoundError
from ..models import ActiveDays, ProgramRequest, Trainee, Trainer
from ..schemas.trainer import TrainerEdit, TrainerSetPrice

logger = logging.getLogger(__name__)

# TrainerEdit fields stored on the User row rather than the Trainer row
USER_FIELDS = ("first_name", "last_name")


def get_trainer_by_user_id(db: Session, user_id: int) -> Trainer:
    trainer = db.query(Trainer).filter(Trainer.user_id == user_id).first()
    if trainer is None:
        logger.warning(f"No trainer profile for user {user_id}")
        raise NotFoundError("Trainer not found")
    return trainer


def edit_trainer_profile(db: Session, trainer_id: int, payload: TrainerEdit) -> Trainer:
    """Apply the non-null fields of ``payload`` and return the refreshed trainer."""
    trainer = db.get(Trainer, trainer_id)
    if trainer is None:
        raise NotFoundError("Trainer not found")

    for key, value in payload.model_dump(exclude_none=True).items():
        if key in USER_FIELDS:
            setattr(trainer.user, key, value)
        else:
            setattr(trainer, key, value)

    db.commit()
    db.refresh(trainer)
    logger.info(f"Updated profile of trainer {trainer.id}")
    return trainer


def get_trainee_by_id(db: Session, trainee_id: int) -> Trainee:
    trainee = db.get(Trainee, trainee_id)
    if trainee is None:
        raise NotFoundError("Trainee not found")
    return trainee


def get_requests(db: Session, trainer: Trainer) -> List[ProgramRequest]:
    return (
        db.query(ProgramRequest)
        .filter(ProgramRequest.trainer_id == trainer.id)
        .order_by(ProgramRequest.id)
        .all()
    )


def set_price(db: Session, trainer_id: int, payload: TrainerSetPrice) -> ProgramRequest:
    """
    Price a request owned by ``trainer_id`` and mark it as priced.

    Raises:
        NotFoundError: If the request does not exist or belongs to another trainer
    """
    request = db.get(ProgramRequest, payload.request_id)
    if request is None or request.trainer_id != trainer_id:
        raise NotFoundError("Request not found")

    request.price = payload.price
    request.status = "priced"
    db.commit()
    db.refresh(request)
    logger.info(f"Trainer {trainer_id} priced request {request.id} at {request.price}")
    return request


def get_all_trainers(db: Session) -> List[Trainer]:
    return (
        db.query(Trainer)
        .options(selectinload(Trainer.user))
        .order_by(Trainer.id)
        .all()
    )


def get_week_plan(trainer: Trainer) -> ActiveDays:
    """Return the trainer's active days; a trainer without a plan is inactive all week."""
    if trainer.active_days is None:
        return ActiveDays(
            trainer_id=trainer.id,
            monday=False,
            tuesday=False,
            wednesday=False,
            thursday=False,
            friday=False,
            saturday=False,
            sunday=False,
        )
    return trainer.active_days
