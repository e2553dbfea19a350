from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from ..core.errors import NotFoundError
from ..models import SportActivity, Trainee, TrainingProgram
from ..schemas.trainer import AddSportActivity, TrainingProgramCreate

logger = logging.getLogger(__name__)


def create_training_program(db: Session, trainer_id: int, payload: TrainingProgramCreate) -> TrainingProgram:
    if payload.trainee_id is not None and db.get(Trainee, payload.trainee_id) is None:
        raise NotFoundError("Trainee not found")

    program = TrainingProgram(trainer_id=trainer_id, **payload.model_dump())
    db.add(program)
    db.commit()
    db.refresh(program)
    logger.info(f"Trainer {trainer_id} created training program {program.id}")
    return program


def add_sport_activity(db: Session, payload: AddSportActivity) -> SportActivity:
    program = db.get(TrainingProgram, payload.program_id)
    if program is None:
        raise NotFoundError("Training program not found")

    activity = SportActivity(**payload.model_dump())
    db.add(activity)
    db.commit()
    db.refresh(activity)
    logger.info(f"Added sport activity {activity.id} to program {program.id}")
    return activity
