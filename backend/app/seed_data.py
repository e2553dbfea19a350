from __future__ import annotations

from datetime import date, timedelta

from sqlalchemy.orm import Session

from .database import Base, engine, get_session
from .models import ActiveDays, ProgramRequest, Trainee, Trainer, User, UserRole

SEED_TRAINER_USER = {
    "email": "coach.rivera@example.com",
    "first_name": "Lena",
    "last_name": "Rivera",
    "role": UserRole.TRAINER.value,
}

SEED_TRAINER = {
    "user_name": "coach_lena",
    "status": "available",
    "coach_experience": 8,
    "contact": "+49 30 1234567",
    "language": "en",
    "country": "Germany",
    "sports": ["running", "strength"],
    "achievements": ["Berlin Marathon 2:58"],
    "education": ["B.Sc. Sports Science"],
}

SEED_TRAINEES = [
    {"email": "max.keller@example.com", "first_name": "Max", "last_name": "Keller"},
    {"email": "ana.souza@example.com", "first_name": "Ana", "last_name": "Souza"},
]

SEED_ACTIVE_DAYS = {"monday": True, "wednesday": True, "friday": True, "saturday": True}


def seed_session(session: Session) -> Trainer:
    """Insert the demo trainer with trainees, requests and a weekly plan unless already present."""
    trainer = (
        session.query(Trainer)
        .join(User, Trainer.user_id == User.id)
        .filter(User.email == SEED_TRAINER_USER["email"])
        .first()
    )
    if trainer is not None:
        return trainer

    trainer_user = User(**SEED_TRAINER_USER)
    session.add(trainer_user)
    session.flush()

    trainer = Trainer(user_id=trainer_user.id, **SEED_TRAINER)
    trainer.active_days = ActiveDays(**SEED_ACTIVE_DAYS)
    session.add(trainer)
    session.flush()

    for offset, data in enumerate(SEED_TRAINEES):
        user = User(role=UserRole.TRAINEE.value, **data)
        session.add(user)
        session.flush()
        trainee = Trainee(user_id=user.id, trainer_id=trainer.id)
        session.add(trainee)
        session.flush()
        session.add(
            ProgramRequest(
                trainer_id=trainer.id,
                trainee_id=trainee.id,
                trainee_name=user.full_name,
                date=date.today() + timedelta(days=7 * (offset + 1)),
                description=f"12-week plan for {user.first_name}",
                status="pending",
            )
        )

    session.commit()
    return trainer


def seed():
    Base.metadata.create_all(bind=engine)
    with get_session() as session:
        seed_session(session)


if __name__ == "__main__":
    seed()
