from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, Column, Date, DateTime, Float, ForeignKey, Integer, String, Text, JSON
from sqlalchemy.orm import relationship

from ..database import Base

TRAINER_STATUSES = ("available", "busy", "inactive")

REQUEST_STATUSES = (
    "pending",
    "priced",
    "accepted",
    "rejected",
)

WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


class TimestampMixin:
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Trainer(Base, TimestampMixin):
    __tablename__ = "trainers"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True, index=True)
    user_name = Column(String(100))
    status = Column(String(50), default=TRAINER_STATUSES[0])
    coach_experience = Column(Integer, default=0)  # years
    contact = Column(String(255))
    language = Column(String(64))
    country = Column(String(100))
    sports = Column(JSON, default=list)
    achievements = Column(JSON, default=list)
    education = Column(JSON, default=list)

    user = relationship("User", backref="trainer")
    trainees = relationship("Trainee", back_populates="trainer", order_by="Trainee.id")
    active_days = relationship("ActiveDays", back_populates="trainer", uselist=False, cascade="all, delete-orphan")
    requests = relationship("ProgramRequest", back_populates="trainer", order_by="ProgramRequest.id")
    programs = relationship("TrainingProgram", back_populates="trainer")

    @property
    def trainee_ids(self) -> list[int]:
        return [trainee.id for trainee in self.trainees]


class Trainee(Base, TimestampMixin):
    __tablename__ = "trainees"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True, index=True)
    trainer_id = Column(Integer, ForeignKey("trainers.id"), nullable=True, index=True)

    user = relationship("User", backref="trainee")
    trainer = relationship("Trainer", back_populates="trainees")

    @property
    def name(self) -> str:
        return f"{self.user.first_name or ''} {self.user.last_name or ''}"


class ActiveDays(Base):
    """Weekly plan: the weekdays a trainer is available."""
    __tablename__ = "active_days"

    id = Column(Integer, primary_key=True)
    trainer_id = Column(Integer, ForeignKey("trainers.id", ondelete="CASCADE"), nullable=False, unique=True)
    monday = Column(Boolean, default=False, nullable=False)
    tuesday = Column(Boolean, default=False, nullable=False)
    wednesday = Column(Boolean, default=False, nullable=False)
    thursday = Column(Boolean, default=False, nullable=False)
    friday = Column(Boolean, default=False, nullable=False)
    saturday = Column(Boolean, default=False, nullable=False)
    sunday = Column(Boolean, default=False, nullable=False)

    trainer = relationship("Trainer", back_populates="active_days")


class ProgramRequest(Base, TimestampMixin):
    """A trainee's request for a training program, priced by the trainer."""
    __tablename__ = "program_requests"

    id = Column(Integer, primary_key=True, index=True)
    trainer_id = Column(Integer, ForeignKey("trainers.id", ondelete="CASCADE"), nullable=False, index=True)
    trainee_id = Column(Integer, ForeignKey("trainees.id", ondelete="CASCADE"), nullable=False)
    trainee_name = Column(String(255))
    date = Column(Date)
    price = Column(Float)
    description = Column(Text)
    status = Column(String(50), default="pending")  # pending, priced, accepted, rejected

    trainer = relationship("Trainer", back_populates="requests")
    trainee = relationship("Trainee")


class TrainingProgram(Base, TimestampMixin):
    __tablename__ = "training_programs"

    id = Column(Integer, primary_key=True, index=True)
    trainer_id = Column(Integer, ForeignKey("trainers.id", ondelete="CASCADE"), nullable=False, index=True)
    trainee_id = Column(Integer, ForeignKey("trainees.id"), nullable=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    start_date = Column(Date)
    end_date = Column(Date)

    trainer = relationship("Trainer", back_populates="programs")
    trainee = relationship("Trainee")
    sport_activities = relationship("SportActivity", back_populates="program", cascade="all, delete-orphan")


class SportActivity(Base, TimestampMixin):
    __tablename__ = "sport_activities"

    id = Column(Integer, primary_key=True, index=True)
    program_id = Column(Integer, ForeignKey("training_programs.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    day = Column(String(16))  # weekday name
    duration_minutes = Column(Integer)
    sets = Column(Integer)
    repetitions = Column(Integer)

    program = relationship("TrainingProgram", back_populates="sport_activities")


class Report(Base):
    """Free-text report filed by any authenticated user."""
    __tablename__ = "reports"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    description = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User")
