"""Request and response DTOs for the trainer routes."""

from __future__ import annotations

import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..models.core import TRAINER_STATUSES, WEEKDAYS

TrainerStatus = Literal[TRAINER_STATUSES]


class TrainerProfileCard(BaseModel):
    user_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    status: Optional[str] = None
    coach_experience: Optional[int] = None
    contact: Optional[str] = None
    language: Optional[str] = None
    country: Optional[str] = None


class TrainerResponse(BaseModel):
    trainer_profile_card: TrainerProfileCard
    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    sports: List[str] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)
    education: List[str] = Field(default_factory=list)


class TrainerEdit(BaseModel):
    """Partial profile update; fields left out (or null) are unchanged."""
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    user_name: Optional[str] = Field(None, min_length=3, max_length=100)
    status: Optional[TrainerStatus] = None
    coach_experience: Optional[int] = Field(None, ge=0, le=80)
    contact: Optional[str] = Field(None, max_length=255)
    language: Optional[str] = Field(None, min_length=2, max_length=64)
    country: Optional[str] = Field(None, min_length=2, max_length=100)
    sports: Optional[List[str]] = None
    achievements: Optional[List[str]] = None
    education: Optional[List[str]] = None

    @field_validator("sports", "achievements", "education")
    @classmethod
    def no_blank_entries(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is not None and any(not item.strip() for item in value):
            raise ValueError("entries must not be blank")
        return value


class TraineeInTrainerPage(BaseModel):
    name: str


class RequestInTrainerPage(BaseModel):
    trainee_name: Optional[str] = None
    date: Optional[datetime.date] = None
    price: Optional[float] = None
    status: str

    class Config:
        from_attributes = True


class TrainerSetPrice(BaseModel):
    request_id: int = Field(..., gt=0)
    price: float = Field(..., gt=0)


class ProgramRequestSetPrice(BaseModel):
    id: int
    trainer_id: int
    trainee_id: int
    price: Optional[float] = None
    description: Optional[str] = None
    status: str


class TrainingProgramCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    trainee_id: Optional[int] = Field(None, gt=0)
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None

    @model_validator(mode="after")
    def check_dates(self) -> "TrainingProgramCreate":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class AddSportActivity(BaseModel):
    program_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    day: Optional[str] = None
    duration_minutes: Optional[int] = Field(None, gt=0, le=24 * 60)
    sets: Optional[int] = Field(None, ge=1)
    repetitions: Optional[int] = Field(None, ge=1)

    @field_validator("day")
    @classmethod
    def check_weekday(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip().lower()
        if value not in WEEKDAYS:
            raise ValueError(f"day must be one of: {', '.join(WEEKDAYS)}")
        return value


class ReportCreate(BaseModel):
    description: str = Field(..., min_length=1, max_length=5000)


class ReportResponse(BaseModel):
    description: str


class WeekPlan(BaseModel):
    monday: bool = False
    tuesday: bool = False
    wednesday: bool = False
    thursday: bool = False
    friday: bool = False
    saturday: bool = False
    sunday: bool = False

    class Config:
        from_attributes = True
