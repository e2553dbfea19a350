from .core import ActiveDays, ProgramRequest, Report, SportActivity, Trainee, Trainer, TrainingProgram
from .user import User, UserRole

__all__ = [
    "ActiveDays",
    "ProgramRequest",
    "Report",
    "SportActivity",
    "Trainee",
    "Trainer",
    "TrainingProgram",
    "User",
    "UserRole",
]
