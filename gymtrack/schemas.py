import uuid
from datetime import date, datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, field_validator
from sqlmodel import Field, SQLModel


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex}"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """Normalise to UTC. Naive values are taken to already be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------


class SetLog(SQLModel):
    set_number: int = Field(ge=1)
    reps: int = Field(ge=1)
    weight: float = Field(ge=0)  # pounds
    completed: bool = False


class ExerciseLog(SQLModel):
    id: str = Field(default_factory=lambda: new_id("exercise"), min_length=1)
    exercise_id: str = Field(min_length=1)
    exercise_name: str = ""
    sets: list[SetLog] = Field(default_factory=list)
    notes: str | None = None
    timestamp: UtcDatetime = Field(default_factory=utcnow)

    @field_validator("sets")
    @classmethod
    def _sets_numbered_from_one(cls, sets: list[SetLog]) -> list[SetLog]:
        numbers = [s.set_number for s in sets]
        if numbers != list(range(1, len(sets) + 1)):
            raise ValueError(f"set numbers must run 1..{len(sets)} in order, got {numbers}")
        return sets


class WorkoutSession(SQLModel):
    id: str = Field(default_factory=lambda: new_id("session"), min_length=1)
    date: date
    start_time: UtcDatetime
    end_time: UtcDatetime | None = None
    exercises: list[ExerciseLog] = Field(default_factory=list)
    auto_grouped: bool = False


# ---------------------------------------------------------------------------
# Exercise history
# ---------------------------------------------------------------------------


class PersonalRecord(SQLModel):
    max_weight: float
    date: date


class SessionSummary(SQLModel):
    date: date
    max_weight: float
    total_volume: float
    sets: int


class ExerciseHistory(SQLModel):
    exercise_id: str
    personal_records: PersonalRecord
    sessions: list[SessionSummary] = Field(default_factory=list)  # ascending by date


# ---------------------------------------------------------------------------
# Goals and templates
# ---------------------------------------------------------------------------


class UserGoals(SQLModel):
    workouts_per_week: int = Field(default=4, ge=1, le=7)
    current_streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)
    last_workout_date: date | None = None


class TemplateExercise(SQLModel):
    exercise_id: str = Field(min_length=1)
    exercise_name: str = ""
    target_sets: int = Field(ge=0)
    target_reps: int = Field(ge=1)
    last_weight: float | None = Field(default=None, ge=0)


class WorkoutTemplate(SQLModel):
    id: str = Field(default_factory=lambda: new_id("template"), min_length=1)
    name: str = Field(min_length=1)
    created_date: UtcDatetime = Field(default_factory=utcnow)
    exercises: list[TemplateExercise] = Field(default_factory=list)
