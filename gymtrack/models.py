from datetime import date, datetime
from enum import Enum

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel


class MuscleGroup(str, Enum):
    FRONT_DELTS = "front-delts"
    SIDE_DELTS = "side-delts"
    REAR_DELTS = "rear-delts"
    UPPER_CHEST = "upper-chest"
    MID_CHEST = "mid-chest"
    LOWER_CHEST = "lower-chest"
    LATS = "lats"
    UPPER_BACK = "upper-back"
    MID_BACK = "mid-back"
    LOWER_BACK = "lower-back"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    FOREARMS = "forearms"
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"
    ABS = "abs"
    OBLIQUES = "obliques"


class Category(str, Enum):
    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    MACHINE = "machine"
    CABLE = "cable"
    BODYWEIGHT = "bodyweight"


class Exercise(SQLModel, table=True):
    id: str = Field(primary_key=True)
    name: str = Field(index=True)
    primary_muscle_group: MuscleGroup = Field(index=True)
    category: Category = Field(index=True)
    common_rep_ranges: str | None = None


class SessionRecord(SQLModel, table=True):
    id: str = Field(primary_key=True)
    day: date = Field(index=True, unique=True)  # one canonical session per calendar day
    start_time: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    end_time: datetime | None = Field(default=None, sa_column=Column(DateTime(timezone=True)))
    auto_grouped: bool = False
    exercises: list[dict] = Field(default_factory=list, sa_column=Column(JSON))


class HistoryRecord(SQLModel, table=True):
    exercise_id: str = Field(primary_key=True)
    pr_max_weight: float
    pr_date: date
    sessions: list[dict] = Field(default_factory=list, sa_column=Column(JSON))


class GoalsRecord(SQLModel, table=True):
    id: str = Field(primary_key=True)
    workouts_per_week: int = 4
    current_streak: int = 0
    longest_streak: int = 0
    last_workout_date: date | None = None


class TemplateRecord(SQLModel, table=True):
    id: str = Field(primary_key=True)
    name: str
    created_date: datetime = Field(
        sa_column=Column(DateTime(timezone=True), index=True, nullable=False)
    )
    exercises: list[dict] = Field(default_factory=list, sa_column=Column(JSON))
