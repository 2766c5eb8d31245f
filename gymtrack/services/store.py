"""
Keyed persistence for the five collections: exercises, workout sessions,
exercise history, user goals and templates.

Each entity is one row keyed by its natural id. Nested parts (exercise logs,
history summaries, template items) are kept in JSON columns and converted
back into validated schema objects on the way out. Every database error is
re-raised as StorageFailure so callers never see SQLAlchemy types.
"""

import functools
import logging
from contextlib import asynccontextmanager
from datetime import date

from pydantic import ValidationError
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from gymtrack.catalog import catalog_exercises
from gymtrack.database import create_db_and_tables
from gymtrack.errors import StorageFailure, StorageUnavailable
from gymtrack.models import (
    Category,
    Exercise,
    GoalsRecord,
    HistoryRecord,
    MuscleGroup,
    SessionRecord,
    TemplateRecord,
)
from gymtrack.schemas import (
    ExerciseHistory,
    ExerciseLog,
    PersonalRecord,
    SessionSummary,
    TemplateExercise,
    UserGoals,
    WorkoutSession,
    WorkoutTemplate,
)

log = logging.getLogger("gymtrack.store")

GOALS_KEY = "user-goals-singleton"


# ---------------------------------------------------------------------------
# Record <-> schema conversion
# ---------------------------------------------------------------------------


def _decoder(fn):
    """Report rows that no longer validate as corrupt records."""

    @functools.wraps(fn)
    def wrapper(record):
        try:
            return fn(record)
        except ValidationError as exc:
            raise StorageFailure(f"Corrupt {type(record).__name__} row: {exc}") from exc

    return wrapper


def _session_to_record(session: WorkoutSession) -> SessionRecord:
    return SessionRecord(
        id=session.id,
        day=session.date,
        start_time=session.start_time,
        end_time=session.end_time,
        auto_grouped=session.auto_grouped,
        exercises=[e.model_dump(mode="json") for e in session.exercises],
    )


@_decoder
def _record_to_session(record: SessionRecord) -> WorkoutSession:
    return WorkoutSession(
        id=record.id,
        date=record.day,
        start_time=record.start_time,
        end_time=record.end_time,
        auto_grouped=record.auto_grouped,
        exercises=[ExerciseLog.model_validate(e) for e in record.exercises],
    )


def _history_to_record(history: ExerciseHistory) -> HistoryRecord:
    return HistoryRecord(
        exercise_id=history.exercise_id,
        pr_max_weight=history.personal_records.max_weight,
        pr_date=history.personal_records.date,
        sessions=[s.model_dump(mode="json") for s in history.sessions],
    )


@_decoder
def _record_to_history(record: HistoryRecord) -> ExerciseHistory:
    return ExerciseHistory(
        exercise_id=record.exercise_id,
        personal_records=PersonalRecord(max_weight=record.pr_max_weight, date=record.pr_date),
        sessions=[SessionSummary.model_validate(s) for s in record.sessions],
    )


def _template_to_record(template: WorkoutTemplate) -> TemplateRecord:
    return TemplateRecord(
        id=template.id,
        name=template.name,
        created_date=template.created_date,
        exercises=[e.model_dump(mode="json") for e in template.exercises],
    )


@_decoder
def _record_to_template(record: TemplateRecord) -> WorkoutTemplate:
    return WorkoutTemplate(
        id=record.id,
        name=record.name,
        created_date=record.created_date,
        exercises=[TemplateExercise.model_validate(e) for e in record.exercises],
    )


@_decoder
def _record_to_goals(record: GoalsRecord) -> UserGoals:
    return UserGoals(
        workouts_per_week=record.workouts_per_week,
        current_streak=record.current_streak,
        longest_streak=record.longest_streak,
        last_workout_date=record.last_workout_date,
    )


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class RecordStore:
    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    @asynccontextmanager
    async def _session(self):
        try:
            async with AsyncSession(self.engine, expire_on_commit=False) as session:
                yield session
        except SQLAlchemyError as exc:
            raise StorageFailure(str(exc)) from exc

    async def init(self) -> None:
        """Create tables and seed the exercise catalog. Safe to call repeatedly."""
        try:
            await create_db_and_tables(self.engine)
            await self.seed_catalog_if_empty()
        except StorageFailure as exc:
            raise StorageUnavailable(str(exc)) from exc
        except (SQLAlchemyError, OSError) as exc:
            raise StorageUnavailable(str(exc)) from exc

    async def seed_catalog_if_empty(self) -> int:
        """Insert the catalog when the exercises table is empty. Returns rows added."""
        async with self._session() as session:
            count = (await session.exec(select(func.count()).select_from(Exercise))).one()
            if count:
                return 0
            exercises = catalog_exercises()
            session.add_all(exercises)
            await session.commit()
        log.info("Seeded exercise catalog with %d exercises", len(exercises))
        return len(exercises)

    # -- exercises ---------------------------------------------------------

    async def all_exercises(self) -> list[Exercise]:
        async with self._session() as session:
            return list((await session.exec(select(Exercise).order_by(Exercise.id))).all())

    async def get_exercise(self, exercise_id: str) -> Exercise | None:
        async with self._session() as session:
            return await session.get(Exercise, exercise_id)

    async def exercises_by_muscle_group(self, group: MuscleGroup) -> list[Exercise]:
        statement = (
            select(Exercise).where(Exercise.primary_muscle_group == group).order_by(Exercise.id)
        )
        async with self._session() as session:
            return list((await session.exec(statement)).all())

    async def exercises_by_category(self, category: Category) -> list[Exercise]:
        statement = select(Exercise).where(Exercise.category == category).order_by(Exercise.id)
        async with self._session() as session:
            return list((await session.exec(statement)).all())

    async def search_exercises(self, query: str) -> list[Exercise]:
        statement = (
            select(Exercise)
            .where(func.lower(Exercise.name).contains(query.lower(), autoescape=True))
            .order_by(Exercise.id)
        )
        async with self._session() as session:
            return list((await session.exec(statement)).all())

    # -- sessions ----------------------------------------------------------

    async def put_session(self, workout: WorkoutSession) -> None:
        async with self._session() as session:
            await session.merge(_session_to_record(workout))
            await session.commit()

    async def get_session(self, session_id: str) -> WorkoutSession | None:
        async with self._session() as session:
            record = await session.get(SessionRecord, session_id)
        return _record_to_session(record) if record else None

    async def get_session_by_date(self, day: date) -> WorkoutSession | None:
        async with self._session() as session:
            record = (
                await session.exec(select(SessionRecord).where(SessionRecord.day == day))
            ).first()
        return _record_to_session(record) if record else None

    async def sessions_in_range(self, start: date, end: date) -> list[WorkoutSession]:
        statement = (
            select(SessionRecord)
            .where(col(SessionRecord.day) >= start, col(SessionRecord.day) <= end)
            .order_by(col(SessionRecord.day).asc())
        )
        async with self._session() as session:
            records = (await session.exec(statement)).all()
        return [_record_to_session(r) for r in records]

    async def all_sessions(self) -> list[WorkoutSession]:
        """Every session, most recent date first."""
        statement = select(SessionRecord).order_by(col(SessionRecord.day).desc())
        async with self._session() as session:
            records = (await session.exec(statement)).all()
        return [_record_to_session(r) for r in records]

    async def delete_session(self, session_id: str) -> bool:
        async with self._session() as session:
            record = await session.get(SessionRecord, session_id)
            if record is None:
                return False
            await session.delete(record)
            await session.commit()
        return True

    # -- exercise history --------------------------------------------------

    async def put_history(self, history: ExerciseHistory) -> None:
        async with self._session() as session:
            await session.merge(_history_to_record(history))
            await session.commit()

    async def get_history(self, exercise_id: str) -> ExerciseHistory | None:
        async with self._session() as session:
            record = await session.get(HistoryRecord, exercise_id)
        return _record_to_history(record) if record else None

    async def all_history(self) -> list[ExerciseHistory]:
        async with self._session() as session:
            records = (await session.exec(select(HistoryRecord))).all()
        return [_record_to_history(r) for r in records]

    async def clear_history(self) -> None:
        async with self._session() as session:
            records = (await session.exec(select(HistoryRecord))).all()
            for record in records:
                await session.delete(record)
            await session.commit()

    # -- goals -------------------------------------------------------------

    async def get_goals(self) -> UserGoals | None:
        async with self._session() as session:
            record = await session.get(GoalsRecord, GOALS_KEY)
        return _record_to_goals(record) if record else None

    async def put_goals(self, goals: UserGoals) -> None:
        record = GoalsRecord(id=GOALS_KEY, **goals.model_dump())
        async with self._session() as session:
            await session.merge(record)
            await session.commit()

    # -- templates ---------------------------------------------------------

    async def put_template(self, template: WorkoutTemplate) -> None:
        async with self._session() as session:
            await session.merge(_template_to_record(template))
            await session.commit()

    async def get_template(self, template_id: str) -> WorkoutTemplate | None:
        async with self._session() as session:
            record = await session.get(TemplateRecord, template_id)
        return _record_to_template(record) if record else None

    async def all_templates(self) -> list[WorkoutTemplate]:
        """Every template, newest first."""
        statement = select(TemplateRecord).order_by(col(TemplateRecord.created_date).desc())
        async with self._session() as session:
            records = (await session.exec(statement)).all()
        return [_record_to_template(r) for r in records]

    async def delete_template(self, template_id: str) -> bool:
        async with self._session() as session:
            record = await session.get(TemplateRecord, template_id)
            if record is None:
                return False
            await session.delete(record)
            await session.commit()
        return True
