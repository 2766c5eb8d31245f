"""
The workout-history engine: every read and write the HTTP layer performs goes
through a GymTracker.

Reads degrade: a StorageFailure is logged and turned into an empty result, so
"no data" and "could not read data" look the same to callers. Writes and
StorageUnavailable propagate. Derived computations (PR status, streaks) never
raise; an unexpected error resolves to NO_DATA or 0 and is logged.
"""

import asyncio
import functools
import logging
from dataclasses import dataclass
from datetime import date

from gymtrack.config import DATABASE_URL, DEFAULT_WORKOUTS_PER_WEEK
from gymtrack.database import make_engine
from gymtrack.errors import StorageFailure, StorageUnavailable, validated
from gymtrack.models import Category, Exercise, MuscleGroup
from gymtrack.schemas import (
    ExerciseHistory,
    ExerciseLog,
    PersonalRecord,
    UserGoals,
    WorkoutSession,
    WorkoutTemplate,
)
from gymtrack.services.editing import merge_sessions
from gymtrack.services.grouping import group_by_proximity
from gymtrack.services.history import HistoryAggregator, last_performed
from gymtrack.services.pr_detection import (
    PRStatus,
    SetPRFlag,
    exercise_pr_status,
    session_pr_status,
    set_pr_flags,
)
from gymtrack.services.store import RecordStore
from gymtrack.services.streaks import day_streaks, this_week_count, week_streak, workout_dates

log = logging.getLogger("gymtrack.tracker")


@dataclass
class ExerciseProgress:
    exercise_id: str
    personal_record: PersonalRecord
    total_sessions: int
    total_volume: float
    average_volume: float
    last_performed: date | None


@dataclass
class GoalStats:
    current_streak: int
    longest_streak: int
    this_week_count: int


def degrades_to(fallback):
    """Turn a StorageFailure on a read path into ``fallback()``."""

    def decorator(fn):
        @functools.wraps(fn)
        async def wrapper(self, *args, **kwargs):
            try:
                return await fn(self, *args, **kwargs)
            except StorageUnavailable:
                raise
            except StorageFailure:
                log.warning("%s failed; treating as no data", fn.__name__, exc_info=True)
                return fallback()

        return wrapper

    return decorator


def _none():
    return None


class GymTracker:
    def __init__(self, database_url: str = DATABASE_URL) -> None:
        self.database_url = database_url
        self.store: RecordStore | None = None
        self.history: HistoryAggregator | None = None
        self._init_lock = asyncio.Lock()
        self._day_lock = asyncio.Lock()

    async def init(self) -> RecordStore:
        """Open the database on first use. Later calls return the open store."""
        if self.store is not None:
            return self.store
        async with self._init_lock:
            if self.store is None:
                engine = make_engine(self.database_url)
                store = RecordStore(engine)
                try:
                    await store.init()
                except StorageUnavailable:
                    await engine.dispose()
                    log.error("Could not open database at %s", self.database_url)
                    raise
                self.history = HistoryAggregator(store)
                self.store = store
                log.info("Opened database at %s", self.database_url)
        return self.store

    async def close(self) -> None:
        if self.store is not None:
            await self.store.engine.dispose()
            self.store = None
            self.history = None

    # -- catalog -----------------------------------------------------------

    @degrades_to(list)
    async def get_all_exercises(self) -> list[Exercise]:
        store = await self.init()
        return await store.all_exercises()

    @degrades_to(_none)
    async def get_exercise_by_id(self, exercise_id: str) -> Exercise | None:
        store = await self.init()
        return await store.get_exercise(exercise_id)

    @degrades_to(list)
    async def get_exercises_by_muscle_group(self, group: MuscleGroup) -> list[Exercise]:
        store = await self.init()
        return await store.exercises_by_muscle_group(group)

    @degrades_to(list)
    async def get_exercises_by_category(self, category: Category) -> list[Exercise]:
        store = await self.init()
        return await store.exercises_by_category(category)

    @degrades_to(list)
    async def search_exercises_by_name(self, query: str) -> list[Exercise]:
        store = await self.init()
        return await store.search_exercises(query)

    # -- sessions ----------------------------------------------------------

    async def save_session(self, session: WorkoutSession) -> WorkoutSession:
        """
        Insert or replace a session and fold it into exercise history. A session
        for a day that another session already owns is merged into that one;
        the stored (possibly merged) session is returned.
        """
        session = validated(WorkoutSession, session.model_dump())
        store = await self.init()

        async with self._day_lock:
            owner = await store.get_session_by_date(session.date)
            if owner is not None and owner.id != session.id:
                log.info("Merging session %s into %s for %s", session.id, owner.id, session.date)
                merged_id = session.id
                session = merge_sessions(owner, session)
                await store.put_session(session)
                # A re-dated session lives on only in the day's owner
                await store.delete_session(merged_id)
            else:
                await store.put_session(session)

        await self.history.record_session(session)
        return session

    @degrades_to(_none)
    async def get_session_by_id(self, session_id: str) -> WorkoutSession | None:
        store = await self.init()
        return await store.get_session(session_id)

    @degrades_to(_none)
    async def get_session_by_date(self, day: date) -> WorkoutSession | None:
        store = await self.init()
        return await store.get_session_by_date(day)

    @degrades_to(list)
    async def get_sessions_in_range(self, start: date, end: date) -> list[WorkoutSession]:
        store = await self.init()
        return await store.sessions_in_range(start, end)

    @degrades_to(list)
    async def get_all_sessions(self) -> list[WorkoutSession]:
        store = await self.init()
        return await store.all_sessions()

    async def delete_session(self, session_id: str) -> bool:
        """Delete a session. Exercise history is left as it is; see rebuild_history."""
        store = await self.init()
        return await store.delete_session(session_id)

    async def group_and_save(self, exercise_logs: list[ExerciseLog]) -> list[WorkoutSession]:
        logs = [validated(ExerciseLog, e.model_dump()) for e in exercise_logs]
        return [await self.save_session(s) for s in group_by_proximity(logs)]

    # -- history -----------------------------------------------------------

    @degrades_to(_none)
    async def get_exercise_history(self, exercise_id: str) -> ExerciseHistory | None:
        store = await self.init()
        return await store.get_history(exercise_id)

    @degrades_to(list)
    async def get_all_exercise_history(self) -> list[ExerciseHistory]:
        store = await self.init()
        return await store.all_history()

    async def rebuild_history(self) -> list[ExerciseHistory]:
        store = await self.init()
        return await self.history.rebuild(await store.all_sessions())

    async def get_exercise_progress(self, exercise_id: str) -> ExerciseProgress | None:
        history = await self.get_exercise_history(exercise_id)
        if history is None:
            return None
        total = sum(s.total_volume for s in history.sessions)
        count = len(history.sessions)
        return ExerciseProgress(
            exercise_id=exercise_id,
            personal_record=history.personal_records,
            total_sessions=count,
            total_volume=total,
            average_volume=total / count if count else 0.0,
            last_performed=last_performed(history),
        )

    async def get_exercises_with_history(self) -> list[tuple[Exercise, ExerciseHistory]]:
        """Exercises that have been performed, most recently performed first."""
        exercises = {e.id: e for e in await self.get_all_exercises()}
        pairs = [
            (exercises[h.exercise_id], h)
            for h in await self.get_all_exercise_history()
            if h.exercise_id in exercises and h.sessions
        ]
        pairs.sort(key=lambda pair: last_performed(pair[1]), reverse=True)
        return pairs

    # -- PR detection ------------------------------------------------------

    async def exercise_pr_status(self, exercise_log: ExerciseLog, as_of: date) -> PRStatus:
        if not exercise_log.sets:
            return PRStatus.NO_DATA
        try:
            history = await self.get_exercise_history(exercise_log.exercise_id)
            return exercise_pr_status(exercise_log, as_of, history)
        except Exception:
            log.exception("PR detection failed for exercise %s", exercise_log.exercise_id)
            return PRStatus.NO_DATA

    async def session_pr_status(self, session: WorkoutSession) -> PRStatus:
        if not session.exercises:
            return PRStatus.NO_DATA
        try:
            histories: dict[str, ExerciseHistory] = {}
            for exercise_id in {e.exercise_id for e in session.exercises}:
                history = await self.get_exercise_history(exercise_id)
                if history is not None:
                    histories[exercise_id] = history
            return session_pr_status(session, histories)
        except Exception:
            log.exception("PR detection failed for session %s", session.id)
            return PRStatus.NO_DATA

    async def set_pr_flags(self, exercise_log: ExerciseLog) -> list[SetPRFlag]:
        try:
            history = await self.get_exercise_history(exercise_log.exercise_id)
        except Exception:
            log.exception("Could not load history for exercise %s", exercise_log.exercise_id)
            history = None
        return set_pr_flags(exercise_log, history)

    # -- goals -------------------------------------------------------------

    async def get_user_goals(self) -> UserGoals:
        """Return the goals singleton, creating it with defaults on first access."""
        store = await self.init()
        try:
            goals = await store.get_goals()
            if goals is None:
                goals = UserGoals(workouts_per_week=DEFAULT_WORKOUTS_PER_WEEK)
                await store.put_goals(goals)
            return goals
        except StorageUnavailable:
            raise
        except StorageFailure:
            log.warning("Could not load user goals; using defaults", exc_info=True)
            return UserGoals(workouts_per_week=DEFAULT_WORKOUTS_PER_WEEK)

    async def save_user_goals(self, goals: UserGoals) -> UserGoals:
        goals = validated(UserGoals, goals.model_dump())
        store = await self.init()
        await store.put_goals(goals)
        return goals

    async def update_streak_data(self, today: date | None = None) -> UserGoals:
        """Recompute the cached weekly streak. The longest streak never shrinks."""
        today = today or date.today()
        store = await self.init()
        # an unreadable goals row must fail here, not be replaced by defaults
        goals = await store.get_goals() or UserGoals(workouts_per_week=DEFAULT_WORKOUTS_PER_WEEK)
        sessions = await store.all_sessions()

        if not sessions:
            goals.current_streak = 0
            goals.last_workout_date = None
        else:
            try:
                current = week_streak(sessions, goals.workouts_per_week, today)
            except Exception:
                log.exception("Week streak calculation failed")
                current = 0
            goals.current_streak = current
            goals.longest_streak = max(goals.longest_streak, current)
            goals.last_workout_date = sessions[0].date

        return await self.save_user_goals(goals)

    async def get_goal_stats(self, today: date | None = None) -> GoalStats:
        """Day-based streaks and this week's workout-day count."""
        today = today or date.today()
        try:
            dates = workout_dates(await self.get_all_sessions())
            streaks = day_streaks(dates, today)
            return GoalStats(
                current_streak=streaks.current,
                longest_streak=streaks.longest,
                this_week_count=this_week_count(dates, today),
            )
        except Exception:
            log.exception("Goal statistics calculation failed")
            return GoalStats(current_streak=0, longest_streak=0, this_week_count=0)

    # -- templates ---------------------------------------------------------

    async def save_template(self, template: WorkoutTemplate) -> WorkoutTemplate:
        template = validated(WorkoutTemplate, template.model_dump())
        store = await self.init()
        await store.put_template(template)
        return template

    @degrades_to(_none)
    async def get_template(self, template_id: str) -> WorkoutTemplate | None:
        store = await self.init()
        return await store.get_template(template_id)

    @degrades_to(list)
    async def get_all_templates(self) -> list[WorkoutTemplate]:
        store = await self.init()
        return await store.all_templates()

    async def delete_template(self, template_id: str) -> bool:
        store = await self.init()
        return await store.delete_template(template_id)


# ---------------------------------------------------------------------------
# Process-wide handle
# ---------------------------------------------------------------------------

_tracker: GymTracker | None = None


async def get_tracker() -> GymTracker:
    """FastAPI dependency: the shared tracker, opened on first use."""
    global _tracker
    if _tracker is None:
        _tracker = GymTracker(DATABASE_URL)
    await _tracker.init()
    return _tracker


async def close_tracker() -> None:
    global _tracker
    if _tracker is not None:
        await _tracker.close()
        _tracker = None
