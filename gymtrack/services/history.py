import asyncio
import logging
from collections import defaultdict
from collections.abc import Iterable
from datetime import date

from gymtrack.schemas import (
    ExerciseHistory,
    PersonalRecord,
    SessionSummary,
    SetLog,
    WorkoutSession,
)
from gymtrack.services.store import RecordStore

log = logging.getLogger("gymtrack.history")


def max_weight(sets: list[SetLog]) -> float | None:
    """Return the heaviest weight across sets, or None when there are no sets."""
    return max(s.weight for s in sets) if sets else None


def total_volume(sets: list[SetLog]) -> float:
    """Return sum(reps * weight) across sets."""
    return sum(s.reps * s.weight for s in sets)


def session_summaries(session: WorkoutSession) -> dict[str, SessionSummary]:
    """
    Summarise a session per exercise id. Logs with no sets contribute nothing;
    several logs of the same exercise in one session are folded into one summary.
    """
    summaries: dict[str, SessionSummary] = {}
    for exercise_log in session.exercises:
        heaviest = max_weight(exercise_log.sets)
        if heaviest is None:
            continue
        volume = total_volume(exercise_log.sets)
        previous = summaries.get(exercise_log.exercise_id)
        if previous is not None:
            heaviest = max(heaviest, previous.max_weight)
            volume += previous.total_volume
        summaries[exercise_log.exercise_id] = SessionSummary(
            date=session.date,
            max_weight=heaviest,
            total_volume=volume,
            sets=len(exercise_log.sets) + (previous.sets if previous else 0),
        )
    return summaries


def apply_summary(
    history: ExerciseHistory | None, exercise_id: str, summary: SessionSummary
) -> ExerciseHistory:
    """Fold one day's summary into an exercise history, returning a new history."""
    if history is None:
        history = ExerciseHistory(
            exercise_id=exercise_id,
            personal_records=PersonalRecord(max_weight=summary.max_weight, date=summary.date),
        )
    else:
        history = ExerciseHistory.model_validate(history.model_dump())

    if summary.max_weight > history.personal_records.max_weight:
        history.personal_records = PersonalRecord(max_weight=summary.max_weight, date=summary.date)

    sessions = [s for s in history.sessions if s.date != summary.date]
    sessions.append(summary)
    sessions.sort(key=lambda s: s.date)
    history.sessions = sessions
    return history


class HistoryAggregator:
    """The only writer of ExerciseHistory rows."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store
        self._locks: defaultdict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    async def record_session(self, session: WorkoutSession) -> list[ExerciseHistory]:
        updated: list[ExerciseHistory] = []
        for exercise_id, summary in session_summaries(session).items():
            async with self._locks[exercise_id]:
                history = await self.store.get_history(exercise_id)
                history = apply_summary(history, exercise_id, summary)
                await self.store.put_history(history)
            updated.append(history)
        log.debug("Recorded session %s into %d exercise histories", session.id, len(updated))
        return updated

    async def rebuild(self, sessions: Iterable[WorkoutSession]) -> list[ExerciseHistory]:
        """Recompute every history from scratch, dropping retracted data."""
        histories: dict[str, ExerciseHistory] = {}
        for session in sorted(sessions, key=lambda s: s.date):
            for exercise_id, summary in session_summaries(session).items():
                histories[exercise_id] = apply_summary(
                    histories.get(exercise_id), exercise_id, summary
                )

        await self.store.clear_history()
        for exercise_id, history in histories.items():
            async with self._locks[exercise_id]:
                await self.store.put_history(history)
        log.info("Rebuilt %d exercise histories", len(histories))
        return list(histories.values())


def last_performed(history: ExerciseHistory) -> date | None:
    return history.sessions[-1].date if history.sessions else None
