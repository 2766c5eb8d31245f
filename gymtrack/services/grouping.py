from datetime import timedelta

from gymtrack.config import SESSION_GAP_MINUTES
from gymtrack.schemas import ExerciseLog, WorkoutSession, as_utc

SESSION_GAP = timedelta(minutes=SESSION_GAP_MINUTES)


def _session_from_logs(logs: list[ExerciseLog]) -> WorkoutSession:
    start = as_utc(logs[0].timestamp)
    return WorkoutSession(
        date=start.date(),
        start_time=start,
        end_time=logs[-1].timestamp,
        exercises=logs,
        auto_grouped=True,
    )


def group_by_proximity(
    exercise_logs: list[ExerciseLog], gap: timedelta = SESSION_GAP
) -> list[WorkoutSession]:
    """
    Rebuild sessions from loose exercise logs. Logs are sorted by timestamp and a
    new session starts whenever two neighbours are more than ``gap`` apart.
    """
    sessions: list[WorkoutSession] = []
    current: list[ExerciseLog] = []

    for exercise_log in sorted(exercise_logs, key=lambda e: as_utc(e.timestamp)):
        if current and as_utc(exercise_log.timestamp) - as_utc(current[-1].timestamp) > gap:
            sessions.append(_session_from_logs(current))
            current = []
        current.append(exercise_log)

    if current:
        sessions.append(_session_from_logs(current))
    return sessions
