"""
Session editing helpers used by the logging routes.

All functions return new objects and leave their inputs untouched, so a caller
can edit a loaded session freely and persist the result with one save.
"""

from datetime import date, datetime

from fastapi import HTTPException

from gymtrack.errors import ValidationFailure, validated
from gymtrack.models import Exercise
from gymtrack.schemas import (
    ExerciseLog,
    SetLog,
    TemplateExercise,
    WorkoutSession,
    WorkoutTemplate,
    as_utc,
    utcnow,
)

DEFAULT_REPS = 8
DEFAULT_TEMPLATE_REPS = 10


def _with_sets(exercise_log: ExerciseLog, sets: list[SetLog]) -> ExerciseLog:
    data = exercise_log.model_dump()
    data["sets"] = [s.model_dump() for s in sets]
    return validated(ExerciseLog, data)


def _with_exercises(session: WorkoutSession, exercises: list[ExerciseLog]) -> WorkoutSession:
    data = session.model_dump()
    data["exercises"] = [e.model_dump() for e in exercises]
    return validated(WorkoutSession, data)


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------


def new_session(day: date, now: datetime | None = None) -> WorkoutSession:
    return WorkoutSession(date=day, start_time=now or utcnow())


def find_log(session: WorkoutSession, log_id: str) -> ExerciseLog:
    for exercise_log in session.exercises:
        if exercise_log.id == log_id:
            return exercise_log
    raise HTTPException(status_code=404, detail="Exercise log not found")


def add_exercise(
    session: WorkoutSession, exercise: Exercise, timestamp: datetime | None = None
) -> WorkoutSession:
    """Append an empty log for ``exercise``; the new log is the session's last."""
    exercise_log = ExerciseLog(
        exercise_id=exercise.id,
        exercise_name=exercise.name,
        timestamp=timestamp or utcnow(),
    )
    return _with_exercises(session, [*session.exercises, exercise_log])


def remove_exercise(session: WorkoutSession, log_id: str) -> WorkoutSession:
    find_log(session, log_id)
    return _with_exercises(session, [e for e in session.exercises if e.id != log_id])


def replace_log(session: WorkoutSession, exercise_log: ExerciseLog) -> WorkoutSession:
    find_log(session, exercise_log.id)
    return _with_exercises(
        session, [exercise_log if e.id == exercise_log.id else e for e in session.exercises]
    )


def merge_sessions(canonical: WorkoutSession, incoming: WorkoutSession) -> WorkoutSession:
    """
    Fold ``incoming`` into the session that already owns its calendar day.
    Logs with a known id replace the stored log; the rest are appended.
    """
    incoming_by_id = {e.id: e for e in incoming.exercises}
    exercises = [incoming_by_id.pop(e.id, e) for e in canonical.exercises]
    exercises.extend(e for e in incoming.exercises if e.id in incoming_by_id)

    ends = [as_utc(t) for t in (canonical.end_time, incoming.end_time) if t is not None]
    data = canonical.model_dump()
    data.update(
        start_time=min(as_utc(canonical.start_time), as_utc(incoming.start_time)),
        end_time=max(ends) if ends else None,
        auto_grouped=canonical.auto_grouped and incoming.auto_grouped,
        exercises=[e.model_dump() for e in exercises],
    )
    return validated(WorkoutSession, data)


# ---------------------------------------------------------------------------
# Sets
# ---------------------------------------------------------------------------


def add_set(
    exercise_log: ExerciseLog, reps: int | None = None, weight: float | None = None
) -> ExerciseLog:
    """Append a set, inheriting reps and weight from the previous set when not given."""
    previous = exercise_log.sets[-1] if exercise_log.sets else None
    new_set = validated(
        SetLog,
        {
            "set_number": len(exercise_log.sets) + 1,
            "reps": reps if reps is not None else (previous.reps if previous else DEFAULT_REPS),
            "weight": weight if weight is not None else (previous.weight if previous else 0.0),
            "completed": False,
        },
    )
    return _with_sets(exercise_log, [*exercise_log.sets, new_set])


def update_set(
    exercise_log: ExerciseLog,
    set_number: int,
    reps: int | None = None,
    weight: float | None = None,
    completed: bool | None = None,
) -> ExerciseLog:
    if not 1 <= set_number <= len(exercise_log.sets):
        raise HTTPException(status_code=404, detail="Set not found")

    current = exercise_log.sets[set_number - 1]
    data = current.model_dump()
    if reps is not None:
        data["reps"] = reps
    if weight is not None:
        data["weight"] = weight
    if completed is not None:
        data["completed"] = completed

    sets = list(exercise_log.sets)
    sets[set_number - 1] = validated(SetLog, data)
    return _with_sets(exercise_log, sets)


def delete_set(exercise_log: ExerciseLog, set_number: int) -> ExerciseLog:
    """Remove a set and renumber the remaining ones 1..n."""
    if not 1 <= set_number <= len(exercise_log.sets):
        raise HTTPException(status_code=404, detail="Set not found")
    remaining = [s for s in exercise_log.sets if s.set_number != set_number]
    renumbered = [
        SetLog(set_number=i, reps=s.reps, weight=s.weight, completed=s.completed)
        for i, s in enumerate(remaining, start=1)
    ]
    return _with_sets(exercise_log, renumbered)


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


def template_from_session(session: WorkoutSession, name: str) -> WorkoutTemplate:
    name = name.strip()
    if not name:
        raise ValidationFailure("Template name must not be empty")
    return validated(
        WorkoutTemplate,
        {
            "name": name,
            "exercises": [
                TemplateExercise(
                    exercise_id=e.exercise_id,
                    exercise_name=e.exercise_name or "Unknown Exercise",
                    target_sets=len(e.sets),
                    target_reps=e.sets[0].reps if e.sets else DEFAULT_TEMPLATE_REPS,
                    last_weight=e.sets[-1].weight if e.sets else None,
                ).model_dump()
                for e in session.exercises
            ],
        },
    )


def apply_template(
    session: WorkoutSession, template: WorkoutTemplate, timestamp: datetime | None = None
) -> WorkoutSession:
    """Append one pre-filled, uncompleted log per template item."""
    timestamp = timestamp or utcnow()
    new_logs = [
        ExerciseLog(
            exercise_id=item.exercise_id,
            exercise_name=item.exercise_name,
            timestamp=timestamp,
            sets=[
                SetLog(
                    set_number=n,
                    reps=item.target_reps,
                    weight=item.last_weight or 0.0,
                    completed=False,
                )
                for n in range(1, item.target_sets + 1)
            ],
        )
        for item in template.exercises
    ]
    return _with_exercises(session, [*session.exercises, *new_logs])
