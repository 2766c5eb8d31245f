from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from enum import Enum

from gymtrack.schemas import ExerciseHistory, ExerciseLog, WorkoutSession
from gymtrack.services.history import max_weight


class PRStatus(str, Enum):
    PR = "PR"
    MATCHED = "MATCHED"
    REGRESSION = "REGRESSION"
    NO_DATA = "NO_DATA"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    PRStatus.PR: "Personal Record",
    PRStatus.MATCHED: "Matched Previous",
    PRStatus.REGRESSION: "Below Previous",
    PRStatus.NO_DATA: "No History",
}

# Session status is the best status of any exercise in it
_PRIORITY = (PRStatus.PR, PRStatus.MATCHED, PRStatus.REGRESSION)


@dataclass
class SetPRFlag:
    set_number: int
    is_pr: bool
    is_matched: bool


def exercise_pr_status(
    exercise_log: ExerciseLog, as_of: date, history: ExerciseHistory | None
) -> PRStatus:
    """
    Compare an exercise occurrence with every summary dated strictly before
    ``as_of``. Summary order is not relied on, so back-dated sessions work too.
    """
    current = max_weight(exercise_log.sets)
    if current is None or history is None:
        return PRStatus.NO_DATA

    prior = [s.max_weight for s in history.sessions if s.date < as_of]
    if not prior:
        return PRStatus.NO_DATA

    previous_best = max(prior)
    if current > previous_best:
        return PRStatus.PR
    if current == previous_best:
        return PRStatus.MATCHED
    return PRStatus.REGRESSION


def session_pr_status(
    session: WorkoutSession, histories: Mapping[str, ExerciseHistory]
) -> PRStatus:
    statuses = {
        exercise_pr_status(log, session.date, histories.get(log.exercise_id))
        for log in session.exercises
    }
    for status in _PRIORITY:
        if status in statuses:
            return status
    return PRStatus.NO_DATA


def set_pr_flags(exercise_log: ExerciseLog, history: ExerciseHistory | None) -> list[SetPRFlag]:
    """Mark each set against the stored personal record."""
    if history is None or not history.sessions:
        return [SetPRFlag(s.set_number, False, False) for s in exercise_log.sets]
    record = history.personal_records.max_weight
    return [
        SetPRFlag(s.set_number, is_pr=s.weight > record, is_matched=s.weight == record)
        for s in exercise_log.sets
    ]
