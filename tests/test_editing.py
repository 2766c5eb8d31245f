from datetime import date, datetime, timezone

import pytest
from fastapi import HTTPException

from gymtrack.errors import ValidationFailure
from gymtrack.models import Category, Exercise, MuscleGroup
from gymtrack.schemas import ExerciseLog, SetLog, WorkoutSession, WorkoutTemplate
from gymtrack.services import editing

BENCH = Exercise(
    id="ex001",
    name="Barbell Bench Press",
    primary_muscle_group=MuscleGroup.MID_CHEST,
    category=Category.BARBELL,
    common_rep_ranges="5-8",
)


def _log(*sets: tuple[int, float], exercise_id: str = "ex001") -> ExerciseLog:
    return ExerciseLog(
        exercise_id=exercise_id,
        exercise_name="Barbell Bench Press",
        sets=[SetLog(set_number=i, reps=r, weight=w) for i, (r, w) in enumerate(sets, start=1)],
    )


def _session(*logs: ExerciseLog, hour: int = 9) -> WorkoutSession:
    return WorkoutSession(
        date=date(2025, 3, 3), start_time=datetime(2025, 3, 3, hour), exercises=list(logs)
    )


# ---------------------------------------------------------------------------
# Sets
# ---------------------------------------------------------------------------


def test_delete_set_renumbers():
    exercise_log = _log((5, 100.0), (5, 110.0), (3, 120.0))
    result = editing.delete_set(exercise_log, 2)
    assert [s.set_number for s in result.sets] == [1, 2]
    assert [s.weight for s in result.sets] == [100.0, 120.0]
    # Input is untouched
    assert len(exercise_log.sets) == 3


def test_delete_unknown_set():
    with pytest.raises(HTTPException) as exc_info:
        editing.delete_set(_log((5, 100.0)), 3)
    assert exc_info.value.status_code == 404


def test_add_set_inherits_previous():
    result = editing.add_set(_log((6, 135.0)))
    new = result.sets[-1]
    assert (new.set_number, new.reps, new.weight, new.completed) == (2, 6, 135.0, False)


def test_add_first_set_uses_defaults():
    new = editing.add_set(_log()).sets[0]
    assert (new.set_number, new.reps, new.weight) == (1, editing.DEFAULT_REPS, 0.0)


def test_add_set_with_values():
    new = editing.add_set(_log((6, 135.0)), reps=3, weight=155.0).sets[-1]
    assert (new.reps, new.weight) == (3, 155.0)


def test_add_set_rejects_negative_weight():
    with pytest.raises(ValidationFailure):
        editing.add_set(_log(), reps=5, weight=-5.0)


def test_update_set():
    result = editing.update_set(_log((5, 100.0), (5, 100.0)), 2, weight=105.0, completed=True)
    assert result.sets[1].weight == 105.0
    assert result.sets[1].completed is True
    assert result.sets[1].reps == 5
    assert result.sets[0].completed is False


def test_update_set_rejects_zero_reps():
    with pytest.raises(ValidationFailure):
        editing.update_set(_log((5, 100.0)), 1, reps=0)


# ---------------------------------------------------------------------------
# Exercise logs
# ---------------------------------------------------------------------------


def test_add_exercise_appends_empty_log():
    session = editing.add_exercise(_session(), BENCH)
    assert len(session.exercises) == 1
    added = session.exercises[0]
    assert added.exercise_id == "ex001"
    assert added.exercise_name == "Barbell Bench Press"
    assert added.sets == []


def test_remove_exercise():
    first, second = _log((5, 100.0)), _log((5, 50.0), exercise_id="ex017")
    session = editing.remove_exercise(_session(first, second), first.id)
    assert [e.id for e in session.exercises] == [second.id]


def test_find_unknown_log():
    with pytest.raises(HTTPException) as exc_info:
        editing.find_log(_session(), "exercise-missing")
    assert exc_info.value.status_code == 404


def test_replace_log_keeps_position():
    first, second = _log((5, 100.0)), _log((5, 50.0), exercise_id="ex017")
    session = _session(first, second)
    updated = editing.add_set(first)
    result = editing.replace_log(session, updated)
    assert [e.id for e in result.exercises] == [first.id, second.id]
    assert len(result.exercises[0].sets) == 2


def test_sets_must_be_numbered_from_one():
    with pytest.raises(ValueError):
        ExerciseLog(exercise_id="ex001", sets=[SetLog(set_number=2, reps=5, weight=100.0)])


# ---------------------------------------------------------------------------
# Merging sessions for the same day
# ---------------------------------------------------------------------------


def test_merge_sessions():
    shared = _log((5, 100.0))
    canonical = _session(shared, hour=9)
    canonical.end_time = datetime(2025, 3, 3, 10, tzinfo=timezone.utc)

    changed = editing.add_set(shared)
    extra = _log((8, 40.0), exercise_id="ex017")
    incoming = _session(changed, extra, hour=8)

    merged = editing.merge_sessions(canonical, incoming)

    assert merged.id == canonical.id
    assert [e.id for e in merged.exercises] == [shared.id, extra.id]
    assert len(merged.exercises[0].sets) == 2
    assert merged.start_time == datetime(2025, 3, 3, 8, tzinfo=timezone.utc)
    assert merged.end_time == datetime(2025, 3, 3, 10, tzinfo=timezone.utc)


def test_merge_keeps_manual_flag():
    canonical = _session()
    incoming = _session()
    incoming.auto_grouped = True
    assert editing.merge_sessions(canonical, incoming).auto_grouped is False


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


def test_template_from_session():
    session = _session(_log((8, 100.0), (6, 110.0)), _log(exercise_id="ex017"))
    template = editing.template_from_session(session, "  Push Day  ")

    assert template.name == "Push Day"
    bench, empty = template.exercises
    assert (bench.target_sets, bench.target_reps, bench.last_weight) == (2, 8, 110.0)
    assert (empty.target_sets, empty.target_reps, empty.last_weight) == (
        0,
        editing.DEFAULT_TEMPLATE_REPS,
        None,
    )


def test_template_needs_a_name():
    with pytest.raises(ValidationFailure):
        editing.template_from_session(_session(), "   ")


def test_apply_template_prefills_sets():
    template = editing.template_from_session(_session(_log((8, 100.0), (6, 110.0))), "Push")
    session = editing.apply_template(_session(), template)

    (exercise_log,) = session.exercises
    assert exercise_log.exercise_id == "ex001"
    assert [(s.set_number, s.reps, s.weight, s.completed) for s in exercise_log.sets] == [
        (1, 8, 110.0, False),
        (2, 8, 110.0, False),
    ]


def test_apply_template_without_weight():
    template = WorkoutTemplate(
        name="Core",
        exercises=[{"exercise_id": "ex150", "exercise_name": "Plank", "target_sets": 1, "target_reps": 1}],
    )
    exercise_log = editing.apply_template(_session(), template).exercises[0]
    assert exercise_log.sets[0].weight == 0.0
