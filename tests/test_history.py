"""Tests for the exercise history aggregator."""

from datetime import date, datetime

import pytest

from gymtrack.schemas import ExerciseLog, SetLog, WorkoutSession
from gymtrack.services.history import (
    apply_summary,
    max_weight,
    session_summaries,
    total_volume,
)
from gymtrack.services.tracker import GymTracker

# ---------------------------------------------------------------------------
# Helper factories
# ---------------------------------------------------------------------------


def _log(exercise_id: str, weights: list[float], reps: int = 5) -> ExerciseLog:
    return ExerciseLog(
        exercise_id=exercise_id,
        exercise_name=exercise_id,
        sets=[SetLog(set_number=i, reps=reps, weight=w) for i, w in enumerate(weights, start=1)],
        timestamp=datetime(2025, 1, 1, 9, 0),
    )


def _session(day: date, *logs: ExerciseLog) -> WorkoutSession:
    return WorkoutSession(date=day, start_time=datetime(day.year, day.month, day.day, 9), exercises=list(logs))


def _assert_invariants(history) -> None:
    dates = [s.date for s in history.sessions]
    assert dates == sorted(set(dates))
    assert history.personal_records.max_weight >= max(s.max_weight for s in history.sessions)


def _dumped(histories) -> list[dict]:
    return sorted((h.model_dump() for h in histories), key=lambda d: d["exercise_id"])


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------


def test_max_weight_and_volume():
    sets = _log("ex001", [100.0, 110.0, 105.0], reps=5).sets
    assert max_weight(sets) == 110.0
    assert total_volume(sets) == pytest.approx(5 * (100 + 110 + 105))


def test_max_weight_of_no_sets_is_none():
    assert max_weight([]) is None
    assert total_volume([]) == 0


def test_summaries_skip_logs_without_sets():
    session = _session(date(2025, 1, 6), _log("ex001", []), _log("ex017", [200.0]))
    summaries = session_summaries(session)
    assert set(summaries) == {"ex017"}


def test_summaries_fold_repeated_exercise():
    """Two logs of the same exercise in one session become one summary."""
    session = _session(date(2025, 1, 6), _log("ex001", [100.0, 100.0]), _log("ex001", [120.0]))
    summary = session_summaries(session)["ex001"]
    assert summary.max_weight == 120.0
    assert summary.sets == 3
    assert summary.total_volume == pytest.approx(5 * 320)


def test_apply_summary_creates_history():
    summary = session_summaries(_session(date(2025, 1, 6), _log("ex001", [100.0])))["ex001"]
    history = apply_summary(None, "ex001", summary)
    assert history.exercise_id == "ex001"
    assert history.personal_records.max_weight == 100.0
    assert history.personal_records.date == date(2025, 1, 6)
    assert len(history.sessions) == 1


def test_apply_summary_does_not_mutate_input():
    first = session_summaries(_session(date(2025, 1, 6), _log("ex001", [100.0])))["ex001"]
    second = session_summaries(_session(date(2025, 1, 8), _log("ex001", [120.0])))["ex001"]
    history = apply_summary(None, "ex001", first)
    apply_summary(history, "ex001", second)
    assert len(history.sessions) == 1
    assert history.personal_records.max_weight == 100.0


def test_apply_summary_keeps_dates_sorted_for_backdated_session():
    history = None
    for day, weight in [(date(2025, 1, 10), 100.0), (date(2025, 1, 3), 90.0), (date(2025, 1, 6), 95.0)]:
        summary = session_summaries(_session(day, _log("ex001", [weight])))["ex001"]
        history = apply_summary(history, "ex001", summary)
    assert [s.date for s in history.sessions] == [date(2025, 1, 3), date(2025, 1, 6), date(2025, 1, 10)]
    _assert_invariants(history)


def test_resaving_same_date_replaces_summary_but_keeps_record():
    day = date(2025, 1, 6)
    heavy = session_summaries(_session(day, _log("ex001", [150.0])))["ex001"]
    light = session_summaries(_session(day, _log("ex001", [100.0])))["ex001"]
    history = apply_summary(apply_summary(None, "ex001", heavy), "ex001", light)
    assert len(history.sessions) == 1
    assert history.sessions[0].max_weight == 100.0
    # Records are never rolled back
    assert history.personal_records.max_weight == 150.0
    _assert_invariants(history)


def test_equal_weight_keeps_original_record_date():
    first = session_summaries(_session(date(2025, 1, 6), _log("ex001", [100.0])))["ex001"]
    later = session_summaries(_session(date(2025, 1, 9), _log("ex001", [100.0])))["ex001"]
    history = apply_summary(apply_summary(None, "ex001", first), "ex001", later)
    assert history.personal_records.date == date(2025, 1, 6)


# ---------------------------------------------------------------------------
# Aggregator through the tracker
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_save_session_records_history(tracker: GymTracker):
    await tracker.save_session(_session(date(2025, 1, 6), _log("ex001", [100.0, 105.0])))
    history = await tracker.get_exercise_history("ex001")
    assert history is not None
    assert history.personal_records.max_weight == 105.0
    assert history.sessions[0].sets == 2


@pytest.mark.asyncio
async def test_record_session_is_idempotent(tracker: GymTracker):
    session = _session(date(2025, 1, 6), _log("ex001", [100.0]), _log("ex017", [180.0, 200.0]))
    await tracker.save_session(session)
    once = await tracker.get_all_exercise_history()
    await tracker.save_session(session)
    twice = await tracker.get_all_exercise_history()
    assert _dumped(once) == _dumped(twice)


@pytest.mark.asyncio
async def test_zero_set_log_creates_no_history(tracker: GymTracker):
    await tracker.save_session(_session(date(2025, 1, 6), _log("ex001", [])))
    assert await tracker.get_exercise_history("ex001") is None


@pytest.mark.asyncio
async def test_invariants_hold_over_many_saves(tracker: GymTracker):
    weights = [100.0, 90.0, 120.0, 110.0, 120.0, 80.0]
    for i, weight in enumerate(weights):
        day = date(2025, 2, 1 + (i * 3) % 10)
        await tracker.save_session(_session(day, _log("ex001", [weight])))
    history = await tracker.get_exercise_history("ex001")
    _assert_invariants(history)
    assert history.personal_records.max_weight == 120.0


@pytest.mark.asyncio
async def test_delete_session_leaves_history(tracker: GymTracker):
    session = await tracker.save_session(_session(date(2025, 1, 6), _log("ex001", [100.0])))
    assert await tracker.delete_session(session.id)
    history = await tracker.get_exercise_history("ex001")
    assert history is not None
    assert len(history.sessions) == 1


@pytest.mark.asyncio
async def test_rebuild_history_drops_deleted_sessions(tracker: GymTracker):
    kept = _session(date(2025, 1, 6), _log("ex001", [100.0]))
    dropped = _session(date(2025, 1, 8), _log("ex001", [140.0]), _log("ex017", [200.0]))
    await tracker.save_session(kept)
    await tracker.save_session(dropped)
    await tracker.delete_session(dropped.id)

    rebuilt = await tracker.rebuild_history()

    assert [h.exercise_id for h in rebuilt] == ["ex001"]
    history = await tracker.get_exercise_history("ex001")
    assert history.personal_records.max_weight == 100.0
    assert [s.date for s in history.sessions] == [date(2025, 1, 6)]
    assert await tracker.get_exercise_history("ex017") is None
