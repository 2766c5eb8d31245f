from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import SQLModel

from gymtrack.schemas import ExerciseLog, SetLog, WorkoutSession
from gymtrack.services import editing
from gymtrack.services.pr_detection import PRStatus
from gymtrack.services.tracker import GymTracker, get_tracker

router = APIRouter()

TrackerDep = Annotated[GymTracker, Depends(get_tracker)]


# ---------------------------------------------------------------------------
# Request / response schemas
# ---------------------------------------------------------------------------


class SessionCreate(SQLModel):
    date: date


class AddExerciseBody(SQLModel):
    exercise_id: str


class SetCreate(SQLModel):
    reps: int | None = None
    weight: float | None = None


class SetUpdate(SQLModel):
    reps: int | None = None
    weight: float | None = None
    completed: bool | None = None


class PRStatusRead(SQLModel):
    status: PRStatus
    label: str


class SetPRFlagRead(SQLModel):
    set_number: int
    is_pr: bool
    is_matched: bool


class ExercisePRRead(PRStatusRead):
    sets: list[SetPRFlagRead]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _load_session(session_id: str, tracker: GymTracker) -> WorkoutSession:
    session = await tracker.get_session_by_id(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


async def _save_log(
    session: WorkoutSession, exercise_log: ExerciseLog, tracker: GymTracker
) -> WorkoutSession:
    return await tracker.save_session(editing.replace_log(session, exercise_log))


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------


@router.get("/", response_model=list[WorkoutSession])
async def list_sessions(tracker: TrackerDep):
    return await tracker.get_all_sessions()


@router.get("/range", response_model=list[WorkoutSession])
async def list_sessions_in_range(start: date, end: date, tracker: TrackerDep):
    if start > end:
        raise HTTPException(status_code=400, detail="start must not be after end")
    return await tracker.get_sessions_in_range(start, end)


@router.get("/by-date/{day}", response_model=WorkoutSession)
async def get_session_by_date(day: date, tracker: TrackerDep):
    session = await tracker.get_session_by_date(day)
    if session is None:
        raise HTTPException(status_code=404, detail="No session on that date")
    return session


@router.post("/", response_model=WorkoutSession, status_code=201)
async def create_session(body: SessionCreate, tracker: TrackerDep):
    """Open the session for a day, reusing the day's existing session if there is one."""
    existing = await tracker.get_session_by_date(body.date)
    if existing is not None:
        return existing
    return await tracker.save_session(editing.new_session(body.date))


@router.post("/group", response_model=list[WorkoutSession], status_code=201)
async def group_exercise_logs(body: list[ExerciseLog], tracker: TrackerDep):
    """Rebuild sessions from loose exercise logs and save them."""
    return await tracker.group_and_save(body)


@router.get("/{id}", response_model=WorkoutSession)
async def get_session(id: str, tracker: TrackerDep):
    return await _load_session(id, tracker)


@router.put("/{id}", response_model=WorkoutSession)
async def save_session(id: str, body: WorkoutSession, tracker: TrackerDep):
    if body.id != id:
        raise HTTPException(status_code=400, detail="Session id does not match the URL")
    return await tracker.save_session(body)


@router.delete("/{id}", status_code=204)
async def delete_session(id: str, tracker: TrackerDep):
    if not await tracker.delete_session(id):
        raise HTTPException(status_code=404, detail="Session not found")


@router.get("/{id}/pr-status", response_model=PRStatusRead)
async def get_session_pr_status(id: str, tracker: TrackerDep):
    session = await _load_session(id, tracker)
    status = await tracker.session_pr_status(session)
    return PRStatusRead(status=status, label=status.label)


# ---------------------------------------------------------------------------
# Exercise logs
# ---------------------------------------------------------------------------


@router.post("/{id}/exercises", response_model=ExerciseLog, status_code=201)
async def add_exercise(id: str, body: AddExerciseBody, tracker: TrackerDep):
    session = await _load_session(id, tracker)
    exercise = await tracker.get_exercise_by_id(body.exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Exercise not found")
    session = await tracker.save_session(editing.add_exercise(session, exercise))
    return session.exercises[-1]


@router.delete("/{id}/exercises/{log_id}", status_code=204)
async def remove_exercise(id: str, log_id: str, tracker: TrackerDep):
    session = await _load_session(id, tracker)
    await tracker.save_session(editing.remove_exercise(session, log_id))


@router.get("/{id}/exercises/{log_id}/pr-status", response_model=ExercisePRRead)
async def get_exercise_pr_status(id: str, log_id: str, tracker: TrackerDep):
    session = await _load_session(id, tracker)
    exercise_log = editing.find_log(session, log_id)
    status = await tracker.exercise_pr_status(exercise_log, session.date)
    flags = await tracker.set_pr_flags(exercise_log)
    return ExercisePRRead(
        status=status,
        label=status.label,
        sets=[
            SetPRFlagRead(set_number=f.set_number, is_pr=f.is_pr, is_matched=f.is_matched)
            for f in flags
        ],
    )


# ---------------------------------------------------------------------------
# Sets
# ---------------------------------------------------------------------------


@router.post("/{id}/exercises/{log_id}/sets", response_model=SetLog, status_code=201)
async def add_set(id: str, log_id: str, body: SetCreate, tracker: TrackerDep):
    session = await _load_session(id, tracker)
    exercise_log = editing.add_set(editing.find_log(session, log_id), body.reps, body.weight)
    await _save_log(session, exercise_log, tracker)
    return exercise_log.sets[-1]


@router.patch("/{id}/exercises/{log_id}/sets/{set_number}", response_model=SetLog)
async def update_set(id: str, log_id: str, set_number: int, body: SetUpdate, tracker: TrackerDep):
    session = await _load_session(id, tracker)
    exercise_log = editing.update_set(
        editing.find_log(session, log_id),
        set_number,
        reps=body.reps,
        weight=body.weight,
        completed=body.completed,
    )
    await _save_log(session, exercise_log, tracker)
    return exercise_log.sets[set_number - 1]


@router.delete("/{id}/exercises/{log_id}/sets/{set_number}", status_code=204)
async def delete_set(id: str, log_id: str, set_number: int, tracker: TrackerDep):
    session = await _load_session(id, tracker)
    exercise_log = editing.delete_set(editing.find_log(session, log_id), set_number)
    await _save_log(session, exercise_log, tracker)
