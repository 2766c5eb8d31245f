from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import SQLModel

from gymtrack.models import MuscleGroup
from gymtrack.schemas import ExerciseHistory, PersonalRecord
from gymtrack.services.tracker import GymTracker, get_tracker

router = APIRouter()

TrackerDep = Annotated[GymTracker, Depends(get_tracker)]


class ProgressRead(SQLModel):
    exercise_id: str
    personal_record: PersonalRecord
    total_sessions: int
    total_volume: float
    average_volume: float
    last_performed: date | None


class ExerciseWithHistoryRead(SQLModel):
    exercise_id: str
    name: str
    primary_muscle_group: MuscleGroup
    history: ExerciseHistory


@router.get("/", response_model=list[ExerciseHistory])
async def list_history(tracker: TrackerDep):
    return await tracker.get_all_exercise_history()


@router.get("/exercises", response_model=list[ExerciseWithHistoryRead])
async def list_performed_exercises(tracker: TrackerDep):
    """Exercises with at least one recorded session, most recently performed first."""
    return [
        ExerciseWithHistoryRead(
            exercise_id=exercise.id,
            name=exercise.name,
            primary_muscle_group=exercise.primary_muscle_group,
            history=history,
        )
        for exercise, history in await tracker.get_exercises_with_history()
    ]


@router.post("/rebuild", response_model=list[ExerciseHistory])
async def rebuild_history(tracker: TrackerDep):
    return await tracker.rebuild_history()


@router.get("/{exercise_id}", response_model=ExerciseHistory)
async def get_history(exercise_id: str, tracker: TrackerDep):
    history = await tracker.get_exercise_history(exercise_id)
    if history is None:
        raise HTTPException(status_code=404, detail="No history for exercise")
    return history


@router.get("/{exercise_id}/summary", response_model=ProgressRead)
async def get_progress_summary(exercise_id: str, tracker: TrackerDep):
    progress = await tracker.get_exercise_progress(exercise_id)
    if progress is None:
        raise HTTPException(status_code=404, detail="No history for exercise")
    return ProgressRead(
        exercise_id=progress.exercise_id,
        personal_record=progress.personal_record,
        total_sessions=progress.total_sessions,
        total_volume=progress.total_volume,
        average_volume=progress.average_volume,
        last_performed=progress.last_performed,
    )
