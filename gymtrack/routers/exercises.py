from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import SQLModel

from gymtrack.catalog import MUSCLE_GROUPS
from gymtrack.models import Category, Exercise, MuscleGroup
from gymtrack.services.tracker import GymTracker, get_tracker

router = APIRouter()

TrackerDep = Annotated[GymTracker, Depends(get_tracker)]


class MuscleGroupRead(SQLModel):
    id: MuscleGroup
    display_name: str
    region: str


@router.get("/", response_model=list[Exercise])
async def list_exercises(
    tracker: TrackerDep,
    muscle_group: MuscleGroup | None = None,
    category: Category | None = None,
    q: str | None = None,
):
    if q:
        exercises = await tracker.search_exercises_by_name(q)
    elif muscle_group is not None:
        exercises = await tracker.get_exercises_by_muscle_group(muscle_group)
    elif category is not None:
        exercises = await tracker.get_exercises_by_category(category)
    else:
        exercises = await tracker.get_all_exercises()

    # Combined filters narrow the first lookup
    if muscle_group is not None:
        exercises = [e for e in exercises if e.primary_muscle_group == muscle_group]
    if category is not None:
        exercises = [e for e in exercises if e.category == category]
    return exercises


@router.get("/muscle-groups", response_model=list[MuscleGroupRead])
async def list_muscle_groups():
    return [
        MuscleGroupRead(id=info.id, display_name=info.display_name, region=info.region)
        for info in MUSCLE_GROUPS.values()
    ]


@router.get("/{id}", response_model=Exercise)
async def get_exercise(id: str, tracker: TrackerDep):
    exercise = await tracker.get_exercise_by_id(id)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise
