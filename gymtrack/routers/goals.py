from typing import Annotated

from fastapi import APIRouter, Depends
from sqlmodel import SQLModel

from gymtrack.schemas import UserGoals
from gymtrack.services.tracker import GymTracker, get_tracker

router = APIRouter()

TrackerDep = Annotated[GymTracker, Depends(get_tracker)]


class GoalStatsRead(SQLModel):
    current_streak: int
    longest_streak: int
    this_week_count: int


@router.get("/", response_model=UserGoals)
async def get_goals(tracker: TrackerDep):
    return await tracker.get_user_goals()


@router.put("/", response_model=UserGoals)
async def save_goals(body: UserGoals, tracker: TrackerDep):
    return await tracker.save_user_goals(body)


@router.post("/streak", response_model=UserGoals)
async def update_streak(tracker: TrackerDep):
    return await tracker.update_streak_data()


@router.get("/stats", response_model=GoalStatsRead)
async def get_stats(tracker: TrackerDep):
    stats = await tracker.get_goal_stats()
    return GoalStatsRead(
        current_streak=stats.current_streak,
        longest_streak=stats.longest_streak,
        this_week_count=stats.this_week_count,
    )
