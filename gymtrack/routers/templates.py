from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import SQLModel

from gymtrack.schemas import WorkoutSession, WorkoutTemplate
from gymtrack.services.editing import apply_template, template_from_session
from gymtrack.services.tracker import GymTracker, get_tracker

router = APIRouter()

TrackerDep = Annotated[GymTracker, Depends(get_tracker)]


class TemplateFromSession(SQLModel):
    name: str


@router.get("/", response_model=list[WorkoutTemplate])
async def list_templates(tracker: TrackerDep):
    return await tracker.get_all_templates()


@router.post("/", response_model=WorkoutTemplate, status_code=201)
async def create_template(body: WorkoutTemplate, tracker: TrackerDep):
    return await tracker.save_template(body)


@router.post("/from-session/{session_id}", response_model=WorkoutTemplate, status_code=201)
async def create_template_from_session(
    session_id: str, body: TemplateFromSession, tracker: TrackerDep
):
    session = await tracker.get_session_by_id(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return await tracker.save_template(template_from_session(session, body.name))


@router.get("/{id}", response_model=WorkoutTemplate)
async def get_template(id: str, tracker: TrackerDep):
    template = await tracker.get_template(id)
    if template is None:
        raise HTTPException(status_code=404, detail="Template not found")
    return template


@router.delete("/{id}", status_code=204)
async def delete_template(id: str, tracker: TrackerDep):
    if not await tracker.delete_template(id):
        raise HTTPException(status_code=404, detail="Template not found")


@router.post("/{id}/apply/{session_id}", response_model=WorkoutSession)
async def apply_template_to_session(id: str, session_id: str, tracker: TrackerDep):
    template = await tracker.get_template(id)
    if template is None:
        raise HTTPException(status_code=404, detail="Template not found")
    session = await tracker.get_session_by_id(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return await tracker.save_session(apply_template(session, template))
