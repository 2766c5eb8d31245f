import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gymtrack.config import LOG_LEVEL
from gymtrack.errors import StorageFailure, StorageUnavailable, ValidationFailure
from gymtrack.routers import exercises, goals, history, sessions, templates
from gymtrack.services.tracker import close_tracker, get_tracker

log = logging.getLogger("gymtrack.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    await get_tracker()
    yield
    await close_tracker()


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationFailure)
    async def _validation_failure(request: Request, exc: ValidationFailure):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(StorageUnavailable)
    async def _storage_unavailable(request: Request, exc: StorageUnavailable):
        log.error("Storage unavailable during %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=503, content={"detail": "Storage unavailable"})

    @app.exception_handler(StorageFailure)
    async def _storage_failure(request: Request, exc: StorageFailure):
        log.warning("Storage failure during %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=503, content={"detail": "Storage failure"})


app = FastAPI(title="Gymtrack", lifespan=lifespan)
install_error_handlers(app)

app.include_router(exercises.router, prefix="/api/exercises", tags=["exercises"])
app.include_router(sessions.router, prefix="/api/sessions", tags=["sessions"])
app.include_router(history.router, prefix="/api/history", tags=["history"])
app.include_router(goals.router, prefix="/api/goals", tags=["goals"])
app.include_router(templates.router, prefix="/api/templates", tags=["templates"])
