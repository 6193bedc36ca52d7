"""
FastAPI app assembly: logging, middleware, error translation and router wiring.
"""
import logging

from fastapi import APIRouter, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from taskboard.utils.config import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)
logger.setLevel(settings.log_level)
logger.info("app_startup: log_level=%s", settings.log_level_name)

from taskboard.errors import NotFound, ValidationFailure
from taskboard.api.users import router as users_router
from taskboard.api.projects import router as projects_router
from taskboard.api.tasks import router as tasks_router
from taskboard.api.entities import router as entities_router

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="Taskboard Service",
    description="REST API for managing users, projects, tasks and generic entities.",
    version="1.0.0",
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    logger.info("404 %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"detail": exc.message}, status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(ValidationFailure)
async def validation_failure_handler(request: Request, exc: ValidationFailure):
    logger.info("400 %s %s: %s", request.method, request.url.path, exc.message)
    body = {"detail": exc.message}
    if exc.field:
        body["field"] = exc.field
    return JSONResponse(body, status_code=status.HTTP_400_BAD_REQUEST)


@app.get("/health")
def health():
    return {"status": "ok"}


api_router = APIRouter(prefix=settings.api_prefix)
api_router.include_router(users_router)
api_router.include_router(projects_router)
api_router.include_router(tasks_router)
api_router.include_router(entities_router)
app.include_router(api_router)
