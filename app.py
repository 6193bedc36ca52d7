"""
App assembly entry point.

Re-exports the FastAPI `app` from `taskboard.api.main` so the service can be
started with ``uvicorn app:app``.
"""

from taskboard.api.main import app  # noqa: F401
