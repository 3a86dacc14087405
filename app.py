"""
App assembly entry point.

Re-exports the FastAPI `app` from `reading_list.api.main` so the service can
be started with ``uvicorn app:app``.
"""

from reading_list.api.main import app  # noqa: F401
