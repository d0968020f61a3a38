"""
App assembly entry point.

Re-exports the FastAPI `app` from `auth_adapter.api.main` so process
managers can point at ``app:app``.
"""

from auth_adapter.api.main import app  # noqa: F401
