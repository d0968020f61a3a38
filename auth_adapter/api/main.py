"""
FastAPI app assembly: logging, middleware and router wiring.
"""
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth_adapter import __version__
from auth_adapter.config import get_settings

settings = get_settings()

# Configure logging
LOG_LEVEL = getattr(logging, settings.log_level, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", settings.log_level)

from auth_adapter.api.accounts import router as accounts_router
from auth_adapter.api.sessions import router as sessions_router
from auth_adapter.api.users import router as users_router
from auth_adapter.api.verification_tokens import router as verification_tokens_router

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="Auth Adapter",
    description="Persistence for users, linked accounts, sessions and verification tokens.",
    version=__version__,
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["health"])
def health():
    return {"status": "ok", "version": __version__}


app.include_router(users_router)
app.include_router(accounts_router)
app.include_router(sessions_router)
app.include_router(verification_tokens_router)
