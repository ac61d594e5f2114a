# main.py
import logging
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo-root .env is loaded for the running server process.
load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env")

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from jobnet.config import settings
from jobnet.config import build_sqlalchemy_db_url
from jobnet.database import Base, engine
from jobnet import models  # noqa: F401  registers every table on Base.metadata
from jobnet.api.routes.health import router as health_router
from jobnet.routers import ai, auth, connections, jobs, messages, payments, posts, users


def configure_logging() -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("jobnet").setLevel(level)


def create_app() -> FastAPI:
    configure_logging()

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)

    application.include_router(auth.router, prefix=f"{settings.api_prefix}/auth", tags=["auth"])
    application.include_router(users.router, prefix=f"{settings.api_prefix}/users", tags=["users"])
    application.include_router(jobs.router, prefix=settings.api_prefix)
    application.include_router(connections.router, prefix=settings.api_prefix)
    application.include_router(messages.router, prefix=settings.api_prefix)
    application.include_router(posts.router, prefix=settings.api_prefix)
    application.include_router(ai.router, prefix=settings.api_prefix)
    application.include_router(payments.router, prefix=settings.api_prefix)

    # Avoid accidental schema changes in shared MySQL databases.
    # For local/test sqlite usage, auto-create ORM tables is still convenient.
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()
