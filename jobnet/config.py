from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Load project-root .env early so both pydantic-settings and any direct os.getenv access
# see consistent values, even if the process CWD is not the repo root.
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_IN_TEST = (os.getenv("ENVIRONMENT") or "").lower() == "test" or bool(os.getenv("PYTEST_CURRENT_TEST"))
if _ENV_PATH.exists() and not _IN_TEST:
    load_dotenv(dotenv_path=_ENV_PATH, override=True)


def _parse_origins(raw: Any) -> list[str]:
    if raw is None:
        return []

    items: list[Any]
    if isinstance(raw, (list, tuple, set)):
        items = list(raw)
    elif isinstance(raw, str):
        s = raw.strip()
        if not s:
            return []

        # Support JSON array string or comma-separated string.
        if s.startswith("["):
            try:
                parsed = json.loads(s)
                items = parsed if isinstance(parsed, list) else [parsed]
            except ValueError:
                items = [p.strip() for p in s.split(",")]
        else:
            items = [p.strip() for p in s.split(",")]
    else:
        items = [raw]

    return [str(item).strip() for item in items if item is not None and str(item).strip()]


class Settings(BaseSettings):
    app_name: str = Field(default="Job Networking Portal API")
    api_prefix: str = Field(default="/api")
    version: str = Field(default="0.1.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=True)
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Database configuration
    # DB_URL wins when set; otherwise development runs on sqlite and other
    # environments assemble a MySQL URL from the discrete DB_* settings.
    db_url: str | None = Field(default=None, validation_alias="DB_URL")
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=3306, validation_alias="DB_PORT")
    db_name: str = Field(default="job_networking_portal", validation_alias="DB_NAME")
    db_user: str = Field(default="root", validation_alias="DB_USER")
    db_password: str = Field(default="password", validation_alias="DB_PASSWORD")
    db_charset: str = Field(default="utf8mb4", validation_alias="DB_CHARSET")

    jwt_secret: str = Field(default="change-me")
    jwt_algorithm: str = Field(default="HS256")
    # Seven days.
    access_token_expire_minutes: int = Field(default=60 * 24 * 7)

    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:3001"],
        validation_alias="CORS_ORIGINS",
    )

    # Matching heuristic
    # - MATCH_STRATEGY: exact | substring | fuzzy
    # - PLACEHOLDER_MODE: fixed | random (experience / culture-fit sub-scores)
    match_strategy: str = Field(default="substring", validation_alias="MATCH_STRATEGY")
    fuzzy_match_threshold: float = Field(default=0.6, ge=0.0, le=1.0, validation_alias="FUZZY_MATCH_THRESHOLD")
    placeholder_mode: str = Field(default="fixed", validation_alias="PLACEHOLDER_MODE")
    experience_placeholder: float = Field(default=80.0, ge=0.0, le=100.0, validation_alias="EXPERIENCE_PLACEHOLDER")
    culture_placeholder: float = Field(default=85.0, ge=0.0, le=100.0, validation_alias="CULTURE_PLACEHOLDER")

    # Skill extraction
    skill_extraction_limit: int = Field(default=5, ge=1, validation_alias="SKILL_EXTRACTION_LIMIT")
    # Returning random vocabulary skills when nothing matched is opt-in.
    skill_extraction_fallback: bool = Field(default=False, validation_alias="SKILL_EXTRACTION_FALLBACK")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> list[str]:
        return _parse_origins(v)

    @field_validator("match_strategy", "placeholder_mode")
    @classmethod
    def _lower(cls, v: str) -> str:
        return (v or "").strip().lower()

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


def build_sqlalchemy_db_url(settings: Settings) -> str:
    if settings.db_url:
        return settings.db_url

    if settings.environment.lower() in {"development", "test"}:
        return "sqlite:///./dev.db"

    # NOTE: password may include special chars; safest is to rely on DB_URL for complex passwords.
    return (
        f"mysql+pymysql://{settings.db_user}:{settings.db_password}"
        f"@{settings.db_host}:{settings.db_port}/{settings.db_name}"
        f"?charset={settings.db_charset}"
    )
