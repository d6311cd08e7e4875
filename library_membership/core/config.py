# File: library_membership/core/config.py

import os
from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "Library Membership API"
    VERSION: str = "0.1.0"

    api_v1_prefix: str = "/api/v1"
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # CORS
    backend_cors_origins: List[str] = Field(
        default=os.getenv("BACKEND_CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"),
        validate_default=True,
    )

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./library_membership.db")

    # Security / auth
    secret_key: str = os.getenv("SECRET_KEY", "CHANGE_ME_IN_PRODUCTION_use_32_bytes_or_more")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    algorithm: str = "HS256"
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
