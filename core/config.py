from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


# Values that shipped as hard-coded secrets in earlier deployments
PLACEHOLDER_SECRETS = {
    "secret",
    "secret123",
    "changeme",
    "supersecretkey",
    "jwt_secret_please_change",
}


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "Fee Portal API"
    ENV: str = "development"
    PORT: int = 3000
    LOG_LEVEL: Optional[str] = None

    # -------------------------------------------------
    # MongoDB
    # -------------------------------------------------
    MONGODB_URI: str = "mongodb://127.0.0.1:27017/feeportal"
    MONGODB_DEFAULT_DB: str = "feeportal"
    MONGODB_TIMEOUT_MS: int = 5000

    # -------------------------------------------------
    # JWT / auth
    # -------------------------------------------------
    JWT_SECRET_KEY: str = Field(..., description="Token signing secret (required)")
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    BCRYPT_ROUNDS: int = 10

    # -------------------------------------------------
    # Front end
    # -------------------------------------------------
    BACKEND_CORS_ORIGINS: List[str] = ["*"]
    STATIC_DIR: Optional[str] = None

    @field_validator("JWT_SECRET_KEY")
    @classmethod
    def reject_weak_secret(cls, value: str) -> str:
        value = value.strip()
        if value.lower() in PLACEHOLDER_SECRETS:
            raise ValueError("JWT_SECRET_KEY is a known placeholder; supply a real secret")
        if len(value) < 16:
            raise ValueError("JWT_SECRET_KEY must be at least 16 characters")
        return value

    class Config:
        case_sensitive = True


# Instantiate settings (fails fast when JWT_SECRET_KEY is missing)
settings = Settings()
