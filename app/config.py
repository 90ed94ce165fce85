import sys
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Find .env even in frozen or packaged mode
POSSIBLE_ENV_PATHS = [
    Path(__file__).resolve().parent.parent / ".env",        # normal
    Path(sys.executable).resolve().parent / ".env",         # frozen exe
    Path.cwd() / ".env",                                   # runtime cwd
]


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = Field(..., min_length=1)

    # JWT
    SECRET_KEY: str = Field(..., min_length=1)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "app.log"

    # Server
    CORS_ORIGINS: List[str] = ["*"]
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    class Config:
        env_file = ".env"
        extra = "ignore"


def find_env_file():
    for env_path in POSSIBLE_ENV_PATHS:
        if env_path.exists():
            return env_path
    return None


def load_settings() -> Settings:
    """
    Build the process-wide settings once at startup.

    Raises pydantic's ValidationError when DATABASE_URL or SECRET_KEY is missing.
    """
    env_path = find_env_file()
    if env_path is not None:
        load_dotenv(env_path, override=True)
    return Settings()
