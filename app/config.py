"""
Application configuration loaded from the environment and an optional .env file.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_PORT = 3001


class Settings(BaseModel):
    """Process-wide settings, built once at startup."""
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    database_url: Optional[str] = None
    log_level: str = "INFO"


def load_settings(env_file: str = ".env") -> Settings:
    """
    Load settings from the environment.
    Values from env_file are applied first if the file exists; variables
    already set in the environment take precedence.
    """
    load_dotenv(env_file)

    return Settings(
        port=os.getenv("PORT") or DEFAULT_PORT,
        database_url=os.getenv("DATABASE_URL") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
