import os
import logging
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings
from typing import ClassVar, List

# Load environment variables from .env file
load_dotenv(".env", override=True)
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Class to store all the settings of the contact form backend."""

    # ------------------------------
    # Database
    # ------------------------------
    DATABASE_URL: str = Field(default="sqlite+aiosqlite:///./.database.db")
    DB_ECHO: bool = Field(default=False)

    # ------------------------------
    # Server
    # ------------------------------
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000)
    CORS_ORIGINS: List[str] = Field(default=["*"])
    LOG_LEVEL: str = Field(default="INFO")

    # ------------------------------
    # Environment
    # ------------------------------
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # ------------------------------
    # Database models
    # ------------------------------
    DB_MODELS: ClassVar[List[str]] = [
        "contact_backend.models.pagecontact",
    ]

    class Config:
        """Configuration for the settings class."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate the settings
settings = Settings()
