"""Core configuration settings"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List, Literal
import os
from dotenv import load_dotenv

# Load .env file into os.environ for libraries that expect it
load_dotenv()


class Settings(BaseSettings):
    """Core application settings"""

    # Environment
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # API Configuration
    API_V1_STR: str = Field(default="/api/v1")
    PROJECT_NAME: str = Field(default="Content Tree Backend")

    # CORS
    ALLOWED_ORIGINS: List[str] = Field(default=["*"])

    # Storage
    STORAGE_BACKEND: Literal["dynamodb", "memory"] = Field(default="dynamodb")
    CREATE_TABLES_ON_STARTUP: bool = Field(default=False)

    # AWS Configuration
    AWS_ACCESS_KEY_ID: str = Field(default="")
    AWS_SECRET_ACCESS_KEY: str = Field(default="")
    AWS_REGION: str = Field(default="us-east-1")
    DYNAMODB_ENDPOINT_URL: str = Field(default="")
    DYNAMODB_TABLE_PREFIX: str = Field(default="")

    # Authentication
    SECRET_KEY: str = Field(default="change-me-in-production")
    JWT_ALGORITHM: str = Field(default="HS256")

    # Search
    DEFAULT_SEARCH_LIMIT: int = Field(default=10)
    MAX_SEARCH_LIMIT: int = Field(default=100)

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
        "extra": "ignore",  # Ignore extra environment variables
    }


settings = Settings()


def sync_settings_to_env():
    """Sync AWS settings back to os.environ for botocore's credential chain"""
    env_vars = {
        "AWS_ACCESS_KEY_ID": settings.AWS_ACCESS_KEY_ID,
        "AWS_SECRET_ACCESS_KEY": settings.AWS_SECRET_ACCESS_KEY,
        "AWS_DEFAULT_REGION": settings.AWS_REGION,
    }

    for key, value in env_vars.items():
        if value and key not in os.environ:
            os.environ[key] = value


sync_settings_to_env()
