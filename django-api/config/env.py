"""
Process configuration read from environment variables and an optional .env file.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvSettings(BaseSettings):
    """Deployment-specific settings"""

    DEBUG: bool = False
    SECRET_KEY: str = "django-insecure-change-me"
    ALLOWED_HOSTS: list[str] = ["*"]

    # Bearer tokens
    JWT_SECRET: str = "top_secret"
    JWT_ALGORITHM: str = "HS256"

    # Database
    DB_ENGINE: str = "django.db.backends.sqlite3"
    DB_NAME: str = "db.sqlite3"
    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_HOST: str = ""
    DB_PORT: str = ""

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")
