# backend/emailql/config.py
from pathlib import Path
from pydantic_settings import BaseSettings
import os

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    APP_NAME: str = "emailql"

    # HTTP listener
    HOST: str = os.environ.get("HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("PORT", 4000))

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    DEBUG: bool = os.environ.get("DEBUG", "False").lower() in ("1", "true", "yes")

    # "strict" (email-validator) or "light" (regex)
    EMAIL_CHECKER: str = os.environ.get("EMAIL_CHECKER", "strict")

    # Files loaded at startup / served as-is
    SCHEMA_PATH: str = os.environ.get("SCHEMA_PATH", str(PACKAGE_DIR / "schema.graphql"))
    STATIC_DIR: str = os.environ.get("STATIC_DIR", str(PACKAGE_DIR / "static"))
    EXPLORER_PAGE: str = os.environ.get("EXPLORER_PAGE", str(PACKAGE_DIR / "graphiql.html"))

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
