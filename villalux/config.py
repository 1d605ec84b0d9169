import os
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


class Settings(BaseSettings):
    # Single SQLite file next to the running process
    DATABASE_URL: str = "sqlite:///./villalux.db"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Frontend assets
    STATIC_DIR: str = os.path.join(PACKAGE_DIR, "static")
    INDEX_FILE: str = "index.html"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
