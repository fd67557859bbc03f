"""
Configuration module - loads env vars using pydantic-settings.
Only the MongoDB URI comes from the environment (or a .env file);
everything else is a fixed constant below.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


# Fixed names, not configurable
MONGODB_DATABASE = "pbscybsec"
STUDENTS_COLLECTION = "students"

# HTTP listener
SERVER_HOST = "0.0.0.0"
SERVER_PORT = 8080

# Upper bounds for store calls (milliseconds)
SERVER_SELECTION_TIMEOUT_MS = 5000
STORE_TIMEOUT_MS = 10000


class Settings(BaseSettings):
    # MongoDB (env: MONGODB_URI)
    mongodb_uri: str = "mongodb://localhost:27017"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
