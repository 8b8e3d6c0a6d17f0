"""Application configuration loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_URL: str = "sqlite:///./fitstreak.db"

    # Log store backend: "sql" (local database) or "supabase" (hosted table)
    LOG_STORE_BACKEND: str = "sql"

    # Supabase REST (PostgREST) access
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""
    SUPABASE_TABLE: str = "fitness_logs"
    SUPABASE_TIMEOUT: float = 10.0

    # Identity used when a request carries no X-User-Id header
    DEFAULT_USER_ID: str = "myself"

    # Challenge settings
    GOAL_DAYS: int = 100
    HEATMAP_WINDOW_DAYS: int = 28
    DEFAULT_HEIGHT_CM: str = "175"

    # IANA timezone used to decide which calendar day a log belongs to
    TIMEZONE: str = "UTC"

    # Frontend URL for CORS
    FRONTEND_URL: str = "http://localhost:5173"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Create a global settings instance for direct import
settings = get_settings()
