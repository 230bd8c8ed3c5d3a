from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    API_V1_PREFIX: str = "/api/v1"
    DATABASE_URL: str = "sqlite:///./fitstreak.db"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Local calendar used for week boundaries, e.g. "America/New_York".
    # Falls back to the system zone when unset.
    LOCAL_TIMEZONE: Optional[str] = None

    # Personal record eligibility
    MIN_PACE_DISTANCE: float = 0.1  # miles
    PACE_MIN: float = 3.0  # min/mile
    PACE_MAX: float = 30.0  # min/mile

    # Streak messages
    STREAK_MILESTONE_EVERY: int = 5
    STREAK_AT_RISK_DAYS: int = 2  # warn when this few days are left with goals open

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()

settings = get_settings()
