"""
Configuration settings for the application
"""

import os
from typing import List, Optional
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""

    # Key-value store
    REDIS_URL: Optional[str] = os.getenv("REDIS_URL")
    REDIS_TOKEN: Optional[str] = os.getenv("REDIS_TOKEN")
    REDIS_SOCKET_TIMEOUT: float = float(os.getenv("REDIS_SOCKET_TIMEOUT", "5.0"))

    # Security
    ADMIN_PASSWORD: Optional[str] = os.getenv("ADMIN_PASSWORD")
    SESSION_COOKIE_NAME: str = os.getenv("SESSION_COOKIE_NAME", "e23_session")
    SESSION_TTL_SECONDS: int = int(os.getenv("SESSION_TTL_SECONDS", str(60 * 60 * 24 * 7)))  # 7 days
    BCRYPT_ROUNDS: int = 10

    # Application
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    TIMEZONE: str = os.getenv("TIMEZONE", "America/New_York")

    # CORS
    ALLOW_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    # RSVP limits
    RSVP_NAME_MAX_LENGTH: int = 50

    class Config:
        env_file = ".env"

    @property
    def store_configured(self) -> bool:
        return bool(self.REDIS_URL)

    @property
    def secure_cookies(self) -> bool:
        return self.ENVIRONMENT != "development"

    @property
    def local_tz(self) -> ZoneInfo:
        return ZoneInfo(self.TIMEZONE)

settings = Settings()
