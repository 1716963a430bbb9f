from typing import List, Optional
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings using Pydantic BaseSettings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Database
    DATABASE_URL: str = "sqlite:///./popcornpick.db"
    AUTO_CREATE_TABLES: bool = True

    # JWT
    SECRET_KEY: str = Field(
        "your-secret-key-change-this-in-production",
        validation_alias=AliasChoices("SECRET_KEY", "JWT_SECRET"),
    )
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7
    BCRYPT_ROUNDS: int = 10

    # TMDB
    TMDB_API_KEY: str = ""
    TMDB_BASE_URL: str = "https://api.themoviedb.org/3"
    TMDB_TIMEOUT: int = 10
    TMDB_REGION: str = "IN"  # region read from watch/providers
    TMDB_LANGUAGE: Optional[str] = None

    # Server
    PORT: int = 5000
    API_PREFIX: str = "/api"
    CORS_ALLOW_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    # Scheduler
    ENABLE_SCHEDULER: bool = False
    SCHEDULE_HOUR: int = 3
    SCHEDULE_MINUTE: int = 0

    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()] or ["*"]

# Singleton instance
_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get settings singleton instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
