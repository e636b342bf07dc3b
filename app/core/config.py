from datetime import timedelta
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./sports_stats.db"

    # Server
    PORT: int = 5000
    URL: str = "http://127.0.0.1"
    CORS_ORIGIN: str = "*"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Authentication
    JWT_SECRET: str = "change-me-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_IN: timedelta = timedelta(days=30)
    BCRYPT_ROUNDS: int = 12

    # Rate limiting
    RATE_LIMIT: str = "5000/5 minutes"
    RATE_LIMIT_ENABLED: bool = True

    # Go up two levels from core/config.py → project root
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[2] / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def cors_origins(self) -> list:
        return [origin.strip() for origin in self.CORS_ORIGIN.split(",") if origin.strip()]


settings = Settings()
