"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    DATABASE_URL: str = "sqlite:///./wait_times.db"
    ADMIN_PASSWORD: str = ""
    CORS_ORIGINS: str = "http://localhost:3000"

    # Reviewer email (SMTP)
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 587
    SMTP_USE_TLS: bool = True
    EMAIL_USER: str = ""
    EMAIL_PASS: str = ""
    REVIEWER_EMAIL: str = ""
    NOTIFY_ON_SUBMIT: bool = False

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
