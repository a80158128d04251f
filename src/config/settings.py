from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # Application
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # FastAPI
    PORT: int = 8000
    CORS_ORIGINS: List[str] = ["*"]

    # Database settings
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "waitlist"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    DB_AUTO_CREATE_TABLES: bool = False

    # Resend settings
    RESEND_API_KEY: Optional[str] = None
    RESEND_FROM_EMAIL: str = "Rhetix <hello@rhetix.app>"

    # Waitlist
    WAITLIST_SOURCE: str = "landing_hero"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "allow"


settings = Settings()
