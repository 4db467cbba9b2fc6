from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Community Resource Dashboard"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"

    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./database.sqlite"

    # Security
    SECRET_KEY: str = "community-resource-dashboard-secret-key-2024"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Default admin account, created at startup when missing
    DEFAULT_ADMIN_EMAIL: str = "admin@community.gov.in"
    DEFAULT_ADMIN_PASSWORD: str = "admin123"
    DEFAULT_ADMIN_NAME: str = "System Administrator"

    # Seeding
    SEED_SAMPLE_DATA: bool = False

    # Matching
    MATCH_LIMIT: int = 10

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
