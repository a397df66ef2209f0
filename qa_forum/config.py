# qa_forum/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"


class Settings(BaseSettings):
    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    DATABASE_URL: str = "sqlite:///./qa_forum.db"

    # "production" hides internal error details from clients
    ENVIRONMENT: str = "development"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"

    BCRYPT_ROUNDS: int = 10

    # Frontend origin allowed by CORS
    FRONTEND_URL: Optional[str] = None

    model_config = SettingsConfigDict(env_file=str(env_path), extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.strip().lower() == "production"


settings = Settings()
