from pydantic_settings import BaseSettings
from typing import Optional, List

class Settings(BaseSettings):
    PROJECT_NAME: str = "Coaching Test Scoring API"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
    ]

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./coaching.db"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    # Marking scheme applied when neither the question nor the test sets one
    DEFAULT_MARKS_PER_QUESTION: float = 4
    DEFAULT_NEGATIVE_MARKING: float = 0

    def __init__(self, **data):
        super().__init__(**data)
        # Render / Heroku still hand out postgres:// urls
        if self.DATABASE_URL.startswith("postgres://"):
            self.DATABASE_URL = self.DATABASE_URL.replace("postgres://", "postgresql://", 1)

    class Config:
        env_file = ".env"

settings = Settings()
