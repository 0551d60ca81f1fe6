from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./dev.db"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 3001
    FRONTEND_ORIGINS: List[str] = ["http://localhost:5173"]
    LOG_LEVEL: str = "INFO"
    RESET_DB: bool = False

    # catalogue paging
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # fuzzy matching cut-offs (similarity, 1.0 == exact)
    SEARCH_THRESHOLD: float = 0.65
    SUGGESTION_THRESHOLD: float = 0.6
    SUGGESTION_MIN_LENGTH: int = 2
    DEFAULT_SUGGESTION_LIMIT: int = 10
    MAX_SUGGESTION_LIMIT: int = 50

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
