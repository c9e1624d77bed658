from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Optional

from summarize_ai.schemas.summary import ProviderName


class Settings(BaseSettings):
    PROJECT_NAME: str = "SummarizeAI"
    DEBUG: bool = False

    API_KEY: Optional[str] = None
    SUMMARIZER_PROVIDER: ProviderName = ProviderName.GEMINI
    # Falls back to the provider's default model when unset
    SUMMARIZER_MODEL: Optional[str] = None
    SUMMARY_TIMEOUT_SECONDS: Optional[float] = Field(default=None, gt=0)

    MAX_SESSIONS: int = Field(default=1000, gt=0)
    LOG_DIR: str = "logs"

    class Config:
        env_file = ".env"


settings = Settings()
