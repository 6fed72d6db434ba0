from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Loads all environment variables into a single, accessible object."""
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    SERPER_API_KEY: Optional[str] = None
    SERPER_ENDPOINT: str = "https://serpapi.com/search.json"
    SEARCH_ENGINE: str = "google"
    SEARCH_TIMEOUT_SECONDS: float = 30.0

    ANALYSIS_DELAY_SECONDS: float = 0.8

    PORT: int = 3001
    LOG_LEVEL: str = "INFO"

def get_settings() -> Settings:
    """Reads the environment on every call so a changed key is picked up without a restart."""
    return Settings()
