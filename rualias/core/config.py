from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Connectivity probe
    PROBE_URL: str = "https://morpher.ru"
    PROBE_TIMEOUT_SECONDS: float = 3.0

    # Remote declension providers
    PRIMARY_PROVIDER_URL: str = "https://ws3.morpher.ru/russian/declension"
    SECONDARY_PROVIDER_URL: str = "https://ws3.morpher.ru/russian/declension"
    PROVIDER_TIMEOUT_SECONDS: float = 5.0
    PROVIDER_MAX_ATTEMPTS: int = 2
    PROVIDER_RETRY_DELAY_SECONDS: float = 2.0
    CONCURRENT_PROVIDERS: bool = False  # True queries both providers at once

    # Backend
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    APP_DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
