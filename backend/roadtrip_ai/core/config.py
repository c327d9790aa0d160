from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Roadtrip Assistant"
    environment: str = Field("local", validation_alias="ENVIRONMENT")
    default_user_id: str = Field("demo-user", validation_alias="DEFAULT_USER_ID")
    llm_provider: str = Field("mock", validation_alias="LLM_PROVIDER")
    ollama_host: str = Field("http://localhost:11434", validation_alias="OLLAMA_HOST")
    ollama_model: str = Field("llama3", validation_alias="OLLAMA_MODEL")
    llm_timeout_seconds: float = Field(60.0, validation_alias="LLM_TIMEOUT_SECONDS")
    llm_retries: int = Field(2, validation_alias="LLM_RETRIES")
    llm_retry_delay_seconds: float = Field(1.0, validation_alias="LLM_RETRY_DELAY_SECONDS")
    cache_ttl_seconds: int = Field(3600, validation_alias="CACHE_TTL_SECONDS")
    weather_enabled: bool = Field(True, validation_alias="WEATHER_ENABLED")
    weather_days: int = Field(5, validation_alias="WEATHER_DAYS")
    display_locale: str = Field("fr-FR", validation_alias="DISPLAY_LOCALE")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    backend_url: str = Field("http://localhost:8000", validation_alias="BACKEND_URL")
    backend_timeout_seconds: float = Field(90.0, validation_alias="BACKEND_TIMEOUT_SECONDS")

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    load_dotenv(".env")
    return Settings()


settings = get_settings()
