"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    log_level: str = "INFO"
    customer_repository: str = "in_memory"  # in_memory or sql
    call_repository: str = "in_memory"  # in_memory or sql
    database_url: str = ""  # Required when customer_repository=sql or call_repository=sql

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
