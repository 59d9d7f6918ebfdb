"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODELS = {
    "ollama": "llama3.2:3b",
    "openai": "gpt-4o-mini",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = "postgresql+asyncpg://localhost/recipeshelf"  # sync engine uses psycopg
    sql_echo: bool = False

    # Redis (Celery broker)
    redis_url: str = "redis://localhost:6379/0"

    # Ingredient parsing
    ingredient_parser_type: str = "rules"  # "rules" or "llm"
    llm_provider: str = ""  # "ollama" or "openai", empty picks from openai_api_key
    ollama_url: str = "http://localhost:11434"
    ollama_model: str = ""  # empty uses the provider default
    ollama_timeout: float = 30.0  # seconds per remote call
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    llm_request_delay: float = 0.5  # seconds between remote calls during import
    llm_max_retries: int = 3

    # Shopping lists
    range_reduction: str = "lower"  # "lower", "midpoint" or "upper"

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    allowed_origins: str = "http://localhost:3000,http://localhost:8000"

    @property
    def resolved_llm_provider(self) -> str:
        """Get the remote parser provider, defaulting to openai when a key is configured."""
        if self.llm_provider:
            return self.llm_provider.lower()
        return "openai" if self.openai_api_key else "ollama"

    @property
    def llm_model(self) -> str:
        """Get the model name for the active provider."""
        return self.ollama_model or DEFAULT_MODELS.get(self.resolved_llm_provider, "")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
