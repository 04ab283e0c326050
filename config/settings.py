"""Application configuration using Pydantic Settings."""

from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# NOTE: logfire.configure() is not called here. Logfire is configured once at
# application startup (main.py via observability/logfire_config.py) or in
# pytest hooks (conftest.py).


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The OpenRouter key is optional at startup: a missing key is reported
    per request as a generation failure instead of preventing the API
    from booting.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment: development, staging, production")
    debug: bool = Field(default=False, description="Debug mode")

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")

    # CORS Settings
    allowed_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins"
    )

    # Generation endpoint (OpenRouter)
    openrouter_api_key: str = Field(default="", description="OpenRouter API key")
    openrouter_base_url: str = Field(
        default="https://openrouter.ai/api/v1",
        description="OpenRouter API base URL"
    )
    generation_model: str = Field(
        default="qwen/qwen3-0.6b-04-28:free",
        description="Model identifier sent to OpenRouter"
    )
    generation_temperature: float = Field(default=0.7, ge=0.0, le=2.0, description="Sampling temperature")
    generation_max_tokens: int = Field(default=1000, ge=1, description="Maximum tokens per generated email")
    generation_timeout: float = Field(default=60.0, gt=0, description="Generation request timeout in seconds")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Observability
    logfire_token: str = Field(default="", description="Logfire observability token")

    @field_validator("allowed_origins")
    @classmethod
    def parse_origins(cls, v: str) -> List[str]:
        """Parse comma-separated origins into a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("generation_model")
    @classmethod
    def validate_generation_model(cls, v: str) -> str:
        """Validate that a model identifier is provided."""
        if not v.strip():
            raise ValueError("Generation model cannot be empty")
        return v.strip()

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() == "production"


# Create a singleton instance
settings = Settings()


def get_settings() -> "Settings":
    """Return the singleton settings instance."""
    return settings
