"""Application configuration with validation."""
from typing import Optional, Literal
from functools import lru_cache
from pydantic import Field, field_validator, model_validator, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from the environment / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Breakaway Blueprint Assessment"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Live API sessions held in memory; least recently used are evicted past this
    SESSION_REGISTRY_MAX_SIZE: int = Field(default=10_000, ge=1)

    # Lead notification (outbound, fire-and-forget)
    NOTIFICATION_URL: Optional[str] = Field(
        default=None,
        description="Endpoint receiving the lead payload; dispatch is skipped when unset",
    )
    NOTIFICATION_TIMEOUT_SECONDS: float = Field(default=10.0, ge=1.0, le=60.0)

    # Mail renderer (Resend)
    NOTIFICATION_EMAIL: Optional[str] = None
    RESEND_API_KEY: Optional[SecretStr] = None
    RESEND_API_URL: str = "https://api.resend.com/emails"
    NOTIFICATION_FROM: str = "Breakaway Blueprint <onboarding@resend.dev>"

    # Call-to-action target for every readiness tier
    CTA_URL: str = "https://iconocapital.com/contact"

    @field_validator("RESEND_API_KEY")
    @classmethod
    def validate_resend_key(cls, v: Optional[SecretStr]) -> Optional[SecretStr]:
        if v is not None and not v.get_secret_value().startswith("re_"):
            raise ValueError("Invalid Resend API key format")
        return v

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production does not run in debug mode."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
