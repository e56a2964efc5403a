"""Skill configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Skill settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "alexa-skill"

    # Skill
    application_id: str = ""  # Skill ID from the Alexa developer console
    verbose: bool = False  # Log full request/response bodies
    skip_validation: bool = False
    verify_signature: bool = False  # Only applies to the HTTP endpoint

    # Request validation
    timestamp_tolerance_seconds: int = 150
    cert_fetch_timeout: float = 5.0

    class Config:
        env_prefix = "ALEXA_SKILL_"
        case_sensitive = False


settings = Settings()
