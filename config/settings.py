"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    api_title: str = "Salary Calculator"
    log_level: str = "INFO"
    forms_config: str = "forms.yaml"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
