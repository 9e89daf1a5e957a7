import os
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

DEFAULT_MODEL = "llama3-70b-8192"
DEFAULT_API_BASE_URL = "https://api.groq.com/openai/v1"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class ConfigurationError(RuntimeError):
    """Raised when the process environment cannot produce usable settings."""


class Settings(BaseModel):
    groq_api_key: str = Field(..., min_length=1)
    model: str = DEFAULT_MODEL
    api_base_url: str = DEFAULT_API_BASE_URL
    timeout_seconds: float = Field(30.0, gt=0)
    log_level: LogLevel = "INFO"

    model_config = {"frozen": True}


def load_settings() -> Settings:
    api_key = os.getenv("GROQ_API_KEY")
    if not api_key:
        raise ConfigurationError("Missing env: GROQ_API_KEY")

    try:
        timeout_seconds = float(os.getenv("LINGOBRIDGE_TIMEOUT_SECONDS", "30"))
    except ValueError as exc:
        raise ConfigurationError("LINGOBRIDGE_TIMEOUT_SECONDS must be a number.") from exc

    try:
        return Settings(
            groq_api_key=api_key,
            model=os.getenv("LINGOBRIDGE_MODEL", DEFAULT_MODEL),
            api_base_url=os.getenv("LINGOBRIDGE_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
            timeout_seconds=timeout_seconds,
            log_level=os.getenv("LINGOBRIDGE_LOG_LEVEL", "INFO").upper(),
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
