"""
Library configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file). The
provider itself never reads them implicitly; host applications build a
RecaptchaSettings and hand it to ``ReCaptchaProvider.from_settings``.
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"
DEFAULT_TIMEOUT_SECONDS = 10.0


class RecaptchaSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Empty is allowed here; the provider refuses to start without a secret
    recaptcha_secret: str = ""
    recaptcha_verify_url: str = DEFAULT_VERIFY_URL
    recaptcha_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @field_validator("recaptcha_timeout_seconds")
    @classmethod
    def _timeout_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("recaptcha_timeout_seconds must be positive")
        return v


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "development"
    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production

    @property
    def is_production(self) -> bool:
        return self.env == "production"
