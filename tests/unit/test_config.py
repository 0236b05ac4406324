"""Unit tests for RecaptchaSettings and LoggingSettings."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from recaptcha.config import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_VERIFY_URL,
    LoggingSettings,
    RecaptchaSettings,
)


# ---------------------------------------------------------------------------
# RecaptchaSettings
# ---------------------------------------------------------------------------


class TestRecaptchaSettings:
    def test_defaults(self, monkeypatch):
        for var in (
            "RECAPTCHA_SECRET",
            "RECAPTCHA_VERIFY_URL",
            "RECAPTCHA_TIMEOUT_SECONDS",
        ):
            monkeypatch.delenv(var, raising=False)
        s = RecaptchaSettings()
        assert s.recaptcha_secret == ""
        assert s.recaptcha_verify_url == DEFAULT_VERIFY_URL
        assert s.recaptcha_timeout_seconds == DEFAULT_TIMEOUT_SECONDS == 10.0

    def test_loads_from_env(self, monkeypatch):
        monkeypatch.setenv("RECAPTCHA_SECRET", "env-secret")
        monkeypatch.setenv("RECAPTCHA_VERIFY_URL", "https://verify.test/siteverify")
        monkeypatch.setenv("RECAPTCHA_TIMEOUT_SECONDS", "2.5")
        s = RecaptchaSettings()
        assert s.recaptcha_secret == "env-secret"
        assert s.recaptcha_verify_url == "https://verify.test/siteverify"
        assert s.recaptcha_timeout_seconds == 2.5

    @pytest.mark.parametrize("timeout", ["0", "-1"], ids=["zero", "negative"])
    def test_non_positive_timeout_rejected(self, monkeypatch, timeout):
        monkeypatch.setenv("RECAPTCHA_TIMEOUT_SECONDS", timeout)
        with pytest.raises(PydanticValidationError):
            RecaptchaSettings()


# ---------------------------------------------------------------------------
# LoggingSettings
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "env, expected",
    [("production", True), ("development", False)],
    ids=["production", "development"],
)
def test_is_production(monkeypatch, env, expected):
    monkeypatch.setenv("ENV", env)
    assert LoggingSettings().is_production is expected


class TestLoggingSettings:
    def test_defaults(self, monkeypatch):
        for var in ("ENV", "LOG_LEVEL", "LOG_FORMAT"):
            monkeypatch.delenv(var, raising=False)
        s = LoggingSettings()
        assert s.env == "development"
        assert s.log_level == "INFO"
        assert s.log_format == "console"
