"""reCAPTCHA implementation of CaptchaProvider.

One GET per call against the siteverify endpoint. Every outcome, including
transport failures, comes back as a VerificationResult; only a missing
secret is raised, and only at construction.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from recaptcha.config import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_VERIFY_URL,
    RecaptchaSettings,
)
from recaptcha.errors import ConfigurationError
from recaptcha.infrastructure.http_client import HttpClient
from recaptcha.schemas.verification import (
    HTTP_ERROR,
    MISSING_INPUT,
    UNKNOWN_ERROR,
    VerificationResult,
)
from recaptcha.utils.logger import get_logger, hash_ip

log = get_logger(__name__)


class ReCaptchaProvider:
    VERIFY_URL = DEFAULT_VERIFY_URL
    SIGNUP_URL = "https://www.google.com/recaptcha/admin"
    CLIENT_VERSION = "python_1.0"
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT_SECONDS

    def __init__(
        self,
        secret: Optional[str],
        http_client: Optional[HttpClient] = None,
        *,
        verify_url: str = VERIFY_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Build a provider for one secret.

        ``timeout`` only applies to the client created here; an injected
        ``http_client`` keeps the timeout it was built with.
        """
        if not secret:
            raise ConfigurationError(
                f"To use reCAPTCHA you must get an API key from {self.SIGNUP_URL}",
                field="secret",
            )
        self._secret = secret
        self._verify_url = verify_url
        self._owns_http = http_client is None
        self._http = http_client or HttpClient(timeout=timeout)

    @classmethod
    def from_settings(
        cls, settings: RecaptchaSettings, http_client: Optional[HttpClient] = None
    ) -> "ReCaptchaProvider":
        return cls(
            settings.recaptcha_secret,
            http_client,
            verify_url=settings.recaptcha_verify_url,
            timeout=settings.recaptcha_timeout_seconds,
        )

    @property
    def verify_url(self) -> str:
        return self._verify_url

    def _build_params(
        self, remote_ip: Optional[str], response_token: str
    ) -> dict[str, str]:
        params = {
            "secret": self._secret,
            "remoteip": remote_ip,
            "v": self.CLIENT_VERSION,
            "response": response_token,
        }
        # None means "not provided"; an empty string is still sent
        return {k: v for k, v in params.items() if v is not None}

    def verify(
        self, remote_ip: Optional[str], response_token: Optional[str]
    ) -> VerificationResult:
        if not response_token:
            log.debug("recaptcha_missing_input", ip_hash=hash_ip(remote_ip))
            return VerificationResult.failed(MISSING_INPUT)

        try:
            response = self._http.get(
                self._verify_url, params=self._build_params(remote_ip, response_token)
            )
        except Exception as e:
            log.error(
                "recaptcha_request_failed", error=str(e), error_type=type(e).__name__
            )
            return VerificationResult.failed(HTTP_ERROR)

        if not response.is_success:
            log.error(
                "recaptcha_api_error",
                status_code=response.status_code,
                response_text=response.text[:200],
            )
            return VerificationResult.failed(HTTP_ERROR)

        try:
            answers: Any = response.json()
        except (ValueError, RecursionError) as e:
            log.warning(
                "recaptcha_invalid_json",
                error_type=type(e).__name__,
                status_code=response.status_code,
                response_text=response.text[:200],
            )
            answers = None

        if not isinstance(answers, dict):
            answers = {}

        if answers.get("success") is True:
            log.debug("recaptcha_verified", ip_hash=hash_ip(remote_ip))
            return VerificationResult.ok()

        error_codes = _normalise_codes(answers.get("error-codes"))
        log.warning(
            "recaptcha_verification_failed",
            error_codes=error_codes,
            ip_hash=hash_ip(remote_ip),
        )
        return VerificationResult.failed(error_codes)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "ReCaptchaProvider":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def _normalise_codes(codes: Any) -> Union[str, list[str]]:
    """Keep a string or list as sent; anything else becomes a string."""
    if codes is None:
        return UNKNOWN_ERROR
    if isinstance(codes, str):
        return codes
    if isinstance(codes, list):
        return [c if isinstance(c, str) else str(c) for c in codes]
    return str(codes)
