"""
Server-side reCAPTCHA verification client.

Exposes the provider, its transport and the result model so callers can
``from recaptcha import ReCaptchaProvider`` without knowing the layout.
"""

from .errors import AppError, ConfigurationError
from .infrastructure.captcha.protocol import CaptchaProvider
from .infrastructure.captcha.recaptcha import ReCaptchaProvider
from .infrastructure.http_client import HttpClient
from .schemas.verification import VerificationResult

__all__ = [
    "AppError",
    "CaptchaProvider",
    "ConfigurationError",
    "HttpClient",
    "ReCaptchaProvider",
    "VerificationResult",
]
