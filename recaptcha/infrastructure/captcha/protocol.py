"""CaptchaProvider protocol: callers depend on this, not the concrete implementation."""

from typing import Optional, Protocol, runtime_checkable

from recaptcha.schemas.verification import VerificationResult


@runtime_checkable
class CaptchaProvider(Protocol):
    def verify(
        self, remote_ip: Optional[str], response_token: Optional[str]
    ) -> VerificationResult: ...
