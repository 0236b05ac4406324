"""
Result model for a single siteverify call.

VerificationResult is the only value ``ReCaptchaProvider.verify`` returns;
failures are reported through ``error_codes`` rather than exceptions.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Codes produced locally, before or instead of a usable service answer.
MISSING_INPUT = "missing-input"
HTTP_ERROR = "http-error"
UNKNOWN_ERROR = "unknown-error"


class VerificationResult(BaseModel):
    """Outcome of verifying one response token.

    ``error_codes`` keeps whatever shape the service sent: a single code
    string or a list of codes. It is always ``None`` on success.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool
    error_codes: Optional[Union[str, list[str]]] = Field(
        default=None, alias="error-codes"
    )

    @model_validator(mode="after")
    def _no_codes_on_success(self) -> "VerificationResult":
        if self.success and self.error_codes is not None:
            raise ValueError("error_codes must be unset when success is true")
        return self

    @classmethod
    def ok(cls) -> "VerificationResult":
        return cls(success=True)

    @classmethod
    def failed(cls, error_codes: Union[str, list[str]]) -> "VerificationResult":
        return cls(success=False, error_codes=error_codes)

    @property
    def error_code_list(self) -> list[str]:
        """Error codes normalised to a list (empty on success)."""
        if self.error_codes is None:
            return []
        if isinstance(self.error_codes, str):
            return [self.error_codes]
        return list(self.error_codes)

    def __bool__(self) -> bool:
        return self.success
