"""
Library error hierarchy.

AppError is the base for all typed errors. Verification outcomes are never
raised; only misconfiguration detected at construction time is.
"""

from __future__ import annotations

from typing import Optional


class AppError(Exception):
    """Base library error. All typed errors inherit from this."""

    error_code: str = "internal_error"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.field is not None:
            payload["field"] = self.field
        return payload


class ConfigurationError(AppError):
    error_code = "configuration_error"
