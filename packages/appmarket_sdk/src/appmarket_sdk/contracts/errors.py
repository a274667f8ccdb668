"""
SDK Errors

Exceptions raised by the AppMarket SDK contracts.
"""

from typing import Any


class AppMarketSDKError(Exception):
    """Base error for the AppMarket SDK."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details or {}


class InvalidReturnAddressError(AppMarketSDKError, ValueError):
    """A return address could not be built from the given values."""

    MISSING_FIELD = "MISSING_FIELD"
    INVALID_TYPE = "INVALID_TYPE"
    EMPTY_VALUE = "EMPTY_VALUE"
    INVALID_URL = "INVALID_URL"

    def __init__(self, field: str, message: str, code: str, value: Any = None):
        super().__init__(
            message,
            code=code,
            details={"field": field, "value": value},
        )
        self.field = field
