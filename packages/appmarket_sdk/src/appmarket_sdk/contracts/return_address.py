"""
Event Return Address

Contextual information passed to an EventHandler when an AppMarket event is
handled. It carries what is needed to send the "event processing completed"
signal back to the marketplace that originated the event:

- event_id: correlation key of the event being processed
- marketplace_base_url: where the completion signal must be sent
- client_id: client/tenant the event belongs to

Instances are immutable and compare by value, so they can be shared freely
between threads and tasks.
"""

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

from appmarket_sdk.contracts.errors import InvalidReturnAddressError

ALLOWED_URL_SCHEMES = ("http", "https")


def _require_text(field: str, value: Any) -> None:
    if not isinstance(value, str):
        raise InvalidReturnAddressError(
            field,
            f"{field} must be a string, got {type(value).__name__}",
            code=InvalidReturnAddressError.INVALID_TYPE,
            value=value,
        )
    if not value.strip():
        raise InvalidReturnAddressError(
            field,
            f"{field} must not be empty",
            code=InvalidReturnAddressError.EMPTY_VALUE,
            value=value,
        )


def _require_base_url(field: str, value: str) -> None:
    try:
        parts = urlsplit(value)
    except ValueError as e:
        raise InvalidReturnAddressError(
            field,
            f"{field} is not a valid URL: {e}",
            code=InvalidReturnAddressError.INVALID_URL,
            value=value,
        ) from e
    if parts.scheme.lower() not in ALLOWED_URL_SCHEMES or not parts.netloc:
        raise InvalidReturnAddressError(
            field,
            f"{field} must be an absolute http(s) URL, got {value!r}",
            code=InvalidReturnAddressError.INVALID_URL,
            value=value,
        )


@dataclass(frozen=True)
class EventReturnAddress:
    """
    Return address of an AppMarket event.

    Attributes:
        event_id: Unique identifier of the event being processed
        marketplace_base_url: Base URL of the marketplace instance that sent the event
        client_id: Identifier of the client (tenant) associated with the event

    Values are kept verbatim. Validation happens once, at construction.
    """

    event_id: str
    marketplace_base_url: str
    client_id: str

    def __post_init__(self) -> None:
        _require_text("event_id", self.event_id)
        _require_text("marketplace_base_url", self.marketplace_base_url)
        _require_text("client_id", self.client_id)
        _require_base_url("marketplace_base_url", self.marketplace_base_url)

    @property
    def is_secure(self) -> bool:
        """Whether the completion signal would travel over https."""
        return urlsplit(self.marketplace_base_url).scheme.lower() == "https"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EventReturnAddress":
        """Create a return address from a dictionary with snake_case keys."""
        if not isinstance(data, dict):
            raise InvalidReturnAddressError(
                "return_address",
                f"return address must be a dictionary, got {type(data).__name__}",
                code=InvalidReturnAddressError.INVALID_TYPE,
                value=data,
            )
        for key in ("event_id", "marketplace_base_url", "client_id"):
            if key not in data:
                raise InvalidReturnAddressError(
                    key,
                    f"{key} is required",
                    code=InvalidReturnAddressError.MISSING_FIELD,
                )
        return cls(
            event_id=data["event_id"],
            marketplace_base_url=data["marketplace_base_url"],
            client_id=data["client_id"],
        )

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for serialization."""
        return {
            "event_id": self.event_id,
            "marketplace_base_url": self.marketplace_base_url,
            "client_id": self.client_id,
        }
