"""
Event Handler Base

Abstract interface implemented by applications to process AppMarket events.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from appmarket_sdk.contracts.return_address import EventReturnAddress


@dataclass
class HandlerResult:
    """
    Outcome reported by a handler after processing an event.
    """

    success: bool
    message: str | None = None
    error_code: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, message: str | None = None, **details: Any) -> "HandlerResult":
        return cls(success=True, message=message, details=details)

    @classmethod
    def failed(
        cls,
        error_code: str,
        message: str | None = None,
        **details: Any,
    ) -> "HandlerResult":
        return cls(success=False, message=message, error_code=error_code, details=details)


class EventHandler(ABC):
    """
    Abstract interface for AppMarket event handlers.

    The return address received with each event identifies where the
    "event processing completed" signal has to be sent once the handler
    is done. Handlers may keep it after handle() returns when completion
    is reported later.
    """

    @abstractmethod
    def handle(
        self,
        payload: dict[str, Any],
        return_address: EventReturnAddress,
    ) -> HandlerResult:
        """
        Process a single event.

        Args:
            payload: Event data as delivered by the marketplace
            return_address: Event id, marketplace base URL and client id
                needed to acknowledge the event

        Returns:
            HandlerResult describing the outcome
        """
        ...
