"""
Recording Event Handler

Development handler that logs and records every event it receives.
Useful for local development and testing of code that produces return
addresses.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from appmarket_sdk.contracts.return_address import EventReturnAddress
from appmarket_sdk.handlers.base import EventHandler, HandlerResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordedEvent:
    payload: dict[str, Any]
    return_address: EventReturnAddress
    received_at: datetime


class RecordingEventHandler(EventHandler):
    """
    Handler for development and testing.

    - Records every (payload, return address) pair it receives
    - Logs each call with the return address fields
    - Can be configured to report failures
    """

    def __init__(self, fail_with: str | None = None):
        self.fail_with = fail_with
        self.received: list[RecordedEvent] = []

    def handle(
        self,
        payload: dict[str, Any],
        return_address: EventReturnAddress,
    ) -> HandlerResult:
        self.received.append(
            RecordedEvent(
                payload=payload,
                return_address=return_address,
                received_at=datetime.now(timezone.utc),
            )
        )

        logger.info(
            "[RECORDING] Event received",
            extra={
                "event_id": return_address.event_id,
                "marketplace_base_url": return_address.marketplace_base_url,
                "client_id": return_address.client_id,
            },
        )

        if self.fail_with:
            return HandlerResult.failed(
                self.fail_with,
                message="Simulated failure for testing",
                event_id=return_address.event_id,
            )

        return HandlerResult.ok(event_id=return_address.event_id)

    @property
    def return_addresses(self) -> list[EventReturnAddress]:
        return [event.return_address for event in self.received]

    def clear(self) -> None:
        self.received.clear()
