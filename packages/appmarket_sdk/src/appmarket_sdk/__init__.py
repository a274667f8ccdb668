"""
AppMarket SDK - Event Return Address

Information passed to an EventHandler when an AppMarket event is handled.
It identifies the event, the marketplace that sent it and the client it
belongs to, which is everything needed to later send the
"event processing completed" signal back to the marketplace.

This package provides:
- EventReturnAddress (immutable value type) and its JSON payload model
- EventHandler contract receiving the return address
- Settings, logging setup and a small CLI for inspecting return addresses

Delivering events, dispatching them to handlers and transporting the
completion signal are handled elsewhere.
"""

from appmarket_sdk.contracts import (
    AppMarketSDKError,
    EventReturnAddress,
    InvalidReturnAddressError,
    ReturnAddressPayload,
)
from appmarket_sdk.handlers import EventHandler, HandlerResult

__all__ = [
    "AppMarketSDKError",
    "EventHandler",
    "EventReturnAddress",
    "HandlerResult",
    "InvalidReturnAddressError",
    "ReturnAddressPayload",
]
