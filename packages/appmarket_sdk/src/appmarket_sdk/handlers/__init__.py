"""
Event handlers - the contract that receives return addresses.
"""

from appmarket_sdk.handlers.base import EventHandler, HandlerResult
from appmarket_sdk.handlers.recording import RecordedEvent, RecordingEventHandler

__all__ = ["EventHandler", "HandlerResult", "RecordedEvent", "RecordingEventHandler"]
