"""
Tests for the event handler contract.
"""

import logging

import pytest

from appmarket_sdk.contracts import EventReturnAddress
from appmarket_sdk.handlers import EventHandler, HandlerResult, RecordingEventHandler


class TestHandlerResult:
    """Tests for HandlerResult constructors."""

    def test_ok(self):
        result = HandlerResult.ok("done", account="acc-1")
        assert result.success is True
        assert result.message == "done"
        assert result.error_code is None
        assert result.details == {"account": "acc-1"}

    def test_failed(self):
        result = HandlerResult.failed("ACCOUNT_NOT_FOUND", "no such account")
        assert result.success is False
        assert result.error_code == "ACCOUNT_NOT_FOUND"
        assert result.message == "no such account"


class TestEventHandler:
    """Tests for custom EventHandler implementations."""

    def test_cannot_instantiate_abstract(self):
        """Test the base class requires handle()."""
        with pytest.raises(TypeError):
            EventHandler()

    def test_handler_keeps_return_address(self, return_address):
        """Test a handler can keep the return address for later completion."""

        class DeferredHandler(EventHandler):
            def __init__(self):
                self.pending: list[EventReturnAddress] = []

            def handle(self, payload, return_address):
                self.pending.append(return_address)
                return HandlerResult.ok("accepted")

        handler = DeferredHandler()
        result = handler.handle({"type": "SUBSCRIPTION_ORDER"}, return_address)

        assert result.success is True
        assert handler.pending == [return_address]
        assert handler.pending[0].marketplace_base_url == "https://market.example.com"


class TestRecordingEventHandler:
    """Tests for the recording development handler."""

    def test_records_calls(self, return_address):
        handler = RecordingEventHandler()
        payload = {"type": "SUBSCRIPTION_ORDER"}

        result = handler.handle(payload, return_address)

        assert result.success is True
        assert result.details == {"event_id": "evt-123"}
        assert len(handler.received) == 1
        assert handler.received[0].payload == payload
        assert handler.return_addresses == [return_address]

    def test_simulated_failure(self, return_address):
        handler = RecordingEventHandler(fail_with="SIMULATED")

        result = handler.handle({}, return_address)

        assert result.success is False
        assert result.error_code == "SIMULATED"
        assert handler.return_addresses == [return_address]

    def test_clear(self, return_address):
        handler = RecordingEventHandler()
        handler.handle({}, return_address)
        handler.clear()
        assert handler.received == []

    def test_logs_return_address(self, return_address, caplog):
        handler = RecordingEventHandler()

        with caplog.at_level(logging.INFO, logger="appmarket_sdk.handlers.recording"):
            handler.handle({}, return_address)

        record = caplog.records[-1]
        assert record.event_id == "evt-123"
        assert record.client_id == "client-42"
        assert record.marketplace_base_url == "https://market.example.com"
