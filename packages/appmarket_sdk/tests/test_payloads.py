"""
Tests for the return address JSON payload model.
"""

import pytest
from pydantic import ValidationError

from appmarket_sdk.contracts import InvalidReturnAddressError, ReturnAddressPayload


class TestReturnAddressPayload:
    """Tests for parsing return address documents."""

    def test_camel_case_keys(self, return_address):
        """Test marketplace-style camelCase keys."""
        payload = ReturnAddressPayload.model_validate({
            "eventId": "evt-123",
            "marketplaceBaseUrl": "https://market.example.com",
            "clientId": "client-42",
        })
        assert payload.to_return_address() == return_address

    def test_snake_case_keys(self, return_address):
        """Test snake_case keys are accepted too."""
        payload = ReturnAddressPayload.model_validate(return_address.to_dict())
        assert payload.to_return_address() == return_address

    def test_unknown_keys_ignored(self):
        """Test extra keys do not fail parsing."""
        payload = ReturnAddressPayload.model_validate({
            "eventId": "evt-1",
            "marketplaceBaseUrl": "https://market.example.com",
            "clientId": "client-1",
            "flag": "STATELESS",
        })
        assert payload.event_id == "evt-1"

    def test_missing_key(self):
        """Test a missing key raises a pydantic ValidationError."""
        with pytest.raises(ValidationError):
            ReturnAddressPayload.model_validate({"eventId": "evt-1", "clientId": "client-1"})

    def test_values_checked_on_conversion(self):
        """Test value rules are applied when building the return address."""
        payload = ReturnAddressPayload.model_validate({
            "eventId": "evt-1",
            "marketplaceBaseUrl": "not a url",
            "clientId": "client-1",
        })
        with pytest.raises(InvalidReturnAddressError):
            payload.to_return_address()

    def test_dump_by_alias(self, return_address):
        """Test dumping back to camelCase."""
        payload = ReturnAddressPayload.from_return_address(return_address)
        assert payload.model_dump(by_alias=True) == {
            "eventId": "evt-123",
            "marketplaceBaseUrl": "https://market.example.com",
            "clientId": "client-42",
        }
