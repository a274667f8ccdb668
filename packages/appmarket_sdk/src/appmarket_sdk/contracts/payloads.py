"""
Return Address Payload Models

Pydantic models for return address documents read from JSON
(camelCase keys as sent by the marketplace, or snake_case).
"""

from pydantic import BaseModel, ConfigDict, Field

from appmarket_sdk.contracts.return_address import EventReturnAddress


class ReturnAddressPayload(BaseModel):
    """
    JSON representation of an EventReturnAddress.

    Only checks shape and types. Value rules (non-empty, http(s) URL) are
    enforced when converting with to_return_address().
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    event_id: str = Field(..., alias="eventId", description="Unique event identifier")
    marketplace_base_url: str = Field(
        ...,
        alias="marketplaceBaseUrl",
        description="Base URL of the originating marketplace",
    )
    client_id: str = Field(..., alias="clientId", description="Client (tenant) identifier")

    def to_return_address(self) -> EventReturnAddress:
        return EventReturnAddress(
            event_id=self.event_id,
            marketplace_base_url=self.marketplace_base_url,
            client_id=self.client_id,
        )

    @classmethod
    def from_return_address(cls, address: EventReturnAddress) -> "ReturnAddressPayload":
        return cls(
            event_id=address.event_id,
            marketplace_base_url=address.marketplace_base_url,
            client_id=address.client_id,
        )
