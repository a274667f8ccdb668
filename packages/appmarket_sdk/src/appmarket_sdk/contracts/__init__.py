"""
AppMarket SDK Contracts

Return address value type, its JSON payload model and SDK errors.
"""

from appmarket_sdk.contracts.errors import AppMarketSDKError, InvalidReturnAddressError
from appmarket_sdk.contracts.payloads import ReturnAddressPayload
from appmarket_sdk.contracts.return_address import EventReturnAddress

__all__ = [
    "AppMarketSDKError",
    "InvalidReturnAddressError",
    "EventReturnAddress",
    "ReturnAddressPayload",
]
