"""
Pytest fixtures for AppMarket SDK tests.
"""

import logging

import pytest


@pytest.fixture
def sample_event_id():
    """Sample event identifier."""
    return "evt-123"


@pytest.fixture
def sample_base_url():
    """Sample marketplace base URL."""
    return "https://market.example.com"


@pytest.fixture
def sample_client_id():
    """Sample client identifier."""
    return "client-42"


@pytest.fixture
def return_address(sample_event_id, sample_base_url, sample_client_id):
    """Valid return address built from the sample identifiers."""
    from appmarket_sdk.contracts import EventReturnAddress

    return EventReturnAddress(
        event_id=sample_event_id,
        marketplace_base_url=sample_base_url,
        client_id=sample_client_id,
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    from appmarket_sdk.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop console handlers installed by setup_logging() during a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if type(h) is logging.StreamHandler]:
        root.removeHandler(handler)
    root.setLevel(level)
