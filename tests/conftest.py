"""pytest configuration and fixtures for chain_resolver tests.

This module provides shared fixtures for testing the resolver,
including a fresh EventBridge and sample webhook events.
"""

from __future__ import annotations

from collections.abc import Generator
from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from chain_resolver import EventBridge


def _event(event_id: str, event_type: str, object_id: str, amount: int) -> dict[str, Any]:
    return {
        "id": event_id,
        "type": event_type,
        "data": {"object": {"id": object_id, "amount": amount}},
    }


@pytest.fixture
def event_bridge() -> Generator[EventBridge, None, None]:
    """Provide a fresh, started EventBridge for each test."""
    from chain_resolver import EventBridge

    bridge = EventBridge()
    bridge.start()
    yield bridge
    bridge.stop()


@pytest.fixture
def payment_event() -> dict[str, Any]:
    """Provide a successful payment webhook event."""
    return _event("evt_123", "payment_intent.succeeded", "pi_123", 1000)


@pytest.fixture
def refund_event() -> dict[str, Any]:
    """Provide a refund webhook event."""
    return _event("evt_456", "charge.refunded", "ch_456", 500)


@pytest.fixture
def unsupported_event() -> dict[str, Any]:
    """Provide an event no example target claims."""
    return _event("evt_789", "customer.created", "cus_789", 0)


@pytest.fixture
def call_log() -> list[str]:
    """Provide an empty list for targets to record calls into."""
    return []


# Markers for test categorization
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow running",
    )
