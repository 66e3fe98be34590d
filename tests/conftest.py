"""Pytest configuration and fixtures."""

from unittest.mock import AsyncMock

import pytest

from main import app
from src.api.dependencies import get_rotation_controller, get_subscription_ledger
from src.services.quote_client import QuoteClient
from src.services.subscription_ledger import SubscriptionLedger
from src.services.task_scheduler import TaskScheduler
from src.services.tip_rotation import TipRotationController
from src.utils.config import QuoteConfig


@pytest.fixture
def quote_config():
    """Quote configuration with no pause between requests."""
    return QuoteConfig(
        endpoint="https://quotes.test/query",
        api_key="test-key",
        request_delay_seconds=0,
    )


@pytest.fixture
def task_scheduler():
    """Task scheduler that is never started, so no timer fires on its own."""
    scheduler = TaskScheduler()
    yield scheduler
    scheduler.stop()


@pytest.fixture
def stub_quote_client(quote_config):
    """Quote client whose fetch returns no tips unless a test says otherwise."""
    client = QuoteClient(quote_config)
    client.fetch_tips = AsyncMock(return_value=[])
    return client


@pytest.fixture
def rotation_controller(stub_quote_client, task_scheduler):
    """Tip rotation controller on an unstarted scheduler."""
    return TipRotationController(stub_quote_client, task_scheduler, interval_seconds=5)


@pytest.fixture
def subscription_ledger(task_scheduler):
    """Subscription ledger on an unstarted scheduler."""
    return SubscriptionLedger(task_scheduler, clear_after_seconds=3)


@pytest.fixture
def test_client(rotation_controller, subscription_ledger):
    """Create a test client wired to the fixture components."""
    app.dependency_overrides[get_rotation_controller] = lambda: rotation_controller
    app.dependency_overrides[get_subscription_ledger] = lambda: subscription_ledger

    from fastapi.testclient import TestClient
    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
