"""Tests for configuration management."""

import os
from unittest.mock import patch

import pytest

from src.utils.config import Config, QuoteConfig, RotationConfig, SubscriptionConfig


def test_quote_config_default_symbols():
    """Test that quote config requests the five default symbols in order."""
    config = QuoteConfig()
    assert config.symbols == ["AAPL", "MSFT", "GOOGL", "TSLA", "NVDA"]
    assert config.request_delay_seconds == 0.2


def test_timer_config_defaults():
    """Test the rotation and status timer defaults."""
    assert RotationConfig().interval_seconds == 5.0
    assert SubscriptionConfig().status_clear_seconds == 3.0


def test_config_reads_environment():
    """Test that config picks up overrides from the environment."""
    with patch.dict(
        os.environ,
        {
            "QUOTE_API_KEY": "secret",
            "QUOTE_SYMBOLS": "spy, qqq ,",
            "QUOTE_REQUEST_DELAY_MS": "500",
            "TIP_ROTATION_INTERVAL_MS": "2500",
            "STATUS_CLEAR_DELAY_MS": "1000",
            "LOG_LEVEL": "debug",
        },
    ):
        config = Config()

    assert config.quote.api_key == "secret"
    assert config.quote.symbols == ["SPY", "QQQ"]
    assert config.quote.request_delay_seconds == 0.5
    assert config.rotation.interval_seconds == 2.5
    assert config.subscription.status_clear_seconds == 1.0
    assert config.logging.level == "DEBUG"


def test_config_validation_valid_defaults():
    """Test that config validation passes with defaults."""
    with patch.dict(os.environ, {}, clear=True):
        config = Config()

        assert config.validate() is True


@pytest.mark.parametrize(
    "env, match",
    [
        ({"QUOTE_SYMBOLS": " , "}, "QUOTE_SYMBOLS"),
        ({"QUOTE_REQUEST_DELAY_MS": "-1"}, "QUOTE_REQUEST_DELAY_MS"),
        ({"QUOTE_TIMEOUT_SECONDS": "0"}, "QUOTE_TIMEOUT_SECONDS"),
        ({"TIP_ROTATION_INTERVAL_MS": "0"}, "TIP_ROTATION_INTERVAL_MS"),
        ({"STATUS_CLEAR_DELAY_MS": "-5"}, "STATUS_CLEAR_DELAY_MS"),
        ({"LOG_LEVEL": "verbose"}, "LOG_LEVEL"),
    ],
)
def test_config_validation_rejects_bad_values(env, match):
    """Test that config validation fails for each invalid setting."""
    with patch.dict(os.environ, env, clear=True):
        config = Config()

        with pytest.raises(ValueError, match=match):
            config.validate()
