"""Configuration management for the application."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class QuoteConfig:
    """Market quote API configuration."""

    endpoint: str = "https://www.alphavantage.co/query"
    api_key: str = "demo"
    symbols: list[str] = None  # Requested in this order
    request_delay_seconds: float = 0.2
    timeout_seconds: float = 10.0

    def __post_init__(self):
        if self.symbols is None:
            self.symbols = ["AAPL", "MSFT", "GOOGL", "TSLA", "NVDA"]


@dataclass
class RotationConfig:
    """Tip rotation configuration."""

    interval_seconds: float = 5.0


@dataclass
class SubscriptionConfig:
    """Subscription form configuration."""

    status_clear_seconds: float = 3.0


@dataclass
class LoggingConfig:
    """Structured logging configuration."""

    level: str = "INFO"
    file_path: str | None = None


def _parse_symbols(raw: str | None) -> list[str] | None:
    if raw is None:
        return None
    return [symbol.strip().upper() for symbol in raw.split(",") if symbol.strip()]


class Config:
    """Main application configuration."""

    def __init__(self):
        self.quote = QuoteConfig(
            endpoint=os.getenv("QUOTE_API_URL", "https://www.alphavantage.co/query"),
            api_key=os.getenv("QUOTE_API_KEY", "demo"),
            symbols=_parse_symbols(os.getenv("QUOTE_SYMBOLS")),
            request_delay_seconds=int(os.getenv("QUOTE_REQUEST_DELAY_MS", "200")) / 1000,
            timeout_seconds=float(os.getenv("QUOTE_TIMEOUT_SECONDS", "10")),
        )

        self.rotation = RotationConfig(
            interval_seconds=int(os.getenv("TIP_ROTATION_INTERVAL_MS", "5000")) / 1000,
        )

        self.subscription = SubscriptionConfig(
            status_clear_seconds=int(os.getenv("STATUS_CLEAR_DELAY_MS", "3000")) / 1000,
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            file_path=os.getenv("LOG_FILE"),
        )

    def validate(self) -> bool:
        """
        Validate configuration.

        Returns:
            True if configuration is valid

        Raises:
            ValueError if configuration is invalid
        """
        if not self.quote.symbols:
            raise ValueError("QUOTE_SYMBOLS must name at least one symbol")
        if not self.quote.endpoint:
            raise ValueError("QUOTE_API_URL environment variable is required")
        if self.quote.request_delay_seconds < 0:
            raise ValueError("QUOTE_REQUEST_DELAY_MS must not be negative")
        if self.quote.timeout_seconds <= 0:
            raise ValueError("QUOTE_TIMEOUT_SECONDS must be positive")
        if self.rotation.interval_seconds <= 0:
            raise ValueError("TIP_ROTATION_INTERVAL_MS must be positive")
        if self.subscription.status_clear_seconds <= 0:
            raise ValueError("STATUS_CLEAR_DELAY_MS must be positive")
        if self.logging.level not in LOG_LEVELS:
            raise ValueError(f"Invalid LOG_LEVEL: {self.logging.level}")

        return True


# Global config instance
config = Config()
