"""Quote client that turns Alpha Vantage global quotes into trading tips."""

import asyncio
import uuid
from typing import Any

import httpx

from src.models.trading_tip import TipRecord
from src.utils.config import QuoteConfig, config
from src.utils.logger import StructuredLogger


class QuoteDataError(ValueError):
    """Raised when a quote response carries no usable data."""


class QuoteClient:
    """Fetches one global quote per symbol and builds a tip from each."""

    SOURCE = "Alpha Vantage"

    def __init__(
        self,
        quote_config: QuoteConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the quote client.

        Args:
            quote_config: Endpoint, key, symbols and pacing (defaults to global config)
            transport: Optional httpx transport, used by tests to stub the API
        """
        quote_config = quote_config or config.quote
        self.endpoint = quote_config.endpoint
        self.api_key = quote_config.api_key
        self.symbols = list(quote_config.symbols)
        self.request_delay_seconds = quote_config.request_delay_seconds
        self.timeout_seconds = quote_config.timeout_seconds
        self.transport = transport
        self.logger = StructuredLogger("QuoteClient")

    async def fetch_tips(self) -> list[TipRecord]:
        """
        Fetch a tip for every configured symbol.

        Symbols are requested one at a time, in order, with a fixed pause
        between requests. Symbols that fail are left out.

        Returns:
            Parsed tips in request order (possibly empty); never raises
        """
        batch_id = str(uuid.uuid4())
        try:
            tips = await self._fetch_all(batch_id)
        except Exception as e:
            self.logger.error(
                "Tip fetch batch failed",
                context={"batch_id": batch_id, "source": self.SOURCE},
                exception=e,
            )
            return []

        self.logger.info(
            "Finished tip fetch batch",
            context={
                "batch_id": batch_id,
                "source": self.SOURCE,
                "requested": len(self.symbols),
                "fetched": len(tips),
                "symbols": [tip.symbol for tip in tips],
            },
        )
        return tips

    async def _fetch_all(self, batch_id: str) -> list[TipRecord]:
        tips = []
        async with httpx.AsyncClient(
            transport=self.transport, timeout=self.timeout_seconds
        ) as client:
            for position, symbol in enumerate(self.symbols):
                tip = await self._fetch_symbol(client, symbol, batch_id)
                if tip is not None:
                    tips.append(tip)

                # Pace requests for the free API tier
                if position < len(self.symbols) - 1:
                    await asyncio.sleep(self.request_delay_seconds)
        return tips

    async def _fetch_symbol(
        self, client: httpx.AsyncClient, symbol: str, batch_id: str
    ) -> TipRecord | None:
        """Fetch and parse one symbol, returning None when it has no usable data."""
        context = {"batch_id": batch_id, "source": self.SOURCE, "symbol": symbol}
        self.logger.debug("Starting quote fetch", context=context)

        params = {"function": "GLOBAL_QUOTE", "symbol": symbol, "apikey": self.api_key}
        try:
            response = await client.get(self.endpoint, params=params)
            response.raise_for_status()
            tip = self.parse_quote(symbol, response.json())
        except QuoteDataError as e:
            self.logger.warning(
                f"No valid data for {symbol}, API might be rate limited",
                context={**context, "result": "no_data", "reason": str(e)},
            )
            return None
        except Exception as e:
            self.logger.error(
                f"Error fetching quote for {symbol}",
                context={**context, "result": "failed"},
                exception=e,
            )
            return None

        self.logger.info(
            "Successfully fetched quote",
            context={**context, "result": "success", "price": tip.price, "change": tip.change},
        )
        return tip

    @staticmethod
    def parse_quote(symbol: str, payload: Any) -> TipRecord:
        """
        Build a tip from a GLOBAL_QUOTE response body.

        Args:
            symbol: The requested symbol
            payload: Decoded JSON body

        Returns:
            TipRecord with price and change filled in

        Raises:
            QuoteDataError: If the body has no usable quote
        """
        if not isinstance(payload, dict):
            raise QuoteDataError("Response body is not an object")

        quote = payload.get("Global Quote")
        if not isinstance(quote, dict) or not quote:
            raise QuoteDataError("Missing or empty 'Global Quote'")

        try:
            price = float(quote["05. price"])
            change = float(quote["09. change"])
            change_percent = quote["10. change percent"]
        except (KeyError, TypeError, ValueError) as e:
            raise QuoteDataError(f"Malformed quote fields: {e}") from e
        if not isinstance(change_percent, str) or not change_percent:
            raise QuoteDataError("'10. change percent' is not a string")

        if change > 0:
            tip_text = (
                f"{symbol} is up {change_percent} today at ${price:.2f}. "
                "Positive momentum detected."
            )
            tip_type = "BUY"
        else:
            tip_text = (
                f"{symbol} is down {change_percent} today at ${price:.2f}. "
                "Watch for support levels."
            )
            tip_type = "WATCH"

        return TipRecord(
            symbol=symbol,
            tip=tip_text,
            type=tip_type,
            confidence="Medium",
            price=f"{price:.2f}",
            change=change_percent,
        )
