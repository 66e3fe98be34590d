"""Stub quote API responses shared by the quote client and rotation tests."""

import httpx


def global_quote(price: str, change: str, change_percent: str) -> dict:
    """Build a GLOBAL_QUOTE response body."""
    return {
        "Global Quote": {
            "01. symbol": "TEST",
            "05. price": price,
            "09. change": change,
            "10. change percent": change_percent,
        }
    }


def quote_transport(responses: dict, requested: list | None = None) -> httpx.MockTransport:
    """
    Transport answering per symbol.

    responses maps a symbol to a JSON body, an httpx.Response, or an
    exception to raise. Unknown symbols get the rate-limit note the API
    sends instead of a quote.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        symbol = request.url.params["symbol"]
        if requested is not None:
            requested.append(symbol)
        answer = responses.get(symbol, {"Note": "API call frequency exceeded"})
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, httpx.Response):
            return answer
        return httpx.Response(200, json=answer)

    return httpx.MockTransport(handler)
