"""Static sample tips shown when no live quotes are available."""

from src.models.trading_tip import TipRecord

FALLBACK_TIPS: tuple[TipRecord, ...] = (
    TipRecord(
        symbol="AAPL",
        tip="Apple stock shows strong support at $150. Consider buying on dips with stop loss at $145.",
        type="BUY",
        confidence="High",
    ),
    TipRecord(
        symbol="TSLA",
        tip="Tesla breaking above $200 resistance. Momentum traders might find opportunities.",
        type="WATCH",
        confidence="Medium",
    ),
    TipRecord(
        symbol="SPY",
        tip="S&P 500 ETF approaching key resistance. Watch for breakout or reversal signals.",
        type="WATCH",
        confidence="High",
    ),
    TipRecord(
        symbol="NVDA",
        tip="NVIDIA showing consolidation pattern. Wait for clear direction before entry.",
        type="HOLD",
        confidence="Medium",
    ),
    TipRecord(
        symbol="MSFT",
        tip="Microsoft maintaining uptrend. Good for long-term portfolio allocation.",
        type="BUY",
        confidence="High",
    ),
)
