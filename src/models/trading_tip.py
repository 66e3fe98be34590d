"""Trading tip models shown on the tip board."""

from dataclasses import asdict, dataclass
from typing import Any, Literal

TipType = Literal["BUY", "WATCH", "HOLD"]
Confidence = Literal["Low", "Medium", "High"]


@dataclass(frozen=True)
class TipRecord:
    """One displayable trading tip."""

    symbol: str
    tip: str
    type: TipType
    confidence: Confidence
    price: str | None = None  # Two fraction digits, API-derived records only
    change: str | None = None  # Percent string as returned by the quote API

    def __post_init__(self):
        for field_name in ("symbol", "tip", "type"):
            if not getattr(self, field_name):
                raise ValueError(f"Tip record {field_name} cannot be empty")

    @property
    def has_quote(self) -> bool:
        """Whether the record carries live quote data."""
        return self.price is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert tip to dictionary, excluding absent quote fields."""
        result = asdict(self)
        return {k: v for k, v in result.items() if v is not None}
