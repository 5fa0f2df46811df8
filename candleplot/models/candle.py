"""Candlestick (OHLCV) data model."""

from datetime import datetime
from pydantic import BaseModel, Field


class Candlestick(BaseModel):
    """Represents a single renderable OHLCV candle."""

    timestamp: datetime = Field(..., description="Candle open time (UTC)")
    open: float = Field(..., description="Opening price")
    high: float = Field(..., description="High price")
    low: float = Field(..., description="Low price")
    close: float = Field(..., description="Closing price")
    volume: float = Field(..., description="Traded volume")

    model_config = {"frozen": True}

    @property
    def is_bullish(self) -> bool:
        """True when the candle closed at or above its open."""
        return self.close >= self.open
