"""Historical record data model.

A record is one raw row of the input CSV. The timestamp stays as text
until the converter parses it.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

# Header row expected in every input file, in this order.
CSV_COLUMNS = ("Timestamp", "Open", "High", "Low", "Close", "Volume")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class HistoricalRecord(BaseModel):
    """Represents one timestamped OHLCV row as read from the source."""

    timestamp: str = Field(..., alias="Timestamp", description="Timestamp text (YYYY-MM-DD HH:MM:SS)")
    open: float = Field(..., alias="Open", description="Opening price")
    high: float = Field(..., alias="High", description="High price")
    low: float = Field(..., alias="Low", description="Low price")
    close: float = Field(..., alias="Close", description="Closing price")
    volume: float = Field(..., alias="Volume", description="Traded volume")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("open", "high", "low", "close", "volume", mode="before")
    @classmethod
    def _reject_loose_numbers(cls, value: Any) -> Any:
        """Numeric text must be a bare float literal: no padding, no underscores."""
        if isinstance(value, str) and (value != value.strip() or "_" in value):
            raise ValueError(f"not a plain number: {value!r}")
        return value
