"""Data models for candleplot."""

from candleplot.models.candle import Candlestick
from candleplot.models.record import CSV_COLUMNS, TIMESTAMP_FORMAT, HistoricalRecord

__all__ = [
    "CSV_COLUMNS",
    "Candlestick",
    "HistoricalRecord",
    "TIMESTAMP_FORMAT",
]
