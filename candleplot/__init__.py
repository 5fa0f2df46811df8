"""Candleplot - CSV OHLCV ingestion and candlestick charting."""

__version__ = "0.1.0"
