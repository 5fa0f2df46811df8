"""Command-line interface for candleplot.

Echoes the input text in upper case, then loads OHLCV data, converts it to
candlesticks and renders the chart.
"""

from candleplot.cli.main import cli, main

__all__ = ["cli", "main"]
