"""Conversion of historical records into candlesticks."""

import logging
from datetime import datetime, timezone
from typing import Iterable

from candleplot.errors import TimestampParseError
from candleplot.models import TIMESTAMP_FORMAT, Candlestick, HistoricalRecord

logger = logging.getLogger(__name__)


def parse_timestamp(text: str) -> datetime:
    """Parse a ``YYYY-MM-DD HH:MM:SS`` timestamp as UTC.

    Raises:
        TimestampParseError: If the text does not match the format.
    """
    try:
        naive = datetime.strptime(text, TIMESTAMP_FORMAT)
    except (TypeError, ValueError) as e:
        raise TimestampParseError(
            f"Failed to parse timestamp {text!r}: {e}", value=text
        ) from e
    return naive.replace(tzinfo=timezone.utc)


def to_candlestick(record: HistoricalRecord) -> Candlestick:
    """Convert a single record, copying the OHLCV values unchanged."""
    return Candlestick(
        timestamp=parse_timestamp(record.timestamp),
        open=record.open,
        high=record.high,
        low=record.low,
        close=record.close,
        volume=record.volume,
    )


def convert(records: Iterable[HistoricalRecord]) -> list[Candlestick]:
    """Convert records to candlesticks, preserving order.

    The whole call fails on the first unparsable timestamp; no partial
    sequence is returned.

    Args:
        records: Ordered historical records.

    Returns:
        One candlestick per record, in the same order.

    Raises:
        TimestampParseError: If any record has a malformed timestamp.
    """
    candles: list[Candlestick] = []

    for index, record in enumerate(records):
        try:
            candles.append(to_candlestick(record))
        except TimestampParseError as e:
            raise TimestampParseError(
                f"Record {index}: {e}", value=e.value, index=index
            ) from e

    logger.debug("Converted %d records to candlesticks", len(candles))
    return candles
