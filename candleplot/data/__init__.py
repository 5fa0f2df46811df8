"""Record ingestion and candlestick conversion."""

from candleplot.data.convert import convert, parse_timestamp, to_candlestick
from candleplot.data.ingest import (
    FALLBACK_RECORDS,
    RecordIngestor,
    Source,
    SourceAbsent,
    SourceFound,
    fallback_records,
    ingest,
    locate_source,
    read_records,
)

__all__ = [
    "FALLBACK_RECORDS",
    "RecordIngestor",
    "Source",
    "SourceAbsent",
    "SourceFound",
    "convert",
    "fallback_records",
    "ingest",
    "locate_source",
    "parse_timestamp",
    "read_records",
    "to_candlestick",
]
