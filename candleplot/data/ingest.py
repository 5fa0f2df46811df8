"""Record ingestion from CSV sources.

Reads a comma-separated OHLCV file into ``HistoricalRecord`` objects, or
substitutes a fixed fallback dataset when the file does not exist.
"""

import csv
import logging
from pathlib import Path
from typing import Union

from pydantic import BaseModel, Field, ValidationError

from candleplot.errors import RecordDeserializationError, SourceReadError
from candleplot.models import CSV_COLUMNS, HistoricalRecord

logger = logging.getLogger(__name__)


FALLBACK_RECORDS = (
    HistoricalRecord(
        timestamp="2023-01-01 00:00:00",
        open=100.0,
        high=105.0,
        low=95.0,
        close=102.0,
        volume=1000.0,
    ),
    HistoricalRecord(
        timestamp="2023-01-02 00:00:00",
        open=102.0,
        high=108.0,
        low=101.0,
        close=106.0,
        volume=1200.0,
    ),
    HistoricalRecord(
        timestamp="2023-01-03 00:00:00",
        open=106.0,
        high=110.0,
        low=104.0,
        close=108.0,
        volume=1500.0,
    ),
)


class SourceFound(BaseModel):
    """An input source that exists and should be parsed."""

    path: Path = Field(..., description="Location of the source")

    model_config = {"frozen": True}


class SourceAbsent(BaseModel):
    """An input source that does not exist."""

    path: Path = Field(..., description="Location that was looked up")

    model_config = {"frozen": True}


Source = Union[SourceFound, SourceAbsent]


def fallback_records() -> list[HistoricalRecord]:
    """Return a fresh copy of the fallback dataset."""
    return list(FALLBACK_RECORDS)


def locate_source(source: Union[str, Path]) -> Source:
    """Look up a source identifier.

    Args:
        source: Path-like identifier of the CSV file.

    Returns:
        SourceFound if anything exists at the path, SourceAbsent otherwise.
    """
    if not str(source):
        return SourceAbsent(path=Path(""))

    path = Path(source)
    if path.exists():
        return SourceFound(path=path)
    return SourceAbsent(path=path)


def _parse_row(
    fields: list[str], path: Path, line: int, row: int
) -> HistoricalRecord:
    """Deserialize one data row into a record."""
    if len(fields) != len(CSV_COLUMNS):
        raise RecordDeserializationError(
            f"Row {row}: expected {len(CSV_COLUMNS)} fields, found {len(fields)}",
            source=path,
            line=line,
            row=row,
        )

    try:
        return HistoricalRecord.model_validate(dict(zip(CSV_COLUMNS, fields)))
    except ValidationError as e:
        bad = ", ".join(
            f"{err['loc'][0]}={err.get('input')!r}" for err in e.errors()
        )
        raise RecordDeserializationError(
            f"Row {row}: invalid value(s) {bad}",
            source=path,
            line=line,
            row=row,
        ) from e


def read_records(path: Union[str, Path]) -> list[HistoricalRecord]:
    """Parse an existing CSV source into records.

    The first row must be the exact header ``Timestamp,Open,High,Low,Close,Volume``.
    Blank lines are skipped. Parsing stops at the first bad row and nothing
    is returned for the rows before it.

    Args:
        path: Location of the CSV file.

    Returns:
        Records in file order. Empty when the file only holds the header.

    Raises:
        SourceReadError: If the file cannot be opened or read.
        RecordDeserializationError: If the header or any row is malformed.
    """
    path = Path(path)
    records: list[HistoricalRecord] = []
    reader = None

    try:
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            reader = csv.reader(f)

            header = next(reader, None)
            if header is None:
                raise RecordDeserializationError(
                    "Missing header row", source=path, line=1
                )
            if tuple(header) != CSV_COLUMNS:
                raise RecordDeserializationError(
                    f"Unexpected header {','.join(header)!r}, "
                    f"expected {','.join(CSV_COLUMNS)!r}",
                    source=path,
                    line=reader.line_num,
                )

            for fields in reader:
                if not fields:
                    continue
                records.append(
                    _parse_row(fields, path, reader.line_num, len(records) + 1)
                )
    except UnicodeDecodeError as e:
        raise RecordDeserializationError(
            f"Source is not valid UTF-8: {e.reason}",
            source=path,
            line=reader.line_num + 1 if reader is not None else None,
        ) from e
    except csv.Error as e:
        raise RecordDeserializationError(
            f"Malformed CSV: {e}",
            source=path,
            line=reader.line_num if reader is not None else None,
        ) from e
    except OSError as e:
        raise SourceReadError(
            f"Failed to read {path}: {e.strerror or e}", source=path
        ) from e

    return records


def ingest(source: Union[str, Path]) -> list[HistoricalRecord]:
    """Load records from a source, falling back to sample data if it is absent.

    Args:
        source: Path-like identifier of the CSV file.

    Returns:
        Ordered records, never None.

    Raises:
        SourceReadError: If the source exists but cannot be read.
        RecordDeserializationError: If the source content is malformed.
    """
    located = locate_source(source)

    if isinstance(located, SourceAbsent):
        logger.warning(
            "Source %s not found, using %d fallback records",
            located.path,
            len(FALLBACK_RECORDS),
        )
        return fallback_records()

    records = read_records(located.path)
    logger.info("Loaded %d records from %s", len(records), located.path)
    return records


class RecordIngestor:
    """Holds the most recently ingested dataset.

    The dataset is replaced wholesale on each successful ``ingest`` call and
    left untouched when ingestion fails.
    """

    def __init__(self):
        self._records: list[HistoricalRecord] = []

    @property
    def records(self) -> list[HistoricalRecord]:
        """Copy of the held dataset."""
        return list(self._records)

    def ingest(self, source: Union[str, Path]) -> list[HistoricalRecord]:
        """Ingest a source and adopt the result as the held dataset."""
        records = ingest(source)
        self._records = records
        return list(records)
