"""Error classifications for the candleplot pipeline.

Each exception names the pipeline stage it belongs to so that the CLI can
tell the user which step failed. A missing input file is not an error: the
ingestor substitutes the fallback dataset instead.
"""

from pathlib import Path
from typing import Any, Optional


class CandleplotError(Exception):
    """Base class for all pipeline failures."""

    stage = "pipeline"

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class SourceReadError(CandleplotError):
    """The input source exists but could not be read."""

    stage = "ingest"

    def __init__(self, message: str, source: Optional[Path] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source


class RecordDeserializationError(CandleplotError):
    """A row of the input source does not match the record shape."""

    stage = "ingest"

    def __init__(
        self,
        message: str,
        source: Optional[Path] = None,
        line: Optional[int] = None,
        row: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.source = source
        self.line = line
        self.row = row

    def __str__(self) -> str:
        message = super().__str__()
        location = []
        if self.source is not None:
            location.append(str(self.source))
        if self.line is not None:
            location.append(f"line {self.line}")
        if location:
            return f"{message} ({', '.join(location)})"
        return message


class TimestampParseError(CandleplotError):
    """A record timestamp does not match the expected format."""

    stage = "convert"

    def __init__(
        self,
        message: str,
        value: Optional[str] = None,
        index: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.value = value
        self.index = index


class OutputLocationError(CandleplotError):
    """The output location could not be prepared before rendering."""

    stage = "output"

    def __init__(self, message: str, path: Optional[Path] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path


class RenderError(CandleplotError):
    """The chart artifact could not be written."""

    stage = "render"
