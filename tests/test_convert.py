"""Property-based tests for candlestick conversion.

**Feature: candleplot**
"""

from datetime import datetime, timezone

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from candleplot.data import convert, fallback_records, ingest, parse_timestamp
from candleplot.errors import TimestampParseError
from candleplot.models import Candlestick, HistoricalRecord


@st.composite
def record_strategy(draw):
    """Generate a record with a well-formed timestamp."""
    ts = draw(st.datetimes(
        min_value=datetime(1970, 1, 1),
        max_value=datetime(2100, 12, 31),
    ))
    values = st.floats(allow_nan=False, allow_infinity=False)
    return HistoricalRecord(
        timestamp=ts.replace(microsecond=0).strftime("%Y-%m-%d %H:%M:%S"),
        open=draw(values),
        high=draw(values),
        low=draw(values),
        close=draw(values),
        volume=draw(values),
    )


class TestFieldPreservation:
    """
    **Feature: candleplot, Property 5: Field Preservation**

    *For any* record sequence R, convert(R) has the same length and every
    numeric field is copied unchanged.
    """

    @given(records=st.lists(record_strategy(), min_size=0, max_size=50))
    @settings(max_examples=100)
    def test_convert_preserves_length_and_fields(self, records: list[HistoricalRecord]):
        candles = convert(records)

        assert len(candles) == len(records)
        for record, candle in zip(records, candles):
            assert candle.open == record.open
            assert candle.high == record.high
            assert candle.low == record.low
            assert candle.close == record.close
            assert candle.volume == record.volume

    @given(records=st.lists(record_strategy(), min_size=1, max_size=50))
    @settings(max_examples=50)
    def test_timestamps_are_utc_and_match_text(self, records: list[HistoricalRecord]):
        candles = convert(records)

        for record, candle in zip(records, candles):
            assert candle.timestamp.tzinfo is not None
            assert candle.timestamp.utcoffset().total_seconds() == 0
            assert candle.timestamp.strftime("%Y-%m-%d %H:%M:%S") == record.timestamp

    @given(records=st.lists(record_strategy(), min_size=0, max_size=20))
    @settings(max_examples=30)
    def test_convert_does_not_mutate_input(self, records: list[HistoricalRecord]):
        snapshot = list(records)

        convert(records)

        assert records == snapshot


class TestSamplePipeline:
    """Ingest then convert the five-day sample dataset."""

    def test_sample_round_trip(self, sample_csv):
        candles = convert(ingest(sample_csv))

        assert [c.timestamp for c in candles] == [
            datetime(2023, 1, day, tzinfo=timezone.utc) for day in range(1, 6)
        ]
        assert [c.timestamp.isoformat().replace("+00:00", "Z") for c in candles][0] == (
            "2023-01-01T00:00:00Z"
        )
        assert [c.close for c in candles] == [102.0, 106.0, 108.0, 110.0, 112.0]

    def test_fallback_converts(self):
        candles = convert(fallback_records())

        assert len(candles) == 3
        assert candles[0].open == 100.0
        assert candles[1].close == 106.0
        assert candles[2].volume == 1500.0
        assert all(isinstance(c, Candlestick) for c in candles)


class TestTimestampParseFailure:
    """
    **Feature: candleplot, Property 6: All-or-Nothing Conversion**

    *For any* sequence containing a malformed timestamp, conversion fails
    and returns nothing.
    """

    def test_not_a_date(self):
        record = HistoricalRecord(
            timestamp="not-a-date", open=1, high=2, low=0.5, close=1.5, volume=10
        )

        with pytest.raises(TimestampParseError) as exc_info:
            convert([record])

        assert exc_info.value.value == "not-a-date"
        assert exc_info.value.index == 0

    @given(
        position=st.integers(min_value=0, max_value=4),
        bad=st.sampled_from([
            "not-a-date",
            "2023-01-01",
            "2023-01-01T00:00:00",
            "2023-13-01 00:00:00",
            "2023-01-01 25:00:00",
            "",
        ]),
    )
    @settings(max_examples=50)
    def test_bad_record_fails_whole_call(self, position: int, bad: str):
        records = fallback_records() + fallback_records()[:2]
        records[position] = records[position].model_copy(update={"timestamp": bad})

        with pytest.raises(TimestampParseError) as exc_info:
            convert(records)

        assert exc_info.value.index == position


class TestParseTimestamp:
    """Tests for the timestamp parser."""

    def test_parses_as_utc(self):
        assert parse_timestamp("2023-06-15 13:45:30") == datetime(
            2023, 6, 15, 13, 45, 30, tzinfo=timezone.utc
        )

    def test_rejects_trailing_offset(self):
        with pytest.raises(TimestampParseError):
            parse_timestamp("2023-06-15 13:45:30+02:00")
