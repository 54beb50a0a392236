"""Unit tests for UTC timestamp formatting."""

from datetime import datetime, timedelta, timezone

from finops.timestamps import utc_timestamp


class TestUtcTimestamp:
    """Tests for utc_timestamp."""

    def test_aware_datetime(self):
        """Test millisecond precision and Z suffix."""
        moment = datetime(2024, 3, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)
        assert utc_timestamp(moment) == "2024-03-01T12:30:45.123Z"

    def test_other_timezone_converted_to_utc(self):
        """Test that offsets are converted rather than relabelled."""
        moment = datetime(2024, 3, 1, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert utc_timestamp(moment) == "2024-03-01T12:00:00.000Z"

    def test_naive_datetime_treated_as_utc(self):
        """Test that naive datetimes are assumed to be UTC."""
        assert utc_timestamp(datetime(2024, 1, 1)) == "2024-01-01T00:00:00.000Z"

    def test_defaults_to_now(self):
        """Test that the current time is used when no moment is given."""
        before = datetime.now(timezone.utc).replace(microsecond=0)
        parsed = datetime.fromisoformat(utc_timestamp().replace("Z", "+00:00"))
        assert parsed >= before
