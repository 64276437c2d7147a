"""Tests for duration and timestamp formatting."""

import unittest
from datetime import timezone

from activity_report.durations import format_duration, format_timestamp


class TestFormatDuration(unittest.TestCase):
    """Test cases for format_duration."""

    def test_zero(self):
        self.assertEqual(format_duration(0), "0 seconds")

    def test_below_half_second_rounds_to_zero(self):
        self.assertEqual(format_duration(499), "0 seconds")

    def test_half_second_rounds_up(self):
        self.assertEqual(format_duration(500), "1 second")
        self.assertEqual(format_duration(1500), "2 seconds")

    def test_singular_units(self):
        self.assertEqual(format_duration(3661000), "1 hour, 1 minute, 1 second")

    def test_zero_units_are_skipped(self):
        self.assertEqual(format_duration(900000), "15 minutes")
        self.assertEqual(format_duration(7200000), "2 hours")
        self.assertEqual(format_duration(3605000), "1 hour, 5 seconds")

    def test_no_days(self):
        self.assertEqual(format_duration(26 * 3600 * 1000), "26 hours")

    def test_mixed_with_rounding(self):
        self.assertEqual(format_duration(3723400), "1 hour, 2 minutes, 3 seconds")

    def test_rounding_carries_into_next_unit(self):
        self.assertEqual(format_duration(59600), "1 minute")

    def test_monotonic_within_a_minute(self):
        def seconds(text):
            if text == "0 seconds":
                return 0
            return int(text.split()[0])

        previous = 0
        for milliseconds in range(0, 59000, 250):
            current = seconds(format_duration(milliseconds))
            self.assertGreaterEqual(current, previous, milliseconds)
            previous = current

    def test_negative_rejected(self):
        with self.assertRaises(ValueError):
            format_duration(-1)


class TestFormatTimestamp(unittest.TestCase):
    """Test cases for format_timestamp."""

    def test_utc(self):
        self.assertEqual(
            format_timestamp(1705327200000, timezone.utc), "2024-01-15 14:00:00"
        )

    def test_sub_second_truncated(self):
        self.assertEqual(
            format_timestamp(1705327200999, timezone.utc), "2024-01-15 14:00:00"
        )

    def test_custom_format(self):
        self.assertEqual(
            format_timestamp(1705327200000, timezone.utc, "%H:%M"), "14:00"
        )


if __name__ == "__main__":
    unittest.main()
