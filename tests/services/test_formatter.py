"""Tests for distance/duration display strings."""

from __future__ import annotations

from traveler.services.formatter import format_distance, format_duration


class TestFormatDistance:
    def test_below_one_km_in_meters(self):
        assert format_distance(999) == "999 m"

    def test_one_km_boundary(self):
        assert format_distance(1000) == "1.00 km"

    def test_two_decimals(self):
        assert format_distance(2500) == "2.50 km"

    def test_zero(self):
        assert format_distance(0) == "0 m"

    def test_half_meter_rounds_up(self):
        assert format_distance(12.5) == "13 m"
        assert format_distance(999.4) == "999 m"

    def test_long_trip(self):
        assert format_distance(392_217.8) == "392.22 km"


class TestFormatDuration:
    def test_seconds(self):
        assert format_duration(45) == "45 sec"

    def test_minutes_floor(self):
        assert format_duration(90) == "1 min"
        assert format_duration(3599) == "59 min"

    def test_hours_and_minutes(self):
        assert format_duration(3661) == "1 hr 1 min"

    def test_exact_hour(self):
        assert format_duration(3600) == "1 hr 0 min"

    def test_minute_boundary(self):
        assert format_duration(60) == "1 min"

    def test_zero(self):
        assert format_duration(0) == "0 sec"

    def test_half_second_rounds_up(self):
        assert format_duration(2.5) == "3 sec"

    def test_flight_with_overhead(self):
        assert format_duration(7200 + 1800 + 59) == "2 hr 30 min"
