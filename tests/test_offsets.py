"""Offset provider tests."""

import time

import pytest

from pywxunits import FixedOffsetProvider, LocalOffsetProvider, OffsetProvider, TimeCodec


class TestFixedOffsetProvider:
    def test_constant(self):
        provider = FixedOffsetProvider(-3600)
        assert provider.utc_offset(0) == -3600
        assert provider.utc_offset(1705067200) == -3600

    def test_default_is_utc(self):
        assert FixedOffsetProvider().utc_offset(12345) == 0

    def test_satisfies_protocol(self):
        assert isinstance(FixedOffsetProvider(0), OffsetProvider)


class TestLocalOffsetProvider:
    def test_matches_os(self):
        ts = 1705067200
        assert LocalOffsetProvider().utc_offset(ts) == time.localtime(ts).tm_gmtoff

    def test_satisfies_protocol(self):
        assert isinstance(LocalOffsetProvider(), OffsetProvider)


class TestCodecInjection:
    def test_default_provider(self):
        assert isinstance(TimeCodec().offsets, LocalOffsetProvider)

    def test_custom_provider_is_used(self):
        class Recorder:
            def __init__(self):
                self.seen = []

            def utc_offset(self, timestamp, /):
                self.seen.append(timestamp)
                return 0

        recorder = Recorder()
        codec = TimeCodec(recorder)
        codec.timestamp_to_string(42)
        assert recorder.seen == [42]

    def test_utc_formatting_does_not_consult_provider(self):
        class Exploding:
            def utc_offset(self, timestamp, /):
                raise AssertionError("offset requested for UTC formatting")

        codec = TimeCodec(Exploding())
        assert codec.timestamp_to_string(0, utc=True) == "1970-01-01 00:00:00Z"
        assert codec.string_to_timestamp("1970-01-01T00:00:00Z") == 0


# America/New_York 2024: 2024-03-10 07:00:00Z and 2024-11-03 06:00:00Z
NY_DST_START = 1710054000
NY_DST_END = 1730613600


@pytest.fixture
def new_york_tz(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    if time.localtime(NY_DST_START).tm_gmtoff != -4 * 3600:
        monkeypatch.undo()
        time.tzset()
        pytest.skip("America/New_York zone data is not installed")
    yield
    monkeypatch.undo()
    time.tzset()


class TestSystemTimezone:
    def test_offsets_around_transitions(self, new_york_tz):
        provider = LocalOffsetProvider()
        assert provider.utc_offset(NY_DST_START - 1) == -5 * 3600
        assert provider.utc_offset(NY_DST_START) == -4 * 3600
        assert provider.utc_offset(NY_DST_END - 1) == -4 * 3600
        assert provider.utc_offset(NY_DST_END) == -5 * 3600

    def test_format_across_spring_forward(self, new_york_tz):
        codec = TimeCodec()
        assert codec.timestamp_to_string(NY_DST_START - 1) == "2024-03-10 01:59:59"
        assert codec.timestamp_to_string(NY_DST_START) == "2024-03-10 03:00:00"

    def test_round_trip_across_spring_forward(self, new_york_tz):
        codec = TimeCodec()
        for ts in range(NY_DST_START - 7200, NY_DST_START + 7200, 900):
            assert codec.string_to_timestamp(codec.timestamp_to_string(ts)) == ts

    def test_round_trip_outside_repeated_hour(self, new_york_tz):
        codec = TimeCodec()
        timestamps = [
            *range(NY_DST_END - 10800, NY_DST_END - 3600, 900),
            *range(NY_DST_END + 3600, NY_DST_END + 10800, 900),
        ]
        for ts in timestamps:
            assert codec.string_to_timestamp(codec.timestamp_to_string(ts)) == ts
