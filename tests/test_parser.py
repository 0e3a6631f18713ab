"""Date/time grammar tests."""

import pytest
from lark.exceptions import UnexpectedInput

from pywxunits._parser import DateTimeFields, DateTimeParser


@pytest.fixture(scope="module")
def parser():
    return DateTimeParser()


class TestDateTimeParser:
    def test_date_only(self, parser):
        assert parser.parse("2024-01-12") == DateTimeFields(2024, 1, 12)

    def test_date_time(self, parser):
        assert parser.parse("2024-01-12 13:46:40") == DateTimeFields(2024, 1, 12, 13, 46, 40)

    def test_utc_suffix(self, parser):
        fields = parser.parse("2024-01-12T13:46:40Z")
        assert fields.utc is True
        assert fields.second == 40

    def test_no_suffix_is_not_utc(self, parser):
        assert parser.parse("2024-01-12T13:46:40").utc is False

    def test_fields_not_range_checked(self, parser):
        assert parser.parse("2024-99-99 99:99:99").month == 99

    def test_long_year(self, parser):
        assert parser.parse("12345-01-01").year == 12345

    def test_negative_year(self, parser):
        assert parser.parse("-0044-03-15") == DateTimeFields(-44, 3, 15)

    def test_minus_only_allowed_on_year(self, parser):
        with pytest.raises(UnexpectedInput):
            parser.parse("2024--01-12")

    @pytest.mark.parametrize("text", ["2024-01-12T", "2024-01-12T13:46:40 Z", "--2024-01-12", "2024-01--12"])
    def test_rejects(self, parser, text):
        with pytest.raises(UnexpectedInput):
            parser.parse(text)
