"""
Test các hàm tiện ích và cấu hình.
"""

from datetime import date

import pytest

from config import settings
from core.exceptions import ConfigError
from utils.utils import add_months, parse_date, parse_frequency_days, time_to_minutes


class TestParseDate:
    """Test đọc ngày"""

    def test_iso_date(self):
        assert parse_date("2024-03-05") == date(2024, 3, 5)

    def test_iso_datetime(self):
        assert parse_date(" 2024-03-05T08:30:00 ") == date(2024, 3, 5)

    @pytest.mark.parametrize("value", ["", None, "05/03/2024", "2024-02-30", "ngày mai"])
    def test_invalid(self, value):
        assert parse_date(value) is None


class TestAddMonths:
    """Test cộng tháng"""

    def test_simple(self):
        assert add_months(date(2024, 3, 4), 6) == date(2024, 9, 4)

    def test_year_rollover(self):
        assert add_months(date(2024, 10, 15), 6) == date(2025, 4, 15)

    def test_end_of_month(self):
        assert add_months(date(2024, 8, 31), 6) == date(2025, 2, 28)


class TestFrequencyAndTime:
    """Test tần suất và giờ"""

    @pytest.mark.parametrize(
        "frequency,days",
        [("1 tuần", 7), ("2 tuần", 14), ("tuần", 7), ("6 tháng", 180), ("24 tháng", 720), ("hàng ngày", 30)],
    )
    def test_parse_frequency_days(self, frequency, days):
        assert parse_frequency_days(frequency) == days

    def test_time_to_minutes(self):
        assert time_to_minutes("11:30") == 690
        assert time_to_minutes("7:05") == 425


class TestSettings:
    """Test cấu hình"""

    def test_defaults(self):
        assert settings.get_validation_config() == {
            "plan_title_min_length": 10,
            "max_future_months": 6,
            "max_appointments_per_plan": 15,
            "detailed_notes_min_length": 50,
        }
        assert settings.get_config("missing", "x") == "x"

    def test_env_int(self, monkeypatch):
        monkeypatch.setenv("TEST_LIMIT", "42")
        assert settings._env_int("TEST_LIMIT", 1) == 42

        monkeypatch.setenv("TEST_LIMIT", "abc")
        with pytest.raises(ConfigError):
            settings._env_int("TEST_LIMIT", 1)
