"""Pytest configuration file."""

import os
import sys
from datetime import date

import pytest

# Add the src directory to Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(project_root, "src"))

from api.medical_plan.models import AppointmentEntry  # noqa: E402

# Thứ 2, 04/03/2024
FIXED_TODAY = date(2024, 3, 4)


@pytest.fixture
def today():
    """Ngày cố định để kết quả kiểm tra không phụ thuộc đồng hồ hệ thống."""
    return FIXED_TODAY


@pytest.fixture
def make_appointment():
    """Tạo cuộc hẹn hợp lệ, ghi đè từng trường khi cần."""

    def _make(**overrides):
        fields = {
            "type": "Khám tổng quát",
            "provider": "BS. Nguyễn Văn A",
            "date": "2024-03-05",
            "time": "09:00",
            "notes": "",
            "priority": "medium",
        }
        fields.update(overrides)
        return AppointmentEntry(**fields)

    return _make


@pytest.fixture(autouse=True)
def reset_feature_manager():
    """Mỗi test dùng một feature manager mới."""
    import features.feature_manager as feature_manager

    feature_manager._manager = None
    yield
    feature_manager._manager = None
