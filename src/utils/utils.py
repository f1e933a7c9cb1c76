"""Các hàm tiện ích xử lý ngày, giờ và tần suất."""

import calendar
import re
from datetime import date, datetime
from typing import Optional

from core.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SPACING_DAYS = 30


def parse_date(value: Optional[str]) -> Optional[date]:
    """Chuyển chuỗi ngày sang date.

    Args:
        value: Ngày dạng ISO ("2024-03-05") hoặc ngày giờ ISO

    Returns:
        Đối tượng date, hoặc None nếu không đọc được
    """
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        logger.debug(f"Không đọc được ngày: {value!r}")
        return None


def add_months(start: date, months: int) -> date:
    """Cộng số tháng, ngày vượt quá cuối tháng được đưa về ngày cuối tháng."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def time_to_minutes(value: str) -> int:
    """Đổi "HH:MM" thành số phút tính từ nửa đêm."""
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def parse_frequency_days(frequency: str) -> int:
    """Đổi tần suất dạng chữ ("2 tuần", "6 tháng") thành số ngày.

    Thiếu con số thì coi là 1; đơn vị không nhận ra thì mặc định 30 ngày.
    """
    match = re.search(r"(\d+)", frequency or "")
    amount = int(match.group(1)) if match else 1

    if "tuần" in frequency:
        return amount * 7
    if "tháng" in frequency:
        return amount * 30
    return DEFAULT_SPACING_DAYS
