"""Quản lý cấu hình."""

import os
from dotenv import load_dotenv

from core.exceptions import ConfigError

# Load environment variables
load_dotenv()


def _env_int(name: str, default: int) -> int:
    """Đọc một biến môi trường kiểu số nguyên."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"Giá trị của {name} phải là số nguyên, nhận được: {raw}")


# Cấu hình ứng dụng
config = {
    # API Configuration
    "app_title": "Medical Plan Service - Plan Validator",
    "app_version": "1.0.0",
    "app_description": "Service for medical examination plan validation and quality scoring",
    "host": os.getenv("APP_HOST", "0.0.0.0"),
    "port": _env_int("APP_PORT", 5023),
    "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
    # Validation limits
    "plan_title_min_length": _env_int("PLAN_TITLE_MIN_LENGTH", 10),
    "max_future_months": _env_int("MAX_FUTURE_MONTHS", 6),
    "max_appointments_per_plan": _env_int("MAX_APPOINTMENTS_PER_PLAN", 15),
    "detailed_notes_min_length": _env_int("DETAILED_NOTES_MIN_LENGTH", 50),
}


# Hàm getter
def get_config(key: str, default=None):
    """Lấy giá trị cấu hình theo key."""
    return config.get(key, default)


def get_validation_config():
    """Lấy các giới hạn dùng khi kiểm tra kế hoạch."""
    return {
        "plan_title_min_length": config["plan_title_min_length"],
        "max_future_months": config["max_future_months"],
        "max_appointments_per_plan": config["max_appointments_per_plan"],
        "detailed_notes_min_length": config["detailed_notes_min_length"],
    }
