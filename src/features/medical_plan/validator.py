"""Kiểm tra kế hoạch khám bệnh theo quy trình y tế.

Mọi quy tắc đều chạy độc lập: một trường sai không làm dừng việc kiểm tra các
trường khác. Kết quả luôn là danh sách ``ValidationDiagnostic``, module này
không ném exception cho dữ liệu không hợp lệ.
"""

import re
from collections import Counter
from datetime import date
from typing import Dict, List, Optional, Sequence

from api.medical_plan.models import (
    AppointmentEntry,
    Priority,
    ServiceCategory,
    ServiceDefinition,
    Severity,
    ValidationDiagnostic,
)
from config.settings import get_config
from constants.medical_services import (
    MEDICAL_KEYWORDS,
    PROVIDER_TITLE_PATTERN,
    SCHEDULE_BY_WEEKDAY,
    SERVICES_BY_NAME,
    TIME_PATTERN,
    WORKING_HOURS,
)
from core.logging_config import get_logger
from utils.utils import add_months, parse_date, parse_frequency_days, time_to_minutes

logger = get_logger(__name__)

_PROVIDER_TITLE_RE = re.compile(PROVIDER_TITLE_PATTERN, re.IGNORECASE)
_TIME_RE = re.compile(TIME_PATTERN)

_SEVERITY_ORDER = {Severity.ERROR: 0, Severity.WARNING: 1, Severity.INFO: 2}


def _diagnostic(field: str, message: str, severity: Severity, code: str) -> ValidationDiagnostic:
    return ValidationDiagnostic(field=field, message=message, severity=severity, code=code)


def get_service(name: Optional[str]) -> Optional[ServiceDefinition]:
    """Tìm dịch vụ trong danh mục theo tên chính xác."""
    if not name:
        return None
    return SERVICES_BY_NAME.get(name)


def category_of(service_type: str) -> ServiceCategory:
    """Nhóm dịch vụ của một loại khám, ``OTHER`` nếu không có trong danh mục."""
    service = get_service(service_type)
    return service.category if service else ServiceCategory.OTHER


def is_fully_populated(appointment: AppointmentEntry) -> bool:
    """Cuộc hẹn có đủ loại dịch vụ, ngày và giờ."""
    return bool(appointment.type and appointment.date and appointment.time)


def is_within_working_hours(appointment_date: Optional[date], minutes: int) -> bool:
    """Kiểm tra giờ hẹn có nằm trong khung giờ làm việc của ngày đó."""
    if appointment_date is None:
        return False

    windows = WORKING_HOURS[SCHEDULE_BY_WEEKDAY[appointment_date.weekday()]]
    return any(
        time_to_minutes(start) <= minutes <= time_to_minutes(end)
        for start, end in windows
    )


def validate_plan_info(title: str, notes: Optional[str] = None) -> List[ValidationDiagnostic]:
    """Kiểm tra thông tin cơ bản của kế hoạch.

    Args:
        title: Tên kế hoạch
        notes: Mô tả chung, hiện chưa có quy tắc nào áp dụng

    Returns:
        Danh sách chẩn đoán cho trường ``title``
    """
    diagnostics = []
    title = title or ""
    min_length = get_config("plan_title_min_length", 10)

    if not title.strip():
        diagnostics.append(
            _diagnostic(
                "title",
                "Tên kế hoạch khám bệnh là bắt buộc theo quy trình y tế",
                Severity.ERROR,
                "PLAN_TITLE_REQUIRED",
            )
        )
    elif len(title.strip()) < min_length:
        diagnostics.append(
            _diagnostic(
                "title",
                f"Tên kế hoạch nên mô tả rõ ràng mục đích (tối thiểu {min_length} ký tự)",
                Severity.WARNING,
                "PLAN_TITLE_TOO_SHORT",
            )
        )

    lowered = title.lower()
    if not any(keyword in lowered for keyword in MEDICAL_KEYWORDS):
        diagnostics.append(
            _diagnostic(
                "title",
                "Tên kế hoạch nên chứa từ khóa y tế rõ ràng (VD: khám, xét nghiệm, theo dõi)",
                Severity.INFO,
                "PLAN_TITLE_NO_MEDICAL_KEYWORDS",
            )
        )

    return diagnostics


def _provider_has_skill(provider: str, requirements: Sequence[str]) -> bool:
    # So khớp chuỗi con gần đúng, chấp nhận báo sai
    lowered = provider.lower()
    for requirement in requirements:
        requirement = requirement.lower()
        words = requirement.split(" ")
        if len(words) > 1 and words[1] in lowered:
            return True
        if requirement in lowered:
            return True
    return False


def _validate_type(
    appointment: AppointmentEntry, index: int, service: Optional[ServiceDefinition]
) -> List[ValidationDiagnostic]:
    prefix = f"apt_{index}"
    label = f"Cuộc hẹn {index + 1}"

    if not appointment.type.strip():
        return [
            _diagnostic(
                f"{prefix}_type",
                f"{label}: Loại dịch vụ y tế là bắt buộc",
                Severity.ERROR,
                "APT_TYPE_REQUIRED",
            )
        ]

    if service is None:
        return [
            _diagnostic(
                f"{prefix}_type",
                f'{label}: "{appointment.type}" không có trong danh mục dịch vụ y tế chuẩn',
                Severity.WARNING,
                "APT_TYPE_NOT_STANDARD",
            )
        ]

    return [
        _diagnostic(
            f"{prefix}_type_info",
            f"{label}: {service.name} - Thời gian: {service.duration}, "
            f"Tần suất: {service.frequency}. Chuẩn bị: {service.preparation}",
            Severity.INFO,
            "APT_SERVICE_INFO",
        )
    ]


def _validate_provider(
    appointment: AppointmentEntry, index: int, service: Optional[ServiceDefinition]
) -> List[ValidationDiagnostic]:
    prefix = f"apt_{index}"
    label = f"Cuộc hẹn {index + 1}"
    provider = appointment.provider.strip()

    if not provider:
        return [
            _diagnostic(
                f"{prefix}_provider",
                f"{label}: Tên bác sĩ/nhà cung cấp dịch vụ là bắt buộc",
                Severity.ERROR,
                "APT_PROVIDER_REQUIRED",
            )
        ]

    diagnostics = []
    if not _PROVIDER_TITLE_RE.match(provider):
        diagnostics.append(
            _diagnostic(
                f"{prefix}_provider",
                f"{label}: Tên nhà cung cấp nên có danh xưng chuyên môn "
                f"(VD: BS. Nguyễn Văn A, KTV. Trần Thị B)",
                Severity.WARNING,
                "APT_PROVIDER_NO_TITLE",
            )
        )

    if service is not None and service.requirements:
        if not _provider_has_skill(appointment.provider, service.requirements):
            diagnostics.append(
                _diagnostic(
                    f"{prefix}_provider",
                    f'{label}: Dịch vụ "{appointment.type}" yêu cầu: '
                    f"{', '.join(service.requirements)}. "
                    f"Vui lòng kiểm tra chuyên môn nhà cung cấp.",
                    Severity.WARNING,
                    "APT_PROVIDER_SKILL_MISMATCH",
                )
            )

    return diagnostics


def _validate_date(
    appointment: AppointmentEntry, index: int, today: date
) -> List[ValidationDiagnostic]:
    prefix = f"apt_{index}"
    label = f"Cuộc hẹn {index + 1}"

    if not appointment.date.strip():
        return [
            _diagnostic(
                f"{prefix}_date",
                f"{label}: Ngày hẹn là bắt buộc",
                Severity.ERROR,
                "APT_DATE_REQUIRED",
            )
        ]

    appointment_date = parse_date(appointment.date)
    if appointment_date is None:
        return [
            _diagnostic(
                f"{prefix}_date",
                f"{label}: Ngày hẹn không hợp lệ",
                Severity.ERROR,
                "APT_DATE_INVALID",
            )
        ]

    diagnostics = []
    if appointment_date < today:
        diagnostics.append(
            _diagnostic(
                f"{prefix}_date",
                f"{label}: Không thể đặt lịch hẹn trong quá khứ",
                Severity.ERROR,
                "APT_DATE_IN_PAST",
            )
        )

    max_months = get_config("max_future_months", 6)
    if appointment_date > add_months(today, max_months):
        diagnostics.append(
            _diagnostic(
                f"{prefix}_date",
                f"{label}: Không nên đặt lịch hẹn quá xa (>{max_months} tháng)",
                Severity.WARNING,
                "APT_DATE_TOO_FAR",
            )
        )

    if appointment_date.weekday() == 6:
        diagnostics.append(
            _diagnostic(
                f"{prefix}_date",
                f"{label}: Chủ nhật thường không có dịch vụ y tế thường quy. "
                f"Vui lòng kiểm tra lại.",
                Severity.WARNING,
                "APT_DATE_SUNDAY",
            )
        )

    return diagnostics


def _validate_time(appointment: AppointmentEntry, index: int) -> List[ValidationDiagnostic]:
    prefix = f"apt_{index}"
    label = f"Cuộc hẹn {index + 1}"

    if not appointment.time.strip():
        return [
            _diagnostic(
                f"{prefix}_time",
                f"{label}: Giờ hẹn là bắt buộc",
                Severity.ERROR,
                "APT_TIME_REQUIRED",
            )
        ]

    if not _TIME_RE.fullmatch(appointment.time):
        return [
            _diagnostic(
                f"{prefix}_time",
                f"{label}: Giờ hẹn phải có định dạng HH:MM (VD: 09:30)",
                Severity.ERROR,
                "APT_TIME_INVALID_FORMAT",
            )
        ]

    # Ngày thiếu hoặc sai thì không xác định được thứ, coi như ngoài giờ
    minutes = time_to_minutes(appointment.time)
    if is_within_working_hours(parse_date(appointment.date), minutes):
        return []

    return [
        _diagnostic(
            f"{prefix}_time",
            f"{label}: Giờ hẹn ngoài giờ làm việc. "
            f"Thứ 2-6: 07:00-11:30, 13:30-17:00. Thứ 7: 07:00-11:30",
            Severity.WARNING,
            "APT_TIME_OUTSIDE_HOURS",
        )
    ]


def _validate_priority(
    appointment: AppointmentEntry, index: int, service: Optional[ServiceDefinition]
) -> List[ValidationDiagnostic]:
    prefix = f"apt_{index}"
    label = f"Cuộc hẹn {index + 1}"

    if appointment.priority not in {p.value for p in Priority}:
        return [
            _diagnostic(
                f"{prefix}_priority",
                f"{label}: Mức độ ưu tiên không hợp lệ",
                Severity.ERROR,
                "APT_PRIORITY_INVALID",
            )
        ]

    if service is None:
        return []

    if service.category == ServiceCategory.SPECIALIST and appointment.priority == Priority.LOW.value:
        return [
            _diagnostic(
                f"{prefix}_priority",
                f"{label}: Khám chuyên khoa thường có mức độ ưu tiên Medium hoặc High",
                Severity.INFO,
                "APT_PRIORITY_SUGGESTION",
            )
        ]

    if service.category == ServiceCategory.MONITORING and appointment.priority == Priority.HIGH.value:
        return [
            _diagnostic(
                f"{prefix}_priority",
                f"{label}: Theo dõi thường quy thường có mức độ ưu tiên Low hoặc Medium",
                Severity.INFO,
                "APT_PRIORITY_SUGGESTION",
            )
        ]

    return []


def validate_appointment(
    appointment: AppointmentEntry, index: int, today: Optional[date] = None
) -> List[ValidationDiagnostic]:
    """Kiểm tra một cuộc hẹn y tế.

    Args:
        appointment: Cuộc hẹn cần kiểm tra
        index: Vị trí của cuộc hẹn trong kế hoạch (bắt đầu từ 0)
        today: Ngày hiện tại, mặc định lấy theo đồng hồ hệ thống

    Returns:
        Chẩn đoán theo thứ tự: loại dịch vụ, nhà cung cấp, ngày, giờ, ưu tiên
    """
    today = today or date.today()
    service = get_service(appointment.type)

    diagnostics = []
    diagnostics.extend(_validate_type(appointment, index, service))
    diagnostics.extend(_validate_provider(appointment, index, service))
    diagnostics.extend(_validate_date(appointment, index, today))
    diagnostics.extend(_validate_time(appointment, index))
    diagnostics.extend(_validate_priority(appointment, index, service))
    return diagnostics


def check_schedule_conflicts(appointments: Sequence[AppointmentEntry]) -> List[ValidationDiagnostic]:
    """Phát hiện các cuộc hẹn trùng chính xác ngày và giờ."""
    schedule: Dict[str, List[int]] = {}

    for position, appointment in enumerate(appointments, start=1):
        if appointment.date and appointment.time:
            slot = f"{appointment.date} {appointment.time}"
            schedule.setdefault(slot, []).append(position)

    diagnostics = []
    for slot, positions in schedule.items():
        if len(positions) > 1:
            diagnostics.append(
                _diagnostic(
                    "schedule_conflict",
                    f"⚠️ XUNG ĐỘT LỊCH HẸN: {slot} có {len(positions)} cuộc hẹn "
                    f"(vị trí: {', '.join(str(p) for p in positions)}). "
                    f"Cần điều chỉnh thời gian.",
                    Severity.ERROR,
                    "SCHEDULE_CONFLICT",
                )
            )

    return diagnostics


def check_service_frequency(appointments: Sequence[AppointmentEntry]) -> List[ValidationDiagnostic]:
    """Nhắc khoảng cách tối thiểu cho dịch vụ xuất hiện nhiều lần.

    Chỉ mang tính gợi ý: ngày thực tế của các cuộc hẹn không được so sánh.
    """
    counts = Counter(appointment.type for appointment in appointments if appointment.type)

    diagnostics = []
    for service_name, count in counts.items():
        if count <= 1:
            continue

        service = get_service(service_name)
        if service is None:
            continue

        min_days = parse_frequency_days(service.frequency)
        diagnostics.append(
            _diagnostic(
                "frequency",
                f'Dịch vụ "{service_name}" có {count} lần trong kế hoạch. '
                f"Tần suất khuyến nghị: {service.frequency}. "
                f"Đảm bảo khoảng cách tối thiểu {min_days} ngày.",
                Severity.INFO,
                "SERVICE_FREQUENCY_INFO",
            )
        )

    return diagnostics


def validate_medical_plan(
    title: str,
    appointments: Sequence[AppointmentEntry],
    notes: Optional[str] = None,
    today: Optional[date] = None,
) -> List[ValidationDiagnostic]:
    """Kiểm tra toàn bộ kế hoạch y tế.

    Thứ tự kết quả: thông tin kế hoạch, từng cuộc hẹn, xung đột lịch,
    tần suất dịch vụ, số lượng và tính cân bằng. Danh sách không được sắp xếp
    theo mức độ; dùng ``sort_diagnostics`` nếu cần.
    """
    today = today or date.today()

    diagnostics = []
    diagnostics.extend(validate_plan_info(title, notes))
    for index, appointment in enumerate(appointments):
        diagnostics.extend(validate_appointment(appointment, index, today))
    diagnostics.extend(check_schedule_conflicts(appointments))
    diagnostics.extend(check_service_frequency(appointments))

    populated = [a for a in appointments if is_fully_populated(a)]
    max_appointments = get_config("max_appointments_per_plan", 15)

    if not populated:
        diagnostics.append(
            _diagnostic(
                "appointments",
                "Kế hoạch y tế phải có ít nhất một cuộc hẹn hợp lệ",
                Severity.ERROR,
                "NO_VALID_APPOINTMENTS",
            )
        )
    elif len(populated) > max_appointments:
        diagnostics.append(
            _diagnostic(
                "appointments",
                f"Kế hoạch có {len(populated)} cuộc hẹn (>{max_appointments}). "
                f"Cân nhắc chia thành nhiều kế hoạch nhỏ để dễ quản lý.",
                Severity.WARNING,
                "TOO_MANY_APPOINTMENTS",
            )
        )

    categories = {category_of(a.type) for a in populated}
    if len(categories) == 1 and len(populated) > 3:
        diagnostics.append(
            _diagnostic(
                "balance",
                "Kế hoạch tập trung vào một loại dịch vụ. "
                "Cân nhắc thêm các dịch vụ khác để chăm sóc toàn diện.",
                Severity.INFO,
                "PLAN_NOT_BALANCED",
            )
        )

    logger.debug(
        f"Đã kiểm tra kế hoạch '{title}' với {len(appointments)} cuộc hẹn: "
        f"{len(diagnostics)} chẩn đoán"
    )
    return diagnostics


def sort_diagnostics(diagnostics: Sequence[ValidationDiagnostic]) -> List[ValidationDiagnostic]:
    """Sắp xếp ổn định theo mức độ: error, warning rồi info."""
    return sorted(diagnostics, key=lambda d: _SEVERITY_ORDER[d.severity])


def has_blocking_errors(diagnostics: Sequence[ValidationDiagnostic]) -> bool:
    """Có ít nhất một chẩn đoán mức error."""
    return any(d.severity == Severity.ERROR for d in diagnostics)
