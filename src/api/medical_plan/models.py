"""Models cho API kế hoạch khám bệnh - Request và Response schemas."""

from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field


class Severity(str, Enum):
    """Mức độ của một kết quả kiểm tra."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Priority(str, Enum):
    """Mức độ ưu tiên của cuộc hẹn."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ServiceCategory(str, Enum):
    """Nhóm dịch vụ y tế trong danh mục."""

    GENERAL_CHECKUP = "Khám định kỳ"
    SPECIALIST = "Chuyên khoa"
    LAB_TEST = "Xét nghiệm"
    IMAGING = "Chẩn đoán hình ảnh"
    REHABILITATION = "Phục hồi chức năng"
    COUNSELING = "Tư vấn"
    MONITORING = "Theo dõi"
    # Dùng khi loại dịch vụ không có trong danh mục
    OTHER = "Khác"


class QualityLevel(str, Enum):
    """Xếp loại chất lượng kế hoạch."""

    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"


class ServiceDefinition(BaseModel):
    """Một dịch vụ y tế trong danh mục chuẩn.

    Thuộc tính:
        name: Tên dịch vụ, duy nhất trong danh mục
        frequency: Tần suất khuyến nghị (ví dụ: "6 tháng", "1 tuần")
        duration: Thời gian thực hiện dự kiến
        preparation: Hướng dẫn chuẩn bị cho người bệnh
        category: Nhóm dịch vụ
        requirements: Chuyên môn hoặc thiết bị cần có
    """

    name: str
    frequency: str
    duration: str
    preparation: str
    category: ServiceCategory
    requirements: Tuple[str, ...] = ()

    class Config:
        frozen = True


class AppointmentEntry(BaseModel):
    """Một cuộc hẹn trong kế hoạch khám bệnh.

    Các trường được giữ nguyên dạng chuỗi như người dùng nhập; tính hợp lệ
    được báo cáo qua danh sách chẩn đoán thay vì lỗi 422.
    """

    type: str = Field(default="", description="Tên dịch vụ y tế")
    provider: str = Field(default="", description="Bác sĩ hoặc cơ sở thực hiện")
    date: str = Field(
        default="",
        description="Ngày hẹn theo ISO: YYYY-MM-DD hoặc YYYY-MM-DDTHH:MM:SS; dạng khác như 2024/03/05 bị coi là không hợp lệ",
    )
    time: str = Field(default="", description="Giờ hẹn theo định dạng 24h (HH:MM)")
    notes: str = Field(default="", description="Ghi chú cho cuộc hẹn")
    priority: str = Field(default=Priority.MEDIUM.value, description="low, medium hoặc high")


class ValidationDiagnostic(BaseModel):
    """Một kết quả kiểm tra kế hoạch.

    Thuộc tính:
        field: Trường liên quan (ví dụ: "title", "apt_0_date")
        message: Thông điệp hiển thị cho người dùng
        severity: error chặn việc lưu, warning và info chỉ mang tính gợi ý
        code: Mã ổn định của quy tắc đã phát hiện vấn đề
    """

    field: str
    message: str
    severity: Severity
    code: str


class MedicalPlanRequest(BaseModel):
    """Mô hình yêu cầu kiểm tra một kế hoạch khám bệnh."""

    title: str = Field(description="Tên kế hoạch")
    notes: Optional[str] = Field(default=None, description="Mô tả chung của kế hoạch")
    appointments: List[AppointmentEntry] = Field(
        default_factory=list, description="Danh sách cuộc hẹn theo thứ tự"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "title": "Khám định kỳ quý I/2024",
                "notes": "Kế hoạch khám sức khỏe định kỳ cho người cao tuổi, theo dõi huyết áp và đường huyết.",
                "appointments": [
                    {
                        "type": "Khám tổng quát",
                        "provider": "BS. Nguyễn Văn A",
                        "date": "2024-03-05",
                        "time": "09:00",
                        "notes": "",
                        "priority": "medium",
                    }
                ],
            }
        }


class MedicalPlanValidationResponse(BaseModel):
    """Mô hình phản hồi cho việc kiểm tra kế hoạch."""

    is_valid: bool = Field(description="Không có chẩn đoán mức error")
    error_count: int
    warning_count: int
    info_count: int
    diagnostics: List[ValidationDiagnostic]


class PlanQuality(BaseModel):
    """Điểm chất lượng kế hoạch.

    Thuộc tính:
        score: Điểm từ 0 đến 100
        level: Xếp loại poor, fair, good hoặc excellent
        recommendations: Khuyến nghị, dòng tổng kết đứng đầu
    """

    score: int
    level: QualityLevel
    recommendations: List[str]

    class Config:
        json_schema_extra = {
            "example": {
                "score": 99,
                "level": "excellent",
                "recommendations": [
                    "Kế hoạch có chất lượng xuất sắc, phù hợp để triển khai"
                ],
            }
        }


class WorkingHoursResponse(BaseModel):
    """Khung giờ làm việc chuẩn theo ngày trong tuần."""

    schedule: Dict[str, List[Dict[str, str]]]
    emergency: str
