"""Tính điểm chất lượng kế hoạch khám bệnh (0-100)."""

from datetime import date
from typing import Optional, Sequence

from api.medical_plan.models import AppointmentEntry, PlanQuality, Priority, QualityLevel, Severity
from config.settings import get_config
from core.logging_config import get_logger
from features.medical_plan.validator import category_of, is_fully_populated, validate_medical_plan

logger = get_logger(__name__)

SEVERITY_PENALTIES = {
    Severity.ERROR: 15,
    Severity.WARNING: 8,
    Severity.INFO: 3,
}

CATEGORY_BONUS = 5
MAX_CATEGORY_BONUS = 20
DETAILED_NOTES_BONUS = 5
PRIORITY_SPREAD_BONUS = 10

LEVEL_SUMMARIES = {
    QualityLevel.POOR: "Kế hoạch cần cải thiện đáng kể về chất lượng và tính khả thi",
    QualityLevel.FAIR: "Kế hoạch có thể cải thiện thêm để đạt chất lượng tốt hơn",
    QualityLevel.EXCELLENT: "Kế hoạch có chất lượng xuất sắc, phù hợp để triển khai",
}


def level_for_score(score: int) -> QualityLevel:
    """Xếp loại theo điểm."""
    if score >= 85:
        return QualityLevel.EXCELLENT
    if score >= 70:
        return QualityLevel.GOOD
    if score >= 50:
        return QualityLevel.FAIR
    return QualityLevel.POOR


def calculate_plan_quality(
    title: str,
    appointments: Sequence[AppointmentEntry],
    notes: Optional[str] = None,
    today: Optional[date] = None,
) -> PlanQuality:
    """Tính điểm chất lượng kế hoạch.

    Bắt đầu từ 100, trừ điểm theo từng chẩn đoán và cộng điểm cho sự đa dạng
    dịch vụ, ghi chú chi tiết và phân bổ ưu tiên. Thông điệp của mọi chẩn đoán
    mức error được đưa vào danh sách khuyến nghị.

    Args:
        title: Tên kế hoạch
        appointments: Danh sách cuộc hẹn
        notes: Mô tả chung của kế hoạch
        today: Ngày hiện tại, mặc định lấy theo đồng hồ hệ thống

    Returns:
        Điểm, xếp loại và khuyến nghị
    """
    diagnostics = validate_medical_plan(title, appointments, notes, today)
    recommendations = []
    score = 100

    for diagnostic in diagnostics:
        score -= SEVERITY_PENALTIES[diagnostic.severity]
        if diagnostic.severity == Severity.ERROR:
            recommendations.append(diagnostic.message)

    populated = [a for a in appointments if is_fully_populated(a)]

    # Đa dạng dịch vụ
    categories = {category_of(a.type) for a in populated}
    score += min(len(categories) * CATEGORY_BONUS, MAX_CATEGORY_BONUS)

    # Ghi chú chi tiết
    notes_min_length = get_config("detailed_notes_min_length", 50)
    if notes and len(notes) > notes_min_length:
        score += DETAILED_NOTES_BONUS

    # Phân bổ ưu tiên đủ ba mức
    priorities = {a.priority for a in populated}
    if {p.value for p in Priority} <= priorities:
        score += PRIORITY_SPREAD_BONUS

    score = max(0, min(100, score))
    level = level_for_score(score)

    summary = LEVEL_SUMMARIES.get(level)
    if summary:
        recommendations.insert(0, summary)

    logger.info(f"Điểm chất lượng kế hoạch '{title}': {score} ({level.value})")
    return PlanQuality(score=score, level=level, recommendations=recommendations)
