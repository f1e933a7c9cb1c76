"""API routes kiểm tra và chấm điểm kế hoạch khám bệnh."""

from typing import List, Optional

from fastapi import APIRouter, HTTPException

from api.medical_plan.models import (
    MedicalPlanRequest,
    MedicalPlanValidationResponse,
    PlanQuality,
    ServiceCategory,
    ServiceDefinition,
    Severity,
    WorkingHoursResponse,
)
from constants.medical_services import EMERGENCY_AVAILABILITY, WORKING_HOURS
from core.exceptions import NotFoundError, ServiceError
from core.logging_config import get_logger
from features.feature_manager import get_feature_manager
from features.medical_plan.validator import sort_diagnostics

logger = get_logger(__name__)
router = APIRouter(tags=["Kế Hoạch Khám Bệnh"])


@router.post(
    "/validate",
    response_model=MedicalPlanValidationResponse,
    summary="🩺 Kiểm Tra Kế Hoạch Khám Bệnh",
    description="""
    Kiểm tra một kế hoạch khám bệnh theo quy trình y tế.

    Các quy tắc được áp dụng:
    - Tên kế hoạch: bắt buộc, đủ dài, có từ khóa y tế
    - Từng cuộc hẹn: loại dịch vụ, bác sĩ, ngày, giờ làm việc, mức ưu tiên
    - Xung đột lịch hẹn trùng ngày giờ
    - Tần suất khuyến nghị cho dịch vụ lặp lại
    - Số lượng và tính cân bằng của kế hoạch

    Chẩn đoán mức `error` chặn việc lưu kế hoạch; `warning` và `info` chỉ là gợi ý.
    """,
    responses={
        500: {
            "description": "Lỗi máy chủ nội bộ",
            "content": {
                "application/json": {
                    "example": {
                        "error": "INTERNAL_ERROR",
                        "message": "Đã xảy ra lỗi không mong muốn khi kiểm tra kế hoạch",
                    }
                }
            },
        },
    },
)
async def validate_plan(
    request: MedicalPlanRequest, sort_by_severity: bool = False
) -> MedicalPlanValidationResponse:
    """Kiểm tra kế hoạch và trả về toàn bộ chẩn đoán."""
    try:
        logger.info(f"Nhận yêu cầu kiểm tra kế hoạch: {request.title}")

        feature_manager = get_feature_manager()
        await feature_manager.initialize()
        review = feature_manager.get_medical_plan()

        diagnostics = review.validate_plan(request)
        if sort_by_severity:
            diagnostics = sort_diagnostics(diagnostics)

        counts = {severity: 0 for severity in Severity}
        for diagnostic in diagnostics:
            counts[diagnostic.severity] += 1

        return MedicalPlanValidationResponse(
            is_valid=counts[Severity.ERROR] == 0,
            error_count=counts[Severity.ERROR],
            warning_count=counts[Severity.WARNING],
            info_count=counts[Severity.INFO],
            diagnostics=diagnostics,
        )

    except ServiceError as e:
        logger.error(f"Lỗi dịch vụ khi kiểm tra kế hoạch {request.title}: {e.message}")
        raise HTTPException(
            status_code=400,
            detail={"error": "SERVICE_ERROR", "message": e.message},
        )
    except Exception as e:
        logger.error(f"Lỗi không mong muốn khi kiểm tra kế hoạch {request.title}: {e}")
        raise HTTPException(
            status_code=500,
            detail={
                "error": "INTERNAL_ERROR",
                "message": "Đã xảy ra lỗi không mong muốn khi kiểm tra kế hoạch",
            },
        )


@router.post(
    "/quality",
    response_model=PlanQuality,
    summary="📈 Chấm Điểm Chất Lượng Kế Hoạch",
    description="Tính điểm 0-100, xếp loại và khuyến nghị cho kế hoạch khám bệnh.",
)
async def evaluate_quality(request: MedicalPlanRequest) -> PlanQuality:
    """Chấm điểm chất lượng kế hoạch."""
    try:
        logger.info(f"Nhận yêu cầu chấm điểm kế hoạch: {request.title}")

        feature_manager = get_feature_manager()
        await feature_manager.initialize()
        review = feature_manager.get_medical_plan()

        return review.evaluate_quality(request)

    except ServiceError as e:
        logger.error(f"Lỗi dịch vụ khi chấm điểm kế hoạch {request.title}: {e.message}")
        raise HTTPException(
            status_code=400,
            detail={"error": "SERVICE_ERROR", "message": e.message},
        )
    except Exception as e:
        logger.error(f"Lỗi không mong muốn khi chấm điểm kế hoạch {request.title}: {e}")
        raise HTTPException(
            status_code=500,
            detail={
                "error": "INTERNAL_ERROR",
                "message": "Đã xảy ra lỗi không mong muốn khi chấm điểm kế hoạch",
            },
        )


@router.get(
    "/services",
    response_model=List[ServiceDefinition],
    summary="📋 Danh Mục Dịch Vụ Y Tế",
)
async def list_services(category: Optional[ServiceCategory] = None) -> List[ServiceDefinition]:
    """Lấy danh mục dịch vụ y tế chuẩn."""
    feature_manager = get_feature_manager()
    await feature_manager.initialize()
    return feature_manager.get_medical_plan().list_services(category)


@router.get(
    "/services/{name}",
    response_model=ServiceDefinition,
    summary="🔎 Chi Tiết Dịch Vụ Y Tế",
)
async def get_service(name: str) -> ServiceDefinition:
    """Lấy thông tin một dịch vụ theo tên."""
    try:
        feature_manager = get_feature_manager()
        await feature_manager.initialize()
        return feature_manager.get_medical_plan().get_service(name)
    except NotFoundError as e:
        raise HTTPException(
            status_code=404,
            detail={"error": "NOT_FOUND", "message": e.message},
        )


@router.get(
    "/working-hours",
    response_model=WorkingHoursResponse,
    summary="🕘 Khung Giờ Làm Việc",
)
async def get_working_hours() -> WorkingHoursResponse:
    """Khung giờ làm việc chuẩn dùng khi kiểm tra giờ hẹn."""
    schedule = {
        day: [{"start": start, "end": end} for start, end in windows]
        for day, windows in WORKING_HOURS.items()
    }
    return WorkingHoursResponse(schedule=schedule, emergency=EMERGENCY_AVAILABILITY)
