"""Triển khai tính năng kiểm tra kế hoạch khám bệnh."""

from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional

from api.medical_plan.models import (
    MedicalPlanRequest,
    PlanQuality,
    ServiceCategory,
    ServiceDefinition,
    ValidationDiagnostic,
)
from constants.medical_services import MEDICAL_SERVICES
from core.exceptions import NotFoundError, ServiceError
from core.logging_config import get_logger
from features.interfaces.medical_plan_interface import MedicalPlanInterface
from features.medical_plan import validator
from features.medical_plan.quality_scorer import calculate_plan_quality

logger = get_logger(__name__)


class MedicalPlanReview(MedicalPlanInterface):
    """Kiểm tra và chấm điểm kế hoạch khám bệnh."""

    def __init__(self, today_provider: Callable[[], date] = date.today):
        """Khởi tạo tính năng.

        Args:
            today_provider: Hàm trả về ngày hiện tại, thay được khi kiểm thử
        """
        self._today_provider = today_provider
        self._initialized = False
        self._stats = {
            "total_validations": 0,
            "plans_with_errors": 0,
            "total_quality_checks": 0,
            "last_validation_time": None,
        }

    async def initialize(self) -> None:
        """Khởi tạo tài nguyên cho tính năng."""
        logger.info(f"Danh mục dịch vụ y tế có {len(MEDICAL_SERVICES)} mục")
        self._initialized = True
        logger.info("Khởi tạo kiểm tra kế hoạch khám bệnh thành công")

    async def shutdown(self) -> None:
        """Giải phóng tài nguyên của tính năng."""
        self._initialized = False
        logger.info("Đã giải phóng kiểm tra kế hoạch khám bệnh")

    def get_stats(self) -> Dict[str, Any]:
        """Lấy thống kê hoạt động của tính năng."""
        return self._stats.copy()

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            logger.error("Tính năng kiểm tra kế hoạch chưa được khởi tạo")
            raise ServiceError("Tính năng kiểm tra kế hoạch chưa được khởi tạo")

    def validate_plan(
        self, request: MedicalPlanRequest, today: Optional[date] = None
    ) -> List[ValidationDiagnostic]:
        """Kiểm tra toàn bộ kế hoạch và trả về danh sách chẩn đoán."""
        self._ensure_initialized()
        today = today or self._today_provider()

        diagnostics = validator.validate_medical_plan(
            request.title, request.appointments, request.notes, today
        )

        self._stats["total_validations"] += 1
        if validator.has_blocking_errors(diagnostics):
            self._stats["plans_with_errors"] += 1
        self._stats["last_validation_time"] = datetime.utcnow().isoformat()

        logger.info(
            f"Kiểm tra kế hoạch '{request.title}' xong: {len(diagnostics)} chẩn đoán"
        )
        return diagnostics

    def evaluate_quality(
        self, request: MedicalPlanRequest, today: Optional[date] = None
    ) -> PlanQuality:
        """Tính điểm chất lượng của kế hoạch."""
        self._ensure_initialized()
        today = today or self._today_provider()

        quality = calculate_plan_quality(
            request.title, request.appointments, request.notes, today
        )
        self._stats["total_quality_checks"] += 1
        return quality

    def list_services(
        self, category: Optional[ServiceCategory] = None
    ) -> List[ServiceDefinition]:
        """Lấy danh mục dịch vụ, có thể lọc theo nhóm."""
        if category is None:
            return list(MEDICAL_SERVICES)
        return [s for s in MEDICAL_SERVICES if s.category == category]

    def get_service(self, name: str) -> ServiceDefinition:
        """Lấy một dịch vụ theo tên."""
        service = validator.get_service(name)
        if service is None:
            logger.warning(f"Không tìm thấy dịch vụ: {name}")
            raise NotFoundError(f"Không tìm thấy dịch vụ '{name}' trong danh mục")
        return service
