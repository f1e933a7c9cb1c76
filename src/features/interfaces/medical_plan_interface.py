"""Interface cho tính năng kiểm tra kế hoạch khám bệnh."""

from abc import abstractmethod
from datetime import date
from typing import List, Optional

from features.interfaces.base_interface import BaseInterface
from api.medical_plan.models import (
    MedicalPlanRequest,
    PlanQuality,
    ServiceCategory,
    ServiceDefinition,
    ValidationDiagnostic,
)


class MedicalPlanInterface(BaseInterface):
    """Interface cho tính năng kiểm tra kế hoạch khám bệnh."""

    @abstractmethod
    def validate_plan(
        self, request: MedicalPlanRequest, today: Optional[date] = None
    ) -> List[ValidationDiagnostic]:
        """Kiểm tra toàn bộ kế hoạch và trả về danh sách chẩn đoán."""
        pass

    @abstractmethod
    def evaluate_quality(
        self, request: MedicalPlanRequest, today: Optional[date] = None
    ) -> PlanQuality:
        """Tính điểm chất lượng của kế hoạch."""
        pass

    @abstractmethod
    def list_services(
        self, category: Optional[ServiceCategory] = None
    ) -> List[ServiceDefinition]:
        """Lấy danh mục dịch vụ, có thể lọc theo nhóm."""
        pass

    @abstractmethod
    def get_service(self, name: str) -> ServiceDefinition:
        """Lấy một dịch vụ theo tên."""
        pass
