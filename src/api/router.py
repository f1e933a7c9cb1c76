"""Router chính cho API với các module được tổ chức."""

from fastapi import APIRouter
from .medical_plan.routes import router as medical_plan_router
from .system.routes import router as system_router

# Tạo router chính
router = APIRouter()

# Bao gồm các router con với prefix và tags tương ứng
router.include_router(medical_plan_router, prefix="/medical-plan")
router.include_router(system_router, prefix="/system")
