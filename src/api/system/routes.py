"""Routes cho system info và kiểm tra."""

from fastapi import APIRouter, HTTPException

from api.system.models import HealthResponse, StatsResponse
from config.settings import config
from constants.medical_services import MEDICAL_SERVICES
from core.logging_config import get_logger
from features.feature_manager import get_feature_manager

logger = get_logger(__name__)
router = APIRouter(tags=["system"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats():
    """Lấy thống kê hoạt động của các tính năng."""
    try:
        feature_manager = get_feature_manager()
        await feature_manager.initialize()
        stats = feature_manager.get_all_stats()
        logger.info(f"Trả về thống kê của {len(stats)} tính năng")
        return StatsResponse(status="success", data=stats)
    except Exception as e:
        logger.error(f"Lỗi lấy thống kê: {e}")
        raise HTTPException(status_code=500, detail="Lỗi hệ thống")


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Kiểm tra sức khỏe hệ thống."""
    try:
        feature_manager = get_feature_manager()
        await feature_manager.initialize()
        feature_manager.get_medical_plan()

        return HealthResponse(
            status="healthy",
            service=config["app_title"],
            version=config["app_version"],
            catalog_size=len(MEDICAL_SERVICES),
        )
    except Exception as e:
        logger.error(f"Health check thất bại: {e}")
        raise HTTPException(status_code=503, detail="Hệ thống không khả dụng")
