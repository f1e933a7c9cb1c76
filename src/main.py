"""Điểm khởi đầu của ứng dụng FastAPI kiểm tra kế hoạch khám bệnh."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.router import router as api_router
from config.settings import config
from core.logging_config import get_logger
from features.feature_manager import get_feature_manager

logger = get_logger(__name__)

description = """
🏥 **Dịch Vụ Kiểm Tra Kế Hoạch Khám Bệnh**

API kiểm tra và chấm điểm kế hoạch khám bệnh cho người cao tuổi tại cơ sở chăm sóc.

## Tính Năng

* **🩺 Kiểm Tra Kế Hoạch**: Kiểm tra loại dịch vụ, bác sĩ, ngày giờ hẹn và mức ưu tiên
* **⚠️ Xung Đột Lịch Hẹn**: Phát hiện các cuộc hẹn trùng ngày giờ
* **📈 Chấm Điểm Chất Lượng**: Điểm 0-100, xếp loại và khuyến nghị
* **📋 Danh Mục Dịch Vụ**: Tra cứu dịch vụ y tế chuẩn và khung giờ làm việc
"""

app = FastAPI(
    title="Medical Plan Service",
    description=description,
    version=config["app_version"],
    docs_url="/docs",
    redoc_url="/redoc",
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT",
    },
)

# Cấu hình CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Bao gồm các route API
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    """Xử lý sự kiện khởi động ứng dụng."""
    logger.info(f"Đang khởi động {config['app_title']} v{config['app_version']}")
    await get_feature_manager().initialize()
    logger.info("Khởi động ứng dụng hoàn tất")


@app.on_event("shutdown")
async def shutdown_event():
    """Xử lý sự kiện tắt ứng dụng."""
    logger.info("Bắt đầu tắt ứng dụng")
    await get_feature_manager().shutdown()


@app.get(
    "/health",
    summary="🏥 Kiểm Tra Sức Khỏe",
    description="Kiểm tra trạng thái hoạt động của dịch vụ",
    tags=["Hệ Thống"],
)
async def health_check():
    """Endpoint kiểm tra sức khỏe để giám sát trạng thái dịch vụ."""
    return {
        "status": "healthy",
        "service": config["app_title"],
        "version": config["app_version"],
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config["host"], port=config["port"])
