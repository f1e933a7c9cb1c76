from typing import Any, Dict, Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Mô hình phản hồi cho endpoint kiểm tra sức khỏe.

    Thuộc tính:
        status: Trạng thái sức khỏe dịch vụ ("healthy" hoặc "unhealthy")
        service: Tên và mô tả dịch vụ
        version: Phiên bản hiện tại của dịch vụ
        catalog_size: Số dịch vụ trong danh mục y tế
    """

    status: str
    service: str
    version: str
    catalog_size: Optional[int] = None

    class Config:
        json_schema_extra = {
            "example": {
                "status": "healthy",
                "service": "Medical Plan Service - Plan Validator",
                "version": "1.0.0",
                "catalog_size": 23,
            }
        }


class StatsResponse(BaseModel):
    """Thống kê hoạt động theo từng tính năng."""

    status: str
    data: Dict[str, Dict[str, Any]]
