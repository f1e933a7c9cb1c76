"""Interface cơ sở cho các tính năng của dịch vụ."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class BaseInterface(ABC):
    """Vòng đời chung: khởi tạo, giải phóng và thống kê."""

    @abstractmethod
    async def initialize(self) -> None:
        """Chuẩn bị tính năng trước khi nhận yêu cầu."""
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Dừng tính năng và xóa trạng thái đã giữ."""
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Số liệu hoạt động kể từ khi khởi tạo."""
        pass
