"""Thiết lập logging."""

import logging
import os

# Thiết lập logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# Giảm log của các thư viện bên ngoài
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# Hàm để lấy logger
def get_logger(name: str):
    """Lấy một instance logger."""
    return logging.getLogger(name)
