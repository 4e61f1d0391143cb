"""
Services Package
統一管理所有服務層邏輯

子模組請直接匯入（repository 依賴 services.logger，這裡只匯出 logger）
"""

from services.logger import logger

__all__ = [
    'logger'
]
