# services/logger.py
import logging
import os
from logging.handlers import RotatingFileHandler

from config.settings import get_settings


class AppLogger:
    """統一日誌管理系統"""

    _loggers = {}

    @classmethod
    def get_logger(cls, name: str = "estateflow") -> logging.Logger:
        """取得或建立 logger 實例"""
        if name in cls._loggers:
            return cls._loggers[name]

        settings = get_settings()
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

        # 避免重複添加 handler
        if logger.handlers:
            return logger

        formatter = logging.Formatter(
            '[%(asctime)s] %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        # 自動輪轉，最多保留 5 個檔案，每個 10MB
        os.makedirs(settings.log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(settings.log_dir, 'app.log'),
            maxBytes=10*1024*1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        cls._loggers[name] = logger
        return logger


# 建立全域 logger
logger = AppLogger.get_logger()


def log_store_operation(operation: str, collection: str, success: bool,
                        row_count: int = None, error: str = None):
    """記錄 store 異動"""
    if success:
        msg = f"Store 操作成功: {operation} on {collection}"
        if row_count is not None:
            msg += f" ({row_count} rows)"
        logger.info(msg)
    else:
        logger.warning(f"Store 操作失敗: {operation} on {collection} - {error}")
