"""
全域設定
✅ 讀取順序：系統環境變數 → Streamlit Secrets → 預設值
✅ 本機開發用 .env（python-dotenv）
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
import streamlit as st

load_dotenv()

DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_TOKENS = 1000


def get_env(var: str, default: Optional[str] = None) -> Optional[str]:
    """統一從 os.environ 和 st.secrets 根層讀取設定值"""
    # 1. 系統環境變數
    value = os.getenv(var)
    if value:
        return value

    # 2. Streamlit Secrets（非 Streamlit 執行環境下沒有 secrets.toml）
    try:
        value = st.secrets[var]  # type: ignore[index]
        if value:
            return str(value)
    except Exception:
        pass

    return default


@dataclass(frozen=True)
class Settings:
    """應用程式設定值物件"""
    anthropic_api_key: Optional[str]
    anthropic_model: str
    llm_timeout_seconds: float
    llm_max_tokens: int
    log_level: str
    log_dir: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """載入設定（整個 process 只讀一次）"""
    return Settings(
        anthropic_api_key=get_env("ANTHROPIC_API_KEY"),
        anthropic_model=get_env("ANTHROPIC_MODEL", DEFAULT_MODEL),
        llm_timeout_seconds=float(get_env("LLM_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))),
        llm_max_tokens=int(get_env("LLM_MAX_TOKENS", str(DEFAULT_MAX_TOKENS))),
        log_level=get_env("LOG_LEVEL", "INFO").upper(),
        log_dir=get_env("LOG_DIR", "logs"),
    )
