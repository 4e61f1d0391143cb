"""
Session 管理工具
✅ Streamlit Session State 封裝
✅ 每個瀏覽器 session 持有一份 RentalStore 與 AI 對話
"""
import streamlit as st
import logging

from repository.rental_store import RentalStore
from services.address_service import StaticAddressSearcher
from services.assistant_service import AssistantSession
from services.llm_helper import LLMHelper

logger = logging.getLogger(__name__)


class SessionManager:
    """Session 管理器"""

    # Session Key 常量
    STORE_KEY = "rental_store"
    ASSISTANT_KEY = "assistant_session"
    ADDRESS_KEY = "address_searcher"

    def __init__(self):
        """初始化 Session Manager"""
        self._init_session_state()

    def _init_session_state(self):
        """初始化 Session State 結構（以範例資料建立 store）"""
        if self.STORE_KEY not in st.session_state:
            st.session_state[self.STORE_KEY] = RentalStore.from_seed()
            logger.debug("✅ RentalStore 已初始化")

        if self.ASSISTANT_KEY not in st.session_state:
            st.session_state[self.ASSISTANT_KEY] = AssistantSession(
                st.session_state[self.STORE_KEY], LLMHelper()
            )

        if self.ADDRESS_KEY not in st.session_state:
            st.session_state[self.ADDRESS_KEY] = StaticAddressSearcher()

    @property
    def store(self) -> RentalStore:
        return st.session_state[self.STORE_KEY]

    @property
    def address_searcher(self) -> StaticAddressSearcher:
        return st.session_state[self.ADDRESS_KEY]

    @property
    def assistant(self) -> AssistantSession:
        return st.session_state[self.ASSISTANT_KEY]

    def reset(self):
        """清除 session 並重新載入範例資料"""
        for key in (self.STORE_KEY, self.ASSISTANT_KEY, self.ADDRESS_KEY):
            st.session_state.pop(key, None)
        self._init_session_state()
        logger.info("🔄 Session 已重設")
