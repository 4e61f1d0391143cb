"""
LLM 租賃顧問助手
✅ 使用 Claude API 回答租賃管理問題
✅ 生成欠款催繳簡訊（溫和 / 標準 / 堅定三種版本）
✅ 缺少 API Key、連線失敗、空白回應時回傳固定備用文字，不拋例外
✅ 請求逾時預設 30 秒
"""

from typing import Optional

import anthropic
from anthropic import Anthropic

from config.settings import Settings, get_settings
from services.logger import logger

# 備用文字（畫面直接顯示，維持韓文）
MISSING_KEY_MESSAGE = "API 키 설정을 확인해주세요."
ADVICE_ERROR_MESSAGE = "AI 서비스 연결 중 오류가 발생했습니다."
ADVICE_EMPTY_MESSAGE = "응답을 생성할 수 없습니다."
NOTICE_ERROR_MESSAGE = "AI 서비스 오류 발생."
NOTICE_EMPTY_MESSAGE = "메시지를 생성할 수 없습니다."


class LLMHelper:
    """租賃顧問文案生成器"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[Anthropic] = None,
        settings: Optional[Settings] = None
    ):
        """
        初始化 LLM 客戶端

        Args:
            api_key: Anthropic API Key（可選，預設讀取設定）
            client: 已建立的客戶端（測試時注入）
            settings: 設定值（可選）
        """
        self.settings = settings or get_settings()
        self.api_key = api_key or self.settings.anthropic_api_key
        self.client = client

        if self.client is None and self.api_key:
            self.client = Anthropic(
                api_key=self.api_key,
                timeout=self.settings.llm_timeout_seconds,
                max_retries=0
            )

        self.llm_enabled = self.client is not None
        if self.llm_enabled:
            logger.info("✅ LLM 客戶端初始化成功")
        else:
            logger.warning("⚠️ 未設定 ANTHROPIC_API_KEY，AI 功能停用")

    # ==================== 對外方法 ====================

    def generate_advice(self, prompt_text: str, context_summary: str) -> str:
        """
        依目前管理狀況回答使用者問題

        Args:
            prompt_text: 使用者輸入
            context_summary: 由 assistant_service 組好的現況摘要

        Returns:
            生成文字，或備用文字
        """
        if not self.llm_enabled:
            return MISSING_KEY_MESSAGE

        prompt = self._build_advice_prompt(prompt_text, context_summary)
        return self._complete(prompt, ADVICE_ERROR_MESSAGE, ADVICE_EMPTY_MESSAGE)

    def draft_notice(
        self,
        tenant_name: str,
        amount: float,
        payment_type: str,
        days_overdue: int
    ) -> str:
        """
        生成欠款催繳簡訊草稿（三種語氣）

        Args:
            tenant_name: 租客姓名
            amount: 欠款金額
            payment_type: 繳費類型顯示名稱（월세 / 관리비 / 보증금）
            days_overdue: 逾期天數
        """
        if not self.llm_enabled:
            return MISSING_KEY_MESSAGE

        prompt = self._build_notice_prompt(tenant_name, amount, payment_type, days_overdue)
        return self._complete(prompt, NOTICE_ERROR_MESSAGE, NOTICE_EMPTY_MESSAGE)

    # ==================== Prompt ====================

    def _build_advice_prompt(self, prompt_text: str, context_summary: str) -> str:
        return f"""당신은 한국의 전문적인 부동산 임대 관리 비서입니다.
사용자의 요청에 따라 정중하고 전문적인 톤으로 답변하세요.

[현재 상황 데이터]
{context_summary}

[사용자 요청]
{prompt_text}
"""

    def _build_notice_prompt(
        self,
        tenant_name: str,
        amount: float,
        payment_type: str,
        days_overdue: int
    ) -> str:
        return f"""임차인 {tenant_name}님에게 보낼 {payment_type} 미납 안내 문자를 작성해주세요.
미납 금액은 {amount:,.0f}원 이며, 납부 예정일로부터 {days_overdue}일 지났습니다.
정중하지만 단호하게 납부를 요청하는 톤으로 작성해주세요. 3가지 다른 버전(부드러움, 표준, 단호함)을 제안해주세요.
"""

    # ==================== 呼叫 Claude API ====================

    def _complete(self, prompt: str, error_message: str, empty_message: str) -> str:
        """送出 prompt，失敗 / 空白時回傳對應備用文字"""
        try:
            message = self.client.messages.create(
                model=self.settings.anthropic_model,
                max_tokens=self.settings.llm_max_tokens,
                messages=[{
                    "role": "user",
                    "content": prompt
                }]
            )
        except anthropic.APIError as e:
            logger.error(f"❌ LLM 呼叫失敗: {e}")
            return error_message

        text = self._post_process(
            "".join(
                block.text for block in message.content
                if getattr(block, "type", None) == "text"
            )
        )
        if not text:
            logger.warning("⚠️ LLM 回應為空白")
            return empty_message

        return text

    def _post_process(self, text: str) -> str:
        """移除多餘空白與前後空行"""
        text = "\n".join(line.strip() for line in text.split("\n"))
        return text.strip()
