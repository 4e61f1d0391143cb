"""
AI 秘書對話服務
✅ 組合現況摘要（context）交給 LLMHelper
✅ 對話紀錄只存在 session 中，不寫回資料模型
✅ 逾期記錄一鍵生成催繳簡訊
"""
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional, Tuple

from repository.rental_store import RentalStore
from services.llm_helper import LLMHelper
from services.logger import logger
from services.lookup_service import LookupService
from services.metrics_service import days_overdue, overdue_payments

GREETING_MESSAGE = (
    "안녕하세요! 임대 관리 AI 비서입니다. 무엇을 도와드릴까요? "
    "미납 문자 작성이나 계약 관련 질문을 해주세요."
)
UNKNOWN_NAME = "알 수 없음"


@dataclass(frozen=True)
class ChatMessage:
    role: str  # "user" | "assistant"
    text: str


def build_context_summary(store: RentalStore) -> str:
    """把目前 store 的快照整理成給 LLM 的文字摘要"""
    lookup = LookupService(store)

    property_lines = [
        f"- {p.name} ({p.type}, {p.address})" for p in store.properties
    ]

    tenant_lines = []
    for tenant in store.tenants:
        unit, prop = lookup.unit_info(tenant.unit_id)
        prop_name = prop.name if prop else UNKNOWN_NAME
        unit_name = unit.name if unit else UNKNOWN_NAME
        tenant_lines.append(f"- {prop_name} {unit_name}: {tenant.name}")

    return "\n".join([
        "[기본 정보]",
        f"현재 관리 건물 수: {len(store.properties)}개",
        f"현재 관리 호실 수: {len(store.units)}개",
        f"현재 입주 임차인 수: {len(store.tenants)}명",
        f"현재 미납 건수: {len(overdue_payments(store.payments))}건",
        "",
        "[건물 목록]",
        *property_lines,
        "",
        "[임차인 목록 예시]",
        *tenant_lines,
    ])


class AssistantSession:
    """AI 秘書對話（每個使用者 session 一份）"""

    def __init__(
        self,
        store: RentalStore,
        llm: LLMHelper,
        clock: Optional[Callable[[], date]] = None
    ):
        self.store = store
        self.llm = llm
        self.clock = clock or store.clock
        self.messages: List[ChatMessage] = [ChatMessage("assistant", GREETING_MESSAGE)]

    def send_message(self, text: str) -> Optional[str]:
        """
        送出使用者問題

        Returns:
            AI 回覆；空白輸入回傳 None 且不記錄
        """
        if not text or not text.strip():
            return None

        self.messages.append(ChatMessage("user", text))
        reply = self.llm.generate_advice(text, build_context_summary(self.store))
        self.messages.append(ChatMessage("assistant", reply))
        return reply

    def draft_notice_for(self, payment_id: str) -> Optional[str]:
        """
        為指定繳費記錄生成催繳簡訊

        Returns:
            簡訊草稿；找不到繳費記錄或租客時回傳 None
        """
        payment = self.store.get_payment(payment_id)
        if payment is None:
            logger.warning(f"⚠️ 找不到繳費記錄 ID: {payment_id}")
            return None

        tenant = self.store.get_tenant(payment.tenant_id)
        if tenant is None:
            logger.warning(f"⚠️ 繳費記錄 {payment_id} 的租客不存在: {payment.tenant_id}")
            return None

        unit = self.store.get_unit(tenant.unit_id)
        unit_name = unit.name if unit else UNKNOWN_NAME
        self.messages.append(
            ChatMessage("user", f"{tenant.name} ({unit_name})님 미납 안내 문자 작성해줘")
        )

        reply = self.llm.draft_notice(
            tenant.name,
            payment.amount,
            payment.type.value,
            days_overdue(payment, self.clock())
        )
        self.messages.append(ChatMessage("assistant", reply))
        return reply

    def notice_shortcuts(self) -> List[Tuple[str, str]]:
        """逾期記錄的快捷按鈕 (payment_id, 標籤)"""
        lookup = LookupService(self.store)
        shortcuts = []
        for payment in overdue_payments(self.store.payments):
            chain = lookup.chain_for_payment(payment)
            unit_name = chain.unit.name if chain.unit else UNKNOWN_NAME
            tenant_name = chain.tenant.name if chain.tenant else UNKNOWN_NAME
            shortcuts.append((payment.id, f"{unit_name} {tenant_name} 독촉 문자"))
        return shortcuts
