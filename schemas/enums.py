"""
共用列舉 - 主體類型 / 繳費類型 / 繳費狀態
✅ 列舉值即為畫面顯示的韓文標籤
"""
from enum import Enum


class EntityType(str, Enum):
    """個人 / 法人"""
    INDIVIDUAL = "Individual"
    CORPORATE = "Corporate"


class PaymentType(str, Enum):
    """繳費類型"""
    RENT = "월세"
    MAINTENANCE = "관리비"
    DEPOSIT = "보증금"


class PaymentStatus(str, Enum):
    """繳費狀態"""
    PAID = "납부완료"
    PENDING = "대기중"
    OVERDUE = "연체"
