"""
租客 Pydantic Schema
✅ 每位租客對應一個房間 (unit_id)
✅ 保證金 / 月租 / 管理費皆為非負金額
✅ 租約起訖日不做先後檢查
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.enums import EntityType


class TenantBase(BaseModel):
    """租客基本資料 + 租約條件"""
    model_config = ConfigDict(frozen=True)

    unit_id: str = Field(..., description="房間 ID")
    name: str = Field(..., description="租客姓名", examples=["김철수"])
    type: EntityType = Field(default=EntityType.INDIVIDUAL, description="個人 / 法人")
    registration_number: Optional[str] = Field(None, description="身分證號 / 統一編號")
    phone: str = Field(..., description="電話", examples=["010-1234-5678"])
    email: Optional[str] = Field(None, description="Email")

    deposit: float = Field(default=0, ge=0, description="保證金", examples=[50000000])
    rent_amount: float = Field(default=0, ge=0, description="月租", examples=[600000])
    maintenance_amount: float = Field(default=0, ge=0, description="管理費", examples=[50000])
    lease_start_date: date = Field(..., description="租約開始日", examples=["2023-01-01"])
    lease_end_date: date = Field(..., description="租約結束日", examples=["2025-01-01"])

    memo: Optional[str] = Field(None, description="備註", examples=["반려견 있음"])


class TenantCreate(TenantBase):
    """新增租客"""
    pass


class Tenant(TenantBase):
    """完整租客資料"""
    id: str
