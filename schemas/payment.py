"""
繳費記錄 Pydantic Schema
✅ 狀態只能經由 store 的 update_payment_status 變更
✅ paid_date 僅在狀態為 PAID 時存在
"""
import datetime
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.enums import PaymentStatus, PaymentType
from schemas.property import Property
from schemas.tenant import Tenant
from schemas.unit import Unit


class PaymentBase(BaseModel):
    """繳費記錄基本資料"""
    model_config = ConfigDict(frozen=True)

    tenant_id: str = Field(..., description="租客 ID")
    date: datetime.date = Field(..., description="到期日", examples=["2024-05-01"])
    type: PaymentType = Field(default=PaymentType.RENT, description="繳費類型")
    amount: float = Field(..., gt=0, description="應繳金額", examples=[600000])
    status: PaymentStatus = Field(default=PaymentStatus.PENDING, description="狀態")
    paid_date: Optional[datetime.date] = Field(None, description="實際繳費日")


class PaymentCreate(PaymentBase):
    """新增繳費記錄"""
    pass


class PaymentRecord(PaymentBase):
    """完整繳費記錄"""
    id: str


@dataclass(frozen=True)
class PaymentChain:
    """繳費記錄 → 租客 → 房間 → 物件 的關聯結果（任一環節可能為 None）"""
    payment: PaymentRecord
    tenant: Optional[Tenant] = None
    unit: Optional[Unit] = None
    property: Optional[Property] = None


@dataclass(frozen=True)
class DashboardStats:
    """儀表板統計值物件"""
    total_revenue: float
    occupancy_rate: float
    overdue_count: int
    total_units: int

    def to_dict(self) -> dict:
        return {
            'total_revenue': self.total_revenue,
            'occupancy_rate': self.occupancy_rate,
            'overdue_count': self.overdue_count,
            'total_units': self.total_units
        }
