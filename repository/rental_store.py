# repository/rental_store.py
"""
租賃資料存取層（記憶體版）
職責：五個集合的新增與繳費狀態更新，不含業務邏輯
✅ 集合以 tuple 保存，每次異動重新綁定新的 tuple
✅ 紀錄為 frozen model，更新時以 model_copy 產生新物件
✅ 找不到 ID 時不拋例外
"""
import secrets
import string
from datetime import date
from typing import Callable, Optional, Tuple

from config.seed_data import (
    INITIAL_LANDLORDS, INITIAL_PROPERTIES, INITIAL_UNITS,
    INITIAL_TENANTS, INITIAL_PAYMENTS,
)
from schemas import (
    Landlord, LandlordCreate,
    Property, PropertyCreate,
    Unit, UnitCreate,
    Tenant, TenantCreate,
    PaymentRecord, PaymentCreate, PaymentStatus,
)
from services.logger import logger, log_store_operation

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_id(length: int = 9) -> str:
    """產生隨機 base36 ID"""
    return ''.join(secrets.choice(_ID_ALPHABET) for _ in range(length))


class RentalStore:
    """租賃資料存取物件（Repository Pattern）"""

    def __init__(
        self,
        landlords: Tuple[Landlord, ...] = (),
        properties: Tuple[Property, ...] = (),
        units: Tuple[Unit, ...] = (),
        tenants: Tuple[Tenant, ...] = (),
        payments: Tuple[PaymentRecord, ...] = (),
        id_factory: Callable[[], str] = generate_id,
        clock: Callable[[], date] = date.today
    ):
        self.landlords = tuple(landlords)
        self.properties = tuple(properties)
        self.units = tuple(units)
        self.tenants = tuple(tenants)
        self.payments = tuple(payments)
        self.id_factory = id_factory
        self.clock = clock

    @classmethod
    def from_seed(cls, **kwargs) -> "RentalStore":
        """以初始範例資料建立 store"""
        return cls(
            landlords=INITIAL_LANDLORDS,
            properties=INITIAL_PROPERTIES,
            units=INITIAL_UNITS,
            tenants=INITIAL_TENANTS,
            payments=INITIAL_PAYMENTS,
            **kwargs
        )

    # ==================== 新增操作 ====================

    def add_landlord(self, data: LandlordCreate) -> Landlord:
        """新增房東"""
        landlord = Landlord(id=self.id_factory(), **data.model_dump())
        self.landlords = self.landlords + (landlord,)
        log_store_operation("INSERT", "landlords", True, len(self.landlords))
        return landlord

    def add_property(self, data: PropertyCreate) -> Property:
        """新增物件（不檢查 landlord_id 是否存在）"""
        prop = Property(id=self.id_factory(), **data.model_dump())
        self.properties = self.properties + (prop,)
        log_store_operation("INSERT", "properties", True, len(self.properties))
        return prop

    def add_unit(self, data: UnitCreate) -> Unit:
        """新增房間"""
        unit = Unit(id=self.id_factory(), **data.model_dump())
        self.units = self.units + (unit,)
        log_store_operation("INSERT", "units", True, len(self.units))
        return unit

    def add_tenant(self, data: TenantCreate) -> Tenant:
        """新增租客（一房一客由呼叫端以空房查詢保證）"""
        tenant = Tenant(id=self.id_factory(), **data.model_dump())
        self.tenants = self.tenants + (tenant,)
        log_store_operation("INSERT", "tenants", True, len(self.tenants))
        return tenant

    def add_payment(self, data: PaymentCreate) -> PaymentRecord:
        """新增繳費記錄"""
        payment = PaymentRecord(id=self.id_factory(), **data.model_dump())
        self.payments = self.payments + (payment,)
        log_store_operation("INSERT", "payments", True, len(self.payments))
        return payment

    # ==================== 更新操作 ====================

    def update_payment_status(self, payment_id: str, status: PaymentStatus) -> bool:
        """
        更新繳費狀態

        PAID 會以今天日期填入 paid_date，其他狀態則清除 paid_date。

        Args:
            payment_id: 繳費記錄 ID
            status: 新狀態（PaymentStatus 或其顯示標籤，無效值拋 ValueError）

        Returns:
            是否找到並更新該筆記錄
        """
        status = PaymentStatus(status)

        if self.get_payment(payment_id) is None:
            log_store_operation(
                "UPDATE", "payments", False,
                error=f"找不到繳費記錄 ID: {payment_id}"
            )
            return False

        paid_date = self.clock() if status == PaymentStatus.PAID else None
        self.payments = tuple(
            p.model_copy(update={'status': status, 'paid_date': paid_date})
            if p.id == payment_id else p
            for p in self.payments
        )

        logger.info(f"✅ 繳費記錄 {payment_id} 狀態更新為 {status.value}")
        return True

    # ==================== 查詢操作 ====================

    def get_landlord(self, landlord_id: str) -> Optional[Landlord]:
        return next((landlord for landlord in self.landlords if landlord.id == landlord_id), None)

    def get_property(self, property_id: str) -> Optional[Property]:
        return next((p for p in self.properties if p.id == property_id), None)

    def get_unit(self, unit_id: str) -> Optional[Unit]:
        return next((u for u in self.units if u.id == unit_id), None)

    def get_tenant(self, tenant_id: str) -> Optional[Tenant]:
        return next((t for t in self.tenants if t.id == tenant_id), None)

    def get_payment(self, payment_id: str) -> Optional[PaymentRecord]:
        return next((p for p in self.payments if p.id == payment_id), None)
