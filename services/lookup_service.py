"""
關聯查詢服務
✅ 物件 → 房間 → 租客 → 繳費 的 join
✅ 空房查詢
✅ 懸空 ID 回傳 None，不拋例外
"""
from itertools import groupby
from typing import Dict, List, Optional, Tuple

import pandas as pd

from repository.rental_store import RentalStore
from schemas import Landlord, PaymentChain, PaymentRecord, Property, Tenant, Unit


class LookupService:
    """關聯查詢（只讀 store 當下的快照）"""

    def __init__(self, store: RentalStore):
        self.store = store

    # ==================== 房間 ====================

    def units_for_property(self, property_id: str) -> List[Unit]:
        """
        取得物件下所有房間

        排序：樓層由高到低，同樓層依房號字串排序（"10호" 會排在 "2호" 前面）
        """
        units = [u for u in self.store.units if u.property_id == property_id]
        units.sort(key=lambda u: u.name)
        units.sort(key=lambda u: u.floor, reverse=True)
        return units

    def floors_for_property(self, property_id: str) -> List[Tuple[int, List[Unit]]]:
        """依樓層分組（最高樓層在前）"""
        units = self.units_for_property(property_id)
        return [
            (floor, list(group))
            for floor, group in groupby(units, key=lambda u: u.floor)
        ]

    def tenant_for_unit(self, unit_id: str) -> Optional[Tenant]:
        """取得房間的租客（假設一房一客，取第一位）"""
        return next((t for t in self.store.tenants if t.unit_id == unit_id), None)

    def vacant_units_for_property(self, property_id: str) -> List[Unit]:
        """取得物件下尚無租客的房間"""
        occupied = {t.unit_id for t in self.store.tenants}
        return [
            u for u in self.units_for_property(property_id)
            if u.id not in occupied
        ]

    def unit_info(self, unit_id: str) -> Tuple[Optional[Unit], Optional[Property]]:
        """房間與所屬物件"""
        unit = self.store.get_unit(unit_id)
        prop = self.store.get_property(unit.property_id) if unit else None
        return unit, prop

    # ==================== 物件 / 房東 ====================

    def landlord_for_property(self, property_id: str) -> Optional[Landlord]:
        prop = self.store.get_property(property_id)
        if prop is None:
            return None
        return self.store.get_landlord(prop.landlord_id)

    # ==================== 繳費 ====================

    def chain_for_payment(self, payment: PaymentRecord) -> PaymentChain:
        """繳費記錄 → 租客 → 房間 → 物件，任一環節找不到就停在那裡"""
        tenant = self.store.get_tenant(payment.tenant_id)
        unit, prop = self.unit_info(tenant.unit_id) if tenant else (None, None)
        return PaymentChain(payment=payment, tenant=tenant, unit=unit, property=prop)

    def payments_frame(self) -> pd.DataFrame:
        """繳費明細表（含租客 / 房間 / 物件名稱）"""
        columns = [
            'id', 'date', 'property_name', 'unit_name', 'tenant_name',
            'type', 'amount', 'status', 'paid_date'
        ]
        rows: List[Dict] = []

        for payment in self.store.payments:
            chain = self.chain_for_payment(payment)
            rows.append({
                'id': payment.id,
                'date': payment.date,
                'property_name': chain.property.name if chain.property else None,
                'unit_name': chain.unit.name if chain.unit else None,
                'tenant_name': chain.tenant.name if chain.tenant else None,
                'type': payment.type.value,
                'amount': payment.amount,
                'status': payment.status.value,
                'paid_date': payment.paid_date,
            })

        return pd.DataFrame(rows, columns=columns)

    # ==================== 租客 ====================

    def search_tenants(self, term: str = "") -> List[Tenant]:
        """依租客姓名或房號搜尋（子字串比對）"""
        results = []
        for tenant in self.store.tenants:
            unit = self.store.get_unit(tenant.unit_id)
            if term in tenant.name or (unit is not None and term in unit.name):
                results.append(tenant)
        return results
