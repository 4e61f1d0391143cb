"""
儀表板統計
每次呼叫都從傳入的集合重新計算，不做快取
"""
from datetime import date
from typing import Iterable, List, Sequence

from repository.rental_store import RentalStore
from schemas import DashboardStats, PaymentChain, PaymentRecord, PaymentStatus, Tenant
from services.lookup_service import LookupService


def monthly_potential_revenue(tenants: Iterable[Tenant]) -> float:
    """本月預估收入 = Σ(月租 + 管理費)"""
    return sum(t.rent_amount + t.maintenance_amount for t in tenants)


def collected_this_month(payments: Iterable[PaymentRecord], today: date) -> float:
    """到期日落在 today 同年同月、且已繳的金額合計"""
    return sum(
        p.amount for p in payments
        if p.status == PaymentStatus.PAID
        and (p.date.year, p.date.month) == (today.year, today.month)
    )


def overdue_payments(payments: Iterable[PaymentRecord]) -> List[PaymentRecord]:
    return [p for p in payments if p.status == PaymentStatus.OVERDUE]


def overdue_count(payments: Iterable[PaymentRecord]) -> int:
    return len(overdue_payments(payments))


def occupancy_rate(tenants_count: int, units_count: int) -> float:
    """
    入住率 = 租客數 / 房間數 × 100

    以租客數而非「有人住的房間數」計算，同一房間多位租客時可能超過 100。
    """
    if units_count <= 0:
        return 0.0
    return tenants_count / units_count * 100


def days_overdue(payment: PaymentRecord, today: date) -> int:
    """從到期日算起經過的天數（尚未到期為負數）"""
    return (today - payment.date).days


def dashboard_stats(store: RentalStore) -> DashboardStats:
    """儀表板四張卡片的數值"""
    return DashboardStats(
        total_revenue=monthly_potential_revenue(store.tenants),
        occupancy_rate=occupancy_rate(len(store.tenants), len(store.units)),
        overdue_count=overdue_count(store.payments),
        total_units=len(store.units)
    )


def overdue_highlights(store: RentalStore, limit: int = 5) -> Sequence[PaymentChain]:
    """儀表板「미납 현황」列表：前 limit 筆逾期記錄及其關聯資料"""
    lookup = LookupService(store)
    return [lookup.chain_for_payment(p) for p in overdue_payments(store.payments)[:limit]]
