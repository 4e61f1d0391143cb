"""
初始範例資料
1 位房東 / 1 棟物件 / 4 間房 / 3 位租客 / 4 筆繳費記錄
"""
from datetime import date

from schemas import (
    BankAccount,
    EntityType,
    Landlord,
    PaymentRecord,
    PaymentStatus,
    PaymentType,
    Property,
    Tenant,
    Unit,
)

INITIAL_LANDLORDS = (
    Landlord(
        id="l1",
        name="김건물",
        type=EntityType.INDIVIDUAL,
        registration_number="800101-1234567",
        phone="010-1111-2222",
        bank_account=BankAccount(
            bank_name="신한은행",
            account_number="110-123-456789",
            holder_name="김건물",
        ),
        memo="주요 고객",
    ),
)

INITIAL_PROPERTIES = (
    Property(
        id="prop1",
        landlord_id="l1",
        name="강남 선샤인 빌라",
        address="서울특별시 강남구 테헤란로 123 (역삼동)",
        type="Villa",
        total_floors=4,
    ),
)

INITIAL_UNITS = (
    Unit(id="u101", property_id="prop1", floor=1, name="101호"),
    Unit(id="u202", property_id="prop1", floor=2, name="202호"),
    Unit(id="u305", property_id="prop1", floor=3, name="305호"),
    Unit(id="u401", property_id="prop1", floor=4, name="401호"),
)

INITIAL_TENANTS = (
    Tenant(
        id="t1",
        unit_id="u101",
        name="김철수",
        type=EntityType.INDIVIDUAL,
        phone="010-1234-5678",
        deposit=50000000,
        rent_amount=600000,
        maintenance_amount=50000,
        lease_start_date=date(2023, 1, 1),
        lease_end_date=date(2025, 1, 1),
        memo="반려견 있음",
    ),
    Tenant(
        id="t2",
        unit_id="u202",
        name="이영희",
        type=EntityType.INDIVIDUAL,
        phone="010-9876-5432",
        deposit=30000000,
        rent_amount=450000,
        maintenance_amount=50000,
        lease_start_date=date(2023, 6, 15),
        lease_end_date=date(2025, 6, 15),
    ),
    Tenant(
        id="t3",
        unit_id="u305",
        name="박민수",
        type=EntityType.INDIVIDUAL,
        phone="010-5555-4444",
        deposit=10000000,
        rent_amount=800000,
        maintenance_amount=100000,
        lease_start_date=date(2024, 1, 1),
        lease_end_date=date(2025, 1, 1),
    ),
)

INITIAL_PAYMENTS = (
    PaymentRecord(
        id="p1",
        tenant_id="t1",
        date=date(2024, 5, 1),
        type=PaymentType.RENT,
        amount=600000,
        status=PaymentStatus.PAID,
        paid_date=date(2024, 5, 1),
    ),
    PaymentRecord(
        id="p2",
        tenant_id="t1",
        date=date(2024, 5, 1),
        type=PaymentType.MAINTENANCE,
        amount=50000,
        status=PaymentStatus.PAID,
        paid_date=date(2024, 5, 1),
    ),
    PaymentRecord(
        id="p3",
        tenant_id="t2",
        date=date(2024, 5, 15),
        type=PaymentType.RENT,
        amount=450000,
        status=PaymentStatus.OVERDUE,
    ),
    PaymentRecord(
        id="p4",
        tenant_id="t3",
        date=date(2024, 5, 1),
        type=PaymentType.RENT,
        amount=800000,
        status=PaymentStatus.PENDING,
    ),
)
