"""
Pydantic Schemas 統一匯出
"""

from .enums import EntityType, PaymentType, PaymentStatus

from .landlord import (
    BankAccount,
    LandlordBase,
    LandlordCreate,
    Landlord
)

from .property import (
    PropertyBase,
    PropertyCreate,
    Property
)

from .unit import (
    UnitBase,
    UnitCreate,
    Unit
)

from .tenant import (
    TenantBase,
    TenantCreate,
    Tenant
)

from .payment import (
    PaymentBase,
    PaymentCreate,
    PaymentRecord,
    PaymentChain,
    DashboardStats
)

__all__ = [
    # Enums
    "EntityType",
    "PaymentType",
    "PaymentStatus",

    # Landlord schemas
    "BankAccount",
    "LandlordBase",
    "LandlordCreate",
    "Landlord",

    # Property schemas
    "PropertyBase",
    "PropertyCreate",
    "Property",

    # Unit schemas
    "UnitBase",
    "UnitCreate",
    "Unit",

    # Tenant schemas
    "TenantBase",
    "TenantCreate",
    "Tenant",

    # Payment schemas
    "PaymentBase",
    "PaymentCreate",
    "PaymentRecord",
    "PaymentChain",
    "DashboardStats",
]
