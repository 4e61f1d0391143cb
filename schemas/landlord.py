"""
房東 (Landlord) Pydantic Schema
✅ 根實體，不屬於任何其他實體
✅ 銀行帳戶為選填的巢狀物件
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.enums import EntityType


class BankAccount(BaseModel):
    """收租帳戶"""
    model_config = ConfigDict(frozen=True)

    bank_name: str = Field(..., description="銀行名稱", examples=["신한은행"])
    account_number: str = Field(..., description="帳號", examples=["110-123-456789"])
    holder_name: str = Field(..., description="戶名", examples=["김건물"])


class LandlordBase(BaseModel):
    """房東基本資料"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="房東姓名 / 公司名稱", examples=["김건물"])
    type: EntityType = Field(default=EntityType.INDIVIDUAL, description="個人 / 法人")
    registration_number: str = Field(
        default="",
        description="身分證號 / 統一編號",
        examples=["800101-1234567"]
    )
    phone: str = Field(..., description="電話", examples=["010-1111-2222"])
    email: Optional[str] = Field(None, description="Email")
    bank_account: Optional[BankAccount] = Field(None, description="收租帳戶")
    memo: Optional[str] = Field(None, description="備註", examples=["주요 고객"])


class LandlordCreate(LandlordBase):
    """新增房東（ID 由 store 產生）"""
    pass


class Landlord(LandlordBase):
    """完整房東資料"""
    id: str
