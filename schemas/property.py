"""
物件 (Property) 資料模型
支援多棟建築物管理，每棟隸屬一位房東
"""
from pydantic import BaseModel, ConfigDict, Field


class PropertyBase(BaseModel):
    """物件基礎模型"""
    model_config = ConfigDict(frozen=True)

    landlord_id: str = Field(..., description="房東 ID")
    name: str = Field(..., description="物件名稱", examples=["강남 선샤인 빌라"])
    address: str = Field(..., description="地址")
    type: str = Field(default="Villa", description="物件類型：Villa/Apartment/Commercial/Office")
    total_floors: int = Field(default=1, gt=0, description="總樓層數", examples=[4])


class PropertyCreate(PropertyBase):
    """建立物件時使用的模型"""
    pass


class Property(PropertyBase):
    """完整物件模型"""
    id: str
