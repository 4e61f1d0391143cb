"""
房間 (Unit) 資料模型
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UnitBase(BaseModel):
    """房間基礎模型"""
    model_config = ConfigDict(frozen=True)

    property_id: str = Field(..., description="所屬物件 ID")
    floor: int = Field(..., description="樓層", examples=[1])
    name: str = Field(..., description="房號（顯示用）", examples=["101호"])
    area: Optional[float] = Field(None, description="面積（m²）")
    memo: Optional[str] = Field(None, description="備註")


class UnitCreate(UnitBase):
    """新增房間"""
    pass


class Unit(UnitBase):
    """完整房間資料"""
    id: str
