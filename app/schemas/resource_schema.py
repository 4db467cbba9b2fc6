from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List, Dict, Any
from datetime import datetime

from app.schemas.category_schema import CategoryResponse


class ResourceBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    category_id: Optional[int] = None
    address: str = Field(..., min_length=1, max_length=500)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    phone: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = None
    website: Optional[str] = Field(None, max_length=1000)
    operating_hours: Optional[str] = Field(None, max_length=255)
    capacity: Optional[int] = Field(None, ge=0)
    current_availability: Optional[int] = Field(None, ge=0)


class ResourceCreate(ResourceBase):
    pass


class ResourceUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    category_id: Optional[int] = None
    address: Optional[str] = Field(None, min_length=1, max_length=500)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    website: Optional[str] = None
    operating_hours: Optional[str] = None
    capacity: Optional[int] = Field(None, ge=0)
    current_availability: Optional[int] = Field(None, ge=0)
    status: Optional[str] = None


class AvailabilityUpdate(BaseModel):
    current_availability: int = Field(..., ge=0)


class ResourceResponse(ResourceBase):
    id: int
    email: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime

    # Joined category data
    category_name: Optional[str] = None
    category_icon: Optional[str] = None
    category_color: Optional[str] = None

    class Config:
        from_attributes = True


class ResourceDetail(ResourceResponse):
    category: Optional[CategoryResponse] = None


class ResourceList(BaseModel):
    total: int
    filters: Dict[str, Any]
    items: List[ResourceResponse]
