from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class CategoryStats(BaseModel):
    resources: int
    requests: int
    active_requests: int


class CategoryDetail(CategoryResponse):
    stats: CategoryStats


class CategoryList(BaseModel):
    total: int
    items: List[CategoryResponse]
