from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from datetime import datetime
from enum import Enum

from app.schemas.category_schema import CategoryResponse
from app.schemas.volunteer_schema import VolunteerResponse


class RequestPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RequestStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class EmergencyRequestBase(BaseModel):
    requester_name: str = Field(..., min_length=1, max_length=255)
    requester_phone: Optional[str] = Field(None, max_length=50)
    requester_email: Optional[EmailStr] = None
    description: str = Field(..., min_length=1)
    category_id: Optional[int] = None
    location: Optional[str] = Field(None, max_length=255)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


class EmergencyRequestCreate(EmergencyRequestBase):
    # Left empty to have it derived from the description
    priority: Optional[RequestPriority] = None


class StatusUpdate(BaseModel):
    status: RequestStatus
    assigned_volunteer_id: Optional[int] = None
    notes: Optional[str] = None


class AssignVolunteer(BaseModel):
    volunteer_id: int


class EmergencyRequestResponse(EmergencyRequestBase):
    id: int
    requester_email: Optional[str] = None
    priority: str
    status: str
    assigned_volunteer_id: Optional[int] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    # Joined data
    category_name: Optional[str] = None
    category_icon: Optional[str] = None
    category_color: Optional[str] = None
    volunteer_name: Optional[str] = None
    volunteer_phone: Optional[str] = None

    class Config:
        from_attributes = True


class EmergencyRequestDetail(EmergencyRequestResponse):
    category: Optional[CategoryResponse] = None
    assigned_volunteer: Optional[VolunteerResponse] = None


class EmergencyRequestCreated(BaseModel):
    message: str
    priority_assigned: str
    item: EmergencyRequestResponse


class EmergencyRequestList(BaseModel):
    total: int
    items: List[EmergencyRequestResponse]


class DashboardStats(BaseModel):
    total_resources: int
    total_requests: int
    total_volunteers: int
    high_priority_requests: int
