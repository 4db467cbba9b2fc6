from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List, Dict, Any
from datetime import datetime
from enum import Enum


class VolunteerStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    BUSY = "busy"


class VolunteerBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    skills: str = ""
    availability: str = ""
    location: Optional[str] = Field(None, max_length=255)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


class VolunteerCreate(VolunteerBase):
    pass


class VolunteerUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    phone: Optional[str] = None
    skills: Optional[str] = None
    availability: Optional[str] = None
    location: Optional[str] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


class VolunteerStatusUpdate(BaseModel):
    status: VolunteerStatus


class VolunteerAvailabilityUpdate(BaseModel):
    availability: Optional[str] = None
    status: Optional[VolunteerStatus] = None


class VolunteerResponse(VolunteerBase):
    id: int
    email: str
    skills: Optional[str] = ""
    availability: Optional[str] = ""
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class VolunteerList(BaseModel):
    total: int
    filters: Dict[str, Any]
    items: List[VolunteerResponse]


class VolunteerMatchResponse(VolunteerResponse):
    match_score: int
    matching_skills: str


class MatchRequestInfo(BaseModel):
    id: int
    description: str
    priority: str
    required_skills: str


class VolunteerMatchList(BaseModel):
    total: int
    request_info: MatchRequestInfo
    items: List[VolunteerMatchResponse]
