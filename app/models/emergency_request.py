from sqlalchemy import Column, Integer, String, Text, DateTime, Float, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base
import enum


class RequestPriority(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RequestStatus(str, enum.Enum):
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class EmergencyRequest(Base):
    __tablename__ = "emergency_requests"

    id = Column(Integer, primary_key=True, index=True)

    # Requester
    requester_name = Column(String(255), nullable=False)
    requester_phone = Column(String(50))
    requester_email = Column(String(255))

    # Incident
    description = Column(Text, nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), index=True)
    location = Column(String(255))
    latitude = Column(Float)
    longitude = Column(Float)

    # Handling
    priority = Column(String(10), default=RequestPriority.MEDIUM.value, index=True)
    status = Column(String(20), default=RequestStatus.OPEN.value, index=True)
    assigned_volunteer_id = Column(Integer, ForeignKey("volunteers.id"), index=True)
    notes = Column(Text)

    # Metadata
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    category = relationship("Category", back_populates="emergency_requests")
    assigned_volunteer = relationship("Volunteer", back_populates="assignments")

    def __repr__(self):
        return f"<EmergencyRequest {self.id} ({self.priority}/{self.status})>"
