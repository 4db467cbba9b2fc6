from sqlalchemy import Column, Integer, String, Text, DateTime, Float
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base
import enum


class VolunteerStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    BUSY = "busy"


class Volunteer(Base):
    __tablename__ = "volunteers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(50))

    # Free text, comma separated ("First Aid, Driving")
    skills = Column(Text, default="")
    availability = Column(Text, default="")

    # Location
    location = Column(String(255))
    latitude = Column(Float)
    longitude = Column(Float)

    status = Column(String(20), default=VolunteerStatus.ACTIVE.value, index=True)

    # Metadata
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    assignments = relationship("EmergencyRequest", back_populates="assigned_volunteer")

    def __repr__(self):
        return f"<Volunteer {self.email} ({self.status})>"
